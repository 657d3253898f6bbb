import re
from datetime import datetime, timedelta

import pytest

from playground.car_rental import (
    Car,
    CarRentalSystem,
    CreditCardPaymentProcessor,
    Customer,
    PaypalPaymentProcessor,
    RentalError,
    Reservation,
    SearchCriteria,
    get_car_rental_system,
)

START = datetime(2024, 1, 1)


def _car(plate="TEST-001", make="Toyota", model="Camry", price=50.0):
    return Car(make, model, 2022, plate, price)


def _customer():
    return Customer("John Doe", "john@example.com", "DL-TEST")


def _criteria(make="Toyota", model="Camry", start=START, days=3):
    return SearchCriteria(make, model, 40, 60, start, start + timedelta(days=days))


def test_add_same_car_twice_raises():
    system = CarRentalSystem()
    system.add_car(_car())
    with pytest.raises(RentalError):
        system.add_car(_car())


def test_remove_unknown_car_raises():
    system = CarRentalSystem()
    with pytest.raises(RentalError):
        system.remove_car(_car())


def test_remove_car_takes_it_out_of_search():
    system = CarRentalSystem()
    car = _car()
    system.add_car(car)
    system.remove_car(car)
    assert system.search_cars(_criteria()) == []


def test_search_matches_make_and_model_ignoring_case():
    system = CarRentalSystem()
    camry = _car("TEST-001")
    civic = _car("TEST-002", "Honda", "Civic", 45.0)
    system.add_car(camry)
    system.add_car(civic)
    assert system.search_cars(_criteria("toyota", "CAMRY")) == [camry]
    assert system.search_cars(_criteria("Honda", "Civic")) == [civic]


def test_reservation_marks_car_unavailable_and_prices_days():
    system = CarRentalSystem()
    car = _car()
    system.add_car(car)
    reservation = system.make_reservation(_customer(), car, START, START + timedelta(days=3))
    assert car.available is False
    assert reservation.total_price == pytest.approx(150.0)
    assert re.fullmatch(r"RES[0-9a-f]{8}", reservation.reservation_id)
    assert system.search_cars(_criteria()) == []


def test_overlapping_reservation_raises():
    system = CarRentalSystem()
    car = _car()
    system.add_car(car)
    system.make_reservation(_customer(), car, START, START + timedelta(days=3))
    with pytest.raises(RentalError):
        system.make_reservation(
            _customer(), car, START + timedelta(days=3), START + timedelta(days=5)
        )


def test_later_reservation_is_allowed():
    system = CarRentalSystem()
    car = _car()
    system.add_car(car)
    first = system.make_reservation(_customer(), car, START, START + timedelta(days=3))
    second = system.make_reservation(
        _customer(), car, START + timedelta(days=5), START + timedelta(days=7)
    )
    assert set(system.reservations) == {first.reservation_id, second.reservation_id}


def test_cancel_reservation_frees_car():
    system = CarRentalSystem()
    car = _car()
    system.add_car(car)
    reservation = system.make_reservation(_customer(), car, START, START + timedelta(days=3))
    system.cancel_reservation(reservation.reservation_id)
    assert car.available is True
    assert system.search_cars(_criteria()) == [car]


def test_cancel_unknown_reservation_leaves_state():
    system = CarRentalSystem()
    car = _car()
    system.add_car(car)
    system.make_reservation(_customer(), car, START, START + timedelta(days=1))
    system.cancel_reservation("RES-unknown")
    assert len(system.reservations) == 1


@pytest.mark.parametrize("processor", [CreditCardPaymentProcessor(), PaypalPaymentProcessor()])
def test_process_payment_succeeds(processor):
    system = CarRentalSystem(processor=processor)
    car = _car()
    reservation = Reservation("RES00000000", _customer(), car, START, START + timedelta(days=2))
    assert system.process_payment(reservation) is True


def test_reservation_price_scales_with_duration():
    car = _car(price=80.0)
    short = Reservation("a", _customer(), car, START, START + timedelta(days=1))
    long = Reservation("b", _customer(), car, START, START + timedelta(days=4))
    assert long.total_price == pytest.approx(4 * short.total_price)


def test_singleton_shares_state():
    car = _car("TEST-SINGLE", "SingletonMake", "SingletonModel", 50.0)
    get_car_rental_system().add_car(car)
    found = get_car_rental_system().search_cars(
        _criteria("SingletonMake", "SingletonModel")
    )
    assert found == [car]