"""A car rental system: cars, customers, reservations and payments."""

from __future__ import annotations

import secrets
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Protocol


class RentalError(Exception):
    """Raised when a car or reservation operation cannot be carried out."""


class Car:
    """A car offered for rent; its availability may be changed from several threads."""

    def __init__(
        self,
        make: str,
        model: str,
        year: int,
        license_plate_number: str,
        rental_price_per_day: float,
    ) -> None:
        self.make = make
        self.model = model
        self.year = year
        self.license_plate_number = license_plate_number
        self.rental_price_per_day = rental_price_per_day
        self._available = True
        self._lock = threading.Lock()

    @property
    def available(self) -> bool:
        with self._lock:
            return self._available

    @available.setter
    def available(self, value: bool) -> None:
        with self._lock:
            self._available = value

    def __repr__(self) -> str:
        return (
            f"Car({self.make!r}, {self.model!r}, {self.year!r}, "
            f"{self.license_plate_number!r}, {self.rental_price_per_day!r})"
        )


@dataclass
class Customer:
    name: str
    email: str
    driving_license_no: str
    phone_no: str = ""


@dataclass
class SearchCriteria:
    make: str
    model: str
    min_price: float
    max_price: float
    start_date: datetime
    end_date: datetime


@dataclass
class Reservation:
    reservation_id: str
    customer: Customer
    car: Car
    start_date: datetime
    end_date: datetime
    total_price: float = field(init=False)

    def __post_init__(self) -> None:
        days = (self.end_date - self.start_date).total_seconds() / 86400
        self.total_price = self.car.rental_price_per_day * days


class PaymentProcessor(Protocol):
    def process_payment(self, amount: float) -> bool: ...


class CreditCardPaymentProcessor:
    """A card processor that accepts every payment and records its amount."""

    def __init__(self) -> None:
        self.processed: List[float] = []

    def process_payment(self, amount: float) -> bool:
        self.processed.append(amount)
        return True


class PaypalPaymentProcessor:
    """A PayPal processor that accepts every payment and records its amount."""

    def __init__(self) -> None:
        self.processed: List[float] = []

    def process_payment(self, amount: float) -> bool:
        self.processed.append(amount)
        return True


class CarRentalSystem:
    """Keeps cars and reservations and takes payment for them."""

    def __init__(self, processor: Optional[PaymentProcessor] = None) -> None:
        self.cars: Dict[str, Car] = {}
        self.reservations: Dict[str, Reservation] = {}
        self.processor: PaymentProcessor = processor or CreditCardPaymentProcessor()
        self._lock = threading.Lock()

    def add_car(self, car: Car) -> None:
        """Add a car; raise RentalError if its plate is already known."""
        with self._lock:
            if car.license_plate_number in self.cars:
                raise RentalError("car is already in the system")
            self.cars[car.license_plate_number] = car

    def remove_car(self, car: Car) -> None:
        """Remove a car; raise RentalError if its plate is unknown."""
        with self._lock:
            if car.license_plate_number not in self.cars:
                raise RentalError("car is not in the system")
            del self.cars[car.license_plate_number]

    def search_cars(self, criteria: SearchCriteria) -> List[Car]:
        """Available cars of the given make and model, ignoring case, free for the dates."""
        make = criteria.make.casefold()
        model = criteria.model.casefold()
        with self._lock:
            return [
                car
                for car in self.cars.values()
                if car.make.casefold() == make
                and car.model.casefold() == model
                and car.available
                and self._is_free(car, criteria.start_date, criteria.end_date)
            ]

    def _is_free(self, car: Car, start: datetime, end: datetime) -> bool:
        return not any(
            reservation.car.license_plate_number == car.license_plate_number
            and start <= reservation.end_date
            and end >= reservation.start_date
            for reservation in self.reservations.values()
        )

    def make_reservation(
        self, customer: Customer, car: Car, start: datetime, end: datetime
    ) -> Reservation:
        """Reserve the car for the dates; raise RentalError if they overlap another reservation."""
        with self._lock:
            if not self._is_free(car, start, end):
                raise RentalError("car is not available for the selected dates")
            reservation_id = self._new_reservation_id()
            reservation = Reservation(reservation_id, customer, car, start, end)
            self.reservations[reservation_id] = reservation
            car.available = False
            return reservation

    def cancel_reservation(self, reservation_id: str) -> None:
        """Drop a reservation, if it exists, and free its car."""
        with self._lock:
            reservation = self.reservations.pop(reservation_id, None)
            if reservation is not None:
                reservation.car.available = True

    def process_payment(self, reservation: Reservation) -> bool:
        return self.processor.process_payment(reservation.total_price)

    def _new_reservation_id(self) -> str:
        while True:
            reservation_id = f"RES{secrets.token_hex(4)}"
            if reservation_id not in self.reservations:
                return reservation_id


_system: Optional[CarRentalSystem] = None
_system_lock = threading.Lock()


def get_car_rental_system() -> CarRentalSystem:
    """The process-wide rental system, created on first use."""
    global _system
    with _system_lock:
        if _system is None:
            _system = CarRentalSystem()
        return _system