import re
import threading

import pytest

from playground.atm import (
    ATM,
    ATMError,
    Account,
    BankingService,
    Card,
    CashDispenser,
    DepositTransaction,
    WithdrawalTransaction,
)


@pytest.fixture
def bank():
    service = BankingService()
    service.create_account("first123", 1000)
    service.create_account("second123", 500)
    return service


@pytest.fixture
def machine(bank):
    return ATM(CashDispenser(10000), bank)


def test_account_debit_and_credit():
    account = Account("acc", 100)
    account.debit(40)
    account.credit(15)
    assert account.balance == 100 - 40 + 15


def test_account_debit_too_much():
    account = Account("acc", 10)
    with pytest.raises(ATMError, match="not enough balance"):
        account.debit(11)
    assert account.balance == 10


def test_account_concurrent_debits_never_overdraw():
    account = Account("acc", 50)

    def take():
        try:
            account.debit(1)
        except ATMError:
            pass

    threads = [threading.Thread(target=take) for _ in range(80)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert account.balance == 0


def test_create_duplicate_account(bank):
    with pytest.raises(ATMError, match="account already exists"):
        bank.create_account("first123", 1)


def test_get_missing_account(bank):
    with pytest.raises(ATMError, match="account does not exist"):
        bank.get_account("nobody")


def test_get_account_changes_are_shared(bank):
    assert bank.get_account("first123").balance == 1000
    bank.get_account("first123").debit(100)
    assert bank.get_account("first123").balance == 900


def test_transactions_execute():
    account = Account("acc", 100)
    DepositTransaction("t1", account, 25).execute()
    WithdrawalTransaction("t2", account, 5).execute()
    assert account.balance == 100 + 25 - 5


def test_process_failing_withdrawal(bank):
    account = bank.get_account("second123")
    with pytest.raises(ATMError, match="not enough balance"):
        bank.process_transaction(WithdrawalTransaction("t", account, 501))


def test_dispenser_limits():
    dispenser = CashDispenser(100)
    dispenser.dispense_cash(60)
    assert dispenser.cash_available == 40
    with pytest.raises(ATMError, match="insufficient cash in ATM"):
        dispenser.dispense_cash(41)


def test_authenticate_user(machine):
    assert machine.authenticate_user(Card("first123", "1234")) is True


def test_check_balance(machine):
    assert machine.check_balance("first123") == 1000


def test_check_balance_missing(machine):
    with pytest.raises(ATMError, match="account not found"):
        machine.check_balance("missing")


def test_withdraw_reduces_balance_and_cash(machine):
    machine.withdraw_cash("first123", 700)
    assert machine.check_balance("first123") == 1000 - 700
    assert machine.cash_dispenser.cash_available == 10000 - 700


def test_withdraw_missing_account(machine):
    with pytest.raises(ATMError, match="account not found"):
        machine.withdraw_cash("missing", 1)


def test_withdraw_over_balance_keeps_cash(machine):
    with pytest.raises(ATMError, match="not enough balance"):
        machine.withdraw_cash("second123", 600)
    assert machine.cash_dispenser.cash_available == 10000
    assert machine.check_balance("second123") == 500


def test_deposit(machine):
    machine.deposit_cash("second123", 250)
    assert machine.check_balance("second123") == 500 + 250


def test_transaction_ids_are_sequential(machine):
    first = machine.generate_transaction_id()
    second = machine.generate_transaction_id()
    pattern = re.compile(r"TXN\d{14}\d{10}")
    assert pattern.fullmatch(first)
    assert pattern.fullmatch(second)
    assert int(first[-10:]) == 1
    assert int(second[-10:]) == 2