"""A cash machine backed by a simple in-memory banking service."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional


class ATMError(Exception):
    """Raised when an account, transaction or cash operation fails."""


class Account:
    """A bank account whose balance may be changed from several threads."""

    def __init__(self, account_number: str, balance: float = 0.0) -> None:
        self.account_number = account_number
        self._balance = balance
        self._lock = threading.Lock()

    @property
    def balance(self) -> float:
        with self._lock:
            return self._balance

    def debit(self, amount: float) -> None:
        """Take money out; raise ATMError if the balance is too low."""
        with self._lock:
            if self._balance < amount:
                raise ATMError("not enough balance")
            self._balance -= amount

    def credit(self, amount: float) -> None:
        """Put money in."""
        with self._lock:
            self._balance += amount

    def __repr__(self) -> str:
        return f"Account({self.account_number!r}, {self.balance!r})"


@dataclass
class Card:
    card_number: str
    pin: str = field(repr=False)


@dataclass
class _Transaction(ABC):
    transaction_id: str
    account: Account
    amount: float

    @abstractmethod
    def execute(self) -> None:
        """Apply the transaction to its account."""


class DepositTransaction(_Transaction):
    """Adds the amount to the account."""

    def execute(self) -> None:
        self.account.credit(self.amount)


class WithdrawalTransaction(_Transaction):
    """Takes the amount from the account."""

    def execute(self) -> None:
        self.account.debit(self.amount)


class BankingService:
    """Keeps accounts by number and carries out transactions on them."""

    def __init__(self) -> None:
        self.accounts: Dict[str, Account] = {}
        self._lock = threading.Lock()

    def create_account(self, account_number: str, initial_balance: float) -> Account:
        """Open a new account; raise ATMError if the number is taken."""
        with self._lock:
            if account_number in self.accounts:
                raise ATMError("account already exists")
            account = Account(account_number, initial_balance)
            self.accounts[account_number] = account
            return account

    def get_account(self, account_number: str) -> Account:
        """Look up an account; raise ATMError if there is none."""
        with self._lock:
            try:
                return self.accounts[account_number]
            except KeyError:
                raise ATMError("account does not exist") from None

    def process_transaction(self, transaction: _Transaction) -> None:
        transaction.execute()


class CashDispenser:
    """The machine's store of bank notes."""

    def __init__(self, cash_available: int) -> None:
        self.cash_available = cash_available
        self._lock = threading.Lock()

    def dispense_cash(self, amount: int) -> None:
        """Hand out cash; raise ATMError if the machine holds too little."""
        with self._lock:
            if amount > self.cash_available:
                raise ATMError("insufficient cash in ATM")
            self.cash_available -= amount


class ATM:
    """A cash machine that withdraws, deposits and reports balances."""

    def __init__(self, cash_dispenser: CashDispenser, banking_service: BankingService) -> None:
        self.cash_dispenser = cash_dispenser
        self.banking_service = banking_service
        self.txn_counter = 0
        self.current_card: Optional[Card] = None
        self._counter_lock = threading.Lock()

    def authenticate_user(self, card: Card) -> bool:
        """Accept the card and remember it as the one in use; every card is accepted."""
        self.current_card = card
        return self.current_card is card

    def _find_account(self, account_number: str) -> Account:
        try:
            return self.banking_service.get_account(account_number)
        except ATMError:
            raise ATMError("account not found") from None

    def check_balance(self, account_number: str) -> float:
        return self._find_account(account_number).balance

    def generate_transaction_id(self) -> str:
        """A new id made of a timestamp and a ten-digit running number."""
        with self._counter_lock:
            self.txn_counter += 1
            number = self.txn_counter
        timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
        return f"TXN{timestamp}{number:010d}"

    def withdraw_cash(self, account_number: str, amount: float) -> None:
        """Debit the account, then dispense the cash."""
        account = self._find_account(account_number)
        transaction = WithdrawalTransaction(self.generate_transaction_id(), account, amount)
        self.banking_service.process_transaction(transaction)
        self.cash_dispenser.dispense_cash(int(amount))

    def deposit_cash(self, account_number: str, amount: float) -> None:
        account = self._find_account(account_number)
        transaction = DepositTransaction(self.generate_transaction_id(), account, amount)
        self.banking_service.process_transaction(transaction)