"""Interchangeable payment methods with transaction rollback and retries."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, ClassVar, Dict, Optional


class TransactionStatus(str, Enum):
    COMPLETED = "Completed"
    ROLLED_BACK = "Rolled_back"


@dataclass
class Transaction:
    transaction_id: str
    amount: float
    timestamp: datetime
    status: TransactionStatus


class PaymentError(Exception):
    """Raised when a payment or rollback cannot be carried out."""


class PaymentStrategy(ABC):
    """A way of paying that can also undo its own transactions."""

    @abstractmethod
    def pay(self, amount: float) -> str:
        """Charge the amount and return a confirmation message."""

    @abstractmethod
    def rollback(self, transaction_id: str) -> str:
        """Undo a completed transaction and return a confirmation message."""


class _LedgerPayment(PaymentStrategy):
    """A payment method that records every transaction it makes."""

    limit: ClassVar[float]
    id_prefix: ClassVar[str]
    limit_message: ClassVar[str]
    paid_template: ClassVar[str]
    rollback_template: ClassVar[str]
    already_rolled_back: ClassVar[str] = "transaction is already rolled back"

    def __init__(self) -> None:
        self.transactions: Dict[str, Transaction] = {}
        self._last_stamp = 0

    @property
    @abstractmethod
    def _account(self) -> str:
        """The account shown in confirmation messages."""

    def _new_transaction_id(self) -> str:
        stamp = max(time.time_ns(), self._last_stamp + 1)
        self._last_stamp = stamp
        return f"{self.id_prefix}-{stamp}"

    def pay(self, amount: float) -> str:
        if amount > self.limit:
            raise PaymentError(self.limit_message)
        transaction_id = self._new_transaction_id()
        self.transactions[transaction_id] = Transaction(
            transaction_id=transaction_id,
            amount=amount,
            timestamp=datetime.now(),
            status=TransactionStatus.COMPLETED,
        )
        return self.paid_template.format(
            amount=amount, account=self._account, transaction_id=transaction_id
        )

    def rollback(self, transaction_id: str) -> str:
        transaction = self.transactions.get(transaction_id)
        if transaction is None:
            raise PaymentError("transaction not found")
        if transaction.status is TransactionStatus.ROLLED_BACK:
            raise PaymentError(self.already_rolled_back)
        transaction.status = TransactionStatus.ROLLED_BACK
        return self.rollback_template.format(
            transaction_id=transaction_id, amount=transaction.amount, account=self._account
        )


class CreditCardPayment(_LedgerPayment):
    limit = 1000
    id_prefix = "cc"
    limit_message = "amount exceeds credit card limit"
    paid_template = "Paid {amount:.2f} using credit card {account}. Transaction Id: {transaction_id}"
    rollback_template = (
        "Rolled back transaction {transaction_id} for {amount:.2f} on Credit Card {account}"
    )

    def __init__(self, card_number: str, cvv: str, name: str) -> None:
        super().__init__()
        self.card_number = card_number
        self.cvv = cvv
        self.name = name

    @property
    def _account(self) -> str:
        return self.card_number


class PayPalPayment(_LedgerPayment):
    limit = 500
    id_prefix = "PP"
    limit_message = "amount exceeds PayPal single transaction limit"
    already_rolled_back = "transaction already rolled back"
    paid_template = (
        "Paid {amount:.2f} using PayPal account {account}. Transaction ID: {transaction_id}"
    )
    rollback_template = (
        "Rolled back transaction {transaction_id} for {amount:.2f} on PayPal account {account}"
    )

    def __init__(self, email: str, password: str) -> None:
        super().__init__()
        self.email = email
        self.password = password

    @property
    def _account(self) -> str:
        return self.email


class CryptoPayment(_LedgerPayment):
    limit = 10000
    id_prefix = "CR"
    limit_message = "amount requires additional verification for crypto transaction"
    paid_template = (
        "Paid {amount:.2f} using Crypto wallet {account}. Transaction ID: {transaction_id}"
    )
    rollback_template = (
        "Rolled back transaction {transaction_id} for {amount:.2f} on Crypto wallet {account}"
    )

    def __init__(self, wallet_id: str) -> None:
        super().__init__()
        self.wallet_id = wallet_id

    @property
    def _account(self) -> str:
        return self.wallet_id


class PaymentContext:
    """Runs payments through a chosen strategy, retrying failed attempts."""

    def __init__(
        self,
        strategy: Optional[PaymentStrategy] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.strategy = strategy
        self.last_transaction_id = ""
        self._sleep = sleep

    def _require_strategy(self) -> PaymentStrategy:
        if self.strategy is None:
            raise PaymentError("no payment strategy set")
        return self.strategy

    def execute_payment(self, amount: float, max_retries: int) -> str:
        """Try the payment up to max_retries + 1 times, waiting longer before each retry."""
        strategy = self._require_strategy()
        error: Optional[PaymentError] = None
        for attempt in range(max_retries + 1):
            if attempt > 0:
                print(f"Retrying payment (attempt {attempt} of {max_retries})...")
                self._sleep(attempt * 0.5)
            try:
                return strategy.pay(amount)
            except PaymentError as exc:
                error = exc
                print(f"Payment attempt failed: {exc}")
        raise PaymentError(f"payment failed after {max_retries + 1} attempts: {error}") from error

    def rollback_last_payment(self) -> str:
        """Roll back the transaction recorded as the last one."""
        if not self.last_transaction_id:
            raise PaymentError("no transaction to roll back")
        return self._require_strategy().rollback(self.last_transaction_id)