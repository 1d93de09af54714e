"""A credit card that stands in for cash and checks every payment before passing it on."""

from __future__ import annotations

import copy
import datetime
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class CreditCardOwnerData:
    """What the person paying presents: the details they claim for the card."""

    security_code: int = 0
    card_number: int = 0
    first_name: str = ""
    last_name: str = ""
    company_name: str = ""


@dataclass
class CreditCardData:
    """The details on record for a card."""

    is_payment_authenticated: bool = False
    valid_month: int = 0
    valid_year: int = 0
    security_code: int = 0
    card_number: int = 0
    first_name: str = ""
    last_name: str = ""
    company_name: str = ""


class PaymentType(ABC):
    """Anything that can report a balance and pay an amount."""

    @abstractmethod
    def check_balance(self) -> float:
        """Report and return the balance."""

    @abstractmethod
    def pay_amount(
        self,
        payment: float,
        today: datetime.date,
        owner: CreditCardOwnerData,
    ) -> float:
        """Pay ``payment`` and return the amount the method reports back."""


@dataclass
class Cash(PaymentType):
    """Money on hand."""

    payment_balance: float = 0.0
    payment_total: float = 0.0

    def check_balance(self) -> float:
        print(f"Balance: {self.payment_balance:g}")
        return self.payment_balance

    def pay_amount(
        self,
        payment: float,
        today: datetime.date,
        owner: CreditCardOwnerData,
    ) -> float:
        """Pay from the balance.

        Returns the balance left, or, when the payment exceeds the balance,
        the amount overpaid (the balance then drops to zero).
        """
        new_balance = self.payment_balance - payment
        if new_balance < 0:
            overpaid = abs(new_balance)
            self.payment_balance = 0.0
            print(f"Over payment! Returning ${overpaid:.2f}!")
            return overpaid
        self.payment_balance = new_balance
        print("Payment received")
        return new_balance


class CreditCard(PaymentType):
    """Guards a private copy of some cash behind checks against the card on record."""

    def __init__(
        self,
        cash: Cash | None = None,
        card_data: CreditCardData | None = None,
    ) -> None:
        self.cash = copy.copy(cash) if cash is not None else Cash()
        self.card_data = card_data if card_data is not None else CreditCardData()

    def __repr__(self) -> str:
        return f"CreditCard(cash={self.cash!r}, card_data={self.card_data!r})"

    def check_balance(self) -> float:
        return self.cash.check_balance()

    def pay_amount(
        self,
        payment: float,
        today: datetime.date,
        owner: CreditCardOwnerData,
    ) -> float:
        """Pay through the card if the owner's details check out; otherwise return 0."""
        if not self.is_authorized(today, owner):
            print("Payment failed to autenticate!")
            return 0.0
        result = self.cash.pay_amount(payment, today, owner)
        self.cash.payment_balance = result
        print("Payment authenticated and processing...")
        return result

    def is_authorized(self, today: datetime.date, owner: CreditCardOwnerData) -> bool:
        """Whether the card is valid today and every detail given matches the record."""
        data = self.card_data
        checks = (
            1 <= data.valid_month <= 12,
            today.year <= data.valid_year,
            0 <= data.security_code <= 999 and data.security_code == owner.security_code,
            data.card_number == owner.card_number,
            data.first_name == owner.first_name,
            data.last_name == owner.last_name,
            data.company_name == owner.company_name,
        )
        if all(checks):
            print("Success: Credit Card Payment Proccessed!")
            return True
        print("Failed: Credit Card Payment Denied!")
        return False


def request_check_balance(payment_type: PaymentType) -> float:
    """Ask any payment method for its balance."""
    return payment_type.check_balance()


def pay_bill(
    payment_type: PaymentType,
    amount: float,
    today: datetime.date,
    owner: CreditCardOwnerData,
) -> float:
    """Pay ``amount`` with any payment method."""
    return payment_type.pay_amount(amount, today, owner)


def main(argv: list[str] | None = None) -> int:
    """Pay two bills with a credit card, checking the balance around each."""
    if argv is None:
        argv = sys.argv[1:]

    today = datetime.date.today()
    cash = Cash(100.00, 500.00)
    owner = CreditCardOwnerData(420, 123456, "John", "Doe", "Capital One")
    card_data = CreditCardData(False, 9, 2026, 420, 123456, "John", "Doe", "Capital One")
    card = CreditCard(cash, card_data)

    request_check_balance(card)
    pay_bill(card, 30.00, today, owner)
    request_check_balance(card)
    pay_bill(card, 60.00, today, owner)
    request_check_balance(card)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())