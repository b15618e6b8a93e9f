"""A single bank account and the operations on its balance."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any


class AccountError(ValueError):
    """Raised when an operation on an account is refused."""


def _display_number(value: float) -> str:
    """Format a float the way balances are shown: whole values without '.0'."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return f"{value:.0f}"
    return repr(value)


@dataclass
class Account:
    """A bank account held by one owner."""

    account_number: int
    owner_name: str
    balance: float = 0.0

    def deposit(self, amount: float) -> float:
        """Add ``amount`` to the balance and return the new balance."""
        if amount < 0.0:
            raise AccountError("Deposit amount must be positive")
        self.balance += amount
        return self.balance

    def withdraw(self, amount: float) -> float:
        """Take ``amount`` from the balance and return the new balance."""
        if amount < 0.0:
            raise AccountError("Withdrawal amount has to be positive")
        if self.balance < amount:
            raise AccountError("Insufficient funds for withdrawal")
        self.balance -= amount
        return self.balance

    def display_info(self) -> str:
        """Print the account's details and return the printed text."""
        lines = [
            f"  Account Number: {self.account_number}",
            f"  Owner Name: {self.owner_name}",
            f"  Balance: {_display_number(self.balance)}",
        ]
        text = "\n".join(lines)
        print(text)
        return text

    def to_dict(self) -> dict[str, Any]:
        """Return the account as a JSON-ready mapping."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Account:
        """Build an account from a mapping made by :meth:`to_dict`."""
        number = data["account_number"]
        owner = data["owner_name"]
        balance = data["balance"]
        if isinstance(number, bool) or not isinstance(number, int) or number < 0:
            raise TypeError("account_number must be a non-negative integer")
        if not isinstance(owner, str):
            raise TypeError("owner_name must be a string")
        if isinstance(balance, bool) or not isinstance(balance, (int, float)):
            raise TypeError("balance must be a number")
        return cls(account_number=number, owner_name=owner, balance=float(balance))