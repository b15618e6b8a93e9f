"""The bank: a set of accounts persisted to a JSON file."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path

from termbank.account import Account, _display_number

DATA_FILE = Path("data/accounts.json")
U32_MAX = 2**32 - 1


class BankError(ValueError):
    """Raised when a bank operation cannot be carried out."""


def _warn(message: str) -> None:
    print(message, file=sys.stderr)


@dataclass
class Bank:
    """Accounts keyed by number, saved after every change."""

    data_file: Path = DATA_FILE
    accounts: dict[int, Account] = field(default_factory=dict)
    next_account_num: int = 0

    def _generate_account_num(self) -> int:
        num = self.next_account_num
        while num in self.accounts or num == 0:
            num += 1
            if num == U32_MAX:
                _warn("Warning: Account number range exhausted. Resetting.")
                num = 1
        self.next_account_num = num + 1
        return num

    def create_account(self, owner_name: str) -> int:
        """Open an account for ``owner_name`` and return its number."""
        number = self._generate_account_num()
        self.accounts[number] = Account(number, owner_name)
        print(
            f"Successfully created an account for {owner_name}. "
            f"Account number: {number}"
        )
        self.save_accounts()
        return number

    def get_account(self, account_num: int) -> Account:
        """Return the account with this number or raise :class:`BankError`."""
        try:
            return self.accounts[account_num]
        except KeyError:
            raise BankError(f"Account {account_num} not found.") from None

    def load_accounts(self) -> bool:
        """Load accounts from the data file; return whether it succeeded."""
        path = Path(self.data_file)
        if not path.exists():
            _warn("Data file not found. Starting with empty bank")
            return False
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as err:
            _warn(f"Failed to read data from the file: {err}")
            return False
        try:
            data = json.loads(content)
            accounts = {
                int(key): Account.from_dict(value)
                for key, value in data["accounts"].items()
            }
            int(data["next_account_num"])
        except (ValueError, KeyError, TypeError, AttributeError) as err:
            _warn(f"Failed to parse account data from JSON:{err}")
            return False
        self.accounts = accounts
        self.next_account_num = max(accounts, default=0) + 1
        print(f"Accounts Loaded successfully from {self.data_file}")
        return True

    def save_accounts(self) -> bool:
        """Write all accounts to the data file; return whether it succeeded."""
        path = Path(self.data_file)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as err:
            _warn(f"Failed to create data directory: {err}")
            return False
        payload = {
            "accounts": {
                str(num): acct.to_dict() for num, acct in self.accounts.items()
            },
            "next_account_num": self.next_account_num,
        }
        try:
            path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as err:
            _warn(f"Failed to write data to file {err}")
            return False
        print(f"Account Saved Successfully to {self.data_file}")
        return True

    def check_balance(self, account_num: int) -> float | None:
        """Print and return an account's balance, or report it missing."""
        account = self.accounts.get(account_num)
        if account is None:
            _warn(f"Error: Account {account_num} not found")
            return None
        print(f"Current Balance of {account_num}: {_display_number(account.balance)}")
        return account.balance

    def list_all_accounts(self) -> None:
        """Print the details of every account."""
        if not self.accounts:
            print("No Accounts registered yet.")
            return
        print("\n--- All Accounts ---")
        for account in self.accounts.values():
            account.display_info()
            print("------------------")

    def withdraw(self, account_num: int, amount: float) -> float:
        """Withdraw from an account and return its new balance."""
        balance = self.get_account(account_num).withdraw(amount)
        self.save_accounts()
        return balance

    def deposit(self, account_num: int, amount: float) -> float:
        """Deposit into an account and return its new balance."""
        balance = self.get_account(account_num).deposit(amount)
        self.save_accounts()
        return balance

    def transfer(self, from_account_num: int, to_account_num: int, amount: float) -> None:
        """Move ``amount`` from one account to another."""
        if from_account_num == to_account_num:
            raise BankError("Cannot transfer funds to the same account")
        if amount <= 0.0:
            raise BankError("Transfer amount must be positive")
        source = self.accounts.get(from_account_num)
        if source is None:
            raise BankError(f"Account {from_account_num} not found")
        target = self.accounts.get(to_account_num)
        if target is None:
            raise BankError(f"Account {to_account_num} not found")
        source.balance -= amount
        target.balance += amount
        self.save_accounts()