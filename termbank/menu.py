"""Interactive screens for each banking operation."""

from __future__ import annotations

import sys

from termbank.account import AccountError
from termbank.bank import Bank, BankError
from termbank.console import (
    clear_screen,
    get_input_float,
    get_input_int,
    get_input_string,
    press_enter_to_continue,
)


def _error(message: str) -> None:
    print(message, file=sys.stderr)


def _abort(message: str) -> None:
    print(message)
    press_enter_to_continue()


def create_account_menu(bank: Bank) -> None:
    """Ask for an owner name and open an account."""
    clear_screen()
    print("------ Create a New Account -------")
    owner_name = get_input_string("Enter the name of the owner: ")
    if not owner_name:
        _abort("Owner name cannot be empty")
        return
    bank.create_account(owner_name)
    press_enter_to_continue()


def deposit_menu(bank: Bank) -> None:
    """Ask for an account and amount and deposit it."""
    clear_screen()
    print("------ Deposit Funds ------")
    account_num = get_input_int("Enter the account number: ")
    if account_num is None:
        _abort("Account number is invalid")
        return
    amount = get_input_float("Enter amount: ")
    if amount is None:
        _abort("Invalid amount")
        return
    try:
        new_balance = bank.deposit(account_num, amount)
    except (AccountError, BankError) as err:
        _error(f"Error in deposit operation: {err}")
    else:
        print(
            f"Successfully deposited ${amount:.2f} into account {account_num}. "
            f"New Balance: {new_balance:.2f}"
        )
    press_enter_to_continue()


def transfer_menu(bank: Bank) -> None:
    """Ask for two accounts and an amount and transfer between them."""
    clear_screen()
    print("------ Transfer Funds ------")
    from_account_num = get_input_int("Enter the source account number: ")
    if from_account_num is None:
        _abort("Invalid source account number")
        return
    to_account_num = get_input_int("Enter destination account number: ")
    if to_account_num is None:
        _abort("Invalid destination account number")
        return
    amount = get_input_float("Enter amount to transfer: ")
    if amount is None:
        _abort("Invalid amount")
        return
    try:
        bank.transfer(from_account_num, to_account_num, amount)
    except (AccountError, BankError) as err:
        _error(f"Error in transfer operation: {err}")
    else:
        print(
            f"Successfully transferred ${amount:.2f} from account "
            f"{from_account_num} to account {to_account_num}"
        )
    press_enter_to_continue()


def check_balance_menu(bank: Bank) -> None:
    """Ask for an account and show its balance."""
    clear_screen()
    print("------ Check Account Balance ------")
    account_num = get_input_int("Enter Account number: ")
    if account_num is None:
        _abort("Invalid account number")
        return
    bank.check_balance(account_num)
    press_enter_to_continue()


def withdraw_menu(bank: Bank) -> None:
    """Ask for an account and amount and withdraw it."""
    clear_screen()
    print("------ Withdraw Funds ------")
    account_num = get_input_int("Enter Account number: ")
    if account_num is None:
        _abort("Invalid account number")
        return
    amount = get_input_float("Enter amount to withdraw: ")
    if amount is None:
        _abort("Invalid amount")
        return
    try:
        new_balance = bank.withdraw(account_num, amount)
    except (AccountError, BankError) as err:
        _error(f"Error: {err}")
    else:
        print(
            f"Successfully withdrawn ${amount:.2f} from account {account_num}. "
            f"New Balance: ${new_balance:.2f}"
        )
    press_enter_to_continue()


def list_all_accounts_menu(bank: Bank) -> None:
    """Show every account."""
    clear_screen()
    print("--- List All Accounts ---")
    bank.list_all_accounts()
    press_enter_to_continue()