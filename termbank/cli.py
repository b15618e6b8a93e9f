"""Entry point for the terminal banking program."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from termbank.bank import Bank
from termbank.console import clear_screen, get_input_int, press_enter_to_continue
from termbank.menu import (
    check_balance_menu,
    create_account_menu,
    deposit_menu,
    list_all_accounts_menu,
    transfer_menu,
    withdraw_menu,
)

_EXIT_CHOICE = 7

_ACTIONS: dict[int, Callable[[Bank], None]] = {
    1: create_account_menu,
    2: deposit_menu,
    3: withdraw_menu,
    4: transfer_menu,
    5: check_balance_menu,
    6: list_all_accounts_menu,
}

_BANNER = """\
------------------------------------
  Terminal Banking System
------------------------------------
1. Create New Account
2. Deposit Funds
3. Withdraw Funds
4. Transfer Funds
5. Check Account Balance
6. List All Accounts
7. Exit
------------------------------------"""


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu until the user exits or input ends."""
    bank = Bank()
    bank.load_accounts()
    try:
        while True:
            clear_screen()
            print(_BANNER)
            choice = get_input_int("Enter your choice: ")
            if choice == _EXIT_CHOICE:
                print("Exiting banking system. Goodbye!")
                return 0
            action = _ACTIONS.get(choice) if choice is not None else None
            if action is None:
                print("\nInvalid choice. Please enter a number between 1 and 7.")
                press_enter_to_continue()
            else:
                action(bank)
    except EOFError:
        print()
        return 0


if __name__ == "__main__":
    raise SystemExit(main())