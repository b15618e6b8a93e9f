# termbank

A small, menu-driven banking system for the terminal. It lets you open
accounts, deposit and withdraw money, transfer funds between accounts, check
a balance and list every account. Accounts are saved to `data/accounts.json`.
The path is relative to the directory you start the program from. The
program loads them again the next time it starts.

## Installation

```
pip install .
```

## Usage

Start the interactive menu:

```
termbank
```

The menu offers:

1. Create New Account
2. Deposit Funds
3. Withdraw Funds
4. Transfer Funds
5. Check Account Balance
6. List All Accounts
7. Exit

Enter the number of an option and answer the prompts. Anything else shows an
error and returns to the menu. The program ends when you choose 7 or when
input runs out (for example Ctrl-D).

New account numbers start at 1 and go up from there. Each change is written
to the data file straight away. If the data file is missing or cannot be
read, the program starts with an empty bank.

## Using it from Python

```python
from termbank.account import AccountError
from termbank.bank import Bank, BankError

bank = Bank(data_file="data/accounts.json")
bank.load_accounts()            # returns False if there is nothing to load

number = bank.create_account("Alice Example")
bank.deposit(number, 100.0)     # returns the new balance
bank.withdraw(number, 25.0)     # returns the new balance
bank.check_balance(number)      # prints and returns 75.0

try:
    bank.withdraw(number, 1000.0)
except AccountError as err:     # "Insufficient funds for withdrawal"
    print(err)

try:
    bank.get_account(999)
except BankError as err:        # "Account 999 not found."
    print(err)
```

Here is how the `Bank` class in `termbank.bank` behaves:

- `create_account(owner_name)` opens an account and returns its number.
- `deposit` and `withdraw` raise `BankError` for an unknown account number.
  They raise `termbank.account.AccountError` for a negative amount, and
  `withdraw` also raises it for insufficient funds.
- `transfer(from_account_num, to_account_num, amount)` raises `BankError` in
  three cases: both numbers are the same, the amount is not positive, or
  either account is missing.
- `list_all_accounts()` prints every account.
- `save_accounts()` writes the data file. It returns `False` instead of
  raising when the file cannot be written.

`termbank.account.Account` is a dataclass with `account_number`,
`owner_name` and `balance`. `to_dict()` and `Account.from_dict(data)` convert
it to and from the JSON form.

## What it does not do

The package has no logins or passwords, keeps no transaction history and
computes no interest. A transfer does not check the balance of the source
account, so a transfer can leave that account's balance negative.

## Running the tests

```
pip install .[test]
pytest
```