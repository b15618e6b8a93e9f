import pytest

from termbank.account import Account, AccountError


def test_new_account_starts_empty():
    acct = Account(3, "Alice")
    assert acct.balance == 0.0
    assert acct.owner_name == "Alice"


def test_deposit_returns_new_balance():
    acct = Account(1, "Alice")
    assert acct.deposit(125.5) == 125.5
    assert acct.balance == 125.5


def test_zero_deposit_is_allowed():
    acct = Account(1, "Alice")
    assert acct.deposit(0.0) == 0.0


def test_negative_deposit_rejected():
    acct = Account(1, "Alice")
    with pytest.raises(AccountError, match="Deposit amount must be positive"):
        acct.deposit(-5.0)
    assert acct.balance == 0.0


def test_withdraw_full_balance():
    acct = Account(1, "Alice")
    acct.deposit(50.0)
    assert acct.withdraw(50.0) == 0.0


def test_withdraw_more_than_balance_rejected():
    acct = Account(1, "Alice")
    acct.deposit(10.0)
    with pytest.raises(AccountError, match="Insufficient funds"):
        acct.withdraw(20.0)
    assert acct.balance == 10.0


def test_negative_withdraw_rejected():
    acct = Account(1, "Alice")
    acct.deposit(10.0)
    with pytest.raises(AccountError, match="positive"):
        acct.withdraw(-1.0)
    assert acct.balance == 10.0


def test_dict_round_trip():
    acct = Account(42, "Bob", 12.25)
    data = acct.to_dict()
    assert data == {"account_number": 42, "owner_name": "Bob", "balance": 12.25}
    assert Account.from_dict(data) == acct


def test_from_dict_rejects_missing_field():
    with pytest.raises(KeyError):
        Account.from_dict({"account_number": 1, "owner_name": "Bob"})


def test_from_dict_rejects_bad_owner():
    with pytest.raises(TypeError):
        Account.from_dict({"account_number": 1, "owner_name": 5, "balance": 0.0})


def test_display_info_whole_balance(capsys):
    Account(7, "Carol").display_info()
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["  Account Number: 7", "  Owner Name: Carol", "  Balance: 0"]


def test_display_info_fractional_balance(capsys):
    acct = Account(7, "Carol")
    acct.deposit(12.5)
    acct.display_info()
    assert "  Balance: 12.5" in capsys.readouterr().out.splitlines()