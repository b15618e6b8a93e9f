import io
import json

import pytest

from termbank.cli import main


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_exit_choice(workdir, monkeypatch, capsys):
    feed(monkeypatch, "7\n")
    assert main() == 0
    captured = capsys.readouterr()
    assert "Exiting banking system. Goodbye!" in captured.out
    assert "Data file not found" in captured.err


def test_invalid_choice(workdir, monkeypatch, capsys):
    feed(monkeypatch, "9\n\n7\n")
    assert main() == 0
    out = capsys.readouterr().out
    assert "Invalid choice. Please enter a number between 1 and 7." in out
    assert "Goodbye!" in out


def test_create_account_through_menu(workdir, monkeypatch):
    feed(monkeypatch, "1\nBob\n\n7\n")
    assert main() == 0
    data = json.loads((workdir / "data" / "accounts.json").read_text())
    owners = [acct["owner_name"] for acct in data["accounts"].values()]
    assert owners == ["Bob"]


def test_accounts_survive_restart(workdir, monkeypatch, capsys):
    feed(monkeypatch, "1\nBob\n\n7\n")
    main()
    capsys.readouterr()
    feed(monkeypatch, "6\n\n7\n")
    main()
    out = capsys.readouterr().out
    assert "Accounts Loaded successfully" in out
    assert "Owner Name: Bob" in out


def test_end_of_input_exits(workdir, monkeypatch, capsys):
    feed(monkeypatch, "")
    assert main() == 0
    assert "Goodbye" not in capsys.readouterr().out