from tests.helpers import make_questions
from coinbook import logging_setup, store
from coinbook.models import Kind, Ledger, Transaction
from coinbook_quick import cli


def test_enter_transaction_saves(ledger_path, monkeypatch, capsys):
    monkeypatch.setattr(cli.questionary, "text", make_questions(["Coffee", "4.50"]))
    monkeypatch.setattr(cli.questionary, "select", make_questions([Kind.DEBIT]))

    ledger = cli.enter_transaction(ledger_path, Ledger())

    assert ledger.transactions == [Transaction("Coffee", 4.5, Kind.DEBIT)]
    assert store.load(ledger_path) == ledger
    assert "Transaction saved." in capsys.readouterr().out


def test_enter_transaction_rejects_bad_amount(ledger_path, monkeypatch, capsys):
    monkeypatch.setattr(cli.questionary, "text", make_questions(["Coffee", "lots"]))

    ledger = cli.enter_transaction(ledger_path, Ledger())

    assert len(ledger) == 0
    assert not ledger_path.exists()
    assert "Invalid amount" in capsys.readouterr().out


def test_enter_transaction_cancelled(ledger_path, monkeypatch):
    monkeypatch.setattr(cli.questionary, "text", make_questions([None]))
    existing = Ledger([Transaction("Old", 1.0)])

    assert cli.enter_transaction(ledger_path, existing) is existing


def test_enter_transaction_save_failure(ledger_path, monkeypatch, capsys):
    def failing_save(path, ledger):
        raise store.LedgerSaveError(path, "read-only")

    monkeypatch.setattr(cli.questionary, "text", make_questions(["Tea", "2"]))
    monkeypatch.setattr(cli.questionary, "select", make_questions([Kind.CREDIT]))
    monkeypatch.setattr(cli.store, "save", failing_save)
    existing = Ledger()

    assert cli.enter_transaction(ledger_path, existing) is existing
    assert "not saved" in capsys.readouterr().out


def test_note_length_validation():
    assert cli._note_ok("short") is True
    assert isinstance(cli._note_ok("x" * 65), str)


def test_list_transactions_prints_balance(capsys):
    cli.list_transactions(
        Ledger([Transaction("Pay", 10.0, Kind.CREDIT), Transaction("Tea", 2.5, Kind.DEBIT)])
    )
    out = capsys.readouterr().out
    assert "[Pay] + 10.000000" in out
    assert "[Tea] - 2.500000" in out
    assert "Balance: 7.500000" in out

    cli.list_transactions(Ledger())
    assert "No transactions recorded." in capsys.readouterr().out


def test_main_menu_loop(ledger_path, monkeypatch, capsys):
    monkeypatch.delenv("COINBOOK_LOG_FILE", raising=False)
    monkeypatch.setattr(
        cli.questionary,
        "select",
        make_questions(["Enter transaction", Kind.CREDIT, "List transactions", "Quit"]),
    )
    monkeypatch.setattr(cli.questionary, "text", make_questions(["Gift", "20"]))
    monkeypatch.setattr(cli.questionary, "press_any_key_to_continue", make_questions([None]))

    assert cli.main([str(ledger_path)]) == 0
    assert store.load(ledger_path).transactions == [Transaction("Gift", 20.0, Kind.CREDIT)]
    assert "Balance: 20.000000" in capsys.readouterr().out


def test_main_requires_path(capsys):
    assert cli.main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_main_reports_malformed_ledger(ledger_path, capsys):
    ledger_path.write_text("[{}]")
    assert cli.main([str(ledger_path)]) == 1
    assert "error:" in capsys.readouterr().out


def test_main_reports_bad_log_file(ledger_path, monkeypatch, capsys):
    monkeypatch.setattr(logging_setup, "_CONFIGURED", False)
    monkeypatch.setenv("COINBOOK_LOG_FILE", str(ledger_path.parent))

    assert cli.main([str(ledger_path)]) == 1
    assert "cannot open log file" in capsys.readouterr().out
    assert not ledger_path.exists()
