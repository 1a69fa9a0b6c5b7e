import math

import pytest

from tests import helpers  # noqa: F401  # ensure project root on path
from coinbook.models import NOTE_MAX_LEN, Kind, Ledger, Transaction


def test_balance_is_credits_minus_debits():
    ledger = Ledger(
        [
            Transaction("Salary", 1000.0, Kind.CREDIT),
            Transaction("Rent", 650.25, Kind.DEBIT),
            Transaction("Coffee", 4.5, Kind.DEBIT),
            Transaction("Refund", 20.0, Kind.CREDIT),
        ]
    )
    assert math.isclose(ledger.balance(), 365.25)


def test_empty_ledger_balance_is_zero():
    assert Ledger().balance() == 0


def test_appended_returns_new_ledger():
    original = Ledger([Transaction("A", 1.0)])
    updated = original.appended(Transaction("B", 2.0, Kind.DEBIT))

    assert len(original) == 1
    assert [t.note for t in updated] == ["A", "B"]
    assert updated[-1].kind is Kind.DEBIT


def test_transaction_is_immutable():
    txn = Transaction("Lunch", 12.0, Kind.DEBIT)
    with pytest.raises(AttributeError):
        txn.amount = 1.0


@pytest.mark.parametrize("amount", [-0.01, float("nan"), float("inf")])
def test_transaction_rejects_bad_amounts(amount):
    with pytest.raises(ValueError):
        Transaction("x", amount)


def test_transaction_note_limit():
    Transaction("n" * NOTE_MAX_LEN, 1.0)
    with pytest.raises(ValueError):
        Transaction("n" * (NOTE_MAX_LEN + 1), 1.0)


def test_display_helpers():
    credit = Transaction("Paycheck", 12.5, Kind.CREDIT)
    debit = Transaction("Coffee", 4.5, Kind.DEBIT)

    assert credit.title == "[Paycheck]"
    assert credit.description == "+ 12.500000"
    assert debit.description == "- 4.500000"
    assert debit.signed_amount == -4.5
    assert debit.filter_value == "Coffee"


def test_balance_is_sum_of_signed_amounts():
    txns = [Transaction("A", 3.0, Kind.CREDIT), Transaction("B", 5.0, Kind.DEBIT)]
    assert Ledger(txns).balance() == sum(t.signed_amount for t in txns) == -2.0
