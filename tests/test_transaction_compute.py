import pytest

from payment_system.ledger.compute import (
    compute_summary,
    filtered_by,
    total_balance,
    total_expenses,
    total_income,
)
from payment_system.ledger.models import Account, TransactionRecord


def _tx(amount: int, type_: str = "", status: str = "", description: str = "x") -> TransactionRecord:
    return TransactionRecord(
        raw_text=f"{amount} {type_} {status}",
        amount=amount,
        type=type_,
        status=status,
        description=description,
    )


def test_income_and_expenses():
    rows = [_tx(100, "CREDIT"), _tx(40, "DEBIT"), _tx(15, "DEBIT")]

    assert total_income(rows) == 100
    assert total_expenses(rows) == 55


def test_income_and_expenses_use_absolute_amounts_and_ignore_case():
    rows = [_tx(-30, "credit"), _tx(-20, "Debit"), _tx(500, "TRANSFER"), _tx(7, "REFUND")]

    assert total_income(rows) == 30
    assert total_expenses(rows) == 20


def test_balance_prefers_account():
    rows = [_tx(100, "CREDIT"), _tx(40, "DEBIT")]
    acc = Account(account_number="1", routing_number=2, amount_avail=1234.5)

    assert total_balance(rows, acc) == 1234.5


def test_balance_falls_back_to_raw_sum():
    rows = [_tx(100, "CREDIT"), _tx(40, "DEBIT"), _tx(-15, "DEBIT")]
    assert total_balance(rows) == 125.0


def test_empty_sequence_is_all_zero():
    s = compute_summary([])

    assert s.total_balance == 0
    assert s.total_income == 0
    assert s.total_expenses == 0


def test_summary_accepts_generators():
    s = compute_summary(_tx(a, "CREDIT") for a in (1, 2, 3))
    assert s.total_income == 6
    assert s.total_balance == 6.0


def test_pending_filter_keeps_order():
    rows = [
        _tx(1, "DEBIT", "PENDING", "a"),
        _tx(2, "CREDIT", "COMPLETE", "b"),
        _tx(3, "TRANSFER", "pending", "c"),
        _tx(4, "DEBIT", "FAIL", "d"),
    ]

    assert [r.description for r in filtered_by(rows, "pending")] == ["a", "c"]


def test_type_filters():
    rows = [_tx(1, "DEBIT"), _tx(2, "credit"), _tx(3, "TRANSFER"), _tx(4, "OTHER")]

    assert [r.amount for r in filtered_by(rows, "all")] == [1, 2, 3, 4]
    assert [r.amount for r in filtered_by(rows, "credit")] == [2]
    assert [r.amount for r in filtered_by(rows, "debit")] == [1]
    assert [r.amount for r in filtered_by(rows, "transfer")] == [3]


def test_filter_does_not_touch_source():
    rows = [_tx(1, "DEBIT"), _tx(2, "CREDIT")]
    before = list(rows)

    list(filtered_by(rows, "credit"))
    assert rows == before


def test_filter_is_lazy():
    seen: list[int] = []

    def gen():
        for a in (1, 2, 3):
            seen.append(a)
            yield _tx(a, "DEBIT")

    it = filtered_by(gen(), "debit")
    assert seen == []
    assert next(it).amount == 1
    assert seen == [1]


def test_unknown_filter_raises():
    with pytest.raises(ValueError):
        filtered_by([], "refunds")  # type: ignore[arg-type]
