from payment_system.ledger.models import Summary, TransactionRecord
from payment_system.render import (
    format_currency,
    history_block,
    history_counts,
    summary_block,
    transaction_line,
)


def _tx(amount: int, type_: str, status: str = "COMPLETE", description: str = "x") -> TransactionRecord:
    return TransactionRecord(raw_text="raw", amount=amount, type=type_, status=status, description=description)


def test_format_currency():
    assert format_currency(0) == "$0.00"
    assert format_currency(1234.5) == "$1,234.50"
    assert format_currency(-5) == "-$5.00"


def test_transaction_line_signs_by_type():
    assert transaction_line(_tx(50, "DEBIT", "PENDING", "Coffee")) == "Coffee | -$50.00 | Debit | Pending"
    assert transaction_line(_tx(500, "credit", description="Salary")) == "Salary | +$500.00 | Credit | Complete"
    assert transaction_line(_tx(5, "REFUND", "weird", "r")) == "r | $5.00 | REFUND | weird"


def test_summary_block():
    text = summary_block(Summary(total_balance=550.0, total_income=500, total_expenses=50))
    assert text.splitlines() == [
        "Total Balance: $550.00",
        "Income: +$500.00",
        "Expenses: -$50.00",
    ]


def test_history_counts_and_block():
    rows = [_tx(1, "DEBIT"), _tx(2, "CREDIT"), _tx(3, "TRANSFER", "PENDING")]

    assert history_counts(rows) == {"total": 3, "credits": 1, "debits": 1}

    text = history_block(rows, "pending")
    assert "Total: 3  Credits: 1  Debits: 1" in text
    assert "[Pending]" in text
    assert "$3.00" in text
    assert "$1.00" not in text


def test_history_block_empty():
    assert history_block([], "all").endswith("No transactions found")
