from __future__ import annotations

from typing import Iterable

from .ledger.compute import filtered_by
from .ledger.models import Summary, TransactionRecord, TxFilter

TYPE_NAMES = {"DEBIT": "Debit", "CREDIT": "Credit", "TRANSFER": "Transfer"}
STATUS_NAMES = {"COMPLETE": "Complete", "PENDING": "Pending", "FAIL": "Failed"}
FILTER_NAMES = {
    "all": "All",
    "credit": "Credits",
    "debit": "Debits",
    "transfer": "Transfers",
    "pending": "Pending",
}


def format_currency(value: float) -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def type_name(record: TransactionRecord) -> str:
    # unknown backend types are shown as sent
    return TYPE_NAMES.get(record.kind, record.type)


def status_name(record: TransactionRecord) -> str:
    return STATUS_NAMES.get(record.state, record.status)


def amount_text(record: TransactionRecord) -> str:
    if record.kind == "CREDIT":
        return "+" + format_currency(abs(record.amount))
    if record.kind == "DEBIT":
        return "-" + format_currency(abs(record.amount))
    return format_currency(record.amount)


def transaction_line(record: TransactionRecord) -> str:
    parts = [record.date, record.description, amount_text(record), type_name(record), status_name(record)]
    return " | ".join(p for p in parts if p)


def summary_block(summary: Summary) -> str:
    return "\n".join(
        [
            f"Total Balance: {format_currency(summary.total_balance)}",
            f"Income: +{format_currency(summary.total_income)}",
            f"Expenses: -{format_currency(summary.total_expenses)}",
        ]
    )


def history_counts(records: Iterable[TransactionRecord]) -> dict[str, int]:
    rows = list(records)
    return {
        "total": len(rows),
        "credits": sum(1 for _ in filtered_by(rows, "credit")),
        "debits": sum(1 for _ in filtered_by(rows, "debit")),
    }


def history_block(records: Iterable[TransactionRecord], criterion: TxFilter = "all") -> str:
    rows = list(records)
    counts = history_counts(rows)
    header = f"Total: {counts['total']}  Credits: {counts['credits']}  Debits: {counts['debits']}"

    shown = list(filtered_by(rows, criterion))
    if not shown:
        body = "No transactions found"
    else:
        body = "\n".join("• " + transaction_line(r) for r in shown)

    return f"{header}\n[{FILTER_NAMES[criterion]}]\n{body}"
