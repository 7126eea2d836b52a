from __future__ import annotations

from typing import Iterable, Iterator

from .models import TX_FILTERS, Account, Summary, TransactionRecord, TxFilter


def total_balance(records: Iterable[TransactionRecord], account: Account | None = None) -> float:
    if account is not None:
        return account.amount_avail
    # raw sum: direction is not re-derived from type
    return float(sum(r.amount for r in records))


def total_income(records: Iterable[TransactionRecord]) -> int:
    return sum(abs(r.amount) for r in records if r.kind == "CREDIT")


def total_expenses(records: Iterable[TransactionRecord]) -> int:
    return sum(abs(r.amount) for r in records if r.kind == "DEBIT")


def _matches(record: TransactionRecord, criterion: TxFilter) -> bool:
    if criterion == "all":
        return True
    if criterion == "pending":
        return record.state == "PENDING"
    return record.kind == criterion.upper()


def filtered_by(records: Iterable[TransactionRecord], criterion: TxFilter) -> Iterator[TransactionRecord]:
    if criterion not in TX_FILTERS:
        raise ValueError(f"Unknown transaction filter: {criterion!r}")
    return (r for r in records if _matches(r, criterion))


def compute_summary(records: Iterable[TransactionRecord], account: Account | None = None) -> Summary:
    rows = list(records)
    return Summary(
        total_balance=total_balance(rows, account),
        total_income=total_income(rows),
        total_expenses=total_expenses(rows),
    )
