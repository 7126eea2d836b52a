from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

TxType = Literal["DEBIT", "CREDIT", "TRANSFER", "UNKNOWN"]
TxStatus = Literal["COMPLETE", "PENDING", "FAIL", "UNKNOWN"]
TxFilter = Literal["all", "credit", "debit", "transfer", "pending"]

TX_TYPES: tuple[TxType, ...] = ("DEBIT", "CREDIT", "TRANSFER")
TX_STATUSES: tuple[TxStatus, ...] = ("COMPLETE", "PENDING", "FAIL")
TX_FILTERS: tuple[TxFilter, ...] = ("all", "credit", "debit", "transfer", "pending")


def normalize_type(value: str | None) -> TxType:
    v = (value or "").strip().upper()
    for t in TX_TYPES:
        if v == t:
            return t
    return "UNKNOWN"


def normalize_status(value: str | None) -> TxStatus:
    v = (value or "").strip().upper()
    for s in TX_STATUSES:
        if v == s:
            return s
    return "UNKNOWN"


@dataclass(frozen=True)
class TransactionRecord:
    raw_text: str
    description: str = ""
    amount: int = 0  # whole dollars, sign as sent by the backend
    date: str = ""
    type: str = ""  # verbatim, see `kind`
    status: str = ""  # verbatim, see `state`
    account_number: str = ""

    @property
    def kind(self) -> TxType:
        return normalize_type(self.type)

    @property
    def state(self) -> TxStatus:
        return normalize_status(self.status)


@dataclass(frozen=True)
class Account:
    account_number: str
    routing_number: int
    amount_avail: float


@dataclass(frozen=True)
class Summary:
    total_balance: float
    total_income: int
    total_expenses: int
