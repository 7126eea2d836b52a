from .compute import compute_summary, filtered_by, total_balance, total_expenses, total_income
from .models import Account, Summary, TransactionRecord, TxFilter, TxStatus, TxType
from .parse import parse_record, parse_transactions

__all__ = [
    "Account",
    "Summary",
    "TransactionRecord",
    "TxFilter",
    "TxStatus",
    "TxType",
    "compute_summary",
    "filtered_by",
    "parse_record",
    "parse_transactions",
    "total_balance",
    "total_expenses",
    "total_income",
]
