from .account import AccountState, reduce_account
from .controller import AccountController, TransactionController
from .history import HistoryState, reduce_history
from .store import Store

__all__ = [
    "AccountController",
    "AccountState",
    "HistoryState",
    "Store",
    "TransactionController",
    "reduce_account",
    "reduce_history",
]
