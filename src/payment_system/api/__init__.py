from .client import PaymentApiClient
from .errors import ApiError
from .fetch import AccountFetch, HistoryFetch, fetch_account, fetch_transaction_history

__all__ = [
    "ApiError",
    "AccountFetch",
    "HistoryFetch",
    "PaymentApiClient",
    "fetch_account",
    "fetch_transaction_history",
]
