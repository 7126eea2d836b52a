from __future__ import annotations

import logging
from dataclasses import dataclass

from .client import PaymentApiClient
from .errors import ApiError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryFetch:
    success: bool
    raw_info_blob: str | None = None
    error_message: str | None = None


@dataclass(frozen=True)
class AccountFetch:
    has_account: bool
    account_number: str | None = None
    routing_number: str | None = None
    balance: float | None = None
    error: str | None = None  # transport failure, account state unknown


def fetch_transaction_history(client: PaymentApiClient, user_id: int) -> HistoryFetch:
    """
    The sentinel "no data" text comes back as a plain success; parsing
    turns it into an empty record list.
    """
    try:
        resp = client.get_transaction_history(user_id)
    except ApiError as e:
        logger.warning("Transaction history fetch failed for user_id=%s: %s", user_id, e.detail or e)
        return HistoryFetch(success=False, error_message=str(e))

    if resp.Error:
        return HistoryFetch(success=False, error_message=resp.Error)

    return HistoryFetch(success=True, raw_info_blob=resp.info)


def fetch_account(client: PaymentApiClient, user_id: int) -> AccountFetch:
    try:
        resp = client.get_account(user_id)
    except ApiError as e:
        logger.warning("Account fetch failed for user_id=%s: %s", user_id, e.detail or e)
        return AccountFetch(has_account=False, error=str(e))

    if not resp.hasAccount:
        return AccountFetch(has_account=False)

    return AccountFetch(
        has_account=True,
        account_number=resp.accountNumber,
        routing_number=resp.routingNumber,
        balance=resp.balance_float if resp.balance is not None else None,
    )
