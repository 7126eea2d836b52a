from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Union

from ..api.fetch import AccountFetch
from ..ledger.models import Account

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountState:
    account: Account | None = None
    has_account: bool = False
    is_loading: bool = False
    error_message: str | None = None
    success_message: str | None = None
    latest_seq: int = 0


@dataclass(frozen=True)
class AccountRequested:
    seq: int


@dataclass(frozen=True)
class AccountLoaded:
    seq: int
    fetch: AccountFetch


@dataclass(frozen=True)
class AccountFailed:
    seq: int
    message: str


@dataclass(frozen=True)
class AccountCreationStarted:
    pass


@dataclass(frozen=True)
class AccountCreated:
    account: Account


@dataclass(frozen=True)
class AccountCreationFailed:
    message: str


@dataclass(frozen=True)
class AccountMessagesCleared:
    pass


AccountEvent = Union[
    AccountRequested,
    AccountLoaded,
    AccountFailed,
    AccountCreationStarted,
    AccountCreated,
    AccountCreationFailed,
    AccountMessagesCleared,
]


def account_from_fetch(fetch: AccountFetch) -> Account | None:
    """
    The backend sends the routing number as a string; an account whose
    routing number is missing or not an integer is not materialised.
    """
    if not fetch.has_account or not fetch.account_number or not fetch.routing_number:
        return None
    try:
        routing = int(fetch.routing_number)
    except ValueError:
        return None
    return Account(
        account_number=fetch.account_number,
        routing_number=routing,
        amount_avail=fetch.balance if fetch.balance is not None else 0.0,
    )


def reduce_account(state: AccountState, event: AccountEvent) -> AccountState:
    if isinstance(event, AccountRequested):
        return replace(state, is_loading=True, error_message=None, latest_seq=event.seq)

    if isinstance(event, (AccountLoaded, AccountFailed)):
        if event.seq != state.latest_seq:
            logger.debug("Dropping stale account response seq=%s (latest=%s)", event.seq, state.latest_seq)
            return state
        if isinstance(event, AccountFailed):
            # no account yet is the normal state for new users
            return replace(state, is_loading=False, has_account=False)
        if not event.fetch.has_account:
            return replace(state, is_loading=False, has_account=False, account=None)
        return replace(
            state,
            is_loading=False,
            has_account=True,
            account=account_from_fetch(event.fetch) or state.account,
        )

    if isinstance(event, AccountCreationStarted):
        return replace(state, is_loading=True, error_message=None, success_message=None)

    if isinstance(event, AccountCreated):
        return replace(
            state,
            is_loading=False,
            has_account=True,
            account=event.account,
            success_message="Account created successfully!",
        )

    if isinstance(event, AccountCreationFailed):
        return replace(state, is_loading=False, error_message=event.message)

    if isinstance(event, AccountMessagesCleared):
        return replace(state, error_message=None, success_message=None)

    return state
