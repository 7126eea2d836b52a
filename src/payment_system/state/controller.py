from __future__ import annotations

import itertools
import logging

from ..api.client import PaymentApiClient
from ..api.errors import ApiError
from ..api.fetch import AccountFetch, HistoryFetch, fetch_account, fetch_transaction_history
from ..api.models import CreateAccountRequest, CreateTransactionRequest, TransferRequest
from ..ledger.compute import compute_summary, filtered_by
from ..ledger.models import Account, Summary, TransactionRecord, TxFilter, TxStatus, TxType
from ..ledger.parse import parse_transactions
from .account import (
    AccountCreated,
    AccountCreationFailed,
    AccountCreationStarted,
    AccountEvent,
    AccountFailed,
    AccountLoaded,
    AccountMessagesCleared,
    AccountRequested,
    AccountState,
    reduce_account,
)
from .history import (
    ActionFailed,
    ActionStarted,
    ActionSucceeded,
    FilterChanged,
    HistoryEvent,
    HistoryFailed,
    HistoryLoaded,
    HistoryRequested,
    HistoryState,
    MessagesCleared,
    reduce_history,
)
from .store import Store

logger = logging.getLogger(__name__)


class AccountController:
    def __init__(self, client: PaymentApiClient):
        self._client = client
        self._seq = itertools.count(1)
        self.store: Store[AccountState, AccountEvent] = Store(AccountState(), reduce_account)

    @property
    def account(self) -> Account | None:
        return self.store.state.account

    def begin_refresh(self) -> int:
        seq = next(self._seq)
        self.store.dispatch(AccountRequested(seq=seq))
        return seq

    def complete_refresh(self, seq: int, fetch: AccountFetch) -> AccountState:
        if fetch.error is not None:
            return self.store.dispatch(AccountFailed(seq=seq, message=fetch.error))
        return self.store.dispatch(AccountLoaded(seq=seq, fetch=fetch))

    def refresh(self, user_id: int) -> AccountState:
        seq = self.begin_refresh()
        return self.complete_refresh(seq, fetch_account(self._client, user_id))

    def create_account(self, user_id: int, initial_amount: float) -> AccountState:
        self.store.dispatch(AccountCreationStarted())
        try:
            resp = self._client.create_account(user_id, CreateAccountRequest(amountAvail=initial_amount))
        except ApiError as e:
            logger.warning("Account creation failed for user_id=%s: %s", user_id, e.detail or e)
            return self.store.dispatch(AccountCreationFailed(message=str(e)))

        if resp.error:
            return self.store.dispatch(AccountCreationFailed(message=resp.error))

        try:
            routing = int(resp.routingNumber) if resp.routingNumber else None
        except ValueError:
            routing = None

        if not resp.accountNumber or routing is None:
            return self.store.dispatch(AccountCreationFailed(message="Failed to process server response"))

        account = Account(
            account_number=resp.accountNumber,
            routing_number=routing,
            amount_avail=initial_amount,
        )
        return self.store.dispatch(AccountCreated(account=account))

    def clear_messages(self) -> None:
        self.store.dispatch(AccountMessagesCleared())


class TransactionController:
    """
    Presentation-facing boundary for the transaction history screen.

    Records come from the latest completed fetch only; the balance comes
    from the account controller when one is attached and knows an account.
    """

    def __init__(self, client: PaymentApiClient, accounts: AccountController | None = None):
        self._client = client
        self._accounts = accounts
        self._seq = itertools.count(1)
        self.store: Store[HistoryState, HistoryEvent] = Store(HistoryState(), reduce_history)

    # history

    def begin_refresh(self) -> int:
        seq = next(self._seq)
        self.store.dispatch(HistoryRequested(seq=seq))
        return seq

    def complete_refresh(self, seq: int, fetch: HistoryFetch) -> HistoryState:
        if not fetch.success:
            return self.store.dispatch(
                HistoryFailed(seq=seq, message=fetch.error_message or "Request failed. Please try again.")
            )
        records = tuple(parse_transactions(fetch.raw_info_blob))
        return self.store.dispatch(HistoryLoaded(seq=seq, records=records))

    def refresh(self, user_id: int) -> HistoryState:
        seq = self.begin_refresh()
        return self.complete_refresh(seq, fetch_transaction_history(self._client, user_id))

    def set_filter(self, criterion: TxFilter) -> None:
        self.store.dispatch(FilterChanged(criterion=criterion))

    def get_transactions(self) -> list[TransactionRecord]:
        return list(self.store.state.records)

    def get_summary(self) -> Summary:
        account = self._accounts.account if self._accounts is not None else None
        return compute_summary(self.store.state.records, account)

    def get_filtered(self, criterion: TxFilter | None = None) -> list[TransactionRecord]:
        state = self.store.state
        return list(filtered_by(state.records, criterion or state.active_filter))

    # submissions

    def make_transfer(
        self,
        from_account_number: str,
        from_routing_number: int,
        to_account_number: str,
        to_routing_number: int,
        amount: int,
        description: str | None = None,
    ) -> HistoryState:
        req = TransferRequest(
            fromAccountNumber=from_account_number,
            fromRoutingNumber=from_routing_number,
            toAccountNumber=to_account_number,
            toRoutingNumber=to_routing_number,
            amount=amount,
            description=description,
        )
        self.store.dispatch(ActionStarted())
        try:
            resp = self._client.make_transfer(req)
        except ApiError as e:
            logger.warning("Transfer failed: %s", e.detail or e)
            return self.store.dispatch(ActionFailed(message=str(e)))

        if resp.error:
            return self.store.dispatch(ActionFailed(message=resp.error))
        return self.store.dispatch(ActionSucceeded(message=resp.success))

    def create_transaction(
        self,
        account_id: int,
        description: str,
        amount: int,
        type_: TxType,
        status: TxStatus = "PENDING",
    ) -> HistoryState:
        req = CreateTransactionRequest(description=description, transAmount=amount, type=type_, status=status)
        self.store.dispatch(ActionStarted())
        try:
            resp = self._client.create_transaction(account_id, req)
        except ApiError as e:
            logger.warning("Create transaction failed: %s", e.detail or e)
            return self.store.dispatch(ActionFailed(message=str(e)))

        if resp.error:
            return self.store.dispatch(ActionFailed(message=resp.error))
        return self.store.dispatch(ActionSucceeded(message=resp.success))

    def clear_messages(self) -> None:
        self.store.dispatch(MessagesCleared())
