from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Union

from ..ledger.models import TransactionRecord, TxFilter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryState:
    records: tuple[TransactionRecord, ...] = ()
    is_loading: bool = False
    error_message: str | None = None
    success_message: str | None = None
    active_filter: TxFilter = "all"
    latest_seq: int = 0


@dataclass(frozen=True)
class HistoryRequested:
    seq: int


@dataclass(frozen=True)
class HistoryLoaded:
    seq: int
    records: tuple[TransactionRecord, ...]


@dataclass(frozen=True)
class HistoryFailed:
    seq: int
    message: str


@dataclass(frozen=True)
class FilterChanged:
    criterion: TxFilter


@dataclass(frozen=True)
class ActionStarted:
    pass


@dataclass(frozen=True)
class ActionSucceeded:
    message: str | None


@dataclass(frozen=True)
class ActionFailed:
    message: str


@dataclass(frozen=True)
class MessagesCleared:
    pass


HistoryEvent = Union[
    HistoryRequested,
    HistoryLoaded,
    HistoryFailed,
    FilterChanged,
    ActionStarted,
    ActionSucceeded,
    ActionFailed,
    MessagesCleared,
]


def reduce_history(state: HistoryState, event: HistoryEvent) -> HistoryState:
    if isinstance(event, HistoryRequested):
        return replace(state, is_loading=True, error_message=None, latest_seq=event.seq)

    if isinstance(event, (HistoryLoaded, HistoryFailed)):
        if event.seq != state.latest_seq:
            logger.debug("Dropping stale history response seq=%s (latest=%s)", event.seq, state.latest_seq)
            return state
        if isinstance(event, HistoryLoaded):
            return replace(state, is_loading=False, records=tuple(event.records))
        return replace(state, is_loading=False, error_message=event.message)

    if isinstance(event, FilterChanged):
        if event.criterion == state.active_filter:
            return state
        return replace(state, active_filter=event.criterion)

    if isinstance(event, ActionStarted):
        return replace(state, is_loading=True, error_message=None, success_message=None)

    if isinstance(event, ActionSucceeded):
        return replace(state, is_loading=False, success_message=event.message)

    if isinstance(event, ActionFailed):
        return replace(state, is_loading=False, error_message=event.message)

    if isinstance(event, MessagesCleared):
        return replace(state, error_message=None, success_message=None)

    return state
