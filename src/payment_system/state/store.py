from __future__ import annotations

import logging
from typing import Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

S = TypeVar("S")
E = TypeVar("E")

Listener = Callable[[S], None]


class Store(Generic[S, E]):
    """
    Holds one immutable state value. Every change goes through
    `dispatch(event)`, which runs the reducer and notifies subscribers
    when the state actually changed.
    """

    def __init__(self, initial: S, reducer: Callable[[S, E], S]):
        self._state = initial
        self._reducer = reducer
        self._listeners: list[Listener] = []

    @property
    def state(self) -> S:
        return self._state

    def dispatch(self, event: E) -> S:
        new_state = self._reducer(self._state, event)
        if new_state is self._state:
            return self._state

        self._state = new_state
        for fn in list(self._listeners):
            fn(new_state)
        return new_state

    def subscribe(self, fn: Listener) -> Callable[[], None]:
        self._listeners.append(fn)

        def unsubscribe() -> None:
            try:
                self._listeners.remove(fn)
            except ValueError:
                pass

        return unsubscribe
