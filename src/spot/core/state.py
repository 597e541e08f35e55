from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, TypeVar, Union

from .exceptions import DomainError, SessionExpiredError

logger = logging.getLogger(__name__)

T = TypeVar("T")

BAD_RESPONSE = "Unexpected response from server"


@dataclass(frozen=True)
class Idle:
    """Initial state, before any fetch."""

    status = "idle"

    def to_dict(self) -> dict:
        return {"status": self.status}


@dataclass(frozen=True)
class Loading:
    status = "loading"

    def to_dict(self) -> dict:
        return {"status": self.status}


@dataclass(frozen=True)
class Success(Generic[T]):
    data: T
    status = "success"

    def to_dict(self, serialize: Optional[Callable[[T], Any]] = None) -> dict:
        data = serialize(self.data) if serialize else self.data
        return {"status": self.status, "data": data}


@dataclass(frozen=True)
class Error:
    message: str
    status = "error"

    def to_dict(self) -> dict:
        return {"status": self.status, "message": self.message}


ViewState = Union[Idle, Loading, Success, Error]

IDLE = Idle()
LOADING = Loading()


class StateHolder(Generic[T]):
    """One observable Idle/Loading/Success/Error slot of a view-model.

    Each `load` call starts a new fetch cycle. A result that resolves after a
    newer cycle started, or after the holder was closed, is dropped instead of
    overwriting the current state.
    """

    def __init__(self, name: str = "state"):
        self.name = name
        self._state: ViewState = IDLE
        self._generation = 0
        self._closed = False
        self._observers: List[Callable[[ViewState], None]] = []

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, observer: Callable[[ViewState], None]) -> Callable[[], None]:
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def begin(self) -> int:
        """Enter Loading and return the generation token for this cycle."""

        self._generation += 1
        self._publish(LOADING)
        return self._generation

    def complete(self, token: int, state: ViewState) -> bool:
        if self._closed or token != self._generation:
            logger.debug("Dropping stale %s result (token=%s, current=%s)", self.name, token, self._generation)
            return False
        self._publish(state)
        return True

    def load(self, fetch: Callable[[], T]) -> ViewState:
        token = self.begin()
        try:
            result = fetch()
        except SessionExpiredError:
            self.complete(token, IDLE)
            raise
        except DomainError as e:
            logger.warning("%s failed: %s", self.name, e)
            self.complete(token, Error(str(e)))
            return self._state
        except (KeyError, TypeError, ValueError):
            # Malformed payloads fail inside `from_api`.
            logger.exception("%s got an unreadable response", self.name)
            self.complete(token, Error(BAD_RESPONSE))
            return self._state
        self.complete(token, Success(result))
        return self._state

    def set(self, state: ViewState) -> None:
        self._generation += 1
        self._publish(state)

    def reset(self) -> None:
        self.set(IDLE)

    def close(self) -> None:
        """Stop observing; any in-flight result is discarded."""

        self._closed = True
        self._generation += 1
        self._observers.clear()

    def _publish(self, state: ViewState) -> None:
        self._state = state
        for observer in list(self._observers):
            observer(state)
