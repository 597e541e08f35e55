from __future__ import annotations

import pytest

from spot.core.exceptions import ApiError, SessionExpiredError, ValidationError
from spot.core.state import IDLE, LOADING, Error, StateHolder, Success


def test_load_publishes_loading_then_success():
    holder: StateHolder[int] = StateHolder("numbers")
    seen = []
    holder.subscribe(seen.append)

    state = holder.load(lambda: 5)

    assert seen == [LOADING, Success(5)]
    assert state == Success(5)


def test_domain_error_becomes_error_state():
    holder: StateHolder[int] = StateHolder()

    def fetch():
        raise ValidationError("Section is invalid")

    assert holder.load(fetch) == Error("Section is invalid")


def test_session_expiry_is_not_swallowed():
    holder: StateHolder[int] = StateHolder()

    def fetch():
        raise SessionExpiredError()

    with pytest.raises(SessionExpiredError):
        holder.load(fetch)
    assert holder.state == IDLE


def test_result_of_older_cycle_is_dropped():
    holder: StateHolder[str] = StateHolder()

    def slow_fetch():
        # A newer request starts and finishes while this one is in flight.
        newer = holder.begin()
        holder.complete(newer, Success("new"))
        return "old"

    holder.load(slow_fetch)

    assert holder.state == Success("new")


def test_result_after_close_is_dropped():
    holder: StateHolder[str] = StateHolder()
    seen = []
    holder.subscribe(seen.append)

    token = holder.begin()
    holder.close()

    assert holder.complete(token, Success("late")) is False
    assert holder.state == LOADING
    assert seen == [LOADING]


def test_unsubscribe_and_reset():
    holder: StateHolder[int] = StateHolder()
    seen = []
    unsubscribe = holder.subscribe(seen.append)
    holder.load(lambda: 1)
    unsubscribe()
    holder.reset()

    assert holder.state == IDLE
    assert seen == [LOADING, Success(1)]


def test_error_to_dict():
    assert Error("Network error").to_dict() == {"status": "error", "message": "Network error"}
    assert Success([1]).to_dict() == {"status": "success", "data": [1]}
    assert ApiError("x", status_code=500).status_code == 500


def test_unreadable_payload_becomes_error_state():
    holder: StateHolder[dict] = StateHolder("records")

    def fetch():
        # A record without its date.
        return {"id": 1}["date"]

    assert holder.load(fetch) == Error("Unexpected response from server")
    assert holder.state == Error("Unexpected response from server")
