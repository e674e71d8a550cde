from __future__ import annotations

from collections.abc import Iterator

import pytest

from walkaround_checks.core import models
from walkaround_checks.services import inspection_sessions


@pytest.fixture()
def clock(monkeypatch: pytest.MonkeyPatch) -> Iterator[list[float]]:
    now = [1000.0]
    monkeypatch.setattr(inspection_sessions.time, "monotonic", lambda: now[0])
    inspection_sessions.clear_sessions()
    yield now
    inspection_sessions.clear_sessions()


def test_registry_evicts_least_recently_used_when_full(clock, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(inspection_sessions, "MAX_OPEN_SESSIONS", 3)
    first, _ = inspection_sessions.open_session()
    second, _ = inspection_sessions.open_session()
    third, _ = inspection_sessions.open_session()
    inspection_sessions.get_session(first)

    fourth, _ = inspection_sessions.open_session()

    assert inspection_sessions.open_session_count() == 3
    with pytest.raises(KeyError):
        inspection_sessions.get_session(second)
    for session_id in (first, third, fourth):
        inspection_sessions.get_session(session_id)


def test_idle_sessions_are_dropped_on_open(clock) -> None:
    abandoned, _ = inspection_sessions.open_session()
    clock[0] += inspection_sessions.SESSION_IDLE_SECONDS + 1

    fresh, _ = inspection_sessions.open_session()

    assert inspection_sessions.open_session_count() == 1
    with pytest.raises(KeyError):
        inspection_sessions.get_session(abandoned)
    inspection_sessions.get_session(fresh)


def test_recently_used_session_survives_idle_pruning(clock) -> None:
    active, _ = inspection_sessions.open_session()
    clock[0] += inspection_sessions.SESSION_IDLE_SECONDS - 10
    inspection_sessions.get_session(active)
    clock[0] += 20

    inspection_sessions.open_session()

    assert inspection_sessions.get_session(active) is not None


def test_update_and_state_use_camel_case_keys(clock) -> None:
    session_id, session = inspection_sessions.open_session()
    payload = models.InspectionUpdate.model_validate({"driverName": "Jane", "truckNumber": "42"})

    inspection_sessions.update_session(session, payload)
    state = inspection_sessions.session_state(session_id, session).model_dump(by_alias=True)

    assert state["sessionId"] == session_id
    assert (state["driverName"], state["truckNumber"]) == ("Jane", "42")
    assert (state["checkedCount"], state["totalCount"]) == (0, 30)
