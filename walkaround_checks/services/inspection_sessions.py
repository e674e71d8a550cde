"""Registre en mémoire des contrôles en cours de saisie.

Les contrôles inactifs depuis ``SESSION_IDLE_SECONDS`` sont oubliés et le
registre ne dépasse jamais ``MAX_OPEN_SESSIONS`` entrées (les plus anciennes
sont retirées en premier).
"""
from __future__ import annotations

import logging
import time
import uuid
from datetime import datetime

from walkaround_checks.core import models
from walkaround_checks.services.checklist_session import ChecklistSession

logger = logging.getLogger(__name__)

SESSION_IDLE_SECONDS = 12 * 60 * 60
MAX_OPEN_SESSIONS = 256

# session_id -> (last access, session), least recently used first
_SESSIONS: dict[str, tuple[float, ChecklistSession]] = {}


def _prune(now: float) -> None:
    stale = [sid for sid, (seen, _) in _SESSIONS.items() if now - seen > SESSION_IDLE_SECONDS]
    overflow = len(_SESSIONS) - len(stale) - MAX_OPEN_SESSIONS + 1
    if overflow > 0:
        stale.extend([sid for sid in _SESSIONS if sid not in stale][:overflow])
    for sid in stale:
        del _SESSIONS[sid]
    if stale:
        logger.info("%d contrôle(s) abandonné(s) retiré(s) du registre", len(stale))


def open_session(*, date: datetime | None = None) -> tuple[str, ChecklistSession]:
    now = time.monotonic()
    _prune(now)
    session_id = uuid.uuid4().hex
    session = ChecklistSession(date=date or datetime.now())
    _SESSIONS[session_id] = (now, session)
    logger.debug("Contrôle %s ouvert", session_id)
    return session_id, session


def get_session(session_id: str) -> ChecklistSession:
    """Return the open session; raise ``KeyError`` when it does not exist."""

    _, session = _SESSIONS.pop(session_id)
    _SESSIONS[session_id] = (time.monotonic(), session)
    return session


def close_session(session_id: str) -> bool:
    return _SESSIONS.pop(session_id, None) is not None


def open_session_count() -> int:
    return len(_SESSIONS)


def clear_sessions() -> None:
    _SESSIONS.clear()


def update_session(session: ChecklistSession, payload: models.InspectionUpdate) -> ChecklistSession:
    if payload.driver_name is not None:
        session.driver_name = payload.driver_name
    if payload.truck_number is not None:
        session.truck_number = payload.truck_number
    if payload.date is not None:
        session.date = payload.date
    if payload.comments is not None:
        session.comments = payload.comments
    return session


def session_state(session_id: str, session: ChecklistSession) -> models.InspectionState:
    return models.InspectionState(session_id=session_id, **session.snapshot())
