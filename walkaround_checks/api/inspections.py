"""Routes pour la saisie d'un contrôle."""
from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Response
from fastapi.responses import JSONResponse

from walkaround_checks.core import models, services
from walkaround_checks.services import inspection_sessions
from walkaround_checks.services.checklist_session import (
    ChecklistSession,
    ChecklistValidationError,
    IncompleteChecklist,
    UnknownCategory,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _load_session(session_id: str) -> ChecklistSession:
    try:
        return inspection_sessions.get_session(session_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Contrôle introuvable") from exc


@router.post("/", response_model=models.InspectionState, status_code=201)
async def start_inspection() -> models.InspectionState:
    session_id, session = services.start_inspection()
    return inspection_sessions.session_state(session_id, session)


@router.get("/{session_id}", response_model=models.InspectionState)
async def get_inspection(session_id: str) -> models.InspectionState:
    session = _load_session(session_id)
    return inspection_sessions.session_state(session_id, session)


@router.patch("/{session_id}", response_model=models.InspectionState)
async def update_inspection(session_id: str, payload: models.InspectionUpdate) -> models.InspectionState:
    session = _load_session(session_id)
    inspection_sessions.update_session(session, payload)
    return inspection_sessions.session_state(session_id, session)


@router.post("/{session_id}/items/toggle", response_model=models.InspectionState)
async def toggle_item(session_id: str, payload: models.ItemToggle) -> models.InspectionState:
    session = _load_session(session_id)
    session.toggle_item(payload.item)
    return inspection_sessions.session_state(session_id, session)


@router.post("/{session_id}/categories/toggle", response_model=models.InspectionState)
async def toggle_category(session_id: str, payload: models.CategoryToggle) -> models.InspectionState:
    session = _load_session(session_id)
    try:
        session.toggle_all_in_category(payload.category)
    except UnknownCategory as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return inspection_sessions.session_state(session_id, session)


@router.post("/{session_id}/submit", response_model=models.Record, status_code=201)
async def submit_inspection(session_id: str):
    _load_session(session_id)
    try:
        return services.submit_inspection(session_id)
    except ChecklistValidationError as exc:
        detail = models.ChecklistErrorDetail(
            code=exc.code,
            message=str(exc),
            missing_items=exc.missing_items if isinstance(exc, IncompleteChecklist) else [],
        )
        logger.info("Soumission refusée pour %s : %s", session_id, exc.code)
        return JSONResponse(status_code=422, content={"detail": detail.model_dump(by_alias=True)})


@router.delete("/{session_id}", status_code=204)
async def discard_inspection(session_id: str) -> Response:
    if not inspection_sessions.close_session(session_id):
        raise HTTPException(status_code=404, detail="Contrôle introuvable")
    return Response(status_code=204)
