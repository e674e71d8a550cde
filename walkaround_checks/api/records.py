"""Routes de l'historique des relevés."""
from __future__ import annotations

import io
from uuid import UUID

from fastapi import APIRouter, HTTPException, Response
from fastapi.responses import StreamingResponse

from walkaround_checks.core import models, services

router = APIRouter()


@router.get("/", response_model=list[models.RecordSummary])
async def list_records() -> list[models.RecordSummary]:
    return [models.RecordSummary.from_record(record) for record in services.view_history()]


@router.post("/refresh", response_model=list[models.RecordSummary])
async def refresh_records() -> list[models.RecordSummary]:
    return [models.RecordSummary.from_record(record) for record in services.refresh_history()]


@router.post("/delete-at", response_model=list[models.RecordSummary])
async def delete_records_at(payload: models.DeleteAtRequest) -> list[models.RecordSummary]:
    try:
        removed = services.delete_records_at(payload.indices)
    except IndexError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return [models.RecordSummary.from_record(record) for record in removed]


@router.get("/{record_id}", response_model=models.RecordDetail)
async def get_record(record_id: UUID) -> models.RecordDetail:
    try:
        return services.view_record(record_id)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.delete("/{record_id}", status_code=204)
async def delete_record(record_id: UUID) -> Response:
    try:
        services.delete_record(record_id)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=204)


@router.get("/{record_id}/export/pdf")
async def export_record_pdf(record_id: UUID):
    try:
        report = services.export_record_pdf(record_id)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return StreamingResponse(
        io.BytesIO(report.content),
        media_type=report.media_type,
        headers={
            "Content-Disposition": f"attachment; filename=\"{report.filename}\"",
        },
    )
