"""Routes du catalogue de points de contrôle."""
from __future__ import annotations

from fastapi import APIRouter

from walkaround_checks.core import models, services

router = APIRouter()


@router.get("/", response_model=list[models.CatalogCategory])
async def list_catalog() -> list[models.CatalogCategory]:
    return services.list_catalog()
