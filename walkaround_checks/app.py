"""Application FastAPI principale pour WalkAround Checks."""
from fastapi import FastAPI

from walkaround_checks import __version__
from walkaround_checks.api import catalog, inspections, records
from walkaround_checks.core.logging_config import configure_logging


configure_logging()

app = FastAPI(title="WalkAround Checks API", version=__version__)

app.include_router(catalog.router, prefix="/catalog", tags=["catalog"])
app.include_router(inspections.router, prefix="/inspections", tags=["inspections"])
app.include_router(records.router, prefix="/records", tags=["records"])


@app.get("/health", tags=["health"])
async def healthcheck() -> dict[str, str]:
    """Renvoie l'état de santé générique du service."""
    return {"status": "ok"}
