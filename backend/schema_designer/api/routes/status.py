"""Status API route."""

from fastapi import APIRouter, Depends, Request

from schema_designer.api.deps import get_settings
from schema_designer.core.config import Settings
from schema_designer.models.schemas import StatusResponse

router = APIRouter(prefix="/status", tags=["status"])


@router.get("", response_model=StatusResponse)
async def get_status(request: Request, settings: Settings = Depends(get_settings)):
    """Report whether the model credential is configured and the store answers."""
    database = getattr(request.app.state, "database", None)
    database_ok = await database.ping() if database is not None else False

    return StatusResponse(
        server=True,
        model=bool(settings.gemini_api_key),
        database=database_ok,
    )
