"""Health check endpoints."""

from fastapi import APIRouter, Depends

from markdown_docx.api.deps import get_app_settings
from markdown_docx.core.config import Settings
from markdown_docx.schemas.conversion import HealthResponse

router = APIRouter()


@router.get("/health", tags=["system"], response_model=HealthResponse)
def healthcheck(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """Simple readiness probe."""

    return HealthResponse(status="ok", environment=settings.environment)
