"""Service health"""

from typing import Any

from fastapi import APIRouter

from ..schemas.health import HealthResponse
from ..settings import settings


router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health() -> Any:
    """Report that the service is up and whether email delivery is configured."""

    return HealthResponse(email_configured=bool(settings.resend_api_key))
