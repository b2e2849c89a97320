# storefront/routers/health.py
from datetime import datetime, timezone

from fastapi import APIRouter

from storefront.schemas.health import HealthRead

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthRead)
def health():
    """Health check endpoint."""
    return HealthRead(status="OK", timestamp=datetime.now(timezone.utc))
