from fastapi import APIRouter

from wealth_id.models.conversion import HealthStatus
from wealth_id.services.conversion import utc_now_iso

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthStatus, summary="Liveness probe")
async def health() -> HealthStatus:
    return HealthStatus(status="healthy", timestamp=utc_now_iso())
