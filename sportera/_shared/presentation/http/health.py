"""Health/Readiness probe endpoints (로그 제외 - 노이즈 방지)."""

from fastapi import APIRouter

from sportera._shared.presentation.http.schemas import HealthResponse
from sportera.setup.constants import SERVICE_NAME, SERVICE_VERSION

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """서비스 상태 확인."""
    return HealthResponse(status="healthy", service=SERVICE_NAME, version=SERVICE_VERSION)


@router.get("/ping")
async def ping() -> dict:
    """간단한 ping 엔드포인트."""
    return {"pong": True}
