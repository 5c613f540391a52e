"""SportEra API Application

FastAPI 애플리케이션 설정 및 미들웨어 구성
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sportera._shared.presentation.http.errors import register_exception_handlers
from sportera._shared.presentation.http.health import router as health_router
from sportera.auth.presentation.http.controllers import router as auth_router
from sportera.location.presentation.http.controllers import router as places_router
from sportera.setup.config import Settings, get_settings
from sportera.setup.constants import API_PREFIX, SERVICE_NAME, SERVICE_VERSION
from sportera.setup.container import build_container
from sportera.setup.logging import configure_logging
from sportera.setup.metrics import router as metrics_router

# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    container = app.state.container
    await container.startup()
    yield
    await container.shutdown()


# =============================================================================
# Application Factory
# =============================================================================


def create_app(settings: Settings | None = None) -> FastAPI:
    """FastAPI 애플리케이션 생성

    Args:
        settings: 런타임 설정 (없으면 환경변수에서 로드)

    Returns:
        FastAPI: 구성된 애플리케이션 인스턴스
    """
    settings = settings or get_settings()

    # 구조화된 로깅 설정 (ECS JSON 포맷)
    configure_logging(service_name=SERVICE_NAME, service_version=SERVICE_VERSION)

    app = FastAPI(
        title=settings.app_name,
        description="Nearby sports venues search and account service",
        version=SERVICE_VERSION,
        docs_url=f"{API_PREFIX}/docs",
        openapi_url=f"{API_PREFIX}/openapi.json",
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.container = build_container(settings)

    # CORS 미들웨어 (설정에서 origins 가져옴)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(metrics_router)
    app.include_router(places_router, prefix=API_PREFIX)
    app.include_router(auth_router, prefix=API_PREFIX)

    return app


# =============================================================================
# Application Instance
# =============================================================================

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
