"""Database session management."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from sportera._shared.database.base import Base


def build_engine(database_url: str, *, echo: bool = False) -> AsyncEngine:
    """Async 엔진 생성. 모듈 전역이 아니라 컨테이너 조립 시점에 만들어집니다."""
    return create_async_engine(database_url, echo=echo, pool_pre_ping=True)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """등록된 모든 ORM 모델의 테이블 생성 (로컬/테스트용)."""
    # 모델 모듈을 import해야 metadata에 테이블이 등록됨
    import sportera.auth.infrastructure.persistence_postgres.models  # noqa: F401
    import sportera.location.infrastructure.persistence_postgres.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
