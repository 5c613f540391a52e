"""Dependency Container.

애플리케이션 시작 시 한 번 조립되어 app.state.container에 저장됩니다.
저장소와 보안 어댑터는 여기서만 생성합니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from sportera._shared.clock import Clock, utc_now
from sportera._shared.database import build_engine, build_session_factory, create_schema
from sportera.auth.application.common.ports import AccountStore, PasswordHasher, TokenService
from sportera.auth.domain.ports import AccountIdGenerator
from sportera.auth.infrastructure.adapters import UuidAccountIdGenerator
from sportera.auth.infrastructure.persistence_memory import InMemoryAccountStore
from sportera.auth.infrastructure.persistence_postgres import SqlaAccountStore
from sportera.auth.infrastructure.security import BcryptPasswordHasher, JwtTokenService
from sportera.location.application.catalog.ports import PlaceStore
from sportera.location.infrastructure.persistence_memory import (
    InMemoryPlaceStore,
    build_demo_places,
)
from sportera.location.infrastructure.persistence_postgres import SqlaPlaceStore
from sportera.setup.config import Settings

logger = logging.getLogger(__name__)


@dataclass
class Container:
    """조립된 협력자 모음."""

    settings: Settings
    place_store: PlaceStore
    account_store: AccountStore
    password_hasher: PasswordHasher
    token_service: TokenService
    id_generator: AccountIdGenerator
    clock: Clock = utc_now
    engine: AsyncEngine | None = None
    session_factory: async_sessionmaker[AsyncSession] | None = None

    async def startup(self) -> None:
        """DB 사용 시 테이블 생성."""
        if self.engine is not None:
            await create_schema(self.engine)

    async def shutdown(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()


def build_container(settings: Settings, clock: Clock = utc_now) -> Container:
    """설정에 따라 저장소 어댑터 선택 후 컨테이너 조립.

    database_url이 없으면 in-memory 저장소를 사용하고,
    seed_demo_places가 켜져 있으면 데모 장소를 적재합니다.
    """
    engine = None
    session_factory = None
    if settings.database_url:
        engine = build_engine(settings.database_url)
        session_factory = build_session_factory(engine)
        place_store: PlaceStore = SqlaPlaceStore(session_factory)
        account_store: AccountStore = SqlaAccountStore(session_factory)
        backend = "sqlalchemy"
    else:
        seed = build_demo_places(clock()) if settings.seed_demo_places else []
        place_store = InMemoryPlaceStore(seed)
        account_store = InMemoryAccountStore()
        backend = "memory"

    logger.info(
        "Container built",
        extra={"store_backend": backend, "seed_demo_places": settings.seed_demo_places},
    )
    return Container(
        settings=settings,
        place_store=place_store,
        account_store=account_store,
        password_hasher=BcryptPasswordHasher(rounds=settings.bcrypt_rounds),
        token_service=JwtTokenService(
            secret_key=settings.jwt_secret_key.get_secret_value(),
            default_ttl=settings.access_token_ttl,
            algorithm=settings.jwt_algorithm,
            clock=clock,
        ),
        id_generator=UuidAccountIdGenerator(),
        clock=clock,
        engine=engine,
        session_factory=session_factory,
    )
