"""SQLAlchemy Place Store.

PlaceStore 포트의 구현체입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError

from sportera.location.application.common.exceptions import DataMapperError
from sportera.location.domain.entities import Place
from sportera.location.domain.value_objects import PlaceId
from sportera.location.infrastructure.persistence_postgres.mappers import (
    place_model_to_entity,
    place_to_row,
)
from sportera.location.infrastructure.persistence_postgres.models import PlaceModel

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

logger = logging.getLogger(__name__)


class SqlaPlaceStore:
    """SQLAlchemy 기반 장소 저장소.

    PlaceStore 구현체. 연산마다 세션을 열고 커밋합니다 (레코드 단위 원자성).
    """

    def __init__(self, session_factory: "async_sessionmaker[AsyncSession]") -> None:
        self._session_factory = session_factory

    async def add(self, place: Place) -> Place:
        try:
            async with self._session_factory() as session:
                session.add(PlaceModel(**place_to_row(place)))
                await session.commit()
        except SQLAlchemyError as e:
            logger.exception("Failed to add place", extra={"place_id": str(place.id_)})
            raise DataMapperError("add", type(e).__name__) from e
        return place

    async def get(self, place_id: PlaceId) -> Place | None:
        stmt = select(PlaceModel).where(PlaceModel.place_id == place_id.value)
        try:
            async with self._session_factory() as session:
                model = (await session.execute(stmt)).scalar_one_or_none()
                return place_model_to_entity(model) if model else None
        except SQLAlchemyError as e:
            raise DataMapperError("get", type(e).__name__) from e

    async def list_all(self) -> list[Place]:
        stmt = select(PlaceModel).order_by(PlaceModel.seq)
        try:
            async with self._session_factory() as session:
                models = (await session.execute(stmt)).scalars().all()
                return [place_model_to_entity(model) for model in models]
        except SQLAlchemyError as e:
            raise DataMapperError("list_all", type(e).__name__) from e

    async def replace(self, place: Place) -> Place | None:
        values = place_to_row(place)
        values.pop("place_id")
        values.pop("created_at")
        stmt = update(PlaceModel).where(PlaceModel.place_id == place.id_.value).values(**values)
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                await session.commit()
        except SQLAlchemyError as e:
            logger.exception("Failed to replace place", extra={"place_id": str(place.id_)})
            raise DataMapperError("replace", type(e).__name__) from e
        return place if result.rowcount else None

    async def remove(self, place_id: PlaceId) -> bool:
        stmt = delete(PlaceModel).where(PlaceModel.place_id == place_id.value)
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                await session.commit()
        except SQLAlchemyError as e:
            raise DataMapperError("remove", type(e).__name__) from e
        return bool(result.rowcount)
