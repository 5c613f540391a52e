"""SQLAlchemy Account Store.

AccountStore 포트의 구현체입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import delete, exists, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from sportera.auth.application.common.exceptions import DataMapperError
from sportera.auth.domain.entities.account import Account
from sportera.auth.domain.exceptions import AccountAlreadyExistsError
from sportera.auth.domain.value_objects import AccountId, Email
from sportera.auth.infrastructure.persistence_postgres.mappers import (
    account_model_to_entity,
    account_to_row,
)
from sportera.auth.infrastructure.persistence_postgres.models import AccountModel

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

logger = logging.getLogger(__name__)


class SqlaAccountStore:
    """SQLAlchemy 기반 계정 저장소.

    email 유니크 제약 위반(IntegrityError)은 AccountAlreadyExistsError로 변환합니다.
    """

    def __init__(self, session_factory: "async_sessionmaker[AsyncSession]") -> None:
        self._session_factory = session_factory

    async def save(self, account: Account) -> Account:
        try:
            async with self._session_factory() as session:
                session.add(AccountModel(**account_to_row(account)))
                await session.commit()
        except IntegrityError as e:
            raise AccountAlreadyExistsError() from e
        except SQLAlchemyError as e:
            logger.exception("Failed to save account", extra={"account_id": str(account.id_)})
            raise DataMapperError("save", type(e).__name__) from e
        return account

    async def find_by_email(self, email: Email) -> Account | None:
        stmt = select(AccountModel).where(AccountModel.email == email.value)
        return await self._find_one(stmt, "find_by_email")

    async def find_by_id(self, account_id: AccountId) -> Account | None:
        stmt = select(AccountModel).where(AccountModel.account_id == account_id.value)
        return await self._find_one(stmt, "find_by_id")

    async def update(self, account: Account) -> Account | None:
        values = account_to_row(account)
        values.pop("account_id")
        values.pop("created_at")
        stmt = (
            update(AccountModel)
            .where(AccountModel.account_id == account.id_.value)
            .values(**values)
        )
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                await session.commit()
        except IntegrityError as e:
            raise AccountAlreadyExistsError() from e
        except SQLAlchemyError as e:
            raise DataMapperError("update", type(e).__name__) from e
        return account if result.rowcount else None

    async def delete(self, account_id: AccountId) -> bool:
        stmt = delete(AccountModel).where(AccountModel.account_id == account_id.value)
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                await session.commit()
        except SQLAlchemyError as e:
            raise DataMapperError("delete", type(e).__name__) from e
        return bool(result.rowcount)

    async def exists(self, email: Email) -> bool:
        stmt = select(exists().where(AccountModel.email == email.value))
        try:
            async with self._session_factory() as session:
                return bool((await session.execute(stmt)).scalar())
        except SQLAlchemyError as e:
            raise DataMapperError("exists", type(e).__name__) from e

    async def _find_one(self, stmt, operation: str) -> Account | None:
        try:
            async with self._session_factory() as session:
                model = (await session.execute(stmt)).scalar_one_or_none()
                return account_model_to_entity(model) if model else None
        except SQLAlchemyError as e:
            raise DataMapperError(operation, type(e).__name__) from e
