"""SQLAlchemy ORM Models."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from sportera._shared.database.base import Base
from sportera.auth.domain.constants import (
    ACCOUNT_NAME_MAX_LENGTH,
    ORGANIZATION_NAME_MAX_LENGTH,
)


class AccountModel(Base):
    """계정 ORM 모델. email 유니크 제약이 중복 등록의 최종 판정입니다."""

    __tablename__ = "auth_accounts"

    account_id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(ACCOUNT_NAME_MAX_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(128), nullable=False)
    kind: Mapped[str] = mapped_column(String(32), nullable=False)
    organization_name: Mapped[str | None] = mapped_column(String(ORGANIZATION_NAME_MAX_LENGTH))
    organization_description: Mapped[str | None] = mapped_column(Text)
    points: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
