"""SQLAlchemy ORM Models."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, Float, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from sportera._shared.database.base import Base
from sportera.location.domain.constants import PLACE_NAME_MAX_LENGTH


class PlaceModel(Base):
    """장소 ORM 모델.

    seq는 삽입 순서 정렬용 대리 키이고, 도메인 식별자는 place_id입니다.
    """

    __tablename__ = "location_places"

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    place_id: Mapped[uuid.UUID] = mapped_column(Uuid, unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(PLACE_NAME_MAX_LENGTH), nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    sports: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    owner_id: Mapped[str | None] = mapped_column(String(64), index=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    opening_hours: Mapped[dict[str, Any] | None] = mapped_column(JSON)
    amenities: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    contact_info: Mapped[dict[str, Any] | None] = mapped_column(JSON)
    address: Mapped[str | None] = mapped_column(Text)
    description: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
