"""Shared Database Layer."""

from sportera._shared.database.base import Base
from sportera._shared.database.session import build_engine, build_session_factory, create_schema

__all__ = ["Base", "build_engine", "build_session_factory", "create_schema"]
