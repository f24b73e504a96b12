"""Mixins and identifier helpers for SQLAlchemy models."""

import re
import secrets
from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, String, func

OBJECT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")


def new_object_id() -> str:
    """Generate a 24-character hexadecimal identifier."""
    return secrets.token_hex(12)


def is_object_id(value: str | None) -> bool:
    """Check whether a value has the shape of an identifier."""
    return bool(value) and OBJECT_ID_PATTERN.match(value) is not None


def utcnow() -> datetime:
    return datetime.now(UTC)


class ObjectIdMixin:
    """Mixin to add a hexadecimal string primary key."""

    id = Column(String(24), primary_key=True, default=new_object_id)


class TimestampMixin:
    """Mixin to add created_at and updated_at timestamp columns."""

    # Python-side defaults keep sub-second precision for newest-first ordering
    created_at = Column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False
    )
    updated_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        onupdate=utcnow,
        nullable=False,
    )
