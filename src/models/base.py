"""Declarative base for ORM models."""

from __future__ import annotations

from typing import Any

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


# JSONB on Postgres, plain JSON on SQLite and other dialects.
JSONType: Any = JSON().with_variant(JSONB(), "postgresql")
