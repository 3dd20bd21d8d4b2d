"""ranking_systems and player_rankings table models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, JSONType


class RankingSystem(Base):
    """Configuration metadata for one named ranking parameter set."""

    __tablename__ = "ranking_systems"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False, unique=True, index=True)
    description: Mapped[str | None] = mapped_column(String(512), nullable=True)
    config_json: Mapped[dict[str, Any]] = mapped_column(JSONType, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        server_default=func.now(),
    )


class PlayerRanking(Base):
    """Leaderboard snapshot row for one player under one ranking system."""

    __tablename__ = "player_rankings"
    __table_args__ = (
        UniqueConstraint(
            "ranking_system_id",
            "player_id",
            name="uq_player_rankings_system_player",
        ),
        CheckConstraint("score >= 0.0 AND score <= 100.0", name="ck_player_rankings_score"),
        CheckConstraint("rank IN ('S', 'A', 'B', 'C')", name="ck_player_rankings_rank"),
        Index("idx_player_rankings_system", "ranking_system_id"),
        Index("idx_player_rankings_system_position", "ranking_system_id", "position"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    ranking_system_id: Mapped[int] = mapped_column(ForeignKey("ranking_systems.id"), nullable=False)
    player_id: Mapped[str] = mapped_column(String(64), nullable=False)
    player_name: Mapped[str] = mapped_column(String(256), nullable=False)
    player_position: Mapped[str | None] = mapped_column(String(64), nullable=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    games_played: Mapped[int] = mapped_column(Integer, nullable=False)
    wins: Mapped[int] = mapped_column(Integer, nullable=False)
    goals: Mapped[int] = mapped_column(Integer, nullable=False)
    assists: Mapped[int] = mapped_column(Integer, nullable=False)
    win_rate: Mapped[float] = mapped_column(Float, nullable=False)
    score: Mapped[float] = mapped_column(Float, nullable=False)
    rank: Mapped[str] = mapped_column(String(1), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        server_default=func.now(),
    )
