"""Persistence operations for ranking systems and leaderboard snapshots."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import delete, func, insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from domain.ranking.leaderboard import LeaderboardEntry
from models import PlayerRanking, RankingSystem


def entry_to_row(entry: LeaderboardEntry, system_id: int) -> dict[str, Any]:
    event = entry.event
    return {
        "ranking_system_id": system_id,
        "player_id": event.player_id,
        "player_name": event.player_name,
        "player_position": event.position,
        "position": entry.position,
        "games_played": event.games_played,
        "wins": event.wins,
        "goals": event.goals,
        "assists": event.assists,
        "win_rate": event.win_rate,
        "score": event.score,
        "rank": event.rank.value,
    }


class RankingRepository:
    """Reusable persistence operations for player ranking snapshots."""

    def __init__(
        self,
        *,
        system_model: type[RankingSystem] = RankingSystem,
        ranking_model: type[PlayerRanking] = PlayerRanking,
    ) -> None:
        self.system_model = system_model
        self.ranking_model = ranking_model

    def ensure_schema(self, engine: Engine) -> None:
        """Create required tables and indexes when missing."""
        with engine.begin() as connection:
            self.system_model.__table__.create(bind=connection, checkfirst=True)
            self.ranking_model.__table__.create(bind=connection, checkfirst=True)

    def upsert_system(
        self,
        session: Session,
        *,
        name: str,
        description: str | None,
        config_json: dict[str, Any],
    ) -> RankingSystem:
        """Create or update the system metadata row."""
        system = session.execute(
            select(self.system_model).where(self.system_model.name == name)
        ).scalar_one_or_none()
        if system is None:
            system = self.system_model(
                name=name,
                description=description,
                config_json=config_json,
            )
            session.add(system)
        else:
            system.description = description
            system.config_json = config_json
            system.updated_at = datetime.now(UTC).replace(tzinfo=None)
        session.flush()
        return system

    def get_system(self, session: Session, name: str) -> RankingSystem:
        system = session.execute(
            select(self.system_model).where(self.system_model.name == name)
        ).scalar_one_or_none()
        if system is None:
            names = session.scalars(select(self.system_model.name).order_by(self.system_model.name))
            available = ", ".join(names) or "(none)"
            raise KeyError(f"No ranking system named '{name}'. Available: {available}")
        return system

    def delete_rankings_for_system(self, session: Session, system_id: int) -> None:
        """Delete the previous leaderboard snapshot for one system."""
        session.execute(
            delete(self.ranking_model).where(self.ranking_model.ranking_system_id == system_id)
        )

    def insert_rankings(
        self,
        session: Session,
        entries: Sequence[LeaderboardEntry],
        *,
        system_id: int,
    ) -> None:
        if not entries:
            return

        payload = [entry_to_row(entry, system_id) for entry in entries]
        session.execute(insert(self.ranking_model), payload)

    def count_tracked_players(self, session: Session, *, system_id: int | None = None) -> int:
        """Count distinct ranked players for one system or all systems."""
        statement = select(func.count(func.distinct(self.ranking_model.player_id)))
        if system_id is not None:
            statement = statement.where(self.ranking_model.ranking_system_id == system_id)

        result = session.scalar(statement)
        return int(result or 0)

    def fetch_leaderboard(
        self,
        session: Session,
        *,
        system_name: str,
        top_n: int | None = None,
        min_games_played: int = 0,
    ) -> list[PlayerRanking]:
        """Return stored rankings for a system in leaderboard order."""
        if min_games_played < 0:
            raise ValueError("min_games_played must be >= 0")
        if top_n is not None and top_n <= 0:
            raise ValueError("top_n must be greater than 0")

        system = self.get_system(session, system_name)
        statement = (
            select(self.ranking_model)
            .where(
                self.ranking_model.ranking_system_id == system.id,
                self.ranking_model.games_played >= min_games_played,
            )
            .order_by(
                self.ranking_model.score.desc(),
                self.ranking_model.games_played.desc(),
                self.ranking_model.player_id.asc(),
            )
        )
        if top_n is not None:
            statement = statement.limit(top_n)
        return list(session.scalars(statement))


RANKING_REPOSITORY = RankingRepository()

__all__ = ["RANKING_REPOSITORY", "RankingRepository", "entry_to_row"]
