"""Rebuild pipeline for ranking-system leaderboard snapshots."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from sqlalchemy.orm import Session

from domain.ranking.common import PlayerProfile
from domain.ranking.config import RankingSystemConfig
from domain.ranking.leaderboard import build_leaderboard, rank_distribution
from domain.ranking.player_calculator import PlayerRankingCalculator, PlayerRankingEvent
from repositories.ranking_repository import RankingRepository

FetchProfilesFn = Callable[[Session], list[PlayerProfile]]


@dataclass(frozen=True)
class RebuildSummary:
    """Outcome for one rebuilt ranking system config."""

    system_name: str
    config_file: str
    system_id: int
    processed_profiles: int
    inserted_rankings: int
    tracked_players: int
    rank_counts: dict[str, int]
    dry_run: bool


def rebuild_rankings(
    *,
    session_factory,
    repository: RankingRepository,
    system_config: RankingSystemConfig,
    fetch_profiles: FetchProfilesFn,
    batch_size: int = 5000,
    dry_run: bool = False,
    echo: Callable[[str], None] | None = None,
) -> RebuildSummary:
    """Rank every profile under one config and replace the stored snapshot."""
    if batch_size <= 0:
        raise ValueError("batch_size must be greater than 0")

    inserted_rankings = 0

    with session_factory() as session:
        profiles = fetch_profiles(session)
        total_profiles = len(profiles)

        system = repository.upsert_system(
            session,
            name=system_config.name,
            description=system_config.description,
            config_json=system_config.as_config_json(),
        )
        system_id = int(system.id)

        calculator = PlayerRankingCalculator(system_config.parameters)
        events: list[PlayerRankingEvent] = [calculator.process_profile(profile) for profile in profiles]
        rank_counts = rank_distribution(events)

        if dry_run:
            tracked_players = calculator.tracked_entity_count()
            if echo is not None:
                echo(
                    f"[dry-run] config={system_config.file_path.name} "
                    f"system={system_config.name} "
                    f"processed_profiles={total_profiles} "
                    f"tracked_players={tracked_players} "
                    f"rank_counts={_format_counts(rank_counts)}"
                )
            session.rollback()
            return RebuildSummary(
                system_name=system_config.name,
                config_file=system_config.file_path.name,
                system_id=system_id,
                processed_profiles=total_profiles,
                inserted_rankings=0,
                tracked_players=tracked_players,
                rank_counts=rank_counts,
                dry_run=True,
            )

        entries = build_leaderboard(events)
        try:
            repository.delete_rankings_for_system(session, system_id)

            for start in range(0, len(entries), batch_size):
                payload = entries[start : start + batch_size]
                repository.insert_rankings(session, payload, system_id=system_id)
                inserted_rankings += len(payload)

                if echo is not None and len(entries) > batch_size:
                    echo(
                        f"config={system_config.file_path.name} "
                        f"system={system_config.name} "
                        f"inserted_rankings={inserted_rankings}/{len(entries)}"
                    )

            session.commit()
        except Exception:
            session.rollback()
            raise

        tracked_players = repository.count_tracked_players(session, system_id=system_id)
        if echo is not None:
            echo(
                "completed "
                f"config={system_config.file_path.name} "
                f"system={system_config.name} "
                f"system_id={system_id} "
                f"processed_profiles={total_profiles} "
                f"inserted_rankings={inserted_rankings} "
                f"tracked_players={tracked_players} "
                f"rank_counts={_format_counts(rank_counts)}"
            )

        return RebuildSummary(
            system_name=system_config.name,
            config_file=system_config.file_path.name,
            system_id=system_id,
            processed_profiles=total_profiles,
            inserted_rankings=inserted_rankings,
            tracked_players=tracked_players,
            rank_counts=rank_counts,
            dry_run=False,
        )


def _format_counts(rank_counts: dict[str, int]) -> str:
    return ",".join(f"{rank}:{count}" for rank, count in rank_counts.items())


__all__ = ["RebuildSummary", "rebuild_rankings"]
