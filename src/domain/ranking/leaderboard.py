"""Ordering of ranked players into a leaderboard."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from domain.ranking.common import Rank
from domain.ranking.player_calculator import PlayerRankingEvent


@dataclass(frozen=True)
class LeaderboardEntry:
    position: int
    event: PlayerRankingEvent


def leaderboard_sort_key(event: PlayerRankingEvent) -> tuple[float, int, str]:
    return (-event.score, -event.games_played, event.player_id)


def build_leaderboard(
    events: Iterable[PlayerRankingEvent],
    *,
    min_games_played: int = 0,
    top_n: int | None = None,
) -> list[LeaderboardEntry]:
    """Order events by score, then volume, then player id, and number them from 1."""
    if min_games_played < 0:
        raise ValueError("min_games_played must be >= 0")
    if top_n is not None and top_n <= 0:
        raise ValueError("top_n must be greater than 0")

    eligible = [event for event in events if event.games_played >= min_games_played]
    ordered = sorted(eligible, key=leaderboard_sort_key)
    if top_n is not None:
        ordered = ordered[:top_n]

    return [LeaderboardEntry(position=index, event=event) for index, event in enumerate(ordered, start=1)]


def rank_distribution(events: Iterable[PlayerRankingEvent]) -> dict[str, int]:
    """Count players per tier, always listing every tier."""
    counts = {rank.value: 0 for rank in Rank}
    for event in events:
        counts[event.rank.value] += 1
    return counts


__all__ = ["LeaderboardEntry", "build_leaderboard", "leaderboard_sort_key", "rank_distribution"]
