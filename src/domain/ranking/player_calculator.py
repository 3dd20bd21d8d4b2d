"""Batch ranking over player profiles."""

from __future__ import annotations

from dataclasses import dataclass

from domain.ranking.calculator import DEFAULT_RANKING_PARAMETERS, RankingParameters, calculate_ranking
from domain.ranking.common import PlayerProfile, Rank
from domain.ranking.display import win_rate_percent


@dataclass(frozen=True)
class PlayerRankingEvent:
    player_id: str
    player_name: str
    position: str | None
    games_played: int
    wins: int
    goals: int
    assists: int
    win_rate: float
    score: float
    rank: Rank


class PlayerRankingCalculator:
    """Ranks profiles one at a time and keeps a snapshot of scores."""

    def __init__(self, params: RankingParameters = DEFAULT_RANKING_PARAMETERS) -> None:
        self.params = params
        self._scores: dict[str, float] = {}

    def tracked_entity_count(self) -> int:
        return len(self._scores)

    def ratings(self) -> dict[str, float]:
        """Return a snapshot of current player scores."""
        return dict(self._scores)

    def process_profile(self, profile: PlayerProfile) -> PlayerRankingEvent:
        if profile.player_id in self._scores:
            raise ValueError(f"player_id={profile.player_id} was already ranked in this run")

        stats = profile.stats
        result = calculate_ranking(stats, self.params)
        self._scores[profile.player_id] = result.score

        return PlayerRankingEvent(
            player_id=profile.player_id,
            player_name=profile.name,
            position=profile.position,
            games_played=stats.games_played,
            wins=stats.wins,
            goals=stats.goals,
            assists=stats.assists,
            win_rate=win_rate_percent(stats),
            score=result.score,
            rank=result.rank,
        )


__all__ = ["PlayerRankingCalculator", "PlayerRankingEvent"]
