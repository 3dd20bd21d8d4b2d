"""Player ranking score and rank-tier logic."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from math import floor

from domain.ranking.common import PlayerStats, Rank, RankingResult


@dataclass(frozen=True)
class RankingParameters:
    win_rate_weight: float = 0.45
    goals_per_game_weight: float = 0.25
    assists_per_game_weight: float = 0.20
    volume_weight: float = 0.10
    goals_per_game_cap: float = 2.5
    assists_per_game_cap: float = 2.0
    volume_games_cap: float = 50.0
    s_threshold: float = 85.0
    a_threshold: float = 70.0
    b_threshold: float = 55.0


DEFAULT_RANKING_PARAMETERS = RankingParameters()

MIN_SCORE = 0.0
MAX_SCORE = 100.0


def round_half_up(value: float, digits: int = 1) -> float:
    """Round with ties going up, unlike the built-in banker's ``round``."""
    factor = 10**digits
    return floor(value * factor + 0.5) / factor


def classify_rank(score: float, params: RankingParameters = DEFAULT_RANKING_PARAMETERS) -> Rank:
    """Map a rounded score onto its rank tier; the highest matching band wins."""
    if score >= params.s_threshold:
        return Rank.S
    if score >= params.a_threshold:
        return Rank.A
    if score >= params.b_threshold:
        return Rank.B
    return Rank.C


def _saturate(numerator: int, denominator: int, cap: float) -> float:
    """Scale ``numerator / denominator`` against ``cap`` onto 0-100.

    Saturation is decided with exact rationals so counts too large for a float
    land at 100 instead of overflowing.
    """
    if numerator >= Fraction(cap) * denominator:
        return MAX_SCORE
    return min((numerator / denominator) / cap, 1.0) * 100.0


def calculate_ranking(
    stats: PlayerStats,
    params: RankingParameters = DEFAULT_RANKING_PARAMETERS,
) -> RankingResult:
    """Blend win rate, scoring, assists and volume into a 0-100 score and rank."""
    if stats.games_played == 0:
        return RankingResult(score=MIN_SCORE, rank=Rank.C)

    # wins > games_played is not rejected, so the rate is capped at 100.
    if stats.wins >= stats.games_played:
        win_rate_norm = MAX_SCORE
    else:
        win_rate_norm = max(MIN_SCORE, (stats.wins / stats.games_played) * 100.0)

    goals_norm = _saturate(stats.goals, stats.games_played, params.goals_per_game_cap)
    assists_norm = _saturate(stats.assists, stats.games_played, params.assists_per_game_cap)
    volume_norm = _saturate(stats.games_played, 1, params.volume_games_cap)

    score = (
        params.win_rate_weight * win_rate_norm
        + params.goals_per_game_weight * goals_norm
        + params.assists_per_game_weight * assists_norm
        + params.volume_weight * volume_norm
    )
    rounded_score = max(MIN_SCORE, min(round_half_up(score), MAX_SCORE))
    return RankingResult(score=rounded_score, rank=classify_rank(rounded_score, params))


__all__ = [
    "DEFAULT_RANKING_PARAMETERS",
    "MAX_SCORE",
    "MIN_SCORE",
    "RankingParameters",
    "calculate_ranking",
    "classify_rank",
    "round_half_up",
]
