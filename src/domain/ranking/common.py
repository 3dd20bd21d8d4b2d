"""Shared types for the player ranking engine."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum


class Rank(str, Enum):
    """Rank tiers, strongest first."""

    S = "S"
    A = "A"
    B = "B"
    C = "C"


@dataclass(frozen=True)
class PlayerStats:
    """Cumulative profile statistics used as ranking input."""

    wins: int
    games_played: int
    goals: int
    assists: int

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            # bool is an int subclass but never a valid counter.
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{field.name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{field.name} must be >= 0, got {value}")


@dataclass(frozen=True)
class RankingResult:
    score: float
    rank: Rank


@dataclass(frozen=True)
class PlayerProfile:
    """Identity and stats for one player, as read from the profile store."""

    player_id: str
    name: str
    stats: PlayerStats
    position: str | None = None


__all__ = ["PlayerProfile", "PlayerStats", "Rank", "RankingResult"]
