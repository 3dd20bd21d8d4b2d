"""Presentation lookups for rank tiers."""

from __future__ import annotations

from domain.ranking.calculator import round_half_up
from domain.ranking.common import PlayerStats, Rank

RANK_COLORS: dict[Rank, str] = {
    Rank.S: "#F59E0B",  # amber
    Rank.A: "#10B981",  # green
    Rank.B: "#3B82F6",  # blue
    Rank.C: "#6B7280",  # gray
}

RANK_DESCRIPTIONS: dict[str, dict[Rank, str]] = {
    "en": {
        Rank.S: "Elite",
        Rank.A: "Advanced",
        Rank.B: "Intermediate",
        Rank.C: "Beginner",
    },
    "pt-BR": {
        Rank.S: "Elite",
        Rank.A: "Avançado",
        Rank.B: "Intermediário",
        Rank.C: "Iniciante",
    },
}

DEFAULT_LOCALE = "en"


def _coerce_rank(rank: Rank | str) -> Rank:
    try:
        return Rank(rank)
    except ValueError as exc:
        available = ", ".join(member.value for member in Rank)
        raise ValueError(f"Unknown rank {rank!r}. Expected one of: {available}") from exc


def rank_color(rank: Rank | str) -> str:
    return RANK_COLORS[_coerce_rank(rank)]


def rank_description(rank: Rank | str, locale: str = DEFAULT_LOCALE) -> str:
    """Human-readable tier label in the requested locale."""
    try:
        labels = RANK_DESCRIPTIONS[locale]
    except KeyError as exc:
        available = ", ".join(sorted(RANK_DESCRIPTIONS))
        raise ValueError(f"Unsupported locale '{locale}'. Choose one of: {available}.") from exc
    return labels[_coerce_rank(rank)]


def win_rate_percent(stats: PlayerStats) -> float:
    """Win percentage to one decimal place, 0.0 for players without games.

    Capped at 100.0 like the score's win-rate term.
    """
    if stats.games_played == 0:
        return 0.0
    if stats.wins >= stats.games_played:
        return 100.0
    return round_half_up((stats.wins / stats.games_played) * 100.0)


__all__ = [
    "DEFAULT_LOCALE",
    "RANK_COLORS",
    "RANK_DESCRIPTIONS",
    "rank_color",
    "rank_description",
    "win_rate_percent",
]
