"""Tests for rank color/description lookups."""

from __future__ import annotations

import pytest

from domain.ranking.common import PlayerStats, Rank
from domain.ranking.display import rank_color, rank_description, win_rate_percent


@pytest.mark.parametrize(
    ("rank", "color"),
    [
        (Rank.S, "#F59E0B"),
        (Rank.A, "#10B981"),
        (Rank.B, "#3B82F6"),
        (Rank.C, "#6B7280"),
    ],
)
def test_rank_color(rank: Rank, color: str) -> None:
    assert rank_color(rank) == color
    assert rank_color(rank.value) == color


@pytest.mark.parametrize(
    ("rank", "label"),
    [
        (Rank.S, "Elite"),
        (Rank.A, "Advanced"),
        (Rank.B, "Intermediate"),
        (Rank.C, "Beginner"),
    ],
)
def test_rank_description_english(rank: Rank, label: str) -> None:
    assert rank_description(rank) == label


def test_rank_description_portuguese() -> None:
    assert rank_description("A", locale="pt-BR") == "Avançado"
    assert rank_description(Rank.C, locale="pt-BR") == "Iniciante"


def test_unknown_rank_raises() -> None:
    with pytest.raises(ValueError, match="Unknown rank"):
        rank_color("Z")


def test_unknown_locale_raises() -> None:
    with pytest.raises(ValueError, match="Unsupported locale"):
        rank_description(Rank.S, locale="fr")


def test_win_rate_percent() -> None:
    assert win_rate_percent(PlayerStats(wins=31, games_played=47, goals=0, assists=0)) == pytest.approx(66.0)
    assert win_rate_percent(PlayerStats(wins=1, games_played=8, goals=0, assists=0)) == pytest.approx(12.5)
    assert win_rate_percent(PlayerStats(wins=0, games_played=0, goals=0, assists=0)) == 0.0


def test_win_rate_percent_is_capped_for_excess_wins() -> None:
    assert win_rate_percent(PlayerStats(wins=10**400, games_played=1, goals=0, assists=0)) == 100.0
    assert win_rate_percent(PlayerStats(wins=0, games_played=10**400, goals=0, assists=0)) == 0.0
