"""CLI tests for scripts/show_leaderboard.py against a SQLite snapshot."""

from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest
from typer.testing import CliRunner

from db import create_db_engine, create_session_factory
from domain.pipeline import rebuild_rankings
from domain.ranking.calculator import RankingParameters
from domain.ranking.common import PlayerProfile, PlayerStats
from domain.ranking.config import RankingSystemConfig
from repositories.ranking_repository import RankingRepository

ROOT_DIR = Path(__file__).resolve().parents[1]


def _load_script():
    spec = importlib.util.spec_from_file_location(
        "show_leaderboard_script", ROOT_DIR / "scripts" / "show_leaderboard.py"
    )
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _profile(player_id: str, wins: int, games_played: int, goals: int, assists: int) -> PlayerProfile:
    return PlayerProfile(
        player_id=player_id,
        name=f"Player {player_id}",
        stats=PlayerStats(wins=wins, games_played=games_played, goals=goals, assists=assists),
    )


@pytest.fixture
def db_url(tmp_path: Path) -> str:
    url = f"sqlite:///{tmp_path / 'rankings.db'}"
    repository = RankingRepository()
    engine = create_db_engine(url)
    repository.ensure_schema(engine)
    rebuild_rankings(
        session_factory=create_session_factory(engine),
        repository=repository,
        system_config=RankingSystemConfig(
            name="cli_system",
            description=None,
            file_path=tmp_path / "cli.toml",
            parameters=RankingParameters(),
        ),
        fetch_profiles=lambda session: [
            _profile("u1", 31, 47, 23, 18),
            _profile("u2", 50, 50, 150, 100),
            # 91.0 on only five games, so it sits at overall position 2
            _profile("u5", 5, 5, 15, 10),
            _profile("u4", 45, 50, 62, 50),
        ],
    )
    engine.dispose()
    return url


def test_filtered_rows_are_renumbered_from_one(db_url: str) -> None:
    script = _load_script()
    result = CliRunner().invoke(
        script.app,
        ["--system-name", "cli_system", "--db-url", db_url, "--min-games-played", "48"],
    )

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == "system=cli_system top_n=20 min_games_played=48"
    assert len(lines) == 3
    assert lines[1].startswith("   1. Player u2")
    assert lines[1].endswith("overall=1")
    assert lines[2].startswith("   2. Player u4")
    assert lines[2].endswith("overall=3")


def test_unknown_system_is_a_usage_error(db_url: str) -> None:
    script = _load_script()
    result = CliRunner().invoke(script.app, ["--system-name", "missing", "--db-url", db_url])

    assert result.exit_code == 2
    assert "No ranking system named" in result.output
