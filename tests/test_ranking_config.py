"""Tests for TOML-based ranking system config loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from domain.ranking.calculator import RankingParameters
from domain.ranking.config import load_ranking_system_configs, validate_parameters

ROOT_DIR = Path(__file__).resolve().parents[1]


def test_load_ranking_system_configs_from_directory(tmp_path: Path) -> None:
    config_path = tmp_path / "default.toml"
    config_path.write_text(
        """
[system]
name = "system_a"
description = "A test system"

[ranking]
win_rate_weight = 0.4
goals_per_game_weight = 0.3
assists_per_game_weight = 0.2
volume_weight = 0.1
goals_per_game_cap = 3.0
assists_per_game_cap = 1.5
volume_games_cap = 40
s_threshold = 90.0
a_threshold = 75.0
b_threshold = 50.0
""".strip()
    )

    configs = load_ranking_system_configs(tmp_path)
    assert len(configs) == 1

    system = configs[0]
    assert system.name == "system_a"
    assert system.description == "A test system"
    assert system.file_path == config_path
    assert system.parameters.win_rate_weight == pytest.approx(0.4)
    assert system.parameters.goals_per_game_weight == pytest.approx(0.3)
    assert system.parameters.assists_per_game_weight == pytest.approx(0.2)
    assert system.parameters.volume_weight == pytest.approx(0.1)
    assert system.parameters.goals_per_game_cap == pytest.approx(3.0)
    assert system.parameters.assists_per_game_cap == pytest.approx(1.5)
    assert system.parameters.volume_games_cap == pytest.approx(40.0)
    assert system.parameters.s_threshold == pytest.approx(90.0)
    assert system.parameters.a_threshold == pytest.approx(75.0)
    assert system.parameters.b_threshold == pytest.approx(50.0)
    assert system.as_config_json()["volume_games_cap"] == pytest.approx(40.0)


def test_all_ranking_parameter_defaults_when_omitted(tmp_path: Path) -> None:
    (tmp_path / "defaulted.toml").write_text(
        """
[system]
name = "system_defaulted"

[ranking]
""".strip()
    )

    system = load_ranking_system_configs(tmp_path)[0]
    assert system.description is None
    assert system.parameters == RankingParameters()


def test_shipped_configs_are_valid() -> None:
    configs = load_ranking_system_configs(ROOT_DIR / "configs" / "ranking")
    names = [config.name for config in configs]
    assert "player_ranking_default" in names
    default = next(config for config in configs if config.name == "player_ranking_default")
    assert default.parameters == RankingParameters()


def test_duplicate_names_raise_error(tmp_path: Path) -> None:
    template = """
[system]
name = "dup"
""".strip()
    (tmp_path / "a.toml").write_text(template)
    (tmp_path / "b.toml").write_text(template)

    with pytest.raises(ValueError, match="Duplicate ranking system names"):
        load_ranking_system_configs(tmp_path)


def test_missing_name_raises(tmp_path: Path) -> None:
    (tmp_path / "nameless.toml").write_text("[ranking]\nvolume_weight = 0.1\n")

    with pytest.raises(ValueError, match=r"\[system\].name is required"):
        load_ranking_system_configs(tmp_path)


def test_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_ranking_system_configs(tmp_path / "nope")


def test_empty_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="No .toml config files"):
        load_ranking_system_configs(tmp_path)


def test_weights_must_sum_to_one(tmp_path: Path) -> None:
    (tmp_path / "invalid.toml").write_text(
        """
[system]
name = "system_invalid"

[ranking]
win_rate_weight = 0.5
""".strip()
    )

    with pytest.raises(ValueError, match="weights must sum to 1.0"):
        load_ranking_system_configs(tmp_path)


def test_negative_weight_raises(tmp_path: Path) -> None:
    (tmp_path / "invalid.toml").write_text(
        """
[system]
name = "system_invalid"

[ranking]
win_rate_weight = 0.65
volume_weight = -0.1
""".strip()
    )

    with pytest.raises(ValueError, match=r"volume_weight must be >= 0"):
        load_ranking_system_configs(tmp_path)


def test_non_positive_cap_raises() -> None:
    with pytest.raises(ValueError, match=r"goals_per_game_cap must be > 0"):
        validate_parameters(RankingParameters(goals_per_game_cap=0.0))


def test_thresholds_must_descend() -> None:
    with pytest.raises(ValueError, match="thresholds must satisfy"):
        validate_parameters(RankingParameters(a_threshold=90.0))
    with pytest.raises(ValueError, match=r"s_threshold must be <= 100"):
        validate_parameters(RankingParameters(s_threshold=101.0))


@pytest.mark.parametrize(
    ("line", "key"),
    [
        ("goals_per_game_cap = nan", "goals_per_game_cap"),
        ("volume_games_cap = inf", "volume_games_cap"),
        ("a_threshold = nan", "a_threshold"),
    ],
)
def test_non_finite_values_raise(tmp_path: Path, line: str, key: str) -> None:
    (tmp_path / "non_finite.toml").write_text(
        f"""
[system]
name = "system_non_finite"

[ranking]
{line}
""".strip()
    )

    with pytest.raises(ValueError, match=rf"{key} must be a finite number"):
        load_ranking_system_configs(tmp_path)
