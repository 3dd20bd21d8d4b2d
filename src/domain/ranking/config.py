"""Load ranking system definitions from TOML files."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from math import isclose, isfinite
from pathlib import Path
from typing import Any
import tomllib

from domain.ranking.calculator import MAX_SCORE, MIN_SCORE, RankingParameters

_DEFAULTS = RankingParameters()


@dataclass(frozen=True)
class RankingSystemConfig:
    """One named ranking parameter set and the TOML file it came from."""

    name: str
    description: str | None
    file_path: Path
    parameters: RankingParameters

    def as_config_json(self) -> dict[str, Any]:
        return asdict(self.parameters)


def load_ranking_system_configs(config_dir: Path) -> list[RankingSystemConfig]:
    """Load and validate all ranking system TOML config files in a directory."""
    if not config_dir.exists():
        raise FileNotFoundError(f"Config directory not found: {config_dir}")
    if not config_dir.is_dir():
        raise NotADirectoryError(f"Config path is not a directory: {config_dir}")

    config_files = sorted(config_dir.glob("*.toml"))
    if not config_files:
        raise ValueError(f"No .toml config files found in: {config_dir}")

    systems: list[RankingSystemConfig] = []
    for file_path in config_files:
        with file_path.open("rb") as file:
            raw = tomllib.load(file)
        systems.append(_parse_ranking_system_config(raw, file_path))

    names = [system.name for system in systems]
    if len(names) != len(set(names)):
        raise ValueError(f"Duplicate ranking system names found in {config_dir}: {names}")

    return systems


def _parse_ranking_system_config(raw: dict[str, Any], file_path: Path) -> RankingSystemConfig:
    system_raw = raw.get("system", {})
    ranking_raw = raw.get("ranking", {})

    name = str(system_raw.get("name", "")).strip()
    if not name:
        raise ValueError(f"{file_path}: [system].name is required")

    description_value = system_raw.get("description")
    description = None if description_value is None else str(description_value)

    parameters = RankingParameters(
        win_rate_weight=float(ranking_raw.get("win_rate_weight", _DEFAULTS.win_rate_weight)),
        goals_per_game_weight=float(
            ranking_raw.get("goals_per_game_weight", _DEFAULTS.goals_per_game_weight)
        ),
        assists_per_game_weight=float(
            ranking_raw.get("assists_per_game_weight", _DEFAULTS.assists_per_game_weight)
        ),
        volume_weight=float(ranking_raw.get("volume_weight", _DEFAULTS.volume_weight)),
        goals_per_game_cap=float(ranking_raw.get("goals_per_game_cap", _DEFAULTS.goals_per_game_cap)),
        assists_per_game_cap=float(
            ranking_raw.get("assists_per_game_cap", _DEFAULTS.assists_per_game_cap)
        ),
        volume_games_cap=float(ranking_raw.get("volume_games_cap", _DEFAULTS.volume_games_cap)),
        s_threshold=float(ranking_raw.get("s_threshold", _DEFAULTS.s_threshold)),
        a_threshold=float(ranking_raw.get("a_threshold", _DEFAULTS.a_threshold)),
        b_threshold=float(ranking_raw.get("b_threshold", _DEFAULTS.b_threshold)),
    )
    validate_parameters(parameters, file_path=file_path)

    return RankingSystemConfig(
        name=name,
        description=description,
        file_path=file_path,
        parameters=parameters,
    )


def validate_parameters(parameters: RankingParameters, *, file_path: Path | None = None) -> None:
    """Raise ValueError when a parameter set cannot produce a 0-100 score."""
    prefix = f"{file_path}: " if file_path is not None else ""

    # nan compares false against every bound below, so it has to be caught first.
    for key, value in asdict(parameters).items():
        if not isfinite(value):
            raise ValueError(f"{prefix}[ranking].{key} must be a finite number (got {value})")

    weights = {
        "win_rate_weight": parameters.win_rate_weight,
        "goals_per_game_weight": parameters.goals_per_game_weight,
        "assists_per_game_weight": parameters.assists_per_game_weight,
        "volume_weight": parameters.volume_weight,
    }
    for key, value in weights.items():
        if value < 0.0:
            raise ValueError(f"{prefix}[ranking].{key} must be >= 0")
    total_weight = sum(weights.values())
    if not isclose(total_weight, 1.0, rel_tol=0.0, abs_tol=1e-9):
        raise ValueError(f"{prefix}[ranking] weights must sum to 1.0 (got {total_weight})")

    if parameters.goals_per_game_cap <= 0.0:
        raise ValueError(f"{prefix}[ranking].goals_per_game_cap must be > 0")
    if parameters.assists_per_game_cap <= 0.0:
        raise ValueError(f"{prefix}[ranking].assists_per_game_cap must be > 0")
    if parameters.volume_games_cap <= 0.0:
        raise ValueError(f"{prefix}[ranking].volume_games_cap must be > 0")

    if parameters.s_threshold > MAX_SCORE:
        raise ValueError(f"{prefix}[ranking].s_threshold must be <= {MAX_SCORE}")
    if parameters.b_threshold < MIN_SCORE:
        raise ValueError(f"{prefix}[ranking].b_threshold must be >= {MIN_SCORE}")
    if not parameters.s_threshold > parameters.a_threshold > parameters.b_threshold:
        raise ValueError(
            f"{prefix}[ranking] thresholds must satisfy s_threshold > a_threshold > b_threshold"
        )


__all__ = ["RankingSystemConfig", "load_ranking_system_configs", "validate_parameters"]
