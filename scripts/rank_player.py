#!/usr/bin/env python3
"""Score a single player from raw stats and print the rank card values."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from domain.ranking.calculator import DEFAULT_RANKING_PARAMETERS, RankingParameters, calculate_ranking
from domain.ranking.common import PlayerStats
from domain.ranking.config import load_ranking_system_configs
from domain.ranking.display import RANK_DESCRIPTIONS, rank_color, rank_description, win_rate_percent

DEFAULT_CONFIG_DIR = ROOT_DIR / "configs" / "ranking"

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Compute a player's ranking score and tier.",
)


def _resolve_parameters(config_dir: Path, config_name: str | None) -> tuple[str, RankingParameters]:
    if config_name is None:
        return "builtin_default", DEFAULT_RANKING_PARAMETERS

    configs = [
        config for config in load_ranking_system_configs(config_dir) if config.file_path.name == config_name
    ]
    if not configs:
        raise typer.BadParameter(
            f"No config named '{config_name}' found in {config_dir}",
            param_hint="--config-name",
        )
    return configs[0].name, configs[0].parameters


@app.command()
def score(
    wins: Annotated[int, typer.Option("--wins", min=0, help="Games won.")],
    games_played: Annotated[int, typer.Option("--games-played", min=0, help="Games played.")],
    goals: Annotated[int, typer.Option("--goals", min=0, help="Goals scored.")] = 0,
    assists: Annotated[int, typer.Option("--assists", min=0, help="Assists made.")] = 0,
    config_dir: Annotated[
        Path,
        typer.Option("--config-dir", help="Directory holding ranking system TOML files."),
    ] = DEFAULT_CONFIG_DIR,
    config_name: Annotated[
        str | None,
        typer.Option(
            "--config-name",
            help="Config filename to score with (for example: default.toml). Built-in defaults when omitted.",
        ),
    ] = None,
    locale: Annotated[
        str,
        typer.Option("--locale", help="Language for the rank description (en, pt-BR)."),
    ] = "en",
) -> None:
    """Print score, rank, description, color and win rate for one player."""
    if locale not in RANK_DESCRIPTIONS:
        available = ", ".join(sorted(RANK_DESCRIPTIONS))
        raise typer.BadParameter(
            f"Unsupported locale '{locale}'. Choose one of: {available}.",
            param_hint="--locale",
        )

    system_name, parameters = _resolve_parameters(config_dir, config_name)
    stats = PlayerStats(wins=wins, games_played=games_played, goals=goals, assists=assists)
    result = calculate_ranking(stats, parameters)

    typer.echo(
        f"system={system_name} "
        f"score={result.score:.1f} "
        f"rank={result.rank.value} "
        f"description={rank_description(result.rank, locale)} "
        f"color={rank_color(result.rank)} "
        f"win_rate={win_rate_percent(stats):.1f}"
    )
    if wins > games_played:
        typer.echo(
            f"warning: wins={wins} exceeds games_played={games_played}; win rate was capped at 100",
            err=True,
        )


if __name__ == "__main__":
    app()
