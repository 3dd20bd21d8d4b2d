#!/usr/bin/env python3
"""Rebuild stored player leaderboards for ranking system configs."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from db import DEFAULT_DB_URL, create_db_engine, create_session_factory
from domain.pipeline import FetchProfilesFn, rebuild_rankings
from domain.ranking.config import load_ranking_system_configs
from repositories.profiles import fetch_player_profiles, load_profiles_file
from repositories.ranking_repository import RANKING_REPOSITORY

DEFAULT_CONFIG_DIR = ROOT_DIR / "configs" / "ranking"

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Player leaderboard rebuild commands.",
)


def _profiles_source(profiles_file: Path | None, min_games_played: int) -> FetchProfilesFn:
    if profiles_file is None:
        return lambda session: fetch_player_profiles(session, min_games_played=min_games_played)

    profiles = [
        profile
        for profile in load_profiles_file(profiles_file)
        if profile.stats.games_played >= min_games_played
    ]
    return lambda session: profiles


@app.command()
def rebuild(
    db_url: Annotated[
        str,
        typer.Option(
            "--db-url",
            help="Database URL. Defaults to the local player_ranking postgres instance.",
        ),
    ] = DEFAULT_DB_URL,
    profiles_file: Annotated[
        Path | None,
        typer.Option(
            "--profiles-file",
            help="JSON profile export to rank instead of the database profiles table.",
        ),
    ] = None,
    config_dir: Annotated[
        Path,
        typer.Option("--config-dir", help="Directory holding ranking system TOML files."),
    ] = DEFAULT_CONFIG_DIR,
    config_name: Annotated[
        str | None,
        typer.Option(
            "--config-name",
            help="Optional single config filename (for example: default.toml).",
        ),
    ] = None,
    min_games_played: Annotated[
        int,
        typer.Option("--min-games-played", help="Skip players with fewer games."),
    ] = 0,
    batch_size: Annotated[
        int,
        typer.Option("--batch-size", help="Batch size for inserting ranking rows."),
    ] = 5000,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Compute rankings without writing rows."),
    ] = False,
) -> None:
    """Rebuild the leaderboard snapshot for all or one ranking config."""
    if batch_size <= 0:
        raise typer.BadParameter("--batch-size must be greater than 0")
    if min_games_played < 0:
        raise typer.BadParameter("--min-games-played must be >= 0")
    if profiles_file is not None and not profiles_file.is_file():
        raise typer.BadParameter(
            f"Profiles file not found: {profiles_file}",
            param_hint="--profiles-file",
        )

    configs = load_ranking_system_configs(config_dir)
    if config_name is not None:
        configs = [config for config in configs if config.file_path.name == config_name]
        if not configs:
            raise typer.BadParameter(
                f"No config named '{config_name}' found in {config_dir}",
                param_hint="--config-name",
            )

    fetch_profiles = _profiles_source(profiles_file, min_games_played)

    engine = create_db_engine(db_url)
    RANKING_REPOSITORY.ensure_schema(engine)
    session_factory = create_session_factory(engine)

    typer.echo(
        f"loaded_configs={len(configs)} "
        f"config_dir={config_dir} "
        f"profiles_source={profiles_file or 'database'}"
    )

    for config in configs:
        rebuild_rankings(
            session_factory=session_factory,
            repository=RANKING_REPOSITORY,
            system_config=config,
            fetch_profiles=fetch_profiles,
            batch_size=batch_size,
            dry_run=dry_run,
            echo=typer.echo,
        )


@app.command()
def list_systems(
    config_dir: Annotated[
        Path,
        typer.Option("--config-dir", help="Directory holding ranking system TOML files."),
    ] = DEFAULT_CONFIG_DIR,
) -> None:
    """Print every ranking system defined in the config directory."""
    for config in load_ranking_system_configs(config_dir):
        typer.echo(
            f"{config.name} file={config.file_path.name} "
            f"description={config.description or '-'}"
        )


if __name__ == "__main__":
    app()
