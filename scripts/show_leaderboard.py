#!/usr/bin/env python3
"""Show the stored leaderboard for a ranking system."""

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
from domain.ranking.display import rank_description
from models import PlayerRanking
from repositories.ranking_repository import RANKING_REPOSITORY

DEFAULT_SYSTEM_NAME = "player_ranking_default"

app = typer.Typer(
    add_completion=False,
    help="Query the top players of a stored ranking system.",
)


def _render_row(index: int, row: PlayerRanking) -> str:
    return (
        f"{index:>4}. {row.player_name or row.player_id:<24} "
        f"rank={row.rank} ({rank_description(row.rank)}) "
        f"score={row.score:.1f} "
        f"win_rate={row.win_rate:.1f} "
        f"games={row.games_played} goals={row.goals} assists={row.assists} "
        f"overall={row.position}"
    )


@app.command()
def main(
    system_name: Annotated[
        str,
        typer.Option("--system-name", help="Ranking system name to display."),
    ] = DEFAULT_SYSTEM_NAME,
    top_n: Annotated[
        int,
        typer.Option("--top-n", help="How many players to show."),
    ] = 20,
    min_games_played: Annotated[
        int,
        typer.Option(
            "--min-games-played",
            help="Hide players with fewer games. Shown rows are renumbered from 1.",
        ),
    ] = 0,
    db_url: Annotated[
        str,
        typer.Option(
            "--db-url",
            help="Database URL. Defaults to the local player_ranking postgres instance.",
        ),
    ] = DEFAULT_DB_URL,
) -> None:
    """Print top players by stored score."""
    if top_n <= 0:
        raise typer.BadParameter("--top-n must be greater than 0")
    if min_games_played < 0:
        raise typer.BadParameter("--min-games-played must be >= 0")

    engine = create_db_engine(db_url)
    session_factory = create_session_factory(engine)

    with session_factory() as session:
        try:
            rows = RANKING_REPOSITORY.fetch_leaderboard(
                session,
                system_name=system_name,
                top_n=top_n,
                min_games_played=min_games_played,
            )
        except KeyError as exc:
            raise typer.BadParameter(str(exc.args[0]), param_hint="--system-name") from exc

    if not rows:
        typer.echo(
            f"No rows found for system='{system_name}' with min_games_played={min_games_played}."
        )
        return

    typer.echo(f"system={system_name} top_n={top_n} min_games_played={min_games_played}")
    # Filtered views are renumbered; overall= keeps the stored snapshot position.
    for index, row in enumerate(rows, start=1):
        typer.echo(_render_row(index, row))


if __name__ == "__main__":
    app()
