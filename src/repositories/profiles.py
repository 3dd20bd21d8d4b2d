"""Read-only access to player profiles owned by the app backend."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from sqlalchemy import Column, Integer, MetaData, String, Table, select
from sqlalchemy.orm import Session

from domain.ranking.common import PlayerProfile, PlayerStats

_metadata = MetaData()

_profiles = Table(
    "profiles",
    _metadata,
    Column("user_id", String),
    Column("name", String),
    Column("position", String),
    Column("games_played", Integer),
    Column("wins", Integer),
    Column("goals", Integer),
    Column("assists", Integer),
)

# snake_case column name -> camelCase key used by the mobile client.
_STAT_KEYS = {
    "wins": "wins",
    "games_played": "gamesPlayed",
    "goals": "goals",
    "assists": "assists",
}


def fetch_player_profiles(session: Session, *, min_games_played: int = 0) -> list[PlayerProfile]:
    """Load every profile from the backend table in user_id order."""
    if min_games_played < 0:
        raise ValueError("min_games_played must be >= 0")

    statement = select(
        _profiles.c.user_id,
        _profiles.c.name,
        _profiles.c.position,
        _profiles.c.games_played,
        _profiles.c.wins,
        _profiles.c.goals,
        _profiles.c.assists,
    ).order_by(_profiles.c.user_id)

    profiles: list[PlayerProfile] = []
    for row in session.execute(statement).mappings():
        profile = profile_from_mapping(row)
        if profile.stats.games_played >= min_games_played:
            profiles.append(profile)
    return profiles


def load_profiles_file(path: Path) -> list[PlayerProfile]:
    """Load profiles from a JSON export (a list, or an object with a ``profiles`` list)."""
    if not path.exists():
        raise FileNotFoundError(f"Profiles file not found: {path}")

    with path.open("r", encoding="utf-8") as file:
        raw = json.load(file)

    if isinstance(raw, dict):
        raw = raw.get("profiles")
    if not isinstance(raw, list):
        raise ValueError(f"{path}: expected a list of profiles or an object with a 'profiles' list")

    profiles: list[PlayerProfile] = []
    for index, item in enumerate(raw):
        if not isinstance(item, Mapping):
            raise ValueError(f"{path}: profile #{index} is not an object")
        try:
            profiles.append(profile_from_mapping(item))
        except ValueError as exc:
            raise ValueError(f"{path}: profile #{index}: {exc}") from exc
    return profiles


def profile_from_mapping(raw: Mapping[str, Any]) -> PlayerProfile:
    player_id = _first_present(raw, "user_id", "player_id", "id")
    if player_id is None or not str(player_id).strip():
        raise ValueError("profile is missing user_id")

    name = _first_present(raw, "name")
    position = _first_present(raw, "position")
    return PlayerProfile(
        player_id=str(player_id).strip(),
        name="" if name is None else str(name),
        position=None if position is None else str(position),
        stats=parse_player_stats(raw),
    )


def parse_player_stats(raw: Mapping[str, Any]) -> PlayerStats:
    """Build PlayerStats from snake_case or camelCase keys; blank counters read as 0."""
    values = {
        field_name: _parse_counter(field_name, _first_present(raw, field_name, camel_name))
        for field_name, camel_name in _STAT_KEYS.items()
    }
    return PlayerStats(**values)


def _first_present(raw: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in raw and raw[key] is not None:
            return raw[key]
    return None


def _parse_counter(field_name: str, value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ValueError(f"{field_name} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{field_name} must be an integer, got {value!r}")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            return int(text)
        except ValueError as exc:
            raise ValueError(f"{field_name} must be an integer, got {value!r}") from exc
    raise ValueError(f"{field_name} must be an integer, got {value!r}")


__all__ = ["fetch_player_profiles", "load_profiles_file", "parse_player_stats", "profile_from_mapping"]
