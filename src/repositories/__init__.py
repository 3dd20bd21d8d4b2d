"""Database repository helpers."""

from repositories.profiles import fetch_player_profiles, load_profiles_file, parse_player_stats
from repositories.ranking_repository import RANKING_REPOSITORY, RankingRepository

__all__ = [
    "RANKING_REPOSITORY",
    "RankingRepository",
    "fetch_player_profiles",
    "load_profiles_file",
    "parse_player_stats",
]
