"""Player ranking modules."""

from domain.ranking.calculator import (
    DEFAULT_RANKING_PARAMETERS,
    RankingParameters,
    calculate_ranking,
    classify_rank,
    round_half_up,
)
from domain.ranking.common import PlayerProfile, PlayerStats, Rank, RankingResult
from domain.ranking.config import RankingSystemConfig, load_ranking_system_configs
from domain.ranking.display import rank_color, rank_description, win_rate_percent
from domain.ranking.leaderboard import LeaderboardEntry, build_leaderboard, rank_distribution
from domain.ranking.player_calculator import PlayerRankingCalculator, PlayerRankingEvent

__all__ = [
    "DEFAULT_RANKING_PARAMETERS",
    "LeaderboardEntry",
    "PlayerProfile",
    "PlayerRankingCalculator",
    "PlayerRankingEvent",
    "PlayerStats",
    "Rank",
    "RankingParameters",
    "RankingResult",
    "RankingSystemConfig",
    "build_leaderboard",
    "calculate_ranking",
    "classify_rank",
    "load_ranking_system_configs",
    "rank_color",
    "rank_description",
    "rank_distribution",
    "round_half_up",
    "win_rate_percent",
]
