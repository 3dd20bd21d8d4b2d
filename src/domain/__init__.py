"""Player-ranking domain modules."""

from domain.ranking.common import PlayerProfile, PlayerStats, Rank, RankingResult

__all__ = ["PlayerProfile", "PlayerStats", "Rank", "RankingResult"]
