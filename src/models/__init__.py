"""ORM models."""

from models.base import Base
from models.ranking import PlayerRanking, RankingSystem

__all__ = ["Base", "PlayerRanking", "RankingSystem"]
