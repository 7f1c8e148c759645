"""Global engine and graph store instances to avoid circular imports."""

from .config import get_settings
from .core.engine import RankingEngine
from .core.fuzzy_matcher import FuzzyMatcher
from .core.graph import GraphStore

# Global instances
settings = get_settings()
ranking_engine = RankingEngine(max_suggestions=settings.max_suggestions)
suggestion_matcher = FuzzyMatcher(threshold=settings.suggestion_threshold)
graph_store = GraphStore()
