"""Core search and navigation functionality."""

from .engine import RankingEngine, ScoredCandidate, highlight
from .fuzzy_matcher import FuzzyMatcher
from .graph import GraphLoadError, GraphStore, load_graph
from .normalizer import TextNormalizer
from .session import SessionState

__all__ = [
    "RankingEngine",
    "ScoredCandidate",
    "highlight",
    "FuzzyMatcher",
    "GraphLoadError",
    "GraphStore",
    "load_graph",
    "TextNormalizer",
    "SessionState",
]
