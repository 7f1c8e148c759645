"""
Wayfinder - Indoor wayfinding backend for library kiosks.

Resolves free-text queries and category taps to destinations of a pre-built
building graph and serves the precomputed route to each of them.
"""

__version__ = "1.0.0"

from .core.engine import RankingEngine, highlight
from .models.graph import DestinationNode, LibraryGraph, RouteStep

__all__ = [
    "RankingEngine",
    "highlight",
    "DestinationNode",
    "LibraryGraph",
    "RouteStep",
]
