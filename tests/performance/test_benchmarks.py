"""Performance benchmarks for the ranking engine."""

import random
import string

import pytest
from wayfinder.core.engine import RankingEngine
from wayfinder.core.fuzzy_matcher import FuzzyMatcher
from wayfinder.models.graph import DestinationNode


class TestPerformanceBenchmarks:
    """Performance benchmark tests."""

    @pytest.fixture
    def large_nodes(self):
        """A building with a thousand generated destinations plus a few real ones."""
        rng = random.Random(42)
        nodes = []
        for i in range(1000):
            word = "".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(4, 9)))
            nodes.append(DestinationNode(
                id=f"F{i % 3 + 1}_GEN_{i}",
                name=f"{word.title()} Room {i}",
                floor=i % 3 + 1,
                search_keywords=[word],
            ))

        nodes.extend([
            DestinationNode(id="F1_RESTROOM_A", name="Restroom", floor=1,
                            search_keywords=["restroom", "bathroom"]),
            DestinationNode(id="F2_LIBRARY_COMMONS", name="Library Commons", floor=2),
            DestinationNode(id="F1_ROOM_2B", name="Room 2B", floor=1),
        ])
        return nodes

    @pytest.fixture
    def engine(self):
        return RankingEngine(max_suggestions=6)

    def test_exact_match_performance(self, engine, large_nodes, benchmark):
        """Benchmark an exact name query over the whole building."""
        results = benchmark(engine.rank, "restroom", large_nodes)
        assert results[0].id == "F1_RESTROOM_A"

    def test_fuzzy_match_performance(self, engine, large_nodes, benchmark):
        """Benchmark a typo query that falls through to fuzzy matching."""
        results = benchmark(engine.rank, "libary", large_nodes)
        assert any(node.id == "F2_LIBRARY_COMMONS" for node in results)

    def test_room_code_performance(self, engine, large_nodes, benchmark):
        """Benchmark a room-code query."""
        results = benchmark(engine.rank, "2b", large_nodes)
        assert len(results) <= 6

    def test_short_query_performance(self, engine, large_nodes, benchmark):
        """Benchmark a one-letter query that matches most names."""
        results = benchmark(engine.rank, "r", large_nodes)
        assert len(results) == 6

    def test_edit_distance_performance(self, benchmark):
        """Benchmark the edit distance on word-sized inputs."""
        matcher = FuzzyMatcher()
        distance = benchmark(matcher.distance, "circulation", "circulatoin")
        assert distance == 2
