"""Unit tests for the ranking engine."""

import pytest
from wayfinder.core.engine import RankingEngine, highlight
from wayfinder.models.graph import DestinationNode


def make_node(node_id, name, floor=1, keywords=None, node_type="destination"):
    return DestinationNode(
        id=node_id,
        name=name,
        type=node_type,
        floor=floor,
        search_keywords=keywords,
    )


class TestRankingEngine:
    """Test cases for the RankingEngine class."""

    @pytest.fixture
    def engine(self):
        """Create a ranking engine with the default suggestion limit."""
        return RankingEngine(max_suggestions=6)

    @pytest.fixture
    def sample_nodes(self):
        """A small floor's worth of nodes."""
        return [
            make_node("F1_KIOSK_A", "Main Kiosk", node_type="kiosk"),
            make_node("F1_CIRC_DESK", "Circulation Desk", keywords=["checkout", "borrow"]),
            make_node("F1_COMPUTER_LAB", "Computer Lab", keywords=["computer", "printing"]),
            make_node("F1_RESTROOM_A", "Restroom", keywords=["restroom", "bathroom"]),
            make_node("F1_ROOM_2B", "Room 2B"),
            make_node("F2_BREAK_ROOM", "2nd Floor Break Room", floor=2),
            make_node("F2_LIBRARY_COMMONS", "Library Commons", floor=2),
            make_node("F2_ANNEX_C", "Annex C", floor=2, keywords=["restroom"]),
            make_node("F2_MEDIA_LAB", "Media Lab", floor=2),
        ]

    def test_engine_initialization(self, engine):
        """Test ranking engine initialization."""
        assert engine.max_suggestions == 6
        assert engine.normalizer is not None
        assert engine.fuzzy_matcher is not None

    def test_exact_name_match_ranks_first(self, engine):
        """An exact match scores 100 and beats weaker matches."""
        nodes = [
            make_node("F1_LAB_ANNEX", "Computer Lab Annex"),
            make_node("F1_LAB", "Lab"),
        ]

        scored = engine.rank_scored("lab", nodes)

        assert scored[0].node.name == "Lab"
        assert scored[0].score == 100
        assert scored[1].node.name == "Computer Lab Annex"
        assert scored[1].score < 100

    def test_case_insensitive_exact_match(self, engine, sample_nodes):
        """Query and name are compared case-insensitively."""
        scored = engine.rank_scored("RESTROOM", sample_nodes)

        assert scored[0].node.id == "F1_RESTROOM_A"
        assert scored[0].score == 100

    def test_name_heuristic_scores(self, engine):
        """Prefix, word-prefix and substring matches score 95, 90 and 85."""
        node = make_node("F1_CIRC_DESK", "Circulation Desk")

        assert engine.score("circ", node) == 95
        assert engine.score("desk", node) == 90
        assert engine.score("ulation", node) == 85

    def test_empty_query_returns_nothing(self, engine, sample_nodes):
        """Empty or blank queries short-circuit to an empty result."""
        assert engine.rank("", sample_nodes) == []
        assert engine.rank("   ", sample_nodes) == []

    def test_empty_nodes_returns_nothing(self, engine):
        """No data is not an error."""
        assert engine.rank("restroom", []) == []
        assert engine.rank("restroom", None) == []

    def test_non_destination_nodes_excluded(self, engine, sample_nodes):
        """Only destination nodes are searchable."""
        results = engine.rank("kiosk", sample_nodes)

        assert all(node.id != "F1_KIOSK_A" for node in results)

    def test_idempotent_and_no_mutation(self, engine, sample_nodes):
        """Repeated calls give identical output and leave the input alone."""
        original = list(sample_nodes)

        first = engine.rank("room", sample_nodes)
        second = engine.rank("room", sample_nodes)

        assert first == second
        assert sample_nodes == original

    def test_score_is_max_not_sum(self, engine):
        """A node matching name and keyword keeps its best single score."""
        node = make_node("F1_RESTROOM_A", "Restroom", keywords=["restroom", "restrooms"])

        assert engine.score("restroom", node) == 100

    def test_keyword_only_match(self, engine, sample_nodes):
        """An exact keyword hit scores 75 without any name overlap."""
        annex = next(node for node in sample_nodes if node.id == "F2_ANNEX_C")

        assert engine.score("restroom", annex) == 75

        scored = engine.rank_scored("restroom", sample_nodes)
        assert [c.node.id for c in scored] == ["F1_RESTROOM_A", "F2_ANNEX_C"]

    def test_keyword_prefix_and_contains(self, engine):
        """Keyword prefix scores 70, keyword substring 65."""
        node = make_node("F2_ANNEX_C", "Annex C", keywords=["bathroom"])

        assert engine.score("bath", node) == 70
        assert engine.score("hroo", node) == 65

    def test_missing_keywords_are_skipped(self, engine):
        """A node without keywords scores 0 on keywords."""
        assert engine.keyword_score(None, "restroom") == 0
        assert engine.keyword_score([], "restroom") == 0

    def test_tie_break_shorter_name_first(self, engine):
        """Equal scores order by ascending name length."""
        nodes = [
            make_node("F1_CIRC_DESK", "Circulation Desk"),
            make_node("F1_HELP_DESK", "Help Desk"),
        ]

        scored = engine.rank_scored("desk", nodes)

        assert [c.score for c in scored] == [90, 90]
        assert [c.node.name for c in scored] == ["Help Desk", "Circulation Desk"]

    def test_tie_break_keeps_load_order(self, engine):
        """Equal score and equal length keep the input order."""
        nodes = [
            make_node("F1_ROOM_B1", "Room B1"),
            make_node("F1_ROOM_A1", "Room A1"),
        ]

        results = engine.rank("room", nodes)

        assert [node.id for node in results] == ["F1_ROOM_B1", "F1_ROOM_A1"]

    def test_room_code_exact_match(self, engine, sample_nodes):
        """A room-code query matches the code inside the name."""
        assert engine.room_code_score("room 2b", "2b") == 85

        results = engine.rank("2b", sample_nodes)

        assert results[0].name == "Room 2B"
        assert all(node.name != "2nd Floor Break Room" for node in results)

    def test_room_code_contains_match(self, engine):
        """A code containing the query scores 75."""
        assert engine.room_code_score("room 12b", "2") == 75

    def test_room_code_first_code_decides(self, engine):
        """The first code that matches at all decides the score."""
        assert engine.room_code_score("lab a14 14", "14") == 75
        assert engine.room_code_score("lab 14 a14", "14") == 85

    def test_room_code_never_lowers_score(self, engine):
        """A weaker room-code match keeps the better name score."""
        node = make_node("F1_ROOM_12B", "Room 12B")

        assert engine.score("2", node) == 85

    def test_partial_word_match(self, engine):
        """Short queries must anchor in the word unless they contain a digit."""
        assert engine.has_partial_word_match(["b2c"], "2") is True
        assert engine.has_partial_word_match(["abc"], "b") is False
        assert engine.has_partial_word_match(["abc"], "ab") is True
        assert engine.has_partial_word_match(["abc"], "bc") is True
        assert engine.has_partial_word_match(["abcd"], "bcd") is True

    def test_fuzzy_typo_match(self, engine, sample_nodes):
        """A one-letter typo still finds the destination."""
        commons = next(node for node in sample_nodes if node.id == "F2_LIBRARY_COMMONS")

        assert engine.score("libary", commons) == 51

        results = engine.rank("libary", sample_nodes)
        assert results[0].id == "F2_LIBRARY_COMMONS"

    def test_fuzzy_only_when_nothing_else_matched(self, engine):
        """Fuzzy matching never replaces a score from another heuristic."""
        node = make_node("F2_LIBRARY_COMMONS", "Library Commons", keywords=["old libary card"])

        assert engine.score("libary", node) == 65

    def test_fuzzy_needs_three_characters(self, engine):
        """Two-letter typos are not fuzzy matched."""
        node = make_node("F1_LAB", "Lab")

        assert engine.score("lb", node) == 0

    def test_truncation(self, engine):
        """Only max_suggestions results come back, best first."""
        nodes = [make_node(f"F1_STUDY_{i}", f"Study Room {i}") for i in range(1, 21)]

        results = engine.rank("study", nodes)

        assert len(results) == 6
        assert [node.name for node in results] == [f"Study Room {i}" for i in range(1, 7)]

    def test_max_results_override(self, engine, sample_nodes):
        """Callers can ask for fewer results."""
        results = engine.rank("room", sample_nodes, max_results=1)

        assert len(results) == 1

    def test_no_match(self, engine, sample_nodes):
        """Unrelated queries rank nothing."""
        assert engine.rank("xyzxyz", sample_nodes) == []

    def test_filter_by_category(self, engine, sample_nodes):
        """Category terms match names or keywords, in load order."""
        category_keywords = {
            "restroom": ["restroom", "bathroom"],
            "computer": ["computer", "lab"],
        }

        restrooms = engine.filter_by_category("restroom", sample_nodes, category_keywords)
        computers = engine.filter_by_category("computer", sample_nodes, category_keywords)

        assert [node.id for node in restrooms] == ["F1_RESTROOM_A", "F2_ANNEX_C"]
        assert [node.id for node in computers] == ["F1_COMPUTER_LAB", "F2_MEDIA_LAB"]
        assert engine.filter_by_category("cafe", sample_nodes, category_keywords) == []


class TestHighlight:
    """Test cases for the highlight formatter."""

    def test_highlight_keeps_original_casing(self):
        """Matching is case-insensitive, output keeps the name's casing."""
        assert highlight("Room 2B", "2b") == 'Room <mark class="search-highlight">2B</mark>'

    def test_highlight_every_occurrence(self):
        """All occurrences are wrapped."""
        assert highlight("Lab lab", "LAB", "[", "]") == "[Lab] [lab]"

    def test_highlight_empty_query(self):
        """An empty query leaves the name unchanged."""
        assert highlight("Room 2B", "") == "Room 2B"

    def test_highlight_escapes_metacharacters(self):
        """Regex metacharacters in the query match literally."""
        assert highlight("Lab (Annex)", "(", "[", "]") == "Lab [(]Annex)"
        assert highlight("Room A.1", ".", "[", "]") == "Room A[.]1"
        assert highlight("Room", ".*", "[", "]") == "Room"
        assert highlight("C++ Lab", "c++", "[", "]") == "[C++] Lab"
