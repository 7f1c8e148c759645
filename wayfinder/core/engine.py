"""Destination ranking engine."""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from ..models.graph import DestinationNode
from .fuzzy_matcher import FuzzyMatcher
from .normalizer import TextNormalizer

DEFAULT_HIGHLIGHT_OPEN = '<mark class="search-highlight">'
DEFAULT_HIGHLIGHT_CLOSE = '</mark>'

# Score per heuristic
EXACT_NAME = 100
NAME_PREFIX = 95
WORD_PREFIX = 90
NAME_CONTAINS = 85
PARTIAL_WORD = 80
KEYWORD_EXACT = 75
KEYWORD_PREFIX = 70
KEYWORD_CONTAINS = 65
SHORT_WORD_CONTAINS = 75
SHORT_NAME_CONTAINS = 70
ROOM_CODE_EXACT = 85
ROOM_CODE_CONTAINS = 75

SHORT_QUERY_LENGTH = 3
PARTIAL_ANCHOR_LENGTH = 2
FUZZY_MIN_QUERY_LENGTH = 3


@dataclass(frozen=True)
class ScoredCandidate:
    """A destination with its relevance score for one query."""

    node: DestinationNode
    score: int


class RankingEngine:
    """Ranks destination nodes against short, typo-prone kiosk queries.

    The engine keeps no state between calls: every call scores every
    destination node from scratch and never mutates its inputs.
    """

    def __init__(self, max_suggestions: int = 6) -> None:
        """
        Initialize the ranking engine.

        Args:
            max_suggestions: Maximum number of destinations returned by rank
        """
        self.max_suggestions = max_suggestions
        self.normalizer = TextNormalizer()
        self.fuzzy_matcher = FuzzyMatcher()

    def rank(
        self,
        query: str,
        nodes: Optional[Sequence[DestinationNode]],
        max_results: Optional[int] = None
    ) -> List[DestinationNode]:
        """
        Rank destination nodes for a query.

        Args:
            query: Raw search input
            nodes: Graph nodes; non-destination nodes are ignored
            max_results: Override for max_suggestions

        Returns:
            Best nodes first, at most max_results long
        """
        return [candidate.node for candidate in self.rank_scored(query, nodes, max_results)]

    def rank_scored(
        self,
        query: str,
        nodes: Optional[Sequence[DestinationNode]],
        max_results: Optional[int] = None
    ) -> List[ScoredCandidate]:
        """
        Rank destination nodes and keep their scores.

        Ordered by descending score, then ascending name length. The sort is
        stable, so ties keep the order of ``nodes``.

        Args:
            query: Raw search input
            nodes: Graph nodes; non-destination nodes are ignored
            max_results: Override for max_suggestions

        Returns:
            Scored candidates, best first
        """
        query_lower = self.normalizer.normalize(query)
        if not query_lower or not nodes:
            return []

        limit = max_results if max_results is not None else self.max_suggestions

        results = []
        for node in nodes:
            if not node.is_destination:
                continue
            score = self.score(query_lower, node)
            if score > 0:
                results.append(ScoredCandidate(node=node, score=score))

        results.sort(key=lambda c: (-c.score, len(c.node.name)))
        return results[:limit]

    def score(self, query_lower: str, node: DestinationNode) -> int:
        """
        Score a single node; the result is the best heuristic, never a sum.

        Args:
            query_lower: Stripped, lower-cased, non-empty query
            node: Node to score

        Returns:
            Score in 0..100
        """
        name_lower = node.name.lower()
        name_words = self.normalizer.split_words(name_lower)

        score = self._name_score(name_lower, name_words, query_lower)
        score = max(score, self.keyword_score(node.search_keywords, query_lower))

        if len(query_lower) <= SHORT_QUERY_LENGTH and score == 0:
            if any(query_lower in word for word in name_words):
                score = SHORT_WORD_CONTAINS
            elif query_lower in name_lower:
                score = SHORT_NAME_CONTAINS

        if self.normalizer.is_room_code(query_lower):
            score = max(score, self.room_code_score(name_lower, query_lower))

        # Fuzzy matching only when nothing else fired
        if score == 0 and len(query_lower) >= FUZZY_MIN_QUERY_LENGTH:
            score = self.fuzzy_matcher.best_word_score(name_lower, query_lower)

        return score

    def _name_score(self, name_lower: str, name_words: List[str], query_lower: str) -> int:
        if name_lower == query_lower:
            return EXACT_NAME
        if name_lower.startswith(query_lower):
            return NAME_PREFIX
        if any(word.startswith(query_lower) for word in name_words):
            return WORD_PREFIX
        if query_lower in name_lower:
            return NAME_CONTAINS
        if self.has_partial_word_match(name_words, query_lower):
            return PARTIAL_WORD
        return 0

    def has_partial_word_match(self, words: List[str], query_lower: str) -> bool:
        """
        Check whether the query sits inside one of the words.

        Queries of one or two characters must touch the start or end of the
        word unless they contain a digit ("2" inside "b2c").
        """
        for word in words:
            if query_lower not in word:
                continue
            if len(query_lower) > PARTIAL_ANCHOR_LENGTH:
                return True
            if (word.startswith(query_lower) or word.endswith(query_lower)
                    or self.normalizer.has_digit(query_lower)):
                return True
        return False

    def keyword_score(self, keywords: Optional[Sequence[str]], query_lower: str) -> int:
        """Best keyword match: exact 75, prefix 70, substring 65."""
        if not keywords:
            return 0

        best = 0
        for keyword in keywords:
            keyword_lower = keyword.lower()
            if keyword_lower == query_lower:
                best = max(best, KEYWORD_EXACT)
            elif keyword_lower.startswith(query_lower):
                best = max(best, KEYWORD_PREFIX)
            elif query_lower in keyword_lower:
                best = max(best, KEYWORD_CONTAINS)
        return best

    def room_code_score(self, name_lower: str, query_lower: str) -> int:
        """
        Match a room-code query against the room codes found in a name.

        Codes are scanned left to right and the first hit decides: 85 when
        the code equals the query, 75 when it contains it.
        """
        for code in self.normalizer.extract_room_codes(name_lower):
            code_lower = code.lower()
            if code_lower == query_lower:
                return ROOM_CODE_EXACT
            if query_lower in code_lower:
                return ROOM_CODE_CONTAINS
        return 0

    def filter_by_category(
        self,
        category: str,
        nodes: Optional[Sequence[DestinationNode]],
        category_keywords: Dict[str, List[str]]
    ) -> List[DestinationNode]:
        """
        Select destinations for a category button.

        Args:
            category: Category key, e.g. "restroom"
            nodes: Graph nodes
            category_keywords: Category key to the terms it covers

        Returns:
            Matching destinations in load order, empty for unknown categories
        """
        terms = [term.lower() for term in category_keywords.get(category, [])]
        if not terms or not nodes:
            return []

        matches = []
        for node in nodes:
            if not node.is_destination:
                continue
            name_lower = node.name.lower()
            keywords = [keyword.lower() for keyword in node.search_keywords or ()]
            if any(term in name_lower or any(term in keyword for keyword in keywords)
                   for term in terms):
                matches.append(node)
        return matches


def highlight(
    name: str,
    raw_query: str,
    open_tag: str = DEFAULT_HIGHLIGHT_OPEN,
    close_tag: str = DEFAULT_HIGHLIGHT_CLOSE
) -> str:
    """
    Wrap every case-insensitive occurrence of the query in highlight markup.

    The query is matched literally; regex metacharacters in it carry no
    special meaning. Matched text keeps the casing it has in ``name``.

    Args:
        name: Destination name
        raw_query: Query as typed
        open_tag: Markup inserted before each match
        close_tag: Markup inserted after each match

    Returns:
        Marked-up name, or ``name`` unchanged for an empty query
    """
    if not raw_query:
        return name
    pattern = re.compile(re.escape(raw_query), re.IGNORECASE)
    return pattern.sub(lambda m: f"{open_tag}{m.group(0)}{close_tag}", name)
