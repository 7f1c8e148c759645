"""Fuzzy matching for typo-tolerant destination lookup."""

import math
from typing import List, Optional

from rapidfuzz import fuzz, process
from rapidfuzz.distance import Levenshtein

from .normalizer import TextNormalizer

# Heuristic 9 tuning
MAX_LENGTH_DIFFERENCE = 2
MIN_SIMILARITY = 0.7
FUZZY_SCORE_SCALE = 60


class FuzzyMatcher:
    """Edit-distance based matching used as the ranking engine's last resort."""

    def __init__(self, threshold: float = 0.6) -> None:
        """
        Initialize the fuzzy matcher.

        Args:
            threshold: Minimum confidence for "did you mean" suggestions
        """
        self.threshold = threshold
        self.normalizer = TextNormalizer()

    def distance(self, a: str, b: str) -> int:
        """
        Exact Levenshtein distance between two strings.

        Counts the minimum number of single-character insertions, deletions
        and substitutions needed to turn ``a`` into ``b``.

        Args:
            a: Source string
            b: Target string

        Returns:
            Non-negative edit distance
        """
        return Levenshtein.distance(a, b)

    def similarity(self, a: str, b: str) -> float:
        """
        Normalized similarity derived from the edit distance.

        Args:
            a: First string
            b: Second string

        Returns:
            ``(max_len - distance) / max_len``, 1.0 for two empty strings
        """
        max_len = max(len(a), len(b))
        if max_len == 0:
            return 1.0
        return (max_len - self.distance(a, b)) / max_len

    def best_word_score(self, text: str, query: str) -> int:
        """
        Score the closest word of ``text`` against ``query``.

        Only words within two characters of the query length are compared.
        A word is accepted at similarity 0.7 or above and scores
        ``floor(similarity * 60)``; the best accepted word wins.

        Args:
            text: Lower-cased name
            query: Lower-cased query

        Returns:
            Score in 0..60, 0 when no word is close enough
        """
        best_score = 0
        for word in self.normalizer.split_words(text):
            if abs(len(word) - len(query)) > MAX_LENGTH_DIFFERENCE:
                continue
            similarity = self.similarity(word, query)
            if similarity >= MIN_SIMILARITY:
                best_score = max(best_score, math.floor(similarity * FUZZY_SCORE_SCALE))
        return best_score

    def suggest_corrections(
        self,
        query: str,
        candidates: List[str],
        max_suggestions: int = 3,
        threshold: Optional[float] = None
    ) -> List[str]:
        """
        Suggest candidate names for a query that ranked nothing.

        Args:
            query: Raw query
            candidates: Candidate names
            max_suggestions: Maximum number of suggestions
            threshold: Custom threshold (uses instance threshold if None)

        Returns:
            List of suggested names, best first
        """
        normalized_query = self.normalizer.normalize(query)
        if not normalized_query or not candidates:
            return []

        threshold = threshold if threshold is not None else self.threshold

        suggestions = process.extract(
            normalized_query,
            candidates,
            limit=max_suggestions,
            scorer=fuzz.WRatio,
            processor=self.normalizer.normalize
        )

        # Filter by threshold and return just the names
        return [suggestion[0] for suggestion in suggestions
                if suggestion[1] >= threshold * 100]
