"""Text normalization and room-code pattern utilities."""

import re
from typing import List

# Room codes such as "2B", "114" or "A14"
ROOM_CODE_PATTERNS = [
    r'[0-9]+[A-Za-z]*',
    r'[A-Za-z]+[0-9]+[A-Za-z]*',
]


class TextNormalizer:
    """Handles text normalization for consistent query and name processing."""

    def __init__(self) -> None:
        """Initialize the normalizer."""
        self.whitespace_regex = re.compile(r'\s+')
        self.digit_regex = re.compile(r'\d')

        # Compile regex patterns for performance
        self.room_code_regexes = [re.compile(pattern) for pattern in ROOM_CODE_PATTERNS]
        self.room_code_scan_regex = re.compile('|'.join(ROOM_CODE_PATTERNS))

    def normalize(self, text: str) -> str:
        """
        Normalize a query or name for comparison.

        Args:
            text: Input text to normalize

        Returns:
            Lower-cased text without leading/trailing whitespace
        """
        if not text:
            return ""
        return text.lower().strip()

    def split_words(self, text: str) -> List[str]:
        """
        Split text into whitespace-delimited words.

        Args:
            text: Input text

        Returns:
            List of words, empty strings dropped
        """
        if not text:
            return []
        return [word for word in self.whitespace_regex.split(text) if word]

    def has_digit(self, text: str) -> bool:
        """Check whether text contains at least one digit."""
        return bool(self.digit_regex.search(text))

    def is_room_code(self, text: str) -> bool:
        """
        Check whether the whole text looks like a room code.

        Args:
            text: Candidate text, e.g. a query

        Returns:
            True for inputs like "2b", "114" or "a14c"
        """
        return any(regex.fullmatch(text) for regex in self.room_code_regexes)

    def extract_room_codes(self, text: str) -> List[str]:
        """
        Extract all room-code tokens from text, left to right.

        Args:
            text: Text to scan, e.g. a destination name

        Returns:
            List of matched tokens in order of appearance
        """
        if not text:
            return []
        return self.room_code_scan_regex.findall(text)
