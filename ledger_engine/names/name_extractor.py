"""
Name extraction from ledger notes.

Notes are free text such as "عجز محمد احمد 250" or "Ahmed Ali deficit 100".
Known ledger words are removed first, then digits and punctuation, and the
first one or two remaining words are taken as the person's name.
"""

import re
from typing import Dict, List, Optional, Sequence

from ..config.analysis_config import ANALYSIS_CONFIG
from ..patterns.ledger_patterns import NAME_NOISE_PATTERN, NAME_REMOVAL_WORDS

_RE_NOISE = re.compile(NAME_NOISE_PATTERN)
_RE_WHITESPACE = re.compile(r"\s+")


class NameExtractor:
    """Extracts a candidate person name from a notes string."""

    def __init__(
        self,
        removal_words: Optional[Sequence[str]] = None,
        name_config: Optional[Dict] = None
    ):
        words = removal_words if removal_words is not None else NAME_REMOVAL_WORDS
        # Removal order is the list order; keyword removal runs before the
        # digit/punctuation pass
        self._removal_patterns = [re.compile(re.escape(w), re.IGNORECASE) for w in words]

        config = name_config or ANALYSIS_CONFIG["names"]
        self.min_token_length = config["min_token_length"]
        self.min_single_name_length = config["min_single_name_length"]
        self.max_name_words = config["max_name_words"]

    def clean(self, notes: str) -> str:
        """Strip ledger words, digits and punctuation, then collapse whitespace."""
        text = notes.strip()
        for pattern in self._removal_patterns:
            text = pattern.sub("", text)
        text = _RE_NOISE.sub(" ", text)
        return _RE_WHITESPACE.sub(" ", text).strip()

    def tokens(self, notes: str) -> List[str]:
        """Words of the cleaned note long enough to belong to a name."""
        return [w for w in self.clean(notes).split(" ") if len(w) >= self.min_token_length]

    def extract(self, notes: Optional[str]) -> Optional[str]:
        """
        Extract a name from a note.

        Args:
            notes: Notes text

        Returns:
            The first two words joined by a space, a single long word, or
            None when the note holds no usable name

        Example:
            >>> NameExtractor().extract("Ahmed Ali deficit 100")
            'Ahmed Ali'
            >>> NameExtractor().extract("12345") is None
            True
        """
        if not notes or not notes.strip():
            return None

        words = self.tokens(notes)
        if len(words) >= 2:
            return " ".join(words[:self.max_name_words])
        if len(words) == 1 and len(words[0]) >= self.min_single_name_length:
            return words[0]
        return None


_DEFAULT_EXTRACTOR = NameExtractor()


def extract_name(notes: Optional[str]) -> Optional[str]:
    """Extract a name with the default word lists."""
    return _DEFAULT_EXTRACTOR.extract(notes)
