"""
Preprocessing utilities for ledger categorization.
Handles note normalization and keyword containment checks.
"""

from typing import Iterable, Optional


def normalize_notes(notes: Optional[str]) -> str:
    """
    Normalize note text for keyword matching.

    Args:
        notes: Raw notes text

    Returns:
        Lowercased text
    """
    if not notes:
        return ""
    return notes.lower()


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    """
    Check if normalized text contains any of the keywords.

    Args:
        text: Normalized notes text
        keywords: Lowercase keywords to look for

    Returns:
        True if any keyword occurs as a substring
    """
    for keyword in keywords:
        if keyword in text:
            return True
    return False
