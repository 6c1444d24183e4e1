"""
Helpers for deciding whether fetched posts mention any requested keyword.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence


def _lowered_texts(texts: Iterable[Optional[str]]) -> List[str]:
    return [text.lower() for text in texts if isinstance(text, str)]


def keywords_found(texts: Iterable[Optional[str]], keywords: Sequence[str]) -> bool:
    """
    Return True if any text contains any keyword.

    Matching is case-insensitive substring containment. ``None`` and other
    non-string entries never match. Keywords are used exactly as given, so an
    empty keyword matches every text.
    """
    lowered = _lowered_texts(texts)
    if not lowered:
        return False
    for keyword in keywords:
        needle = keyword.lower()
        if any(needle in text for text in lowered):
            return True
    return False


def matching_keywords(texts: Iterable[Optional[str]], keywords: Sequence[str]) -> List[str]:
    """Return the distinct keywords found in ``texts``, in keyword order."""
    lowered = _lowered_texts(texts)
    hits: List[str] = []
    if not lowered:
        return hits
    for keyword in keywords:
        needle = keyword.lower()
        if keyword not in hits and any(needle in text for text in lowered):
            hits.append(keyword)
    return hits


__all__ = ["keywords_found", "matching_keywords"]
