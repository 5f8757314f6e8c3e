"""Duplicate item detection and name similarity.

Used by the item endpoints before inserting a new item into a list and by the
list cleanup endpoint that surfaces clusters of likely duplicates.

Provides:
  - normalize_string(value)
  - levenshtein_distance(a, b)
  - similarity_score(a, b)
  - similarity_label(score)
  - find_potential_duplicates(items, new_item_name, threshold=2)
  - group_similar_items(items, threshold=0.7)
  - describe_duplicates(new_item_name, duplicates, limit=3)

Items can be domain objects (anything with ``id`` and ``name`` attributes) or
plain dicts with the same keys. Nothing here mutates the caller's items.
"""
from __future__ import annotations
import logging
import re
from typing import Any, Dict, List, Sequence, Set

from packlist.utilities.constants import (
    DEFAULT_DISTANCE_THRESHOLD,
    DEFAULT_GROUP_THRESHOLD,
    DUPLICATE_PREVIEW_LIMIT,
    EXACT_MATCH_SCORE,
    MIN_FUZZY_LENGTH,
    MIN_WORD_LENGTH,
    SIMILARITY_LABELS,
    VERY_SIMILAR_SCORE,
)

logger = logging.getLogger(__name__)

__all__ = [
    "normalize_string", "levenshtein_distance", "similarity_score", "similarity_label",
    "find_potential_duplicates", "group_similar_items", "describe_duplicates",
]

# Python's default \w is Unicode aware: letters and digits of any script plus underscore
_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


def _field(item: Any, key: str, default: Any = "") -> Any:
    """Read ``key`` from a domain object or a dict."""
    if isinstance(item, dict):
        return item.get(key, default)
    return getattr(item, key, default)


def normalize_string(value: str) -> str:
    """Canonical form of a name used for every comparison.

    Lower-cases, strips punctuation and symbols, collapses whitespace runs to a
    single space and trims. Trimming runs last so the result is stable under a
    second pass ("a !" -> "a").

    >>> normalize_string("  T-Shirts!!  ")
    'tshirts'
    """
    lowered = value.lower()
    stripped = _NON_WORD.sub("", lowered)
    return _WHITESPACE.sub(" ", stripped).strip()


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum number of single character insertions, deletions and substitutions turning a into b.

    Case sensitive; callers normalize first. Keeps the full
    (len(b)+1) x (len(a)+1) matrix, item names are short.
    """
    if not a:
        return len(b)
    if not b:
        return len(a)

    matrix: List[List[int]] = [[i] + [0] * len(a) for i in range(len(b) + 1)]
    for j in range(len(a) + 1):
        matrix[0][j] = j

    for i in range(1, len(b) + 1):
        for j in range(1, len(a) + 1):
            if b[i - 1] == a[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = min(
                    matrix[i - 1][j - 1] + 1,  # substitution
                    matrix[i][j - 1] + 1,      # insertion
                    matrix[i - 1][j] + 1,      # deletion
                )
    return matrix[len(b)][len(a)]


def similarity_score(a: str, b: str) -> float:
    """Return a similarity in [0, 1] between two names (1 = identical after normalization)."""
    normalized_a = normalize_string(a)
    normalized_b = normalize_string(b)

    # Also covers two empty strings
    if normalized_a == normalized_b:
        return 1.0

    max_length = max(len(normalized_a), len(normalized_b))
    distance = levenshtein_distance(normalized_a, normalized_b)
    return 1 - (distance / max_length)


def similarity_label(score: float) -> str:
    """Badge text shown next to a duplicate candidate."""
    if score >= EXACT_MATCH_SCORE:
        return SIMILARITY_LABELS["exact"]
    if score >= VERY_SIMILAR_SCORE:
        return SIMILARITY_LABELS["very_similar"]
    return SIMILARITY_LABELS["similar"]


def _significant_words(normalized: str) -> Set[str]:
    return {w for w in normalized.split(" ") if len(w) > MIN_WORD_LENGTH}


def _words_overlap(candidate_words: Set[str], item_words: Set[str]) -> bool:
    """Every word of the smaller set is contained in, or contains, a word of the larger set.

    Ties go to the candidate: with equal counts the candidate's words are the
    ones that all have to be matched.
    """
    if not candidate_words or not item_words:
        return False
    if len(candidate_words) <= len(item_words):
        shorter, longer = candidate_words, item_words
    else:
        shorter, longer = item_words, candidate_words
    return all(
        any(other in word or word in other for other in longer)
        for word in shorter
    )


def _is_potential_duplicate(normalized: str, candidate_words: Set[str], item_name: str, threshold: int) -> bool:
    item_normalized = normalize_string(item_name)

    if item_normalized == normalized:
        return True

    if len(normalized) > MIN_FUZZY_LENGTH:
        if levenshtein_distance(item_normalized, normalized) <= threshold:
            return True
        if normalized in item_normalized or item_normalized in normalized:
            return True

    return _words_overlap(candidate_words, _significant_words(item_normalized))


def find_potential_duplicates(items: Sequence[Any], new_item_name: str,
                              threshold: int = DEFAULT_DISTANCE_THRESHOLD) -> List[Any]:
    """Return the items whose names look like ``new_item_name``.

    An item matches on any of: equal normalized names; edit distance within
    ``threshold``; one name containing the other; every significant word of the
    shorter name overlapping a word of the longer one. Distance and substring
    checks only run for candidates longer than three characters.

    Args:
        items: existing items of the target list (objects or dicts with id/name).
        new_item_name: the name the user is about to add.
        threshold: maximum edit distance for a fuzzy match.

    Returns:
        Matching items in input order, each at most once.

    Raises:
        ValueError: if threshold is negative.
    """
    if threshold < 0:
        raise ValueError(f"Distance threshold must be >= 0, got {threshold}")

    normalized = normalize_string(new_item_name)
    if not normalized:
        return []

    candidate_words = _significant_words(normalized)
    matches = [
        item for item in items
        if _is_potential_duplicate(normalized, candidate_words, _field(item, "name"), threshold)
    ]
    logger.debug("Duplicate check for %r: %d of %d items matched", new_item_name, len(matches), len(items))
    return matches


def group_similar_items(items: Sequence[Any], threshold: float = DEFAULT_GROUP_THRESHOLD) -> List[List[Any]]:
    """Cluster items whose names score >= threshold against a group's first member.

    Greedy single pass in input order: each item not yet placed starts a group
    and pulls in every later unplaced item similar to it. Groups of one are
    dropped, so only clusters of likely duplicates are returned.

    Raises:
        ValueError: if threshold is outside [0, 1].
    """
    if not 0 <= threshold <= 1:
        raise ValueError(f"Similarity threshold must be within [0, 1], got {threshold}")

    groups: List[List[Any]] = []
    processed: Set[Any] = set()

    for item in items:
        item_id = _field(item, "id")
        if item_id in processed:
            continue

        group = [item]
        processed.add(item_id)
        item_name = _field(item, "name")

        for other in items:
            other_id = _field(other, "id")
            if other_id in processed:
                continue
            if similarity_score(item_name, _field(other, "name")) >= threshold:
                group.append(other)
                processed.add(other_id)

        groups.append(group)

    return [group for group in groups if len(group) > 1]


def describe_duplicates(new_item_name: str, duplicates: Sequence[Any],
                        limit: int = DUPLICATE_PREVIEW_LIMIT) -> List[Dict[str, Any]]:
    """Summaries of the first ``limit`` duplicates for the confirmation prompt."""
    described = []
    for item in list(duplicates)[:limit]:
        score = similarity_score(new_item_name, _field(item, "name"))
        described.append({
            "id": _field(item, "id"),
            "name": _field(item, "name"),
            "description": _field(item, "description", None) or "",
            "score": round(score, 3),
            "label": similarity_label(score),
        })
    return described
