# Approximate text matching - typo-tolerant search over record fields
from __future__ import annotations

import re
from typing import List, Optional

# Field text splits on whitespace, comma, period and hyphen only.
# Apostrophes stay inside tokens ("o'brien").
_FIELD_SEPARATORS = re.compile(r"[\s,.-]+")


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance: minimum single-character inserts, deletes and substitutions."""
    if len(a) == 0:
        return len(b)
    if len(b) == 0:
        return len(a)

    # table[j][i] = distance between a[:i] and b[:j]
    table = [[0] * (len(a) + 1) for _ in range(len(b) + 1)]
    for i in range(len(a) + 1):
        table[0][i] = i
    for j in range(len(b) + 1):
        table[j][0] = j

    for j in range(1, len(b) + 1):
        for i in range(1, len(a) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            table[j][i] = min(
                table[j][i - 1] + 1,  # deletion
                table[j - 1][i] + 1,  # insertion
                table[j - 1][i - 1] + cost,  # substitution
            )

    return table[len(b)][len(a)]


def typo_threshold(word: str) -> int:
    """Allowed edit distance for a query word: 0 for 1-3 chars, 1 for 4-7, 2 for 8+"""
    if len(word) <= 3:
        return 0
    elif len(word) <= 7:
        return 1
    else:
        return 2


def split_query_words(query: str) -> List[str]:
    """Split a (lowercased) query on single spaces, dropping empty pieces"""
    return [w for w in query.split(" ") if w]


def split_field_words(field: str) -> List[str]:
    """Split a (lowercased) field on runs of whitespace, comma, period or hyphen"""
    return [w for w in _FIELD_SEPARATORS.split(field) if w]


def fuzzy_matches(query: str, field: Optional[str]) -> bool:
    """
    Decide whether field is relevant to query.

    - Empty query matches everything.
    - Case-insensitive substring containment matches immediately.
    - Otherwise every query word needs at least one field word within
      typo_threshold(query_word) edits.
    """
    if not query:
        return True
    query_lower = query.lower()
    field_lower = (field or "").lower()

    if query_lower in field_lower:
        return True

    query_words = split_query_words(query_lower)
    field_words = split_field_words(field_lower)

    return all(
        any(edit_distance(qw, fw) <= typo_threshold(qw) for fw in field_words)
        for qw in query_words
    )
