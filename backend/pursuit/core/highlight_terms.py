"""Highlight Terms — which substrings of a result to emphasize.

Invariants:
    - Terms are lowercased, stripped, deduplicated and sorted
    - split_highlights re-joins to the original text exactly
    - Matching is case-insensitive; longer terms win over their own prefixes
"""

import re

from pursuit.core.rank_applications import normalize_search_term


def highlight_terms(keywords: set[str], search_term: str | None) -> list[str]:
    """Applied keywords plus the active quick-search term."""
    terms = {kw.strip().lower() for kw in keywords if kw.strip()}
    needle = normalize_search_term(search_term)
    if needle:
        terms.add(needle)
    return sorted(terms)


def split_highlights(text: str, terms: list[str]) -> list[tuple[str, bool]]:
    """Split text into (segment, is_match) pairs."""
    if not terms or not text:
        return [(text, False)]
    ordered = sorted({t for t in terms if t}, key=len, reverse=True)
    if not ordered:
        return [(text, False)]
    pattern = re.compile(
        "(" + "|".join(re.escape(t) for t in ordered) + ")", re.IGNORECASE,
    )
    lowered = {t.lower() for t in ordered}
    return [
        (segment, segment.lower() in lowered)
        for segment in pattern.split(text)
        if segment
    ]
