"""Keyword scan of two texts against the topic taxonomy."""
from __future__ import annotations

import re
from functools import lru_cache
from typing import List, Sequence, Tuple

from standards_compare.models.comparison import TopicMatch
from standards_compare.models.taxonomy import Taxonomy


@lru_cache(maxsize=1024)
def _word_pattern(keyword: str) -> re.Pattern:
    return re.compile(r"\b" + re.escape(keyword) + r"\b")


def keyword_present(text: str, keyword: str, whole_words: bool = False) -> bool:
    """
    Plain containment by default, so "cost" is found inside "costly".
    With ``whole_words`` the keyword must sit between word boundaries.
    """
    if whole_words:
        return _word_pattern(keyword).search(text) is not None
    return keyword in text


def matching_keywords(text: str, keywords: Sequence[str], whole_words: bool = False) -> Tuple[str, ...]:
    """Keywords found in ``text``, kept in declaration order."""
    if not text:
        return ()
    return tuple(k for k in keywords if keyword_present(text, k, whole_words))


def match_topics(
    left_text: str,
    right_text: str,
    taxonomy: Taxonomy,
    whole_words: bool = False,
) -> List[TopicMatch]:
    """
    Scan every topic against both texts.

    Both texts must already be lowercased. One TopicMatch is returned per
    topic, in taxonomy order, even when neither side matched.
    """
    return [
        TopicMatch(
            topic=entry.topic,
            left_matches=matching_keywords(left_text, entry.keywords, whole_words),
            right_matches=matching_keywords(right_text, entry.keywords, whole_words),
        )
        for entry in taxonomy
    ]
