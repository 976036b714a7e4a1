from __future__ import annotations

import re
from functools import lru_cache

from resumefit.core.config.scoring import get_scoring_value
from resumefit.lexicon import Lexicon, get_default_lexicon
from resumefit.schemas import WeightedKeyword

from .text_utils import ensure_text, split_sentences


@lru_cache(maxsize=256)
def _term_pattern(term: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(term)}\b", re.IGNORECASE | re.ASCII)


def _keyword_weight(term: str, frequency: int, text: str, *, is_technical: bool) -> float:
    per_hit = float(get_scoring_value("keywords.frequency_weight", 0.2))
    title_window = int(get_scoring_value("keywords.title_window_chars", 100))
    title_boost = float(get_scoring_value("keywords.title_boost", 0.3))
    technical_boost = float(get_scoring_value("keywords.technical_boost", 0.2))

    base = min(frequency * per_hit, 1.0)
    boost_title = title_boost if term.lower() in text.lower()[:title_window] else 0.0
    boost_technical = technical_boost if is_technical else 0.0
    return max(0.0, min(base + boost_title + boost_technical, 1.0))


def _keyword_context(text: str, term: str, limit: int) -> list[str]:
    needle = term.lower()
    sentences = [sentence.strip() for sentence in split_sentences(text) if needle in sentence.lower()]
    return sentences[:limit]


def extract_keywords(text: str, lexicon: Lexicon | None = None) -> list[WeightedKeyword]:
    """Weighted lexicon hits for a job posting, heaviest first."""
    ensure_text(text)
    if not text.strip():
        return []

    lexicon = lexicon or get_default_lexicon()
    max_results = int(get_scoring_value("keywords.max_results", 25))
    max_context = int(get_scoring_value("keywords.max_context_sentences", 3))

    keywords: list[WeightedKeyword] = []
    seen: set[str] = set()
    for term, category in lexicon.categorized_terms():
        if term in seen:
            continue
        frequency = len(_term_pattern(term).findall(text))
        if frequency == 0:
            continue
        seen.add(term)
        keywords.append(
            WeightedKeyword(
                keyword=term,
                weight=_keyword_weight(term, frequency, text, is_technical=lexicon.is_technical(term)),
                category=category,
                frequency=frequency,
                context=_keyword_context(text, term, max_context),
                synonyms=lexicon.synonyms_for(term),
            )
        )

    keywords.sort(key=lambda item: item.weight, reverse=True)
    return keywords[:max_results]
