from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Literal, Mapping

from .terms import BENEFIT_PHRASES, INDUSTRY_TERMS, RED_FLAG_RULES, SOFT_TERMS, TECHNICAL_TERMS

TermCategory = Literal["technical", "soft", "industry"]


@dataclass(frozen=True)
class Lexicon:
    technical_terms: tuple[str, ...]
    soft_terms: tuple[str, ...]
    industry_terms: tuple[str, ...]
    benefit_phrases: tuple[str, ...]
    red_flag_rules: tuple[tuple[str, tuple[str, ...], tuple[str, ...]], ...]
    synonyms: Mapping[str, tuple[str, ...]]
    technical_set: frozenset[str]

    def categorized_terms(self) -> list[tuple[str, TermCategory]]:
        """All terms in scan order: technical, then soft, then industry."""
        output: list[tuple[str, TermCategory]] = []
        output.extend((term, "technical") for term in self.technical_terms)
        output.extend((term, "soft") for term in self.soft_terms)
        output.extend((term, "industry") for term in self.industry_terms)
        return output

    def is_technical(self, term: str) -> bool:
        return term.lower() in self.technical_set

    def synonyms_for(self, term: str) -> list[str]:
        return list(self.synonyms.get(term.lower(), ()))


def _load_synonyms(path: Path) -> dict[str, tuple[str, ...]]:
    with path.open("r", encoding="utf-8") as handle:
        raw = json.load(handle)
    return {
        str(key).strip().lower(): tuple(str(value).strip() for value in values)
        for key, values in raw.items()
    }


def load_lexicon(synonyms_path: str | Path | None = None) -> Lexicon:
    path = Path(synonyms_path) if synonyms_path else Path(__file__).with_name("synonyms.json")
    return Lexicon(
        technical_terms=TECHNICAL_TERMS,
        soft_terms=SOFT_TERMS,
        industry_terms=INDUSTRY_TERMS,
        benefit_phrases=BENEFIT_PHRASES,
        red_flag_rules=RED_FLAG_RULES,
        synonyms=MappingProxyType(_load_synonyms(path)),
        technical_set=frozenset(TECHNICAL_TERMS),
    )
