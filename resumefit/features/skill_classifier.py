from __future__ import annotations

from resumefit.core.config.scoring import get_scoring_value
from resumefit.lexicon import Lexicon, get_default_lexicon
from resumefit.schemas import Skill, SkillClassification

from .text_utils import ensure_text, locate_section

REQUIRED_TRIGGERS = ("required", "must have", "essential")
PREFERRED_TRIGGERS = ("preferred", "nice to have", "bonus")


def _terms_in_order(section: str, terms: tuple[str, ...]) -> list[str]:
    lowered = section.lower()
    hits = [(lowered.find(term), position, term) for position, term in enumerate(terms)]
    return [term for index, _, term in sorted(hit for hit in hits if hit[0] != -1)]


def classify_skills(text: str, lexicon: Lexicon | None = None) -> SkillClassification:
    """Split technical terms into required and preferred skills.

    Each section runs for a fixed window after its trigger phrase and stops
    where the other section begins. A term in both sections is required.
    """
    ensure_text(text)
    lexicon = lexicon or get_default_lexicon()
    window = int(get_scoring_value("sections.window_chars", 500))

    required_section = locate_section(
        text, REQUIRED_TRIGGERS, window=window, stop_triggers=PREFERRED_TRIGGERS
    )
    preferred_section = locate_section(
        text, PREFERRED_TRIGGERS, window=window, stop_triggers=REQUIRED_TRIGGERS
    )

    required_names = _terms_in_order(required_section, lexicon.technical_terms)
    taken = set(required_names)
    preferred_names = [
        name
        for name in _terms_in_order(preferred_section, lexicon.technical_terms)
        if name not in taken
    ]

    return SkillClassification(
        required_skills=[Skill(name=name, category="technical", importance="required") for name in required_names],
        preferred_skills=[Skill(name=name, category="technical", importance="preferred") for name in preferred_names],
    )
