from __future__ import annotations

from resumefit.core.config.scoring import get_scoring_value
from resumefit.lexicon import Lexicon, get_default_lexicon
from resumefit.schemas import JobStructure
from resumefit.schemas.analysis import CompanySize, ExperienceLevel, RoleType, WorkArrangement

from .text_utils import contains_any, ensure_text, extract_list_items, locate_section

_EXPERIENCE_RULES: tuple[tuple[ExperienceLevel, tuple[str, ...]], ...] = (
    ("entry", ("entry level", "junior", "0-2 years")),
    ("senior", ("senior", "5+ years", "lead")),
    ("lead", ("principal", "staff", "architect")),
    ("executive", ("director", "vp", "executive")),
)
_COMPANY_SIZE_RULES: tuple[tuple[CompanySize, tuple[str, ...]], ...] = (
    ("startup", ("startup", "early stage")),
    ("enterprise", ("enterprise", "fortune 500")),
    ("small", ("small team", "boutique")),
)
_ROLE_TYPE_RULES: tuple[tuple[RoleType, tuple[str, ...]], ...] = (
    ("manager", ("manager", "director")),
    ("team-lead", ("lead", "senior")),
    ("executive", ("executive", "vp")),
)
_WORK_ARRANGEMENT_RULES: tuple[tuple[WorkArrangement, tuple[str, ...]], ...] = (
    ("remote", ("remote",)),
    ("hybrid", ("hybrid",)),
    ("onsite", ("on-site", "onsite")),
)

QUALIFICATION_TRIGGERS = ("qualifications", "requirements", "must have")
NICE_TO_HAVE_TRIGGERS = ("nice to have", "preferred", "bonus", "plus")


def _first_match(lowered: str, rules, default):
    for label, markers in rules:
        if contains_any(lowered, markers):
            return label
    return default


def detect_experience_level(lowered: str) -> ExperienceLevel:
    return _first_match(lowered, _EXPERIENCE_RULES, "mid")


def detect_company_size(lowered: str) -> CompanySize:
    return _first_match(lowered, _COMPANY_SIZE_RULES, "medium")


def detect_role_type(lowered: str) -> RoleType:
    return _first_match(lowered, _ROLE_TYPE_RULES, "individual-contributor")


def detect_work_arrangement(lowered: str) -> WorkArrangement:
    return _first_match(lowered, _WORK_ARRANGEMENT_RULES, "flexible")


def detect_industry_context(lowered: str, lexicon: Lexicon) -> str:
    for term in lexicon.industry_terms:
        if term in lowered:
            return term
    return "general"


def detect_benefits(lowered: str, lexicon: Lexicon) -> list[str]:
    return [phrase for phrase in lexicon.benefit_phrases if phrase in lowered]


def detect_red_flags(lowered: str, lexicon: Lexicon) -> list[str]:
    flags: list[str] = []
    for label, any_of, all_of in lexicon.red_flag_rules:
        if any_of and not contains_any(lowered, any_of):
            continue
        if all_of and not all(phrase in lowered for phrase in all_of):
            continue
        flags.append(label)
    return flags


def analyze_structure(text: str, lexicon: Lexicon | None = None) -> JobStructure:
    ensure_text(text)
    lexicon = lexicon or get_default_lexicon()
    lowered = text.lower()
    window = int(get_scoring_value("sections.window_chars", 500))
    limit = int(get_scoring_value("sections.max_list_items", 10))

    qualification_section = locate_section(text, QUALIFICATION_TRIGGERS, window=window)
    nice_to_have_section = locate_section(text, NICE_TO_HAVE_TRIGGERS, window=window)

    return JobStructure(
        experience_level=detect_experience_level(lowered),
        company_size=detect_company_size(lowered),
        role_type=detect_role_type(lowered),
        work_arrangement=detect_work_arrangement(lowered),
        industry_context=detect_industry_context(lowered, lexicon),
        benefits=detect_benefits(lowered, lexicon),
        responsibilities=extract_list_items(text, limit=limit),
        qualifications=extract_list_items(qualification_section, limit=limit),
        nice_to_have=extract_list_items(nice_to_have_section, limit=limit),
        red_flags=detect_red_flags(lowered, lexicon),
    )
