from .compatibility import score_compatibility
from .job_structure import analyze_structure
from .keyword_extractor import extract_keywords
from .skill_classifier import classify_skills
from .skills_gap import identify_skills_gap

__all__ = [
    "extract_keywords",
    "analyze_structure",
    "classify_skills",
    "score_compatibility",
    "identify_skills_gap",
]
