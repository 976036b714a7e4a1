from .analysis import (
    MAX_KEYWORDS,
    CompatibilityBreakdown,
    CompatibilityScore,
    JobAnalysis,
    JobStructure,
    SalaryRange,
    Skill,
    SkillClassification,
    SkillsGap,
    WeightedKeyword,
)

__all__ = [
    "MAX_KEYWORDS",
    "WeightedKeyword",
    "Skill",
    "SalaryRange",
    "JobStructure",
    "SkillClassification",
    "JobAnalysis",
    "CompatibilityBreakdown",
    "CompatibilityScore",
    "SkillsGap",
]
