from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

KeywordCategory = Literal["technical", "soft", "industry", "role", "company"]
SkillCategory = Literal["technical", "soft", "industry", "certification"]
SkillImportance = Literal["required", "preferred", "nice-to-have"]
ProficiencyLevel = Literal["beginner", "intermediate", "advanced", "expert"]
ExperienceLevel = Literal["entry", "junior", "mid", "senior", "lead", "executive"]
CompanySize = Literal["startup", "small", "medium", "large", "enterprise"]
RoleType = Literal["individual-contributor", "team-lead", "manager", "director", "executive"]
WorkArrangement = Literal["remote", "hybrid", "onsite", "flexible"]

MAX_KEYWORDS = 25


class _AnalysisModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class WeightedKeyword(_AnalysisModel):
    keyword: str
    weight: float = Field(ge=0.0, le=1.0)
    category: KeywordCategory
    frequency: int = Field(ge=1)
    context: tuple[str, ...] = Field(default_factory=tuple, max_length=3)
    synonyms: tuple[str, ...] = Field(default_factory=tuple)


class Skill(_AnalysisModel):
    name: str
    category: SkillCategory
    importance: SkillImportance
    years_experience: int | None = Field(default=None, ge=0)
    proficiency_level: ProficiencyLevel | None = None


class SalaryRange(_AnalysisModel):
    min: float = Field(ge=0)
    max: float = Field(ge=0)
    currency: str


class JobStructure(_AnalysisModel):
    experience_level: ExperienceLevel = "mid"
    company_size: CompanySize = "medium"
    role_type: RoleType = "individual-contributor"
    work_arrangement: WorkArrangement = "flexible"
    industry_context: str = "general"
    benefits: tuple[str, ...] = Field(default_factory=tuple)
    responsibilities: tuple[str, ...] = Field(default_factory=tuple)
    qualifications: tuple[str, ...] = Field(default_factory=tuple)
    nice_to_have: tuple[str, ...] = Field(default_factory=tuple)
    red_flags: tuple[str, ...] = Field(default_factory=tuple)


class SkillClassification(_AnalysisModel):
    required_skills: tuple[Skill, ...] = Field(default_factory=tuple)
    preferred_skills: tuple[Skill, ...] = Field(default_factory=tuple)


class JobAnalysis(_AnalysisModel):
    keywords: tuple[WeightedKeyword, ...] = Field(default_factory=tuple, max_length=MAX_KEYWORDS)
    required_skills: tuple[Skill, ...] = Field(default_factory=tuple)
    preferred_skills: tuple[Skill, ...] = Field(default_factory=tuple)
    experience_level: ExperienceLevel = "mid"
    industry_context: str = "general"
    company_size: CompanySize = "medium"
    role_type: RoleType = "individual-contributor"
    work_arrangement: WorkArrangement = "flexible"
    salary_range: SalaryRange | None = None
    benefits: tuple[str, ...] = Field(default_factory=tuple)
    responsibilities: tuple[str, ...] = Field(default_factory=tuple)
    qualifications: tuple[str, ...] = Field(default_factory=tuple)
    nice_to_have: tuple[str, ...] = Field(default_factory=tuple)
    red_flags: tuple[str, ...] = Field(default_factory=tuple)
    matching_tips: tuple[str, ...] = Field(default_factory=tuple)


class CompatibilityBreakdown(_AnalysisModel):
    skills: int = Field(ge=0, le=100)
    experience: int = Field(ge=0, le=100)
    keywords: int = Field(ge=0, le=100)
    qualifications: int = Field(ge=0, le=100)


class CompatibilityScore(_AnalysisModel):
    overall: int = Field(ge=0, le=100)
    breakdown: CompatibilityBreakdown
    strengths: tuple[str, ...] = Field(default_factory=tuple)
    gaps: tuple[str, ...] = Field(default_factory=tuple)
    improvements: tuple[str, ...] = Field(default_factory=tuple)


class SkillsGap(_AnalysisModel):
    missing_skills: tuple[Skill, ...] = Field(default_factory=tuple)
    weak_skills: tuple[Skill, ...] = Field(default_factory=tuple)
    strength_skills: tuple[Skill, ...] = Field(default_factory=tuple)
    recommendations: tuple[str, ...] = Field(default_factory=tuple)
