from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .analysis import CompatibilityScore, JobAnalysis, SkillsGap


class _ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class JobAnalysisRequest(_ApiModel):
    job_description: str = Field(max_length=120000)


class JobAnalysisResponse(_ApiModel):
    analysis: JobAnalysis
    source: str
    enrichment_fallback: bool = False


class BatchJobAnalysisRequest(_ApiModel):
    job_descriptions: list[str] = Field(min_length=1, max_length=20)

    @model_validator(mode="after")
    def _check_lengths(self) -> "BatchJobAnalysisRequest":
        if any(len(text) > 120000 for text in self.job_descriptions):
            raise ValueError("each job description must be at most 120000 characters")
        return self


class BatchJobAnalysisResponse(_ApiModel):
    analyses: list[JobAnalysisResponse] = Field(default_factory=list)


class ResumeAgainstJobRequest(_ApiModel):
    """Resume text plus either a precomputed analysis or the raw posting."""

    resume_text: str = Field(max_length=120000)
    analysis: JobAnalysis | None = None
    job_description: str | None = Field(default=None, max_length=120000)

    @model_validator(mode="after")
    def _require_one_job_source(self) -> "ResumeAgainstJobRequest":
        if (self.analysis is None) == (self.job_description is None):
            raise ValueError("provide exactly one of 'analysis' or 'job_description'")
        return self


class JobMatchRequest(_ApiModel):
    resume_text: str = Field(max_length=120000)
    job_description: str = Field(max_length=120000)


class JobMatchResponse(_ApiModel):
    analysis: JobAnalysis
    compatibility: CompatibilityScore
    skills_gap: SkillsGap
    source: str
    enrichment_fallback: bool = False
