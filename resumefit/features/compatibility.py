from __future__ import annotations

from resumefit.core.config.scoring import get_scoring_value
from resumefit.schemas import CompatibilityBreakdown, CompatibilityScore, JobAnalysis

from .text_utils import ensure_analysis, ensure_text, js_round, ratio_score

IMPROVEMENT_TIPS = (
    "Add specific examples of achievements with quantifiable results",
    "Use action verbs that match the job description language",
    "Include relevant keywords naturally throughout your resume",
)


def _strengths(resume_lower: str, analysis: JobAnalysis, limit: int) -> list[str]:
    threshold = float(get_scoring_value("compatibility.strong_keyword_weight", 0.7))
    strong = [
        item.keyword
        for item in analysis.keywords
        if item.weight > threshold and item.keyword.lower() in resume_lower
    ][:limit]
    if not strong:
        return []
    return [f"Strong match for key requirements: {', '.join(strong)}"]


def _gaps(resume_lower: str, analysis: JobAnalysis, limit: int) -> list[str]:
    missing = [skill.name for skill in analysis.required_skills if skill.name.lower() not in resume_lower][:limit]
    if not missing:
        return []
    return [f"Missing critical skills: {', '.join(missing)}"]


def score_compatibility(resume_text: str, analysis: JobAnalysis) -> CompatibilityScore:
    ensure_text(resume_text, "resume_text")
    ensure_analysis(analysis)
    resume_lower = resume_text.lower()
    limit = int(get_scoring_value("compatibility.max_listed", 3))

    skills_score = ratio_score(
        sum(1 for skill in analysis.required_skills if skill.name.lower() in resume_lower),
        len(analysis.required_skills),
    )
    keywords_score = ratio_score(
        sum(1 for item in analysis.keywords if item.keyword.lower() in resume_lower),
        len(analysis.keywords),
    )
    # No experience-level matching exists; this stays a fixed placeholder.
    experience_score = float(get_scoring_value("compatibility.experience_score", 75))
    qualifications_score = ratio_score(
        sum(1 for line in analysis.qualifications if line.lower() in resume_lower),
        len(analysis.qualifications),
    )

    overall = (skills_score + keywords_score + experience_score + qualifications_score) / 4

    return CompatibilityScore(
        overall=js_round(overall),
        breakdown=CompatibilityBreakdown(
            skills=js_round(skills_score),
            experience=js_round(experience_score),
            keywords=js_round(keywords_score),
            qualifications=js_round(qualifications_score),
        ),
        strengths=_strengths(resume_lower, analysis, limit),
        gaps=_gaps(resume_lower, analysis, limit),
        improvements=list(IMPROVEMENT_TIPS),
    )
