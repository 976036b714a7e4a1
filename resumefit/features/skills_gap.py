from __future__ import annotations

from resumefit.core.config.scoring import get_scoring_value
from resumefit.schemas import JobAnalysis, Skill, SkillsGap

from .text_utils import ensure_analysis, ensure_text

GAP_TIPS = (
    "Use specific examples that demonstrate your experience with required technologies",
    "Quantify your achievements with metrics and numbers",
    "Tailor your professional summary to match the role requirements",
)


def _recommendations(missing: list[Skill], weak: list[Skill], limit: int) -> list[str]:
    recommendations: list[str] = []
    if missing:
        names = ", ".join(skill.name for skill in missing[:limit])
        recommendations.append(f"Add these critical skills to your resume: {names}")
    if weak:
        names = ", ".join(skill.name for skill in weak[:limit])
        recommendations.append(f"Consider highlighting these preferred skills if you have them: {names}")
    recommendations.extend(GAP_TIPS)
    return recommendations


def identify_skills_gap(resume_text: str, analysis: JobAnalysis) -> SkillsGap:
    ensure_text(resume_text, "resume_text")
    ensure_analysis(analysis)
    resume_lower = resume_text.lower()
    limit = int(get_scoring_value("skills_gap.max_listed", 3))

    missing: list[Skill] = []
    strengths: list[Skill] = []
    for skill in analysis.required_skills:
        if skill.name.lower() in resume_lower:
            strengths.append(skill)
        else:
            missing.append(skill)

    # Preferred skills that are present are not surfaced.
    weak = [skill for skill in analysis.preferred_skills if skill.name.lower() not in resume_lower]

    return SkillsGap(
        missing_skills=missing,
        weak_skills=weak,
        strength_skills=strengths,
        recommendations=_recommendations(missing, weak, limit),
    )
