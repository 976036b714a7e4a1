from resumefit.services import analyze_job_description, identify_skills_gap, score_compatibility

__all__ = ["analyze_job_description", "score_compatibility", "identify_skills_gap"]
