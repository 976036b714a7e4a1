from .job_analysis_service import (
    AnalysisResult,
    DeterministicAnalyzer,
    EnrichedAnalyzer,
    JobAnalyzer,
    analyze_job_description,
    analyze_job_descriptions,
    get_default_analyzer,
    identify_skills_gap,
    run_job_analysis,
    score_compatibility,
)

__all__ = [
    "AnalysisResult",
    "JobAnalyzer",
    "DeterministicAnalyzer",
    "EnrichedAnalyzer",
    "get_default_analyzer",
    "run_job_analysis",
    "analyze_job_description",
    "analyze_job_descriptions",
    "score_compatibility",
    "identify_skills_gap",
]
