import asyncio

from fastapi import APIRouter, Header, Request

from resumefit.core.config import settings
from resumefit.core.rate_limit import rate_limit
from resumefit.core.security import check_api_key
from resumefit.schemas import CompatibilityScore, JobAnalysis, SkillsGap
from resumefit.schemas.api import (
    BatchJobAnalysisRequest,
    BatchJobAnalysisResponse,
    JobAnalysisRequest,
    JobAnalysisResponse,
    JobMatchRequest,
    JobMatchResponse,
    ResumeAgainstJobRequest,
)
from resumefit.services import (
    AnalysisResult,
    analyze_job_descriptions,
    identify_skills_gap,
    run_job_analysis,
    score_compatibility,
)

router = APIRouter()


def _to_response(result: AnalysisResult) -> JobAnalysisResponse:
    return JobAnalysisResponse(
        analysis=result.analysis,
        source=result.source,
        enrichment_fallback=result.enrichment_fallback,
    )


async def _resolve_analysis(payload: ResumeAgainstJobRequest) -> JobAnalysis:
    if payload.analysis is not None:
        return payload.analysis
    result = await asyncio.to_thread(run_job_analysis, payload.job_description or "")
    return result.analysis


@router.post("/jobs/analyze", response_model=JobAnalysisResponse)
@rate_limit()
async def jobs_analyze(
    request: Request,
    payload: JobAnalysisRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    result = await asyncio.to_thread(run_job_analysis, payload.job_description)
    return _to_response(result)


@router.post("/jobs/analyze/batch", response_model=BatchJobAnalysisResponse)
@rate_limit(settings.batch_rate_limit)
async def jobs_analyze_batch(
    request: Request,
    payload: BatchJobAnalysisRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    results = await asyncio.to_thread(analyze_job_descriptions, payload.job_descriptions)
    return BatchJobAnalysisResponse(analyses=[_to_response(result) for result in results])


@router.post("/jobs/compatibility", response_model=CompatibilityScore)
@rate_limit()
async def jobs_compatibility(
    request: Request,
    payload: ResumeAgainstJobRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    analysis = await _resolve_analysis(payload)
    return score_compatibility(payload.resume_text, analysis)


@router.post("/jobs/skills-gap", response_model=SkillsGap)
@rate_limit()
async def jobs_skills_gap(
    request: Request,
    payload: ResumeAgainstJobRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    analysis = await _resolve_analysis(payload)
    return identify_skills_gap(payload.resume_text, analysis)


@router.post("/jobs/match", response_model=JobMatchResponse)
@rate_limit()
async def jobs_match(
    request: Request,
    payload: JobMatchRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    result = await asyncio.to_thread(run_job_analysis, payload.job_description)
    return JobMatchResponse(
        analysis=result.analysis,
        compatibility=score_compatibility(payload.resume_text, result.analysis),
        skills_gap=identify_skills_gap(payload.resume_text, result.analysis),
        source=result.source,
        enrichment_fallback=result.enrichment_fallback,
    )
