from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from dataclasses import dataclass
from typing import Literal, Protocol, Sequence

from resumefit.ai.config import load_ai_config
from resumefit.ai.factory import get_enricher
from resumefit.ai.types import JobAnalysisEnricher
from resumefit.core.config import settings
from resumefit.core.config.scoring import get_scoring_value
from resumefit.features import (
    analyze_structure,
    classify_skills,
    extract_keywords,
    identify_skills_gap as _identify_skills_gap,
    score_compatibility as _score_compatibility,
)
from resumefit.features.text_utils import ensure_text
from resumefit.lexicon import Lexicon, get_default_lexicon
from resumefit.schemas import CompatibilityScore, JobAnalysis, Skill, SkillsGap, WeightedKeyword

from .enrichment import merge_enrichment, parse_enrichment_payload

logger = logging.getLogger(__name__)

AnalysisSource = Literal["deterministic", "enriched"]

DEFAULT_ENRICHMENT_TIMEOUT_S = 30.0

GENERIC_MATCHING_TIPS = (
    "Use specific examples and quantifiable achievements",
    "Match the tone and language used in the job description",
    "Address each requirement explicitly in your resume",
)


@dataclass(frozen=True)
class AnalysisResult:
    analysis: JobAnalysis
    source: AnalysisSource = "deterministic"
    enrichment_fallback: bool = False
    fallback_reason: str | None = None


class JobAnalyzer(Protocol):
    def analyze(self, job_description: str) -> AnalysisResult: ...


def build_matching_tips(keywords: Sequence[WeightedKeyword], required_skills: Sequence[Skill]) -> list[str]:
    tips: list[str] = []
    top_count = int(get_scoring_value("matching_tips.top_keywords", 5))
    top_keywords = keywords[:top_count]
    if top_keywords:
        tips.append(f"Emphasize these key terms: {', '.join(item.keyword for item in top_keywords)}")

    technical = [skill for skill in required_skills if skill.category == "technical"]
    if technical:
        tips.append(f"Highlight technical skills: {', '.join(skill.name for skill in technical)}")

    tips.extend(GENERIC_MATCHING_TIPS)
    return tips


class DeterministicAnalyzer:
    """Lexicon and heuristic analysis; same input always gives the same output."""

    def __init__(self, lexicon: Lexicon | None = None) -> None:
        self._lexicon = lexicon or get_default_lexicon()

    def build(self, job_description: str) -> JobAnalysis:
        ensure_text(job_description, "job_description")
        keywords = extract_keywords(job_description, self._lexicon)
        structure = analyze_structure(job_description, self._lexicon)
        skills = classify_skills(job_description, self._lexicon)

        return JobAnalysis(
            keywords=keywords,
            required_skills=skills.required_skills,
            preferred_skills=skills.preferred_skills,
            experience_level=structure.experience_level,
            industry_context=structure.industry_context,
            company_size=structure.company_size,
            role_type=structure.role_type,
            work_arrangement=structure.work_arrangement,
            benefits=structure.benefits,
            responsibilities=structure.responsibilities,
            qualifications=structure.qualifications,
            nice_to_have=structure.nice_to_have,
            red_flags=structure.red_flags,
            matching_tips=build_matching_tips(keywords, skills.required_skills),
        )

    def analyze(self, job_description: str) -> AnalysisResult:
        return AnalysisResult(analysis=self.build(job_description))


class EnrichedAnalyzer:
    """Asks an enrichment provider first and falls back to the deterministic analysis.

    The provider call runs on a worker thread bounded by ``timeout_s``; an
    enricher that overruns is abandoned and the deterministic result is used.
    """

    def __init__(
        self,
        enricher: JobAnalysisEnricher,
        fallback: DeterministicAnalyzer | None = None,
        timeout_s: float = DEFAULT_ENRICHMENT_TIMEOUT_S,
    ) -> None:
        if timeout_s <= 0:
            raise ValueError("timeout_s must be positive")
        self._enricher = enricher
        self._fallback = fallback or DeterministicAnalyzer()
        self._timeout_s = timeout_s

    def _fallback_result(self, baseline: JobAnalysis, reason: str) -> AnalysisResult:
        logger.warning("job_analysis_enrichment_fallback reason=%s", reason)
        return AnalysisResult(
            analysis=baseline,
            source="deterministic",
            enrichment_fallback=True,
            fallback_reason=reason,
        )

    def _call_enricher(self, job_description: str):
        pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="enrichment")
        try:
            return pool.submit(self._enricher.enrich, job_description).result(timeout=self._timeout_s)
        finally:
            pool.shutdown(wait=False)

    def analyze(self, job_description: str) -> AnalysisResult:
        baseline = self._fallback.build(job_description)

        started = time.perf_counter()
        try:
            raw = self._call_enricher(job_description)
        except FuturesTimeoutError:
            return self._fallback_result(baseline, "enricher_timeout")
        except Exception as exc:  # noqa: BLE001 - any provider failure means deterministic output
            return self._fallback_result(baseline, f"enricher_error:{type(exc).__name__}")

        if raw is None:
            return self._fallback_result(baseline, "enricher_empty")

        try:
            payload = parse_enrichment_payload(raw)
            analysis = merge_enrichment(payload, baseline) if payload is not None else None
        except (ValueError, RecursionError):
            analysis = None
        if analysis is None:
            return self._fallback_result(baseline, "invalid_payload")

        logger.info(
            "job_analysis_enriched latency_ms=%s keywords=%s",
            int((time.perf_counter() - started) * 1000),
            len(analysis.keywords),
        )
        return AnalysisResult(analysis=analysis, source="enriched")


def get_default_analyzer() -> JobAnalyzer:
    try:
        enricher = get_enricher()
    except (ValueError, RuntimeError) as exc:
        logger.warning("job_analysis_enrichment_misconfigured: %s", exc)
        enricher = None
    if enricher is None:
        return DeterministicAnalyzer()
    cfg = load_ai_config()
    # Covers every client attempt, retries included.
    budget = cfg.timeout_s * (max(cfg.max_retries, 0) + 1)
    return EnrichedAnalyzer(enricher, timeout_s=budget if budget > 0 else DEFAULT_ENRICHMENT_TIMEOUT_S)


def run_job_analysis(job_description: str, *, analyzer: JobAnalyzer | None = None) -> AnalysisResult:
    ensure_text(job_description, "job_description")
    return (analyzer or get_default_analyzer()).analyze(job_description)


def analyze_job_description(job_description: str, *, analyzer: JobAnalyzer | None = None) -> JobAnalysis:
    return run_job_analysis(job_description, analyzer=analyzer).analysis


def analyze_job_descriptions(
    job_descriptions: Sequence[str],
    *,
    analyzer: JobAnalyzer | None = None,
    max_workers: int | None = None,
) -> list[AnalysisResult]:
    """Analyze many postings in parallel; results keep the input order."""
    for text in job_descriptions:
        ensure_text(text, "job_description")
    if not job_descriptions:
        return []

    analyzer = analyzer or get_default_analyzer()
    workers = max(1, min(max_workers or settings.batch_max_workers, len(job_descriptions)))
    logger.info("job_analysis_batch size=%d workers=%d", len(job_descriptions), workers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(analyzer.analyze, job_descriptions))


def score_compatibility(resume_text: str, analysis: JobAnalysis) -> CompatibilityScore:
    return _score_compatibility(resume_text, analysis)


def identify_skills_gap(resume_text: str, analysis: JobAnalysis) -> SkillsGap:
    return _identify_skills_gap(resume_text, analysis)
