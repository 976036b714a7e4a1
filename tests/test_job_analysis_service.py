import os
import sys
import threading
import time
import unittest
from pathlib import Path
from unittest.mock import patch

from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resumefit.services import (  # noqa: E402
    DeterministicAnalyzer,
    EnrichedAnalyzer,
    analyze_job_description,
    analyze_job_descriptions,
    get_default_analyzer,
    identify_skills_gap,
    run_job_analysis,
    score_compatibility,
)


class _StubEnricher:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = 0

    def enrich(self, job_description):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.response


class JobAnalysisServiceTests(unittest.TestCase):
    JOB_TEXT = "Required: React, TypeScript. Preferred: AWS. This is a senior remote role at a startup."
    RESUME_TEXT = "Built apps using React and TypeScript."

    def setUp(self):
        self.deterministic = DeterministicAnalyzer()

    def test_short_posting_end_to_end(self):
        analysis = analyze_job_description(self.JOB_TEXT, analyzer=self.deterministic)

        self.assertEqual([s.name for s in analysis.required_skills], ["react", "typescript"])
        self.assertEqual([s.importance for s in analysis.required_skills], ["required", "required"])
        self.assertEqual([s.name for s in analysis.preferred_skills], ["aws"])
        self.assertEqual(analysis.experience_level, "senior")
        self.assertEqual(analysis.work_arrangement, "remote")
        self.assertEqual(analysis.company_size, "startup")
        self.assertEqual(analysis.industry_context, "startup")
        self.assertEqual(analysis.role_type, "team-lead")
        self.assertIsNone(analysis.salary_range)

        score = score_compatibility(self.RESUME_TEXT, analysis)
        self.assertEqual(score.breakdown.skills, 100)
        self.assertEqual(score.breakdown.keywords, 50)
        self.assertEqual(score.breakdown.experience, 75)
        self.assertEqual(score.breakdown.qualifications, 100)
        self.assertEqual(score.overall, 81)

        gap = identify_skills_gap(self.RESUME_TEXT, analysis)
        self.assertEqual([s.name for s in gap.strength_skills], ["react", "typescript"])
        self.assertEqual(list(gap.missing_skills), [])
        self.assertEqual([s.name for s in gap.weak_skills], ["aws"])

    def test_matching_tips(self):
        analysis = analyze_job_description(self.JOB_TEXT, analyzer=self.deterministic)
        self.assertEqual(
            list(analysis.matching_tips),
            [
                "Emphasize these key terms: typescript, react, aws, startup",
                "Highlight technical skills: react, typescript",
                "Use specific examples and quantifiable achievements",
                "Match the tone and language used in the job description",
                "Address each requirement explicitly in your resume",
            ],
        )

    def test_posting_without_lexicon_terms(self):
        analysis = analyze_job_description("We are hiring friendly people.", analyzer=self.deterministic)
        self.assertEqual(list(analysis.keywords), [])
        self.assertEqual(list(analysis.required_skills), [])
        self.assertEqual(len(analysis.matching_tips), 3)

        score = score_compatibility("", analysis)
        self.assertEqual(score.breakdown.skills, 100)
        self.assertEqual(score.breakdown.keywords, 100)
        self.assertEqual(score.overall, 94)

    def test_deterministic_analysis_is_repeatable(self):
        first = analyze_job_description(self.JOB_TEXT, analyzer=DeterministicAnalyzer())
        second = analyze_job_description(self.JOB_TEXT, analyzer=DeterministicAnalyzer())
        self.assertEqual(first, second)
        self.assertEqual(first.model_dump_json(), second.model_dump_json())

    def test_enricher_failures_fall_back_to_deterministic_output(self):
        expected = self.deterministic.build(self.JOB_TEXT)
        failing = [
            _StubEnricher(error=TimeoutError("timed out")),
            _StubEnricher(error=ConnectionError("network down")),
            _StubEnricher(response=None),
            _StubEnricher(response="this is not json at all"),
            _StubEnricher(response="```json\n[1, 2, 3]\n```"),
            _StubEnricher(response="{not: valid json}"),
            _StubEnricher(response=42),
            _StubEnricher(response='{"benefits": ' + "[" * 5000 + "]" * 5000 + "}"),
        ]
        for enricher in failing:
            with self.subTest(enricher=repr(enricher.response or enricher.error)[:40]):
                result = run_job_analysis(self.JOB_TEXT, analyzer=EnrichedAnalyzer(enricher))
                self.assertEqual(result.analysis, expected)
                self.assertEqual(result.source, "deterministic")
                self.assertTrue(result.enrichment_fallback)
                self.assertTrue(result.fallback_reason)
                self.assertEqual(enricher.calls, 1)

    def test_slow_enricher_is_abandoned_after_timeout(self):
        release = threading.Event()

        class _SlowEnricher:
            def enrich(self, job_description):
                release.wait(5)
                return '{"experienceLevel": "lead"}'

        try:
            started = time.perf_counter()
            result = run_job_analysis(
                self.JOB_TEXT, analyzer=EnrichedAnalyzer(_SlowEnricher(), timeout_s=0.05)
            )
            elapsed = time.perf_counter() - started
        finally:
            release.set()

        self.assertLess(elapsed, 2)
        self.assertEqual(result.fallback_reason, "enricher_timeout")
        self.assertEqual(result.analysis, self.deterministic.build(self.JOB_TEXT))

    def test_deeply_nested_payload_falls_back(self):
        nested = '{"benefits": ' + "[" * 5000 + "]" * 5000 + "}"
        result = run_job_analysis(self.JOB_TEXT, analyzer=EnrichedAnalyzer(_StubEnricher(response=nested)))
        self.assertEqual(result.fallback_reason, "invalid_payload")
        self.assertEqual(result.analysis, self.deterministic.build(self.JOB_TEXT))

    def test_analysis_cannot_be_changed_after_construction(self):
        analysis = analyze_job_description(self.JOB_TEXT, analyzer=self.deterministic)
        with self.assertRaises(AttributeError):
            analysis.keywords.append(analysis.keywords[0])  # type: ignore[attr-defined]
        with self.assertRaises(ValidationError):
            analysis.experience_level = "lead"
        self.assertIsInstance(analysis.required_skills, tuple)
        self.assertIsInstance(analysis.keywords[0].context, tuple)

    def test_non_positive_timeout_is_rejected(self):
        with self.assertRaises(ValueError):
            EnrichedAnalyzer(_StubEnricher(), timeout_s=0)

    def test_enrichment_overrides_valid_fields_only(self):
        enricher = _StubEnricher(
            response={
                "experienceLevel": "lead",
                "companySize": "gigantic",
                "industryContext": "Developer tooling",
                "benefits": ["gym membership"],
                "redFlags": "not a list",
                "salaryRange": {"min": 120000, "max": 150000, "currency": "USD"},
                "keywords": [
                    {"keyword": "AWS", "weight": 0.4, "category": "technical", "frequency": 1},
                    {"keyword": "React", "weight": 0.9, "category": "technical", "frequency": 2},
                ],
            }
        )
        baseline = self.deterministic.build(self.JOB_TEXT)
        result = run_job_analysis(self.JOB_TEXT, analyzer=EnrichedAnalyzer(enricher))
        analysis = result.analysis

        self.assertEqual(result.source, "enriched")
        self.assertFalse(result.enrichment_fallback)
        self.assertEqual(analysis.experience_level, "lead")
        self.assertEqual(analysis.company_size, baseline.company_size)
        self.assertEqual(analysis.industry_context, "Developer tooling")
        self.assertEqual(list(analysis.benefits), ["gym membership"])
        self.assertEqual(analysis.red_flags, baseline.red_flags)
        self.assertEqual(analysis.salary_range.currency, "USD")
        self.assertEqual([item.keyword for item in analysis.keywords], ["react", "aws"])
        self.assertEqual(analysis.required_skills, baseline.required_skills)
        self.assertEqual(analysis.matching_tips, baseline.matching_tips)

    def test_enrichment_accepts_fenced_json(self):
        enricher = _StubEnricher(response='```json\n{"workArrangement": "hybrid"}\n```')
        result = run_job_analysis(self.JOB_TEXT, analyzer=EnrichedAnalyzer(enricher))
        self.assertEqual(result.source, "enriched")
        self.assertEqual(result.analysis.work_arrangement, "hybrid")
        self.assertEqual(result.analysis.experience_level, "senior")

    def test_empty_enrichment_object_matches_deterministic_output(self):
        result = run_job_analysis(self.JOB_TEXT, analyzer=EnrichedAnalyzer(_StubEnricher(response="{}")))
        self.assertEqual(result.analysis, self.deterministic.build(self.JOB_TEXT))

    def test_contract_errors_raise(self):
        with self.assertRaises(TypeError):
            analyze_job_description(None, analyzer=self.deterministic)  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            score_compatibility("resume", {"keywords": []})  # type: ignore[arg-type]

    def test_batch_analysis_keeps_input_order(self):
        texts = [
            "Senior Python engineer, remote.",
            "Junior React developer at a startup.",
            "Hybrid director role at an enterprise.",
        ]
        results = analyze_job_descriptions(texts, analyzer=self.deterministic, max_workers=3)
        self.assertEqual([r.analysis.experience_level for r in results], ["senior", "entry", "executive"])
        self.assertEqual([r.analysis for r in results], [self.deterministic.build(text) for text in texts])
        self.assertEqual(analyze_job_descriptions([], analyzer=self.deterministic), [])

    def test_default_analyzer_is_deterministic_when_enrichment_is_off(self):
        with patch.dict(os.environ, {"JOB_ANALYSIS_ENRICHMENT_ENABLED": "0"}):
            self.assertIsInstance(get_default_analyzer(), DeterministicAnalyzer)

    def test_default_analyzer_survives_unknown_provider(self):
        env = {"JOB_ANALYSIS_ENRICHMENT_ENABLED": "1", "AI_PROVIDER": "mystery"}
        with patch.dict(os.environ, env):
            self.assertIsInstance(get_default_analyzer(), DeterministicAnalyzer)


if __name__ == "__main__":
    unittest.main()
