from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resumefit.services import identify_skills_gap, run_job_analysis, score_compatibility  # noqa: E402


def _read(path: str) -> str:
    return Path(path).read_text(encoding="utf-8")


def main() -> None:
    parser = argparse.ArgumentParser(description="Analyze a job posting and optionally score a resume against it.")
    parser.add_argument("--job", required=True, help="Path to a plain-text job description")
    parser.add_argument("--resume", help="Path to a plain-text resume")
    parser.add_argument(
        "--out",
        help="Write the JSON result to this path instead of stdout",
    )
    args = parser.parse_args()

    result = run_job_analysis(_read(args.job))
    output: dict = {
        "source": result.source,
        "enrichmentFallback": result.enrichment_fallback,
        "analysis": result.analysis.model_dump(by_alias=True),
    }
    if args.resume:
        resume_text = _read(args.resume)
        output["compatibility"] = score_compatibility(resume_text, result.analysis).model_dump(by_alias=True)
        output["skillsGap"] = identify_skills_gap(resume_text, result.analysis).model_dump(by_alias=True)

    rendered = json.dumps(output, indent=2)
    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(rendered + "\n", encoding="utf-8")
    else:
        print(rendered)


if __name__ == "__main__":
    main()
