from __future__ import annotations

import json
import logging
import re
from typing import Any

from pydantic import TypeAdapter, ValidationError

from resumefit.schemas import MAX_KEYWORDS, JobAnalysis, WeightedKeyword

logger = logging.getLogger(__name__)

_FENCE_OPEN_RE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_FENCE_CLOSE_RE = re.compile(r"\s*```$")
_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")
_KEYWORDS_ADAPTER = TypeAdapter(list[WeightedKeyword])
_MISSING = object()


def parse_enrichment_payload(raw: Any) -> dict[str, Any] | None:
    """Turn an enrichment response into a JSON object, or None if it is not one."""
    if isinstance(raw, dict):
        return raw
    if not isinstance(raw, str):
        return None

    text = raw.strip()
    if text.startswith("```"):
        text = _FENCE_CLOSE_RE.sub("", _FENCE_OPEN_RE.sub("", text))

    match = _JSON_OBJECT_RE.search(text)
    if not match:
        return None
    try:
        parsed = json.loads(match.group(0))
    except (ValueError, RecursionError):
        return None
    return parsed if isinstance(parsed, dict) else None


def _pick(payload: dict[str, Any], name: str, alias: str | None) -> Any:
    for key in (alias, name):
        if key and key in payload:
            return payload[key]
    return _MISSING


def _normalize_keywords(value: Any) -> list[dict[str, Any]]:
    keywords = _KEYWORDS_ADAPTER.validate_python(value)
    keywords = [item.model_copy(update={"keyword": item.keyword.strip().lower()}) for item in keywords]
    keywords.sort(key=lambda item: item.weight, reverse=True)
    return [item.model_dump() for item in keywords[:MAX_KEYWORDS]]


def merge_enrichment(payload: dict[str, Any], baseline: JobAnalysis) -> JobAnalysis:
    """Overlay enrichment fields on the deterministic analysis.

    A field the enrichment omits, leaves blank, or gets wrong keeps its
    deterministic value.
    """
    merged = baseline.model_dump()
    rejected: list[str] = []

    for name, field in JobAnalysis.model_fields.items():
        value = _pick(payload, name, field.alias)
        if value is _MISSING or value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        try:
            if name == "keywords":
                value = _normalize_keywords(value)
            JobAnalysis.model_validate({**merged, name: value})
        except ValidationError:
            rejected.append(name)
            continue
        merged[name] = value

    if rejected:
        logger.info("job_analysis_enrichment_fields_rejected fields=%s", ",".join(rejected))
    return JobAnalysis.model_validate(merged)
