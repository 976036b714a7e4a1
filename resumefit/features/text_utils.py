from __future__ import annotations

import math
import re
from typing import Any

from resumefit.schemas import JobAnalysis

_LIST_ITEM_RE = re.compile(r"^[•\-*\d+.]")
_LIST_MARKER_RE = re.compile(r"^[•\-*\d+.\s]+")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")


def ensure_text(value: Any, name: str = "text") -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def ensure_analysis(value: Any) -> JobAnalysis:
    if not isinstance(value, JobAnalysis):
        raise TypeError(f"analysis must be a JobAnalysis, got {type(value).__name__}")
    return value


def contains_any(lowered: str, markers: tuple[str, ...]) -> bool:
    return any(marker in lowered for marker in markers)


def locate_section(
    text: str,
    triggers: tuple[str, ...],
    *,
    window: int = 500,
    stop_triggers: tuple[str, ...] = (),
) -> str:
    """Slice of ``text`` starting at the first trigger found, in trigger order.

    Falls back to the whole text when no trigger is present. When
    ``stop_triggers`` are given the slice ends early at the first of them
    that appears after the trigger.
    """
    lowered = text.lower()
    for trigger in triggers:
        index = lowered.find(trigger)
        if index == -1:
            continue
        end = index + window
        for stop in stop_triggers:
            stop_index = lowered.find(stop, index + len(trigger))
            if stop_index != -1:
                end = min(end, stop_index)
        return text[index:end]
    return text


def extract_list_items(text: str, limit: int = 10) -> list[str]:
    items: list[str] = []
    for line in text.split("\n"):
        stripped = line.strip()
        if not _LIST_ITEM_RE.match(stripped):
            continue
        item = _LIST_MARKER_RE.sub("", stripped)
        if item:
            items.append(item)
    return items[:limit]


def split_sentences(text: str) -> list[str]:
    return _SENTENCE_SPLIT_RE.split(text)


def js_round(value: float) -> int:
    # Half-up, so 12.5 -> 13 rather than Python's banker's rounding.
    return int(math.floor(value + 0.5))


def ratio_score(found: int, total: int) -> float:
    if total <= 0:
        return 100.0
    return found / total * 100
