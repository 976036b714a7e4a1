from typing import Any, Protocol


class JobAnalysisEnricher(Protocol):
    def enrich(self, job_description: str) -> str | dict[str, Any] | None:
        """Return a JobAnalysis-shaped JSON object (raw text or parsed), or None on failure."""
