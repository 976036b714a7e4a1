import os
from dataclasses import dataclass


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    timeout_s: float
    max_retries: int
    enrichment_enabled: bool


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


def load_ai_config() -> AIConfig:
    provider = os.getenv("AI_PROVIDER", "openai").strip().lower()
    default_model = "gemini-1.5-flash" if provider == "gemini" else "gpt-4o-mini"
    model = (os.getenv("AI_MODEL") or default_model).strip()
    return AIConfig(
        provider=provider,
        model=model,
        timeout_s=float(os.getenv("AI_TIMEOUT_S", "20")),
        max_retries=int(os.getenv("AI_MAX_RETRIES", "1")),
        enrichment_enabled=_env_bool("JOB_ANALYSIS_ENRICHMENT_ENABLED", True),
    )
