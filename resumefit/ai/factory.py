import logging
import os

from resumefit.ai.config import load_ai_config, looks_like_placeholder
from resumefit.ai.types import JobAnalysisEnricher

from resumefit.ai.providers.gemini_provider import GeminiEnricher
from resumefit.ai.providers.openai_provider import OpenAIEnricher

logger = logging.getLogger(__name__)

_KEY_ENV = {
    "openai": "OPENAI_API_KEY",
    "gemini": "GEMINI_API_KEY",
}


def get_enricher() -> JobAnalysisEnricher | None:
    """Configured enrichment provider, or None when enrichment is off or unconfigured."""
    cfg = load_ai_config()
    if not cfg.enrichment_enabled:
        return None

    key_env = _KEY_ENV.get(cfg.provider)
    if key_env is None:
        raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")

    api_key = (os.getenv(key_env) or "").strip()
    if not api_key or looks_like_placeholder(api_key):
        logger.debug("job_analysis_enrichment_unconfigured provider=%s", cfg.provider)
        return None

    if cfg.provider == "gemini":
        return GeminiEnricher(model=cfg.model, api_key=api_key, timeout_s=cfg.timeout_s, max_retries=cfg.max_retries)

    return OpenAIEnricher(model=cfg.model, api_key=api_key, timeout_s=cfg.timeout_s, max_retries=cfg.max_retries)
