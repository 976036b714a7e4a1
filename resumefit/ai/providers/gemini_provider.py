from __future__ import annotations

import os
from typing import Optional

from .openai_provider import OpenAIEnricher

GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"


class GeminiEnricher(OpenAIEnricher):
    """Gemini through its OpenAI-compatible endpoint."""

    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        timeout_s: float = 20.0,
        max_retries: int = 1,
    ):
        key = (api_key or os.getenv("GEMINI_API_KEY") or "").strip()
        if not key:
            raise RuntimeError("GEMINI_API_KEY is missing")
        super().__init__(
            model=model,
            api_key=key,
            base_url=os.getenv("GEMINI_BASE_URL") or GEMINI_OPENAI_BASE_URL,
            timeout_s=timeout_s,
            max_retries=max_retries,
            json_mode=False,
        )
