from __future__ import annotations

import logging
import os
import time
from typing import Optional

from openai import OpenAI

from resumefit.ai.prompts import SYSTEM_PROMPT, build_job_analysis_prompt
from resumefit.core.config.scoring import get_scoring_value

logger = logging.getLogger(__name__)


class OpenAIEnricher:
    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 20.0,
        max_retries: int = 1,
        temperature: float = 0.2,
        max_output_tokens: int = 1800,
        json_mode: bool = True,
    ):
        self._model = model
        self._temperature = temperature
        self._max_output_tokens = max_output_tokens
        self._json_mode = json_mode
        key = (api_key or os.getenv("OPENAI_API_KEY") or "").strip()
        if not key:
            raise RuntimeError("OPENAI_API_KEY is missing")

        self._client = OpenAI(
            api_key=key,
            base_url=(base_url or os.getenv("OPENAI_BASE_URL") or None),
            timeout=timeout_s,
            max_retries=max_retries,
        )

    def enrich(self, job_description: str) -> str | None:
        max_chars = int(get_scoring_value("enrichment.max_prompt_chars", 14000))
        create_kwargs = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_job_analysis_prompt(job_description, max_chars=max_chars)},
            ],
            "temperature": self._temperature,
            "max_tokens": self._max_output_tokens,
        }
        if self._json_mode:
            create_kwargs["response_format"] = {"type": "json_object"}

        started = time.perf_counter()
        try:
            response = self._client.chat.completions.create(**create_kwargs)
        except Exception as exc:  # noqa: BLE001 - caller falls back to the deterministic analysis
            logger.warning("job_analysis_llm_failed model=%s prompt_len=%s: %s", self._model, len(job_description), exc)
            return None

        content = response.choices[0].message.content if response.choices else ""
        logger.info(
            "job_analysis_llm_done model=%s latency_ms=%s empty=%s",
            self._model,
            int((time.perf_counter() - started) * 1000),
            not content,
        )
        return content or None
