"""Language-model gateway (feature-flagged).

One OpenAI-style chat-completions call per request. The model is asked for intent JSON (object,
fields, conditions, explanation), never for a finished query; whatever it returns is re-validated
and re-assembled downstream. Any failure surfaces as `GatewayError` so the caller can fall back to
keyword rules.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from functools import lru_cache
from http.client import HTTPException
from pathlib import Path
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from src.config.settings import Settings

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS = {429, 500, 502, 503, 504}


class GatewayError(RuntimeError):
    """Raised when the language model cannot be reached or returns an unusable response."""


@dataclass(frozen=True)
class LLMConfig:
    """Configuration for the OpenAI-style Chat Completions API call."""

    api_key: str
    model: str = "gpt-4o-mini"
    api_base: str = "https://api.openai.com/v1"
    timeout_s: float = 30.0
    max_retries: int = 2
    backoff_s: float = 0.5


@lru_cache(maxsize=1)
def _load_prompt() -> str:
    prompt_path = Path(__file__).resolve().parent / "prompt_soql_v1.md"
    return prompt_path.read_text(encoding="utf-8")


def _chat_completions_url(api_base: str) -> str:
    return api_base.rstrip("/") + "/chat/completions"


def _build_request(user_text: str, config: LLMConfig) -> Request:
    payload = {
        "model": config.model,
        "temperature": 0,
        "max_tokens": 1000,
        "messages": [
            {"role": "system", "content": _load_prompt()},
            {
                "role": "user",
                "content": f'Convert this natural language query to SOQL intent JSON: "{user_text}"',
            },
        ],
    }
    return Request(
        _chat_completions_url(config.api_base),
        method="POST",
        headers={
            "Authorization": f"Bearer {config.api_key}",
            "Content-Type": "application/json",
        },
        data=json.dumps(payload).encode(),
    )


def _post_once(req: Request, config: LLMConfig) -> bytes:
    with urlopen(req, timeout=config.timeout_s) as resp:  # noqa: S310 (explicit, feature-flagged network call)
        return resp.read()


def complete(user_text: str, *, config: LLMConfig) -> str:
    """Send the query to the model and return the raw message content.

    Transport failures (refused, reset or truncated connections and timeouts) and retryable HTTP
    statuses are retried up to `config.max_retries` times with linear backoff; other HTTP errors
    fail immediately. Every failure surfaces as `GatewayError`.
    """

    try:
        req = _build_request(user_text, config)
    except ValueError as exc:
        raise GatewayError(f"Invalid LLM endpoint: {config.api_base}") from exc

    attempts = config.max_retries + 1
    body: bytes | None = None

    for attempt in range(1, attempts + 1):
        try:
            body = _post_once(req, config)
            break
        except HTTPError as exc:
            if exc.code not in _RETRYABLE_STATUS or attempt == attempts:
                raise GatewayError(f"LLM HTTP error: {exc.code}") from exc
            logger.warning("llm http error status=%s attempt=%d", exc.code, attempt)
        except (URLError, OSError, HTTPException) as exc:
            if attempt == attempts:
                raise GatewayError("LLM connection error") from exc
            logger.warning("llm connection error attempt=%d: %r", attempt, exc)
        time.sleep(config.backoff_s * attempt)

    try:
        decoded = json.loads(body or b"")
        content = decoded["choices"][0]["message"]["content"]
    except Exception as exc:  # noqa: BLE001
        raise GatewayError("Unexpected LLM response format") from exc

    if not isinstance(content, str) or not content.strip():
        raise GatewayError("LLM returned empty content")
    return content


def llm_config_from_settings(settings: Settings) -> LLMConfig | None:
    """Build the gateway config, or `None` when the gateway is disabled."""

    if not settings.llm_enabled or not settings.llm_api_key:
        return None
    return LLMConfig(
        api_key=settings.llm_api_key,
        model=settings.llm_model,
        api_base=settings.llm_api_base,
        timeout_s=settings.llm_timeout_s,
        max_retries=settings.llm_max_retries,
    )
