"""OpenAI-style chat completions client used by the query translator.

The LLM only ever sees the user's query and a fixed instruction; no hotel data is sent. Its answer is
decoded into a JSON object and handed back untrusted: correction and validation happen elsewhere.
"""

from __future__ import annotations

import http.client
import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Any
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

if TYPE_CHECKING:
    from hotel_finder.config.settings import Settings


class LLMClientError(RuntimeError):
    """Raised when the LLM call fails or does not return a JSON object."""


class LLMTimeoutError(LLMClientError):
    """Raised when the LLM call exceeds its timeout (transient, safe to retry)."""


@dataclass(frozen=True)
class LLMConfig:
    """Configuration for the OpenAI-style Chat Completions API call."""

    api_key: str
    model: str = "gpt-3.5-turbo"
    api_base: str = "https://api.openai.com/v1"
    timeout_s: float = 30.0
    max_attempts: int = 2


@lru_cache(maxsize=1)
def load_prompt() -> str:
    prompt_path = Path(__file__).resolve().parent / "prompt_filter_v1.md"
    return prompt_path.read_text(encoding="utf-8").strip()


def _strip_code_fences(text: str) -> str:
    value = (text or "").strip()
    if value.startswith("```"):
        value = value.strip("`")
        # After stripping backticks, try to remove leading "json" marker.
        value = value.removeprefix("json").strip()
    return value


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are accepted by `json` but are not valid JSON.
    raise ValueError(f"invalid JSON constant: {name}")


def _chat_completions_url(api_base: str) -> str:
    return api_base.rstrip("/") + "/chat/completions"


def request_filter_json(user_text: str, *, config: LLMConfig) -> dict[str, Any]:
    """Ask the LLM for a filter and return the decoded JSON object (unvalidated).

    Raises:
        LLMTimeoutError: If the call does not finish within `config.timeout_s`.
        LLMClientError: On HTTP/connection errors or a non-JSON / non-object answer.
    """

    payload = {
        "model": config.model,
        "temperature": 0,
        "messages": [
            {"role": "system", "content": load_prompt()},
            {"role": "user", "content": user_text},
        ],
    }

    req = Request(
        _chat_completions_url(config.api_base),
        method="POST",
        headers={
            "Authorization": f"Bearer {config.api_key}",
            "Content-Type": "application/json",
        },
        data=json.dumps(payload).encode(),
    )

    try:
        with urlopen(req, timeout=config.timeout_s) as resp:  # noqa: S310 (fixed API endpoint)
            body = resp.read()
    except HTTPError as exc:
        raise LLMClientError(f"LLM HTTP error: {exc.code}") from exc
    except TimeoutError as exc:
        raise LLMTimeoutError(f"LLM call timed out after {config.timeout_s:g}s") from exc
    except URLError as exc:
        if isinstance(exc.reason, TimeoutError):
            raise LLMTimeoutError(f"LLM call timed out after {config.timeout_s:g}s") from exc
        raise LLMClientError("LLM connection error") from exc
    except (http.client.HTTPException, OSError) as exc:
        # Raised by getresponse/read without being wrapped in URLError.
        raise LLMClientError("LLM connection error") from exc

    try:
        decoded = json.loads(body)
        content = decoded["choices"][0]["message"]["content"]
    except Exception as exc:  # noqa: BLE001
        raise LLMClientError("Unexpected LLM response format") from exc

    try:
        obj = json.loads(_strip_code_fences(content), parse_constant=_reject_constant)
    except (TypeError, ValueError) as exc:
        raise LLMClientError("LLM did not return valid JSON") from exc

    if not isinstance(obj, dict):
        raise LLMClientError("LLM did not return a JSON object")
    return obj


def llm_config_from_settings(settings: Settings) -> LLMConfig | None:
    """Build the LLM call configuration, or `None` when no credential is configured."""

    if not settings.llm_api_key:
        return None
    return LLMConfig(
        api_key=settings.llm_api_key,
        model=settings.llm_model,
        api_base=settings.llm_api_base,
        timeout_s=settings.llm_timeout_s,
        max_attempts=settings.llm_max_attempts,
    )
