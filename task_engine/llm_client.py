"""Minimal client for a hosted chat-completion deployment."""

from __future__ import annotations

import json
import logging
import time
from typing import Optional

import httpx

from task_engine.config import Settings

logger = logging.getLogger(__name__)

_clock = time.monotonic


class HostedModelError(Exception):
    """The hosted model failed, timed out, or returned unusable output."""


class HostedModelClient:
    """Send a system + user prompt and get back the parsed JSON object.

    ``settings.timeout_seconds`` bounds each connect/read/write step and
    also the whole call: the body is streamed and abandoned once the
    overall deadline has passed.
    """

    def __init__(self, settings: Settings, client: Optional[httpx.Client] = None):
        if not settings.hosted_configured:
            raise ValueError("Hosted model settings are incomplete")
        self.settings = settings
        self._client = client

    @property
    def url(self) -> str:
        base = self.settings.endpoint.rstrip("/")
        return f"{base}/openai/deployments/{self.settings.deployment}/chat/completions"

    def _post(self, client: httpx.Client, payload: dict) -> bytes:
        deadline = _clock() + self.settings.timeout_seconds
        with client.stream(
            "POST",
            self.url,
            params={"api-version": self.settings.api_version},
            headers={"api-key": self.settings.api_key, "Content-Type": "application/json"},
            json=payload,
            timeout=self.settings.timeout_seconds,
        ) as response:
            response.raise_for_status()
            chunks = []
            for chunk in response.iter_bytes():
                if _clock() > deadline:
                    raise HostedModelError(
                        f"Hosted model exceeded {self.settings.timeout_seconds:g}s overall deadline"
                    )
                chunks.append(chunk)
        return b"".join(chunks)

    def complete_json(self, system: str, user: str, temperature: float = 0.1, max_tokens: int = 512) -> dict:
        payload = {
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            "temperature": temperature,
            "max_tokens": max_tokens,
            "response_format": {"type": "json_object"},
        }

        try:
            if self._client is not None:
                body = self._post(self._client, payload)
            else:
                with httpx.Client() as client:
                    body = self._post(client, payload)
            data = json.loads(body)
        except httpx.HTTPStatusError as exc:
            raise HostedModelError(f"Hosted model HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise HostedModelError(f"Hosted model request failed: {exc}") from exc
        except ValueError as exc:
            raise HostedModelError("Hosted model returned a non-JSON envelope") from exc

        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
            raise HostedModelError("Hosted model returned no choices")
        message = choices[0].get("message")
        if not isinstance(message, dict):
            raise HostedModelError("Hosted model choice has no message object")
        content = message.get("content")
        if not isinstance(content, str):
            raise HostedModelError("Hosted model content is not a string")
        if not content.strip():
            raise HostedModelError("Hosted model returned empty content")

        try:
            result = json.loads(content)
        except ValueError as exc:
            raise HostedModelError("Hosted model content is not valid JSON") from exc
        if not isinstance(result, dict):
            raise HostedModelError("Hosted model content is not a JSON object")

        logger.debug("Hosted model result: %s", str(result)[:500])
        return result
