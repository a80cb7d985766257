"""Settings for the optional hosted language-model path."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_API_VERSION = "2024-03-01-preview"
DEFAULT_TIMEOUT_SECONDS = 5.0


@dataclass(frozen=True)
class Settings:
    """Hosted-model connection settings; all three credentials are needed to use it."""

    api_key: Optional[str] = None
    endpoint: Optional[str] = None
    deployment: Optional[str] = None
    api_version: str = DEFAULT_API_VERSION
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def hosted_configured(self) -> bool:
        return bool(self.api_key and self.endpoint and self.deployment)

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "Settings":
        env = os.environ if environ is None else environ

        timeout_raw = env.get("TASK_ENGINE_HOSTED_TIMEOUT")
        timeout = DEFAULT_TIMEOUT_SECONDS
        if timeout_raw not in (None, ""):
            try:
                timeout = float(timeout_raw)
            except ValueError as exc:
                raise ValueError(f"Invalid TASK_ENGINE_HOSTED_TIMEOUT '{timeout_raw}'") from exc
            if timeout <= 0:
                raise ValueError("TASK_ENGINE_HOSTED_TIMEOUT must be positive")

        return cls(
            api_key=env.get("AZURE_OPENAI_API_KEY") or None,
            endpoint=env.get("AZURE_OPENAI_ENDPOINT") or None,
            deployment=env.get("AZURE_OPENAI_DEPLOYMENT_NAME") or None,
            api_version=env.get("AZURE_OPENAI_API_VERSION") or DEFAULT_API_VERSION,
            timeout_seconds=timeout,
        )
