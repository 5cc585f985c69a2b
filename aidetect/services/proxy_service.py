"""Forwards prompt pairs to the upstream chat completions API with the server-held key."""
from dataclasses import dataclass
from typing import Any

import httpx

from aidetect.core.config import Config
from aidetect.core.logging import get_logger

logger = get_logger(__name__)


class ProxyFailure(Exception):
    """The upstream call could not be made or relayed."""


@dataclass
class ProxyResponse:
    status_code: int
    body: Any


class ProxyService:
    """Thin pass-through; the only component that sees the API key."""

    def __init__(self, client: httpx.AsyncClient, config: Config) -> None:
        self._client = client
        self._groq = config.groq

    def _build_body(self, system_prompt: str, user_prompt: str) -> dict:
        return {
            "model": self._groq.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": self._groq.temperature,
            "max_tokens": self._groq.max_tokens,
            "response_format": {"type": "json_object"},
        }

    async def forward(self, system_prompt: str, user_prompt: str) -> ProxyResponse:
        """Relay upstream JSON; 200 on success, the upstream status otherwise."""
        if not self._groq.api_key:
            logger.error("proxy_api_key_missing")
            raise ProxyFailure("Upstream API key is not configured")

        try:
            response = await self._client.post(
                self._groq.completions_url,
                json=self._build_body(system_prompt, user_prompt),
                headers={"Authorization": f"Bearer {self._groq.api_key}"},
            )
            body = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("proxy_upstream_failed", error=str(e), error_type=type(e).__name__)
            raise ProxyFailure(str(e)) from e

        status_code = 200 if response.is_success else response.status_code
        if status_code != 200:
            logger.warning("proxy_upstream_error_status", status_code=status_code)
        return ProxyResponse(status_code=status_code, body=body)
