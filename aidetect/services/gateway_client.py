"""Client for the remote classifier, reached through the credential-holding proxy."""
import json
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from aidetect.core.config import Config
from aidetect.core.exceptions import GatewayBadResponse, GatewayUnavailable
from aidetect.core.logging import get_logger

logger = get_logger(__name__)

PayloadT = TypeVar("PayloadT", bound=BaseModel)


class GatewayClient:
    """Sends one system+user prompt pair per call. No retries."""

    def __init__(self, client: httpx.AsyncClient, config: Config) -> None:
        self._client = client
        self._url = config.gateway.url

    async def complete(self, system_prompt: str, user_prompt: str) -> dict:
        """Return the JSON object the model put in its message content.

        Raises GatewayUnavailable on transport errors and GatewayBadResponse
        on a non-success status or content that is not a JSON object.
        """
        try:
            response = await self._client.post(
                self._url,
                json={"systemPrompt": system_prompt, "userPrompt": user_prompt},
            )
        except httpx.HTTPError as e:
            logger.warning("gateway_request_failed", url=self._url, error=str(e))
            raise GatewayUnavailable(str(e)) from e

        if not response.is_success:
            logger.warning("gateway_error_status", url=self._url, status_code=response.status_code)
            raise GatewayBadResponse(
                f"Gateway returned status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
            message = (data.get("choices") or [{}])[0].get("message") or {}
            content = message.get("content") or "{}"
            payload = json.loads(content)
        except (ValueError, AttributeError, IndexError, TypeError) as e:
            logger.warning("gateway_unparsable_response", url=self._url, error=str(e))
            raise GatewayBadResponse(f"Unparsable gateway response: {e}") from e

        if not isinstance(payload, dict):
            raise GatewayBadResponse("Gateway content is not a JSON object")

        return payload

    async def request_verdict(
        self,
        system_prompt: str,
        user_prompt: str,
        schema: type[PayloadT],
    ) -> PayloadT:
        """Call the gateway and validate its content against a verdict schema."""
        payload = await self.complete(system_prompt, user_prompt)
        try:
            return schema.model_validate(payload)
        except ValidationError as e:
            logger.warning(
                "gateway_payload_invalid",
                schema=schema.__name__,
                error_count=e.error_count(),
            )
            raise GatewayBadResponse(f"Gateway payload does not match {schema.__name__}") from e
