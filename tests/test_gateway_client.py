import asyncio
import json

import httpx
import pytest

from aidetect.core.exceptions import GatewayBadResponse, GatewayError, GatewayUnavailable
from aidetect.services.gateway_client import GatewayClient
from aidetect.services.gateway_schemas import TextVerdictPayload
from tests.helpers import chat_completion, completion_handler, failing_handler


def call_gateway(handler, config, schema=None):
    async def _call():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            gateway = GatewayClient(client, config)
            if schema is None:
                return await gateway.complete("system prompt", "user prompt")
            return await gateway.request_verdict("system prompt", "user prompt", schema)
    return asyncio.run(_call())


class TestGatewayClient:

    def test_posts_prompt_pair_to_gateway(self, config):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=chat_completion({"ai_probability": 61}))

        assert call_gateway(handler, config) == {"ai_probability": 61}
        assert seen["url"] == config.gateway.url
        assert seen["body"] == {"systemPrompt": "system prompt", "userPrompt": "user prompt"}

    def test_transport_failure(self, config):
        with pytest.raises(GatewayUnavailable):
            call_gateway(failing_handler, config)

    def test_error_status(self, config):
        handler = completion_handler({"ai_probability": 10}, status_code=502)
        with pytest.raises(GatewayBadResponse) as exc_info:
            call_gateway(handler, config)
        assert exc_info.value.status_code == 502

    def test_content_is_not_json(self, config):
        with pytest.raises(GatewayBadResponse):
            call_gateway(completion_handler("definitely AI, trust me"), config)

    def test_content_is_not_an_object(self, config):
        with pytest.raises(GatewayBadResponse):
            call_gateway(completion_handler("[1, 2, 3]"), config)

    def test_body_is_not_json(self, config):
        def handler(request):
            return httpx.Response(200, text="<html>oops</html>")

        with pytest.raises(GatewayBadResponse):
            call_gateway(handler, config)

    def test_missing_content_reads_as_empty_object(self, config):
        def handler(request):
            return httpx.Response(200, json={"choices": []})

        assert call_gateway(handler, config) == {}

    def test_null_message(self, config):
        def handler(request):
            return httpx.Response(200, json={"choices": [{"message": None}]})

        assert call_gateway(handler, config) == {}

    def test_request_verdict_validates_schema(self, config):
        payload = {
            "ai_probability": 70,
            "reasoning": "Formal transitions.",
            "sentences": [{"text": "A sentence.", "classification": "ai", "confidence": 70}],
        }
        verdict = call_gateway(completion_handler(payload), config, TextVerdictPayload)
        assert verdict.ai_probability == 70
        assert verdict.sentences[0].classification == "ai"

    def test_request_verdict_schema_mismatch(self, config):
        handler = completion_handler({"sentences": "not a list"})
        with pytest.raises(GatewayBadResponse):
            call_gateway(handler, config, TextVerdictPayload)

    def test_failures_share_a_base_class(self):
        assert issubclass(GatewayUnavailable, GatewayError)
        assert issubclass(GatewayBadResponse, GatewayError)
