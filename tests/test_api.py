import asyncio
import base64
import json

import httpx
from starlette.requests import Request

from aidetect.api.exceptions.exception_handlers import value_error_exception_handler
from aidetect.core.exceptions import EmptyInputError
from aidetect.utils.samples import SAMPLES
from aidetect.utils.sentence_tokenizer import tokenize
from tests.helpers import chat_completion, completion_handler, failing_handler

UPSTREAM_URL = "https://api.groq.com/openai/v1/chat/completions"


def png_data_url(size: int = 64) -> str:
    return "data:image/png;base64," + base64.b64encode(b"\x89PNG" + b"\x00" * size).decode()


class TestHealth:

    def test_liveness(self, make_client):
        with make_client(failing_handler) as client:
            response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_request_id_is_echoed(self, make_client):
        with make_client(failing_handler) as client:
            response = client.get("/health/ready", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"

    def test_request_id_is_generated(self, make_client):
        with make_client(failing_handler) as client:
            response = client.get("/health")
        assert response.headers["X-Request-ID"]


class TestTextAnalysisApi:

    def test_fallback_verdict(self, make_client):
        with make_client(failing_handler) as client:
            response = client.post("/api/v1/text/analyze", json={"text": SAMPLES["ai"]})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["source"] == "fallback"
        assert data["ai_percent"] + data["human_percent"] == 100
        assert data["label"] == "Likely AI Generated"
        assert len(data["sentences"]) == len(tokenize(SAMPLES["ai"]))
        breakdown = data["breakdown"]
        assert breakdown["ai_count"] + breakdown["human_count"] + breakdown["mixed_count"] == len(data["sentences"])
        for sentence in data["sentences"]:
            assert sentence["ai_probability"] + sentence["human_probability"] == 1.0
            assert sentence["classification"] in ("ai", "human", "mixed")

    def test_gateway_verdict(self, make_client):
        payload = {
            "ai_probability": 15,
            "reasoning": "Personal anecdote and contractions.",
            "sentences": [
                {"text": "I remember the first time.", "classification": "human", "confidence": 85},
                {"text": "It was weird.", "classification": "human", "confidence": 75},
            ],
        }
        with make_client(completion_handler(payload)) as client:
            response = client.post("/api/v1/text/analyze", json={"text": SAMPLES["human"]})

        data = response.json()["data"]
        assert data["source"] == "gateway"
        assert data["ai_percent"] == 15
        assert data["label"] == "Likely Human Written"
        assert data["reasoning"] == payload["reasoning"]
        assert data["breakdown"]["human_count"] == 2
        assert [s["confidence"] for s in data["sentences"]] == [85, 75]

    def test_text_too_short(self, make_client):
        with make_client(failing_handler) as client:
            response = client.post("/api/v1/text/analyze", json={"text": "   Too short.   "})

        assert response.status_code == 422
        assert response.json() == {"status": "error", "code": 422, "message": "Invalid request data"}

    def test_text_without_sentences(self, make_client):
        with make_client(failing_handler) as client:
            response = client.post("/api/v1/text/analyze", json={"text": "?!" * 15})
        assert response.status_code == 422

    def test_stats(self, make_client):
        with make_client(failing_handler) as client:
            response = client.post("/api/v1/text/stats", json={"text": "Hello world. How are you? Fine!"})

        assert response.status_code == 200
        assert response.json()["data"] == {"word_count": 6, "sentence_count": 3, "analyzable": True}

    def test_sample(self, make_client):
        with make_client(failing_handler) as client:
            response = client.get("/api/v1/text/samples/mixed")
        assert response.json()["data"] == {"kind": "mixed", "text": SAMPLES["mixed"]}

    def test_unknown_sample(self, make_client):
        with make_client(failing_handler) as client:
            response = client.get("/api/v1/text/samples/poetry")

        assert response.status_code == 404
        assert response.json() == {"status": "error", "code": 404, "message": "Unknown sample"}


class TestImageAnalysisApi:

    def test_url_with_gateway_down(self, make_client):
        with make_client(failing_handler) as client:
            response = client.post(
                "/api/v1/image/analyze",
                json={"image_url": "https://example.com/cat.jpg"},
            )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["source"] == "fallback"
        assert 52 <= data["authenticity_score"] <= 93
        assert len(data["attributes"]) == 5

    def test_data_url_with_gateway(self, make_client):
        payload = {"authenticity_score": 30, "verdict": "Low Authenticity", "attributes": []}
        with make_client(completion_handler(payload)) as client:
            response = client.post(
                "/api/v1/image/analyze",
                json={"image_data": png_data_url(), "name": "upload.png"},
            )

        data = response.json()["data"]
        assert data["source"] == "gateway"
        assert data["authenticity_score"] == 30
        assert data["label"] == "Low Authenticity"

    def test_requires_an_image(self, make_client):
        with make_client(failing_handler) as client:
            response = client.post("/api/v1/image/analyze", json={"name": "nothing"})
        assert response.status_code == 422

    def test_rejects_non_http_url(self, make_client):
        with make_client(failing_handler) as client:
            response = client.post("/api/v1/image/analyze", json={"image_url": "ftp://example.com/a.png"})
        assert response.status_code == 422

    def test_rejects_non_image_data(self, make_client):
        with make_client(failing_handler) as client:
            response = client.post(
                "/api/v1/image/analyze",
                json={"image_data": "data:text/plain;base64,aGVsbG8="},
            )
        assert response.status_code == 422


class TestProxyApi:

    def test_relays_upstream_response_unwrapped(self, make_client, proxy_config):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(200, json=chat_completion({"ai_probability": 44}))

        with make_client(handler, app_config=proxy_config) as client:
            response = client.post("/api/groq", json={"systemPrompt": "sys", "userPrompt": "usr"})

        assert response.status_code == 200
        assert response.json() == chat_completion({"ai_probability": 44})
        assert seen == {"url": UPSTREAM_URL, "auth": "Bearer test-key"}

    def test_missing_key_is_a_proxy_failure(self, make_client):
        with make_client(completion_handler({})) as client:
            response = client.post("/api/groq", json={"systemPrompt": "sys", "userPrompt": "usr"})

        assert response.status_code == 500
        assert response.json() == {"error": "proxy failure"}

    def test_upstream_error_status_is_relayed(self, make_client, proxy_config):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"error": {"message": "invalid api key"}})

        with make_client(handler, app_config=proxy_config) as client:
            response = client.post("/api/groq", json={"systemPrompt": "sys", "userPrompt": "usr"})

        assert response.status_code == 401
        assert response.json() == {"error": {"message": "invalid api key"}}


class TestExceptionHandlers:

    def test_empty_input_is_a_bad_request(self):
        scope = {"type": "http", "method": "POST", "path": "/api/v1/text/analyze", "headers": [], "query_string": b""}
        request = Request(scope)
        response = asyncio.run(value_error_exception_handler(request, EmptyInputError("no sentences to score")))

        assert response.status_code == 400
        assert json.loads(response.body) == {"status": "error", "code": 400, "message": "Invalid request"}

    def test_unknown_route_keeps_its_status(self, make_client):
        with make_client(failing_handler) as client:
            response = client.get("/api/v1/nowhere")
        assert response.status_code == 404
        assert response.json() == {"status": "error", "code": 404, "message": "Not Found"}
