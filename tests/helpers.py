"""Shared test doubles."""
import json
import random

import httpx


class SequenceRandom(random.Random):
    """Random source that replays fixed values from random()."""

    def __init__(self, values):
        super().__init__(0)
        self._values = list(values)

    def random(self):
        return self._values.pop(0)


class ConstantRandom(random.Random):
    def __init__(self, value: float):
        super().__init__(0)
        self._value = value

    def random(self):
        return self._value


def chat_completion(content) -> dict:
    """Upstream chat-completion body carrying the given message content."""
    if not isinstance(content, str):
        content = json.dumps(content)
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {"index": 0, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"}
        ],
    }


def completion_handler(content, status_code: int = 200):
    """MockTransport handler answering every request with one completion."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=chat_completion(content))
    return handler


def failing_handler(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)
