"""Shared test helpers for building fake chat completions traffic."""
import json

import httpx

TEST_API_URL = "https://api.test/v1/chat/completions"


def completion_body(content: str) -> dict:
    """Build a chat completions response body with a single choice."""
    return {
        "id": "cmpl-test",
        "object": "chat.completion",
        "model": "open-mistral-nemo",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 5, "completion_tokens": 2, "total_tokens": 7},
    }


class RecordingHandler:
    """httpx.MockTransport handler that replays canned responses and records requests.

    Responses are served in order; the last one repeats.
    """

    def __init__(self, *responses: httpx.Response):
        self._responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if len(self._responses) > 1:
            return self._responses.pop(0)
        return self._responses[0]

    @property
    def bodies(self) -> list[dict]:
        return [json.loads(request.content) for request in self.requests]
