"""Real API integration tests.

These tests send real requests and are intentionally compact:
- ENABLE_API_TESTS=1 is required to run any API tests
- OPENAI_API_KEY is required; OPENAI_BASE_URL is honored when set

Each test emits one request, sends it with httpx, and parses the body.
"""

from __future__ import annotations

import httpx
import pytest

from llm_sdk import (
    ChatCompletionRequest,
    ChatCompletionResponse,
    Config,
    CreateImageRequest,
    CreateImageResponse,
    FinishReason,
    Role,
    system_message,
    user_message,
)

pytestmark = pytest.mark.api

_TIMEOUT = httpx.Timeout(120.0, connect=10.0)


@pytest.fixture
def client():
    with httpx.Client(timeout=_TIMEOUT) as c:
        yield c


def test_simple_chat_completion(openai_api_key: str, client: httpx.Client) -> None:
    request = ChatCompletionRequest.new(
        [
            system_message("I can answer any question you ask me."),
            user_message("What is human life expectancy in the world?", "user1"),
        ]
    )

    response = client.send(request.into_request(config=Config(api_key=openai_api_key)))
    assert response.status_code == 200, response.text

    parsed = request.parse_response(response)
    assert isinstance(parsed, ChatCompletionResponse)
    assert len(parsed.choices) == 1
    choice = parsed.choices[0]
    assert choice.message.ROLE is Role.ASSISTANT
    assert choice.message.content
    assert isinstance(choice.finish_reason, FinishReason)
    assert parsed.usage.total_tokens == (
        parsed.usage.prompt_tokens + parsed.usage.completion_tokens
    )


def test_create_image(openai_api_key: str, client: httpx.Client) -> None:
    request = CreateImageRequest.new("A cheerful caterpillar on a leaf")

    response = client.send(request.into_request(config=Config(api_key=openai_api_key)))
    assert response.status_code == 200, response.text

    parsed = request.parse_response(response)
    assert isinstance(parsed, CreateImageResponse)
    assert len(parsed.data) == 1
    assert parsed.data[0].url is not None
    assert parsed.data[0].revised_prompt
