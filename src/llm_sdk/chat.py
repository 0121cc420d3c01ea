"""Chat completions: request, builder, and response types.

Example:
    ```python
    request = (
        ChatCompletionRequestBuilder()
        .messages([system_message("Be brief."), user_message("Hi")])
        .tool_choice(ToolChoice.AUTO)
        .build()
    )
    http_request = request.into_request()
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from llm_sdk.emit import CHAT_COMPLETIONS
from llm_sdk.errors import BuilderError, DecodeError, InvalidFieldError
from llm_sdk.messages import (
    MESSAGE_TYPES,
    AssistantMessage,
    ChatCompletionMessage,
    serialize_message,
)
from llm_sdk.request import ApiRequest, RequestBuilder, as_tuple, put_present
from llm_sdk.tools import Tool, ToolChoice
from llm_sdk.wire import ChatCompleteModel, ChatResponseFormat, FinishReason

if TYPE_CHECKING:
    from collections.abc import Iterable


# =============================================================================
# Responses
# =============================================================================


@dataclass(frozen=True)
class ChatCompletionUsage:
    """Token accounting for one completion request."""

    completion_tokens: int
    prompt_tokens: int
    #: ``prompt_tokens + completion_tokens``.
    total_tokens: int


@dataclass(frozen=True)
class ChatCompletionChoice:
    finish_reason: FinishReason
    index: int
    message: AssistantMessage


@dataclass(frozen=True)
class ChatCompletionResponse:
    """A chat completion as returned by the API."""

    id: str
    #: More than one when ``n > 1``; may be empty.
    choices: tuple[ChatCompletionChoice, ...]
    #: Unix timestamp in seconds.
    created: int
    model: str
    #: Backend configuration fingerprint; pair with ``seed`` to track determinism.
    system_fingerprint: str
    #: Always ``"chat.completion"``.
    object: str
    usage: ChatCompletionUsage


# =============================================================================
# Request
# =============================================================================


@dataclass(frozen=True)
class ChatResponseFormatObject:
    """``{"type": ...}`` wrapper for the ``response_format`` request key."""

    type: ChatResponseFormat = field(default_factory=ChatResponseFormat.default)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.to_wire()}


@dataclass(frozen=True)
class ChatCompletionRequest(ApiRequest):
    """A request to the chat completions endpoint.

    Build with :class:`ChatCompletionRequestBuilder` or :meth:`new`.
    """

    ENDPOINT = CHAT_COMPLETIONS
    RESPONSE_TYPE = ChatCompletionResponse

    messages: tuple[ChatCompletionMessage, ...]
    model: ChatCompleteModel | None = None
    #: -2.0..2.0; positive values discourage verbatim repetition.
    frequency_penalty: float | None = None
    max_tokens: int | None = None
    n: int | None = None
    #: -2.0..2.0; positive values encourage new topics.
    presence_penalty: float | None = None
    response_format: ChatResponseFormatObject | None = None
    seed: int | None = None
    # Single stop sequence only.
    stop: str | None = None
    stream: bool | None = None
    temperature: float | None = None
    top_p: float | None = None
    tools: tuple[Tool, ...] = ()
    tool_choice: ToolChoice | None = None
    user: str | None = None

    @classmethod
    def new(cls, messages: Iterable[ChatCompletionMessage]) -> ChatCompletionRequest:
        """Request with only ``messages`` set; everything else omitted."""
        return ChatCompletionRequestBuilder().messages(messages).build()

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "messages": [serialize_message(m) for m in self.messages],
        }
        put_present(out, "model", self.model)
        put_present(out, "frequency_penalty", self.frequency_penalty)
        put_present(out, "max_tokens", self.max_tokens)
        put_present(out, "n", self.n)
        put_present(out, "presence_penalty", self.presence_penalty)
        if self.response_format is not None:
            out["response_format"] = self.response_format.to_dict()
        put_present(out, "seed", self.seed)
        put_present(out, "stop", self.stop)
        put_present(out, "stream", self.stream)
        put_present(out, "temperature", self.temperature)
        put_present(out, "top_p", self.top_p)
        if self.tools:
            out["tools"] = [tool.to_dict() for tool in self.tools]
        if self.tool_choice is not None:
            out["tool_choice"] = self.tool_choice.to_wire()
        put_present(out, "user", self.user)
        return out


class ChatCompletionRequestBuilder(RequestBuilder[ChatCompletionRequest]):
    """Fluent builder; ``messages`` is required."""

    request_type = ChatCompletionRequest
    required = ("messages",)

    def messages(
        self, messages: Iterable[ChatCompletionMessage]
    ) -> ChatCompletionRequestBuilder:
        self._set(
            "messages", as_tuple(messages, field="messages", expected=MESSAGE_TYPES)
        )
        return self

    def model(self, model: ChatCompleteModel | str) -> ChatCompletionRequestBuilder:
        self._set("model", self._decode(ChatCompleteModel, model, field="model"))
        return self

    def frequency_penalty(self, value: float) -> ChatCompletionRequestBuilder:
        self._set("frequency_penalty", value)
        return self

    def max_tokens(self, value: int) -> ChatCompletionRequestBuilder:
        self._set("max_tokens", value)
        return self

    def n(self, value: int) -> ChatCompletionRequestBuilder:
        self._set("n", value)
        return self

    def presence_penalty(self, value: float) -> ChatCompletionRequestBuilder:
        self._set("presence_penalty", value)
        return self

    def response_format(
        self, value: ChatResponseFormatObject | ChatResponseFormat | str
    ) -> ChatCompletionRequestBuilder:
        if not isinstance(value, ChatResponseFormatObject):
            value = ChatResponseFormatObject(
                self._decode(
                    ChatResponseFormat, value, field="response_format.type"
                )
            )
        self._set("response_format", value)
        return self

    def seed(self, value: int) -> ChatCompletionRequestBuilder:
        if isinstance(value, bool) or not isinstance(value, int):
            raise BuilderError(f"seed must be an integer, got {type(value).__name__}")
        self._set("seed", value)
        return self

    def stop(self, value: str) -> ChatCompletionRequestBuilder:
        if not isinstance(value, str):
            raise BuilderError(
                f"stop must be a single string, got {type(value).__name__}",
                hint="Only one stop sequence is supported.",
            )
        self._set("stop", value)
        return self

    def stream(self, value: bool) -> ChatCompletionRequestBuilder:
        self._set("stream", value)
        return self

    def temperature(self, value: float) -> ChatCompletionRequestBuilder:
        self._set("temperature", value)
        return self

    def top_p(self, value: float) -> ChatCompletionRequestBuilder:
        self._set("top_p", value)
        return self

    def tools(self, tools: Iterable[Tool]) -> ChatCompletionRequestBuilder:
        self._set("tools", as_tuple(tools, field="tools", expected=(Tool,)))
        return self

    def tool_choice(self, value: ToolChoice) -> ChatCompletionRequestBuilder:
        if not isinstance(value, ToolChoice):
            try:
                value = ToolChoice.from_wire(value)
            except DecodeError as e:
                raise InvalidFieldError(
                    "tool_choice",
                    value,
                    hint="Use ToolChoice.NONE, .AUTO or ToolChoice.function(name).",
                ) from e
        self._set("tool_choice", value)
        return self

    def user(self, value: str) -> ChatCompletionRequestBuilder:
        self._set("user", value)
        return self
