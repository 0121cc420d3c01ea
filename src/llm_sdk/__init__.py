"""llm-sdk: typed request/response schemas for chat and image generation APIs.

Public API:
    - ChatCompletionRequestBuilder / CreateImageRequestBuilder: validating builders
    - Message constructors and ToolChoice: polymorphic wire shapes
    - into_request(): bind a request to its HTTP endpoint (httpx.Request)
    - parse_response(): decode a raw body into a typed response
"""

from __future__ import annotations

import logging

from llm_sdk.chat import (
    ChatCompletionChoice,
    ChatCompletionRequest,
    ChatCompletionRequestBuilder,
    ChatCompletionResponse,
    ChatCompletionUsage,
    ChatResponseFormatObject,
)
from llm_sdk.config import Config
from llm_sdk.emit import CHAT_COMPLETIONS, IMAGE_GENERATIONS, Endpoint, into_request
from llm_sdk.errors import (
    BuilderError,
    ConfigurationError,
    DecodeError,
    EncodingError,
    InvalidFieldError,
    LlmSdkError,
    MalformedResponseError,
    MissingFieldError,
    UnknownVariantError,
)
from llm_sdk.images import (
    CreateImageRequest,
    CreateImageRequestBuilder,
    CreateImageResponse,
    ImageObject,
)
from llm_sdk.messages import (
    AssistantMessage,
    ChatCompletionMessage,
    SystemMessage,
    ToolMessage,
    UserMessage,
    assistant_message,
    system_message,
    tool_message,
    user_message,
)
from llm_sdk.parse import (
    parse_chat_completion,
    parse_create_image,
    parse_for,
    parse_response,
)
from llm_sdk.tools import FunctionCall, FunctionInfo, Tool, ToolCall, ToolChoice
from llm_sdk.wire import (
    ChatCompleteModel,
    ChatResponseFormat,
    FinishReason,
    ImageModel,
    ImageQuality,
    ImageResponseFormat,
    ImageSize,
    ImageStyle,
    Role,
    ToolType,
    WireEnum,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("llm-sdk")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("llm_sdk").addHandler(logging.NullHandler())

__all__ = [  # noqa: RUF022
    # Requests
    "ChatCompletionRequest",
    "ChatCompletionRequestBuilder",
    "ChatResponseFormatObject",
    "CreateImageRequest",
    "CreateImageRequestBuilder",
    # Messages and tools
    "ChatCompletionMessage",
    "SystemMessage",
    "UserMessage",
    "AssistantMessage",
    "ToolMessage",
    "system_message",
    "user_message",
    "assistant_message",
    "tool_message",
    "FunctionInfo",
    "Tool",
    "FunctionCall",
    "ToolCall",
    "ToolChoice",
    # Wire enums
    "WireEnum",
    "ChatCompleteModel",
    "ChatResponseFormat",
    "FinishReason",
    "Role",
    "ToolType",
    "ImageModel",
    "ImageQuality",
    "ImageResponseFormat",
    "ImageSize",
    "ImageStyle",
    # Emission
    "Config",
    "Endpoint",
    "CHAT_COMPLETIONS",
    "IMAGE_GENERATIONS",
    "into_request",
    # Responses
    "ChatCompletionResponse",
    "ChatCompletionChoice",
    "ChatCompletionUsage",
    "CreateImageResponse",
    "ImageObject",
    "parse_response",
    "parse_chat_completion",
    "parse_create_image",
    "parse_for",
    # Errors
    "LlmSdkError",
    "ConfigurationError",
    "BuilderError",
    "MissingFieldError",
    "InvalidFieldError",
    "EncodingError",
    "DecodeError",
    "MalformedResponseError",
    "UnknownVariantError",
    "__version__",
]
