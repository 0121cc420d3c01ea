"""Wire enum codec: closed domain value sets and their external string tokens.

Each family is a ``str`` enum whose member *value* is the exact token the API
sends or expects. Member names are internal and free to differ from the token
(``ImageQuality.STANDARD`` travels as ``"default"``).

Example:
    ```python
    ImageQuality.HD.to_wire()                     # "hd"
    FinishReason.decode("stop", field="finish_reason")
    ImageSize.default()                          # ImageSize.LARGE
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

from llm_sdk.errors import UnknownVariantError

if TYPE_CHECKING:
    from collections.abc import Callable

E = TypeVar("E", bound="WireEnum")

# Populated by @wire_default; keyed by family class.
_DEFAULTS: dict[type[WireEnum], WireEnum] = {}


class WireEnum(str, Enum):
    """Base for enum families with a fixed external token per member."""

    def __str__(self) -> str:
        return self.value

    @property
    def wire(self) -> str:
        """The external token for this member."""
        return self.value

    def to_wire(self) -> str:
        """Return the wire token. Total over the family; never fails."""
        return self.value

    @classmethod
    def tokens(cls) -> tuple[str, ...]:
        """All recognized wire tokens, in declaration order."""
        return tuple(member.value for member in cls)

    @classmethod
    def decode(cls: type[E], token: object, *, field: str | None = None) -> E:
        """Map a wire token back to its member.

        Raises:
            UnknownVariantError: If *token* is not a recognized token. The error
                names *field* (defaults to the family name) and the token.
        """
        if isinstance(token, cls):
            return token
        for member in cls:
            if member.value == token:
                return member
        raise UnknownVariantError(
            field=field or cls.__name__,
            token=token,
            family=cls.__name__,
            expected=cls.tokens(),
        )

    @classmethod
    def default(cls: type[E]) -> E:
        """Return the family's declared default member."""
        try:
            return _DEFAULTS[cls]  # type: ignore[return-value]
        except KeyError:
            raise TypeError(f"{cls.__name__} declares no default member") from None


def wire_default(name: str) -> Callable[[type[E]], type[E]]:
    """Class decorator declaring the single default member of a family."""

    def decorate(cls: type[E]) -> type[E]:
        if cls in _DEFAULTS:
            raise TypeError(f"{cls.__name__} already declares a default")
        _DEFAULTS[cls] = cls[name]
        return cls

    return decorate


# =============================================================================
# Chat completion
# =============================================================================


@wire_default("GPT3_TURBO")
class ChatCompleteModel(WireEnum):
    """Models accepted by the chat completions endpoint."""

    GPT3_TURBO = "gpt-3.5-turbo-1106"
    GPT3_TURBO_INSTRUCT = "gpt-3.5-turbo-instruct"
    GPT4_TURBO = "gpt-4-1106-preview"
    GPT4_TURBO_VISION = "gpt-4-vision-preview"


@wire_default("JSON")
class ChatResponseFormat(WireEnum):
    TEXT = "text"
    JSON = "json_object"


@wire_default("STOP")
class FinishReason(WireEnum):
    """Why the model stopped generating tokens."""

    STOP = "stop"
    LENGTH = "length"
    CONTENT_FILTER = "content_filter"
    TOOL_CALLS = "tool_calls"


@wire_default("FUNCTION")
class ToolType(WireEnum):
    # Only functions are supported as tools.
    FUNCTION = "function"


@wire_default("USER")
class Role(WireEnum):
    """Message discriminant carried in the ``role`` key."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


# =============================================================================
# Image generation
# =============================================================================


@wire_default("DALL_E_3")
class ImageModel(WireEnum):
    DALL_E_3 = "dall-e-3"


@wire_default("STANDARD")
class ImageQuality(WireEnum):
    """``HD`` trades latency for finer detail."""

    STANDARD = "default"
    HD = "hd"


@wire_default("URL")
class ImageResponseFormat(WireEnum):
    URL = "url"
    B64_JSON = "b64_json"


@wire_default("LARGE")
class ImageSize(WireEnum):
    """Output dimensions as ``WIDTHxHEIGHT``."""

    LARGE = "1024x1024"
    LARGE_WIDE = "1792x1024"
    LARGE_TALL = "1024x1792"


@wire_default("VIVID")
class ImageStyle(WireEnum):
    VIVID = "vivid"
    NATURAL = "natural"


WIRE_ENUMS: tuple[type[WireEnum], ...] = (
    ChatCompleteModel,
    ChatResponseFormat,
    FinishReason,
    ToolType,
    Role,
    ImageModel,
    ImageQuality,
    ImageResponseFormat,
    ImageSize,
    ImageStyle,
)
