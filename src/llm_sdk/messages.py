"""Chat messages: a closed set of role-tagged variants.

On the wire every message is a flat object whose ``role`` key names the
variant. The role is a class constant of each variant rather than a field,
so a message can never carry a role that disagrees with its payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from llm_sdk.errors import EncodingError
from llm_sdk.tools import ToolCall
from llm_sdk.wire import Role

if TYPE_CHECKING:
    from collections.abc import Iterable


def _normalize_name(name: str | None) -> str | None:
    """An empty participant name means no name."""
    return name or None


@dataclass(frozen=True)
class SystemMessage:
    """A message from the system."""

    ROLE: ClassVar[Role] = Role.SYSTEM

    content: str
    #: Distinguishes participants that share a role.
    name: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _normalize_name(self.name))

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"role": self.ROLE.to_wire(), "content": self.content}
        if self.name is not None:
            out["name"] = self.name
        return out


@dataclass(frozen=True)
class UserMessage:
    """A message from the user."""

    ROLE: ClassVar[Role] = Role.USER

    content: str
    name: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _normalize_name(self.name))

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"role": self.ROLE.to_wire(), "content": self.content}
        if self.name is not None:
            out["name"] = self.name
        return out


@dataclass(frozen=True)
class AssistantMessage:
    """A message from the assistant.

    This is the only variant the API sends back, so it is also the only one
    the response parser decodes. ``content`` is ``None`` when the model
    answered with tool calls only.
    """

    ROLE: ClassVar[Role] = Role.ASSISTANT

    content: str | None = None
    name: str | None = None
    tool_calls: tuple[ToolCall, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _normalize_name(self.name))
        object.__setattr__(self, "tool_calls", tuple(self.tool_calls))

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"role": self.ROLE.to_wire()}
        if self.content is not None:
            out["content"] = self.content
        if self.name is not None:
            out["name"] = self.name
        if self.tool_calls:
            out["tool_calls"] = [call.to_dict() for call in self.tool_calls]
        return out


@dataclass(frozen=True)
class ToolMessage:
    """The result of a tool call, sent back to the model."""

    ROLE: ClassVar[Role] = Role.TOOL

    content: str
    #: ``ToolCall.id`` of the assistant call this message answers.
    tool_call_id: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "role": self.ROLE.to_wire(),
            "content": self.content,
            "tool_call_id": self.tool_call_id,
        }


ChatCompletionMessage = SystemMessage | UserMessage | AssistantMessage | ToolMessage

MESSAGE_TYPES = (SystemMessage, UserMessage, AssistantMessage, ToolMessage)


def system_message(content: str, name: str = "") -> SystemMessage:
    return SystemMessage(content=content, name=name)


def user_message(content: str, name: str = "") -> UserMessage:
    return UserMessage(content=content, name=name)


def assistant_message(
    content: str | None = None,
    name: str = "",
    *,
    tool_calls: Iterable[ToolCall] = (),
) -> AssistantMessage:
    return AssistantMessage(content=content, name=name, tool_calls=tuple(tool_calls))


def tool_message(content: str, tool_call_id: str) -> ToolMessage:
    return ToolMessage(content=content, tool_call_id=tool_call_id)


def serialize_message(message: ChatCompletionMessage) -> dict[str, Any]:
    """Render one message in its wire shape.

    Raises:
        EncodingError: If *message* is not one of the message variants.
    """
    if not isinstance(message, MESSAGE_TYPES):
        raise EncodingError(
            f"Expected a chat message, got {type(message).__name__}",
            hint="Use system_message(), user_message(), assistant_message() "
            "or tool_message().",
        )
    return message.to_dict()
