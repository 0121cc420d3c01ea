"""Tool definitions, model-issued tool calls, and tool choice."""

from __future__ import annotations

from dataclasses import dataclass, field
import json
from typing import Any, ClassVar, Literal

from llm_sdk.errors import EncodingError, MalformedResponseError, UnknownVariantError
from llm_sdk.wire import ToolType


@dataclass(frozen=True)
class FunctionInfo:
    """A callable function the model may generate arguments for.

    ``parameters`` is a JSON Schema object and is passed through untouched.
    To describe a function with no parameters use
    ``{"type": "object", "properties": {}}``.
    """

    name: str
    parameters: dict[str, Any] = field(
        default_factory=lambda: {"type": "object", "properties": {}}
    )
    #: Used by the model to decide when and how to call the function.
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.description is not None:
            out["description"] = self.description
        out["name"] = self.name
        out["parameters"] = self.parameters
        return out


@dataclass(frozen=True)
class Tool:
    """A tool the model may call. Only functions are supported."""

    function: FunctionInfo
    type: ToolType = ToolType.FUNCTION

    @classmethod
    def for_function(
        cls,
        name: str,
        parameters: dict[str, Any] | None = None,
        *,
        description: str | None = None,
    ) -> Tool:
        """Shorthand for ``Tool(FunctionInfo(...))``."""
        if parameters is None:
            return cls(FunctionInfo(name=name, description=description))
        return cls(
            FunctionInfo(name=name, parameters=parameters, description=description)
        )

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.to_wire(), "function": self.function.to_dict()}


@dataclass(frozen=True)
class FunctionCall:
    """The function a model asked to invoke.

    ``arguments`` is whatever JSON text the model produced. It is not
    guaranteed to be valid JSON or to match the function's schema; callers
    must validate it before use.
    """

    name: str
    arguments: str

    def parsed_arguments(self) -> Any:
        """Decode ``arguments`` as JSON.

        Raises:
            MalformedResponseError: If the model produced invalid JSON.
        """
        try:
            return json.loads(self.arguments)
        except ValueError as e:
            raise MalformedResponseError(
                f"Tool call arguments for {self.name!r} are not valid JSON: {e}",
                path="function.arguments",
                hint="Models may emit malformed arguments; retry or repair them.",
            ) from e

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "arguments": self.arguments}


@dataclass(frozen=True)
class ToolCall:
    """A tool call generated by the model."""

    id: str
    function: FunctionCall
    type: ToolType = ToolType.FUNCTION

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.to_wire(),
            "function": self.function.to_dict(),
        }


_ToolChoiceKind = Literal["none", "auto", "function"]


@dataclass(frozen=True)
class ToolChoice:
    """Controls which (if any) function the model calls.

    Three variants with two different wire shapes:

    - ``ToolChoice.NONE`` -> ``"none"`` (model answers with a message)
    - ``ToolChoice.AUTO`` -> ``"auto"`` (model decides)
    - ``ToolChoice.function("f")`` ->
      ``{"type": "function", "function": {"name": "f"}}`` (forced call)
    """

    kind: _ToolChoiceKind
    name: str | None = None

    NONE: ClassVar[ToolChoice]
    AUTO: ClassVar[ToolChoice]

    def __post_init__(self) -> None:
        if self.kind == "function":
            if not self.name:
                raise EncodingError("ToolChoice.function requires a function name")
        elif self.kind in ("none", "auto"):
            if self.name is not None:
                raise EncodingError(f"ToolChoice {self.kind!r} does not take a name")
        else:
            raise EncodingError(f"Unknown ToolChoice variant: {self.kind!r}")

    @classmethod
    def function(cls, name: str) -> ToolChoice:
        """Force the model to call the named function."""
        return cls("function", name)

    def to_wire(self) -> str | dict[str, Any]:
        if self.kind == "function":
            return {
                "type": ToolType.FUNCTION.to_wire(),
                "function": {"name": self.name},
            }
        return self.kind

    @classmethod
    def from_wire(cls, value: Any, *, field: str = "tool_choice") -> ToolChoice:
        """Inverse of :meth:`to_wire`."""
        if isinstance(value, str):
            if value == "none":
                return cls.NONE
            if value == "auto":
                return cls.AUTO
            raise UnknownVariantError(
                field=field,
                token=value,
                family="ToolChoice",
                expected=("none", "auto"),
            )
        if not isinstance(value, dict):
            raise MalformedResponseError(
                f"{field} must be a string or an object, got {type(value).__name__}",
                path=field,
            )
        ToolType.decode(value.get("type"), field=f"{field}.type")
        function = value.get("function")
        name = function.get("name") if isinstance(function, dict) else None
        if not isinstance(name, str) or not name:
            raise MalformedResponseError(
                f"Missing required field: {field}.function.name",
                path=f"{field}.function.name",
            )
        return cls.function(name)


ToolChoice.NONE = ToolChoice("none")
ToolChoice.AUTO = ToolChoice("auto")
