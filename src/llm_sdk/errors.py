"""Exception hierarchy for llm-sdk."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class LlmSdkError(Exception):
    """Base exception for all llm-sdk errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(LlmSdkError):
    """Configuration validation or resolution failed."""


class BuilderError(LlmSdkError):
    """A request builder could not be finalized."""


class MissingFieldError(BuilderError):
    """A required request field was never set before ``build()``."""

    def __init__(self, field: str, *, request_type: str | None = None) -> None:
        owner = f"{request_type}." if request_type else ""
        super().__init__(
            f"Missing required field: {owner}{field}",
            hint=f"Call .{field}(...) on the builder before build().",
        )
        self.field = field
        self.request_type = request_type


class InvalidFieldError(BuilderError):
    """A builder setter received a value outside the field's domain."""

    def __init__(
        self,
        field: str,
        value: object,
        *,
        expected: Sequence[str] = (),
        hint: str | None = None,
    ) -> None:
        if hint is None and expected:
            hint = f"Expected one of: {', '.join(expected)}."
        super().__init__(f"Invalid value {value!r} for {field}", hint=hint)
        self.field = field
        self.value = value
        self.expected = tuple(expected)


class EncodingError(LlmSdkError):
    """A value could not be serialized to its wire shape.

    Every buildable value is serializable, so this signals a bug or a value
    constructed outside the public API.
    """


class DecodeError(LlmSdkError):
    """A response body could not be decoded into a typed value."""


class MalformedResponseError(DecodeError):
    """A required response field is missing, ill-typed, or the body is not JSON."""

    def __init__(
        self, message: str, *, path: str | None = None, hint: str | None = None
    ) -> None:
        super().__init__(message, hint=hint)
        self.path = path


class UnknownVariantError(DecodeError):
    """A wire token is not a recognized member of its enum family.

    Raised separately from :class:`MalformedResponseError` so callers can
    spot new server-side variants without string matching.
    """

    def __init__(
        self,
        *,
        field: str,
        token: object,
        family: str | None = None,
        expected: Sequence[str] = (),
    ) -> None:
        family_note = f" for {family}" if family else ""
        super().__init__(
            f"Unrecognized variant {token!r}{family_note} at {field}",
            hint=(
                f"Expected one of: {', '.join(expected)}."
                if expected
                else "The remote API may have introduced a new variant."
            ),
        )
        self.field = field
        self.token = token
        self.family = family
        self.expected = tuple(expected)
