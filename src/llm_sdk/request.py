"""Request values and the validating builder that finalizes them."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from llm_sdk.errors import (
    BuilderError,
    InvalidFieldError,
    MissingFieldError,
    UnknownVariantError,
)
from llm_sdk.wire import WireEnum

if TYPE_CHECKING:
    from collections.abc import Iterable

    import httpx

    from llm_sdk.config import Config
    from llm_sdk.emit import Endpoint

logger = logging.getLogger(__name__)

R = TypeVar("R", bound="ApiRequest")
T = TypeVar("T")
E = TypeVar("E", bound=WireEnum)


class ApiRequest:
    """Mixin for frozen request dataclasses.

    Subclasses set ``ENDPOINT`` and ``RESPONSE_TYPE`` and implement
    ``to_dict()``. Absent optional fields never appear in ``to_dict()``.
    """

    ENDPOINT: ClassVar[Endpoint]
    RESPONSE_TYPE: ClassVar[type]

    def to_dict(self) -> dict[str, Any]:
        raise NotImplementedError

    def to_json(self) -> str:
        """Compact JSON body, byte-stable for equal requests."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)

    def into_request(self, *, config: Config | None = None) -> httpx.Request:
        """Bind this request to its endpoint. See :func:`llm_sdk.emit.into_request`."""
        from llm_sdk.emit import into_request

        return into_request(self, config=config)

    def parse_response(self, body: Any) -> Any:
        """Decode a response body into this request's paired response type."""
        from llm_sdk.parse import parse_response

        return parse_response(self.RESPONSE_TYPE, body)


def put_present(out: dict[str, Any], key: str, value: Any) -> None:
    """Set ``out[key]`` unless *value* is absent (``None``)."""
    if value is None:
        return
    out[key] = value.to_wire() if isinstance(value, WireEnum) else value


class RequestBuilder(Generic[R]):
    """Accumulates fields for one request type and finalizes it.

    Setters overwrite (last write wins). ``build()`` never mutates the
    builder, so it can be called repeatedly and always yields equal values.
    """

    request_type: ClassVar[type]
    #: Required field names, in declaration order.
    required: ClassVar[tuple[str, ...]] = ()

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def _set(self, name: str, value: Any) -> None:
        self._values[name] = value

    def is_set(self, name: str) -> bool:
        """Whether a field has been given a value (even one equal to its default)."""
        return name in self._values

    def _decode(self, family: type[E], value: Any, *, field: str) -> E:
        """Coerce a setter argument to a member of *family*.

        Raises:
            InvalidFieldError: If *value* is not a member or a known token.
        """
        try:
            return family.decode(value, field=field)
        except UnknownVariantError as e:
            raise InvalidFieldError(field, value, expected=e.expected) from e

    def build(self) -> R:
        """Finalize into an immutable request.

        Raises:
            MissingFieldError: If a required field was never set.
        """
        for name in self.required:
            if name not in self._values:
                raise MissingFieldError(name, request_type=self.request_type.__name__)
        request: R = self.request_type(**self._values)
        logger.debug(
            "Built %s with fields %s",
            self.request_type.__name__,
            sorted(self._values),
        )
        return request


def as_tuple(
    items: Iterable[T], *, field: str, expected: tuple[type, ...]
) -> tuple[T, ...]:
    """Coerce an iterable of items into a tuple, checking each item's type."""
    if isinstance(items, (str, bytes)):
        raise BuilderError(
            f"{field} must be a sequence, got {type(items).__name__}",
            hint=f"Pass a list, e.g. {field}=[...].",
        )
    result = tuple(items)
    for i, item in enumerate(result):
        if not isinstance(item, expected):
            names = " | ".join(t.__name__ for t in expected)
            raise BuilderError(
                f"{field}[{i}] must be {names}, got {type(item).__name__}",
            )
    return result
