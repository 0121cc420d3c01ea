"""Decode raw response bodies into typed, immutable response values.

Validation is delegated to pydantic over the response dataclasses; its
errors are translated into :class:`MalformedResponseError` (missing or
ill-typed fields, non-JSON bodies) or :class:`UnknownVariantError`
(unrecognized enum tokens). Fields the schema does not model are ignored.
HTTP status codes are not inspected here.
"""

from __future__ import annotations

from collections.abc import Mapping
import dataclasses
from functools import cache
import json
import logging
import types
import typing
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from llm_sdk.chat import ChatCompletionResponse
from llm_sdk.errors import DecodeError, MalformedResponseError, UnknownVariantError
from llm_sdk.images import CreateImageResponse
from llm_sdk.wire import WireEnum

if TYPE_CHECKING:
    from llm_sdk.request import ApiRequest

logger = logging.getLogger(__name__)

T = TypeVar("T")

Body = bytes | str | Mapping[str, Any] | httpx.Response


@cache
def _adapter(response_type: type[T]) -> TypeAdapter[T]:
    return TypeAdapter(response_type)


def parse_response(response_type: type[T], body: Body) -> T:
    """Decode *body* into *response_type*.

    Args:
        response_type: A response dataclass, e.g. ``ChatCompletionResponse``.
        body: Raw JSON (bytes or text), an already-decoded mapping, or an
            ``httpx.Response`` whose content is used as-is.

    Raises:
        MalformedResponseError: If the body is not a JSON object or a required
            field is missing or has the wrong type.
        UnknownVariantError: If an enum field carries an unrecognized token.
    """
    data = _load(body)
    try:
        return _adapter(response_type).validate_python(data)
    except ValidationError as e:
        err = _translate(e, response_type)
        logger.debug("Failed to decode %s: %s", response_type.__name__, err)
        raise err from e


def parse_chat_completion(body: Body) -> ChatCompletionResponse:
    return parse_response(ChatCompletionResponse, body)


def parse_create_image(body: Body) -> CreateImageResponse:
    return parse_response(CreateImageResponse, body)


def parse_for(request: ApiRequest, body: Body) -> Any:
    """Decode *body* into the response type paired with *request*."""
    return parse_response(request.RESPONSE_TYPE, body)


def _load(body: Body) -> Any:
    if isinstance(body, httpx.Response):
        body = body.content
    if isinstance(body, Mapping):
        return dict(body)
    if isinstance(body, (bytes, str)):
        try:
            data = json.loads(body)
        except ValueError as e:
            raise MalformedResponseError(
                f"Response body is not valid JSON: {e}",
                hint="The transport may have returned an error page or a cut-off body.",
            ) from e
        if not isinstance(data, dict):
            raise MalformedResponseError(
                f"Response body must be a JSON object, got {type(data).__name__}"
            )
        return data
    raise MalformedResponseError(
        f"Unsupported response body type: {type(body).__name__}"
    )


def _translate(exc: ValidationError, response_type: type) -> DecodeError:
    """Pick the most specific error; enum failures win over other failures."""
    errors = exc.errors()
    chosen = next(
        (e for e in errors if e["type"] == "enum" and isinstance(e["input"], str)),
        errors[0],
    )
    path = ".".join(str(part) for part in chosen["loc"])

    # Only a string can be an unrecognized token; null or a number is ill-typed.
    if chosen["type"] == "enum" and not isinstance(chosen["input"], str):
        return MalformedResponseError(
            f"Invalid value at {path}: expected a string token, "
            f"got {type(chosen['input']).__name__}",
            path=path,
        )

    if chosen["type"] == "enum":
        family = _resolve_field_type(response_type, chosen["loc"])
        if isinstance(family, type) and issubclass(family, WireEnum):
            return UnknownVariantError(
                field=path,
                token=chosen["input"],
                family=family.__name__,
                expected=family.tokens(),
            )
        return UnknownVariantError(field=path, token=chosen["input"])

    if chosen["type"] == "missing":
        return MalformedResponseError(f"Missing required field: {path}", path=path)

    return MalformedResponseError(
        f"Invalid value at {path or '<root>'}: {chosen['msg']}", path=path or None
    )


def _resolve_field_type(root: type, loc: tuple[int | str, ...]) -> Any:
    """Follow a pydantic error location through dataclass/tuple annotations."""
    tp: Any = root
    for part in loc:
        tp = _strip_optional(tp)
        if isinstance(part, int):
            args = typing.get_args(tp)
            if not args:
                return None
            tp = args[0]
        elif dataclasses.is_dataclass(tp):
            hints = typing.get_type_hints(tp)
            if part not in hints:
                return None
            tp = hints[part]
        else:
            return None
    return _strip_optional(tp)


def _strip_optional(tp: Any) -> Any:
    if isinstance(tp, types.UnionType) or typing.get_origin(tp) is typing.Union:
        args = [a for a in typing.get_args(tp) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp
