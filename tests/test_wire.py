"""Wire enum codec tests."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st
import httpx
import pytest

from llm_sdk.errors import DecodeError, MalformedResponseError, UnknownVariantError
from llm_sdk.wire import (
    WIRE_ENUMS,
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
    wire_default,
)

pytestmark = pytest.mark.unit

_ALL_MEMBERS = st.sampled_from(WIRE_ENUMS).flatmap(
    lambda family: st.sampled_from(list(family))
)


@given(_ALL_MEMBERS)
def test_every_member_round_trips_through_its_token(member: WireEnum) -> None:
    family = type(member)
    assert family.decode(member.to_wire(), field="x") is member


@pytest.mark.parametrize(
    ("member", "token"),
    [
        (ChatCompleteModel.GPT3_TURBO, "gpt-3.5-turbo-1106"),
        (ChatCompleteModel.GPT4_TURBO_VISION, "gpt-4-vision-preview"),
        (ChatResponseFormat.JSON, "json_object"),
        (FinishReason.CONTENT_FILTER, "content_filter"),
        (ImageQuality.STANDARD, "default"),
        (ImageResponseFormat.B64_JSON, "b64_json"),
        (ImageSize.LARGE_WIDE, "1792x1024"),
        (ImageModel.DALL_E_3, "dall-e-3"),
    ],
)
def test_tokens_differ_from_internal_names(member: WireEnum, token: str) -> None:
    assert member.to_wire() == token
    assert member.wire == token
    assert str(member) == token


@pytest.mark.parametrize(
    ("family", "expected"),
    [
        (ChatCompleteModel, ChatCompleteModel.GPT3_TURBO),
        (ChatResponseFormat, ChatResponseFormat.JSON),
        (FinishReason, FinishReason.STOP),
        (ToolType, ToolType.FUNCTION),
        (Role, Role.USER),
        (ImageModel, ImageModel.DALL_E_3),
        (ImageQuality, ImageQuality.STANDARD),
        (ImageResponseFormat, ImageResponseFormat.URL),
        (ImageSize, ImageSize.LARGE),
        (ImageStyle, ImageStyle.VIVID),
    ],
)
def test_each_family_declares_one_default(
    family: type[WireEnum], expected: WireEnum
) -> None:
    assert family.default() is expected


def test_every_registered_family_has_a_default() -> None:
    for family in WIRE_ENUMS:
        assert isinstance(family.default(), family)


# =============================================================================
# str behavior
# =============================================================================


@given(_ALL_MEMBERS)
def test_members_keep_str_encode_semantics(member: WireEnum) -> None:
    assert member.encode("utf-8") == member.to_wire().encode("utf-8")
    assert member.encode() == member.value.encode()


def test_members_are_usable_as_http_header_values() -> None:
    request = httpx.Request(
        "GET", "https://api.example.com/", headers={"X-Quality": ImageQuality.HD}
    )
    assert request.headers["X-Quality"] == "hd"


@pytest.mark.parametrize("member", [ImageQuality.STANDARD, ImageSize.LARGE_TALL])
def test_members_hash_and_compare_as_their_token(member: WireEnum) -> None:
    assert member == member.to_wire()
    assert {member.to_wire(): 1}[member] == 1


# =============================================================================
# Decoding
# =============================================================================


def test_decode_unknown_token_names_field_and_token() -> None:
    with pytest.raises(UnknownVariantError) as exc:
        FinishReason.decode("function_call", field="choices.0.finish_reason")

    err = exc.value
    assert err.field == "choices.0.finish_reason"
    assert err.token == "function_call"
    assert err.family == "FinishReason"
    assert err.expected == ("stop", "length", "content_filter", "tool_calls")
    assert isinstance(err, DecodeError)
    assert not isinstance(err, MalformedResponseError)


def test_decode_is_case_sensitive_and_rejects_member_names() -> None:
    with pytest.raises(UnknownVariantError):
        ImageQuality.decode("STANDARD")
    with pytest.raises(UnknownVariantError):
        ImageQuality.decode("standard")


def test_decode_without_field_falls_back_to_family_name() -> None:
    with pytest.raises(UnknownVariantError) as exc:
        ImageStyle.decode("sepia")
    assert exc.value.field == "ImageStyle"


def test_decode_passes_members_through() -> None:
    assert ImageSize.decode(ImageSize.LARGE_TALL) is ImageSize.LARGE_TALL


def test_family_without_default_raises_type_error() -> None:
    class Bare(WireEnum):
        ONLY = "only"

    with pytest.raises(TypeError, match="declares no default"):
        Bare.default()


def test_wire_default_rejects_second_declaration() -> None:
    @wire_default("A")
    class Twice(WireEnum):
        A = "a"
        B = "b"

    with pytest.raises(TypeError, match="already declares"):
        wire_default("B")(Twice)
