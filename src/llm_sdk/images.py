"""Image generation: request, builder, and response types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from llm_sdk.emit import IMAGE_GENERATIONS
from llm_sdk.errors import BuilderError
from llm_sdk.request import ApiRequest, RequestBuilder, put_present
from llm_sdk.wire import (
    ImageModel,
    ImageQuality,
    ImageResponseFormat,
    ImageSize,
    ImageStyle,
)


@dataclass(frozen=True)
class ImageObject:
    """One generated image.

    Exactly one of ``url`` (the default) or ``b64_json`` is normally set,
    depending on the requested ``response_format``.
    """

    #: The prompt actually used, if the API revised it.
    revised_prompt: str
    b64_json: str | None = None
    url: str | None = None


@dataclass(frozen=True)
class CreateImageResponse:
    created: int
    data: tuple[ImageObject, ...]


@dataclass(frozen=True)
class CreateImageRequest(ApiRequest):
    """A request to the image generation endpoint.

    ``model`` is always sent and defaults to ``dall-e-3``. Every other
    optional field is omitted until set.
    """

    ENDPOINT = IMAGE_GENERATIONS
    RESPONSE_TYPE = CreateImageResponse

    prompt: str
    model: ImageModel = ImageModel.default()
    #: 1..10; dall-e-3 only supports 1.
    n: int | None = None
    quality: ImageQuality | None = None
    response_format: ImageResponseFormat | None = None
    size: ImageSize | None = None
    style: ImageStyle | None = None
    user: str | None = None

    @classmethod
    def new(cls, prompt: str) -> CreateImageRequest:
        """Request with only ``prompt`` set."""
        return CreateImageRequestBuilder().prompt(prompt).build()

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"prompt": self.prompt, "model": self.model.to_wire()}
        put_present(out, "n", self.n)
        put_present(out, "quality", self.quality)
        put_present(out, "response_format", self.response_format)
        put_present(out, "size", self.size)
        put_present(out, "style", self.style)
        put_present(out, "user", self.user)
        return out


class CreateImageRequestBuilder(RequestBuilder[CreateImageRequest]):
    """Fluent builder; ``prompt`` is required."""

    request_type = CreateImageRequest
    required = ("prompt",)

    def prompt(self, prompt: str) -> CreateImageRequestBuilder:
        if not isinstance(prompt, str):
            raise BuilderError(f"prompt must be a string, got {type(prompt).__name__}")
        self._set("prompt", prompt)
        return self

    def model(self, model: ImageModel | str) -> CreateImageRequestBuilder:
        self._set("model", self._decode(ImageModel, model, field="model"))
        return self

    def n(self, value: int) -> CreateImageRequestBuilder:
        self._set("n", value)
        return self

    def quality(self, quality: ImageQuality | str) -> CreateImageRequestBuilder:
        self._set("quality", self._decode(ImageQuality, quality, field="quality"))
        return self

    def response_format(
        self, value: ImageResponseFormat | str
    ) -> CreateImageRequestBuilder:
        self._set(
            "response_format",
            self._decode(ImageResponseFormat, value, field="response_format"),
        )
        return self

    def size(self, size: ImageSize | str) -> CreateImageRequestBuilder:
        self._set("size", self._decode(ImageSize, size, field="size"))
        return self

    def style(self, style: ImageStyle | str) -> CreateImageRequestBuilder:
        self._set("style", self._decode(ImageStyle, style, field="style"))
        return self

    def user(self, value: str) -> CreateImageRequestBuilder:
        self._set("user", value)
        return self
