"""Bind built requests to their HTTP method and endpoint.

Dispatch is left to the caller's transport; this module only produces an
``httpx.Request`` that any ``httpx.Client.send()`` can deliver.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Literal

import httpx

from llm_sdk.config import DEFAULT_BASE_URL

if TYPE_CHECKING:
    from llm_sdk.config import Config
    from llm_sdk.request import ApiRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Endpoint:
    """HTTP method and path (relative to the base URL) of one API operation."""

    method: Literal["POST"]
    path: str

    def url(self, base_url: str = DEFAULT_BASE_URL) -> str:
        return f"{base_url.rstrip('/')}{self.path}"


CHAT_COMPLETIONS = Endpoint("POST", "/chat/completions")
IMAGE_GENERATIONS = Endpoint("POST", "/images/generations")


def into_request(request: ApiRequest, *, config: Config | None = None) -> httpx.Request:
    """Build a transport-ready HTTP request for *request*.

    Args:
        request: A finalized request value.
        config: Optional base URL and credentials. Without one, the public
            endpoint is used and no auth header is attached.

    Returns:
        An unsent ``httpx.Request`` with the JSON body.
    """
    endpoint = request.ENDPOINT
    base_url = DEFAULT_BASE_URL
    headers: dict[str, str] = {}
    if config is not None:
        base_url = config.base_url or DEFAULT_BASE_URL
        headers = config.headers()
    url = endpoint.url(base_url)

    logger.debug("Emitting %s %s (%s)", endpoint.method, url, type(request).__name__)
    return httpx.Request(endpoint.method, url, json=request.to_dict(), headers=headers)
