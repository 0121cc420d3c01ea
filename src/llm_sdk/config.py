"""Configuration: Frozen Config resolving base URL and credentials."""

from __future__ import annotations

from dataclasses import dataclass
import os
from urllib.parse import urlparse

from dotenv import load_dotenv

from llm_sdk.errors import ConfigurationError

load_dotenv()

DEFAULT_BASE_URL = "https://api.openai.com/v1"

_API_KEY_ENV_VAR = "OPENAI_API_KEY"
_BASE_URL_ENV_VAR = "OPENAI_BASE_URL"
_ORGANIZATION_ENV_VAR = "OPENAI_ORG_ID"


@dataclass(frozen=True)
class Config:
    """Immutable settings consumed when emitting HTTP requests.

    Every field is optional. Unset values are auto-resolved from
    ``OPENAI_API_KEY``, ``OPENAI_BASE_URL`` and ``OPENAI_ORG_ID``.

    Example:
        config = Config(base_url="http://localhost:8080/v1")
        http_request = request.into_request(config=config)
    """

    #: Auto-resolved from ``OPENAI_API_KEY`` when *None*.
    api_key: str | None = None
    #: Auto-resolved from ``OPENAI_BASE_URL``, else the public endpoint.
    base_url: str | None = None
    organization: str | None = None

    def __post_init__(self) -> None:
        """Auto-resolve unset values and validate the base URL."""
        if self.api_key is None:
            object.__setattr__(self, "api_key", os.environ.get(_API_KEY_ENV_VAR))
        if self.organization is None:
            object.__setattr__(
                self, "organization", os.environ.get(_ORGANIZATION_ENV_VAR)
            )

        base_url = (
            self.base_url or os.environ.get(_BASE_URL_ENV_VAR) or DEFAULT_BASE_URL
        )
        base_url = base_url.rstrip("/")
        if urlparse(base_url).scheme not in ("http", "https"):
            raise ConfigurationError(
                f"base_url must be an http(s) URL, got {base_url!r}",
                hint=f"Pass base_url='{DEFAULT_BASE_URL}' or set {_BASE_URL_ENV_VAR}.",
            )
        object.__setattr__(self, "base_url", base_url)

    def headers(self) -> dict[str, str]:
        """Headers derived from credentials; empty when none are configured."""
        headers: dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        if self.organization:
            headers["OpenAI-Organization"] = self.organization
        return headers

    def __str__(self) -> str:
        """Return a redacted, developer-friendly representation."""
        return (
            f"Config(base_url={self.base_url!r}, "
            f"api_key={'[REDACTED]' if self.api_key else None}, "
            f"organization={self.organization!r})"
        )

    __repr__ = __str__
