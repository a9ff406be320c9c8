"""Failures raised by the generative client and handled by the discovery service."""
from __future__ import annotations

from typing import Any


class DiscoveryError(RuntimeError):
    """Base class for upstream failures that degrade to the sample places."""


class ConfigurationError(DiscoveryError):
    """No API key is configured; no request was attempted."""


class NetworkError(DiscoveryError):
    """The request never produced an HTTP response."""


class HttpError(DiscoveryError):
    """The generation endpoint answered with a non-2xx status."""

    def __init__(self, status: int, status_text: str, body: Any = None) -> None:
        super().__init__(f"API error: {status} {status_text}".rstrip())
        self.status = status
        self.status_text = status_text
        self.body = body


class ShapeError(DiscoveryError):
    """A 2xx body lacked ``candidates[0].content.parts[0].text``."""
