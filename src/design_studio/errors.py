from __future__ import annotations

from typing import Any


class DesignStudioError(Exception):
    """Base for errors the HTTP layer maps onto a status code."""

    status_code = 500

    def __init__(self, message: str, details: Any | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ConfigurationError(DesignStudioError):
    status_code = 500


class InvalidActionError(DesignStudioError):
    status_code = 400


class InvalidPayloadError(DesignStudioError):
    status_code = 400


class ResponseShapeError(DesignStudioError):
    # The provider answered, but not in a shape the action can use.
    status_code = 500
