"""Error kinds raised by the gateway and mapped onto HTTP responses."""
from __future__ import annotations


class GatewayError(Exception):
    """Base class for gateway errors."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class GenerationError(GatewayError):
    """The external generation call failed; carries the raw upstream message."""

    status_code = 500


class MissingUploadError(GatewayError):
    """A required multipart upload field was not sent."""

    status_code = 400

    def __init__(self, field: str) -> None:
        super().__init__(f"missing upload field '{field}'")
        self.field = field
