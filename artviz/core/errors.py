"""
Error taxonomy for art visualization requests.

Every failure that reaches the HTTP boundary is reported with one of the
``ErrorKind`` values so clients can tell categories apart without matching
on message text.
"""
from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure categories exposed to clients"""

    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    INVALID_IMAGE_FORMAT = "invalid_image_format"
    UPSTREAM_EMPTY_RESPONSE = "upstream_empty_response"
    UPSTREAM_NO_IMAGE = "upstream_no_image"
    UPSTREAM_CALL_FAILURE = "upstream_call_failure"
    INTERNAL = "internal"


class ArtVisualizationError(Exception):
    """Base class for errors raised while serving a visualization request."""

    kind: ErrorKind = ErrorKind.INTERNAL
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ArtVisualizationError):
    """The request body is missing the image or is malformed."""

    kind = ErrorKind.VALIDATION
    status_code = 400


class ConfigurationError(ArtVisualizationError):
    """The Gemini credential is not configured."""

    kind = ErrorKind.CONFIGURATION


class InvalidImageFormatError(ArtVisualizationError):
    """The image is not a usable base64 data URL."""

    kind = ErrorKind.INVALID_IMAGE_FORMAT


class UpstreamEmptyResponseError(ArtVisualizationError):
    """The model answered without candidates, content or text."""

    kind = ErrorKind.UPSTREAM_EMPTY_RESPONSE


class UpstreamNoImageError(ArtVisualizationError):
    """The model answered, but no part carried image data."""

    kind = ErrorKind.UPSTREAM_NO_IMAGE


class UpstreamCallFailureError(ArtVisualizationError):
    """The call to the model service itself failed (network, API, timeout)."""

    kind = ErrorKind.UPSTREAM_CALL_FAILURE
