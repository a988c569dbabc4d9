from enum import Enum
from typing import Optional

from .models import DiagnosticInfo


class ErrorKind(str, Enum):
    INVALID_INPUT = "InvalidInput"
    UNSUPPORTED_HOST = "UnsupportedHost"
    POST_ID_NOT_FOUND = "PostIdNotFound"
    FETCH_FAILED = "FetchFailed"
    VIDEO_NOT_FOUND = "VideoNotFound"
    INTERNAL = "Internal"


class ExtractionError(ValueError):
    """Base class for every terminal extraction failure.

    `status` is the HTTP-style classification used at the response boundary:
    400 for bad input, 502 for upstream fetch failures, 404 when no strategy
    located a video and 500 for anything unexpected.
    """

    kind: ErrorKind = ErrorKind.INTERNAL
    status: int = 500
    default_message: str = "An error occurred while processing your request"

    def __init__(self, message: str = ""):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.message}


class InvalidInput(ExtractionError):
    kind = ErrorKind.INVALID_INPUT
    status = 400
    default_message = "Invalid URL provided"


class UnsupportedHost(ExtractionError):
    kind = ErrorKind.UNSUPPORTED_HOST
    status = 400
    default_message = "Please provide a valid Threads URL"


class PostIdNotFound(ExtractionError):
    kind = ErrorKind.POST_ID_NOT_FOUND
    status = 400
    default_message = "Could not extract post ID from URL"


class FetchFailed(ExtractionError):
    kind = ErrorKind.FETCH_FAILED
    status = 502
    default_message = "Failed to fetch Threads post"

    def __init__(self, message: str = "", status_code: Optional[int] = None):
        self.status_code = status_code
        if not message and status_code is not None:
            message = f"{self.default_message} (HTTP {status_code})"
        super().__init__(message)


class VideoNotFound(ExtractionError):
    kind = ErrorKind.VIDEO_NOT_FOUND
    status = 404
    default_message = (
        "Could not extract video from this Threads post. "
        "The video might be protected or the post structure has changed."
    )

    def __init__(self, message: str = "", debug: Optional[DiagnosticInfo] = None):
        self.debug = debug
        super().__init__(message)

    def to_dict(self) -> dict:
        out = super().to_dict()
        if self.debug is not None:
            out["debug"] = self.debug.to_dict()
        return out


class Internal(ExtractionError):
    kind = ErrorKind.INTERNAL
    status = 500
