# fifufa/core/errors.py
from typing import Optional

from fifufa.models.enums import InferenceErrorKind, TopicErrorKind


class AppError(Exception):
    """Base for every failure that is rendered as `{"error": message}`."""
    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class TopicValidationError(AppError):
    status_code = 400

    MESSAGES = {
        TopicErrorKind.TOPIC_REQUIRED: "Topic is required",
        TopicErrorKind.TOPIC_TOO_SHORT: "Topic too short (minimum 2 characters)",
        TopicErrorKind.TOPIC_TOO_LONG: "Topic too long (maximum 50 characters)",
    }

    def __init__(self, kind: TopicErrorKind):
        super().__init__(self.MESSAGES[kind])
        self.kind = kind


class OriginRejectedError(AppError):
    status_code = 403

    def __init__(self, origin: str):
        super().__init__("Origin not allowed")
        self.origin = origin


# --- Upstream (inference provider) failures ---

class UpstreamError(AppError):
    kind: InferenceErrorKind = InferenceErrorKind.UNKNOWN

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.detail = detail


class UpstreamTimeoutError(UpstreamError):
    status_code = 504
    kind = InferenceErrorKind.TIMEOUT

    def __init__(self, detail: Optional[str] = None):
        super().__init__("AI model is warming up. Please try again in a few seconds.", detail)


class UpstreamRateLimitedError(UpstreamError):
    status_code = 429
    kind = InferenceErrorKind.RATE_LIMITED

    def __init__(self, detail: Optional[str] = None):
        super().__init__("Too many requests. Please wait a moment.", detail)


class UpstreamAuthError(UpstreamError):
    status_code = 401
    kind = InferenceErrorKind.AUTH

    def __init__(self, detail: Optional[str] = None):
        super().__init__("API authentication failed. Please check server configuration.", detail)


class UpstreamUnavailableError(UpstreamError):
    status_code = 500
    kind = InferenceErrorKind.UNAVAILABLE

    def __init__(self, detail: Optional[str] = None):
        super().__init__("AI model unavailable. Please try again later.", detail)


class UpstreamUnknownError(UpstreamError):
    status_code = 500
    kind = InferenceErrorKind.UNKNOWN

    def __init__(self, detail: Optional[str] = None):
        super().__init__(f"Server error: {detail or 'Unknown error'}", detail)
