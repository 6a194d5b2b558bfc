"""Exception types raised by the generation flow."""

from __future__ import annotations

NO_IMAGE_MESSAGE = "The AI did not generate an image. Please try refining your prompt."


class PayloadEncodingError(RuntimeError):
    """Raised when an uploaded file cannot be read into a base64 payload."""

    def __init__(self, path=None, reason=None):
        message = "Failed to read file as base64 string."
        if path is not None:
            message = f"Failed to read '{path}' as base64 string"
            if reason:
                message += f": {reason}"
        super().__init__(message)
        self.path = path


class NoImageError(RuntimeError):
    """Raised when the remote response carries no inline image part."""

    def __init__(self, message: str = NO_IMAGE_MESSAGE):
        super().__init__(message)


class MalformedDataUrlError(ValueError):
    """Raised when a string is not a well-formed base64 data URL."""

    def __init__(self, value: str):
        preview = value if len(value) <= 48 else value[:45] + "..."
        super().__init__(f"Not a well-formed base64 data URL: {preview!r}")


class MissingApiKeyError(RuntimeError):
    """Raised when the remote service is used without a configured key."""

    def __init__(self):
        super().__init__("GEMINI_API_KEY environment variable not set.")
