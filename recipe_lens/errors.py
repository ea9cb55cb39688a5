from typing import Optional


class RecipeLensError(Exception):
    """Base exception for failures rendered to the caller as {"error": message}."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputError(RecipeLensError):
    """Missing or invalid inbound payload."""
    status_code = 400


class MethodNotAllowedError(RecipeLensError):
    status_code = 405

    def __init__(self, message: str = "Method not allowed"):
        super().__init__(message)


class ConfigError(RecipeLensError):
    """Service credential is not configured. Never carries the credential."""

    def __init__(self, message: str = "API configuration error"):
        super().__init__(message)


class GatewayError(RecipeLensError):
    """The model provider call failed."""
    status_code = 502

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class UpstreamStatusError(GatewayError):
    """Provider answered with a non-success status."""
    pass


class InvalidCompletionError(GatewayError):
    """Provider answered but the completion text is missing."""

    def __init__(self, message: str = "Invalid response from AI service", status: Optional[int] = None):
        super().__init__(message, status)


class GatewayTransportError(GatewayError):
    """Provider could not be reached."""

    def __init__(self, message: str = "Failed to reach AI service", status: Optional[int] = None):
        super().__init__(message, status)


class RecipeParseError(RecipeLensError):
    """User-visible form of both extraction and normalization failures."""
    status_code = 502

    def __init__(self, message: str = "Failed to parse recipe from AI response"):
        super().__init__(message)


class ExtractionError(Exception):
    """No recipe could be extracted from the completion text."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class NormalizationError(Exception):
    """A required recipe field is missing or empty after coercion."""

    def __init__(self, field: str, detail: str = "missing or empty"):
        super().__init__(f"{field}: {detail}")
        self.field = field
        self.detail = detail
