"""Error taxonomy for FatSecret lookups."""


class FatSecretError(Exception):
    """Base error for the FatSecret integration."""


class ConfigurationError(FatSecretError):
    """Client credentials are missing."""


class UpstreamError(FatSecretError):
    """FatSecret answered with a non-success HTTP status."""

    def __init__(self, message: str, status_code: int, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ParseError(FatSecretError):
    """A payload value could not be interpreted."""


class InvalidArgumentError(FatSecretError):
    """A required operation argument was missing."""


class InternalError(FatSecretError):
    """An operation failed; `details` carries the underlying error message."""

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details
