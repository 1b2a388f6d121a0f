"""Custom exception hierarchy for hrcard."""


class HrcardError(Exception):
    """Base exception for all hrcard errors."""


class MissingIdentifierError(HrcardError):
    """No profile username was supplied."""


class UpstreamFetchError(HrcardError):
    """Upstream document could not be retrieved."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class UpstreamParseError(HrcardError):
    """Upstream payload was not JSON or lacked the expected list."""