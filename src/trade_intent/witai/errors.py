"""Wit.ai error hierarchy.

Every failure here happens before a command exists; semantic problems with a
parsed command are reported on the command itself, never raised.
"""


class WitAIError(Exception):
    """Base Wit.ai error."""


class WitAIConfigError(WitAIError):
    """Raised when required Wit.ai configuration is missing."""


class WitAIAPIError(WitAIError):
    """Raised when API transport/request fails."""


class WitAITransientError(WitAIAPIError):
    """Transport failure or server-side status; safe to retry."""


class WitAIStatusError(WitAIAPIError):
    """Raised when Wit.ai answers with a non-success status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"wit.ai returned status {status_code}")
        self.status_code = status_code


class WitAIResponseError(WitAIError):
    """Raised when the response body is not JSON or does not match the schema."""
