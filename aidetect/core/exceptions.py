"""
Application exceptions shared by the analysis services and the API layer.
"""


class GatewayError(Exception):
    """Base class for failures of the remote classifier gateway."""


class GatewayUnavailable(GatewayError):
    """The gateway could not be reached (transport-level failure)."""


class GatewayBadResponse(GatewayError):
    """The gateway answered, but not with a usable verdict."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class EmptyInputError(ValueError):
    """Aggregation was attempted over zero sentences."""
