from typing import Optional


class ServiceError(Exception):
    """Base class for errors raised by the podcast services."""


class ConfigError(ServiceError):
    """Raised when a service is called without its API key."""


class NetworkError(ServiceError):
    """Raised on transport failures, non-success responses and undecodable bodies.

    Args:
        message (str): Human readable description.
        status_code (Optional[int]): Upstream HTTP status, when the failure came from a response.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(ServiceError):
    """Raised when one of the fixed CSS selectors fails to compile."""
