"""App Store lookup exceptions.

Every failure of a lookup is reported as a subclass of StoreLookupError.
"""


class StoreLookupError(Exception):
    """Base class for all lookup failures."""


class NetworkFailure(StoreLookupError):
    """Exception raised when the request to the lookup endpoint fails."""

    def __init__(self, cause: Exception) -> None:
        """Initialize the exception with the underlying transport error.

        Args:
            cause: The exception raised by the HTTP client.
        """
        self.cause = cause
        super().__init__(f'Network failure: {type(cause).__name__}: {cause}')


class InvalidResponseData(StoreLookupError):
    """Exception raised when the lookup response is missing required fields."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f'Invalid response data: {reason}')


class InvalidRequestConfiguration(StoreLookupError):
    """Exception raised when no request can be built from the configuration."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f'Invalid request configuration: {reason}')
