class JobFinderError(Exception):
    """Base class for all job_finder errors."""


class FeedError(JobFinderError):
    """
    A job feed could not be loaded.
    `message` is safe to show to the user as-is.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FeedTimeoutError(FeedError):
    def __init__(
        self,
        message: str = "Request timed out. Please check your connection and try again.",
    ) -> None:
        super().__init__(message)


class FeedConnectionError(FeedError):
    pass


class FeedStatusError(FeedError):
    """The feed answered with a non-success HTTP status."""

    def __init__(self, status_code: int, reason: str) -> None:
        super().__init__(f"Server returned {status_code}: {reason}")
        self.status_code = status_code
        self.reason = reason


class FeedFormatError(FeedError):
    def __init__(self, message: str = "Unexpected API response format.") -> None:
        super().__init__(message)


class FeedEmptyError(FeedError):
    def __init__(self, message: str = "No jobs were returned from the API.") -> None:
        super().__init__(message)


class FormStateError(JobFinderError, RuntimeError):
    """An application form event arrived in a phase that does not accept it."""
