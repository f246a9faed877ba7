"""Vote client errors."""

from alumni.domain.value import VoteTally


class VoteClientError(Exception):
    """Base error for outbound vote notifications."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class NetworkError(VoteClientError):
    """Transport failure, timeout, or server error (5xx). Retryable."""

    pass


class ConflictError(VoteClientError):
    """The aggregator holds a different vote than the one the change assumed.

    Carries the server's tally when the response included it.
    """

    def __init__(self, message: str, tally: VoteTally | None = None):
        self.tally = tally
        super().__init__(message, status_code=409)


class ValidationError(VoteClientError):
    """The aggregator rejected the thread ID or payload. Not retryable."""

    pass
