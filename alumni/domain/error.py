"""Domain layer errors."""

from alumni.domain.value import VoteTally


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class VoteConflictError(BusinessRuleViolationError):
    """Raised when a vote change was issued against a stale vote.

    Carries the current tally so callers can adopt the server's view.
    """

    def __init__(self, tally: VoteTally, expected: str, actual: str):
        self.tally = tally
        super().__init__(
            f"Vote on thread {tally.thread_id} is {actual}, expected {expected}"
        )


class DuplicateResponseError(BusinessRuleViolationError):
    """Raised when an alumnus answers the same survey twice."""

    def __init__(self, survey_id: str):
        self.survey_id = survey_id
        super().__init__("You have already submitted a response for this survey.")
