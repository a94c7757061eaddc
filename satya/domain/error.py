"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Bad input shape."""

    pass


class InvalidChoiceError(ValidationError):
    """Raised when a vote is not one of +1 (like) or -1 (dislike)."""

    def __init__(self, choice: object):
        self.choice = choice
        super().__init__("vote must be 1 or -1")


class MissingVoterIdError(ValidationError):
    """Raised when a vote carries no voter identity."""

    def __init__(self):
        super().__init__("voter_id required")


class MissingReportIdError(ValidationError):
    """Raised when a vote targets an absent or unknown report id."""

    def __init__(self, report_id: str | None = None):
        self.report_id = report_id
        if report_id:
            super().__init__(f"report not found: {report_id}")
        else:
            super().__init__("report id required")


class AuthError(DomainError):
    """Base authentication/authorization error."""

    pass


class NotAuthenticatedError(AuthError):
    """Raised when a credential is missing or cannot be resolved."""

    pass


class NotAuthorizedError(AuthError):
    """Raised when a resolved identity lacks the required privilege."""

    def __init__(self, action: str, identity: str | None = None):
        self.action = action
        self.identity = identity
        super().__init__(f"admin only: {action}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class DependencyError(DomainError):
    """Raised when the row store, identity provider or blob storage fails."""

    def __init__(self, dependency: str, message: str):
        self.dependency = dependency
        super().__init__(f"{dependency} error: {message}")
