class DomainError(Exception):
    """Base exception for errors surfaced to callers of the services."""


class ValidationError(DomainError):
    """Raised when input data is malformed or out of range."""


class NotFoundError(DomainError):
    """Raised when an update/delete target does not exist."""


class ConflictError(DomainError):
    """Raised when a write collides with a unique key (email, generated ID)."""


class OperationFailed(DomainError):
    """Generic, entity-scoped failure that replaces internal store errors."""

    def __init__(self, verb: str, entity: str):
        self.verb = verb
        self.entity = entity
        super().__init__(f"Failed to {verb} {entity}")


class StoreUnavailable(OperationFailed):
    """Raised when the record store cannot be reached."""
