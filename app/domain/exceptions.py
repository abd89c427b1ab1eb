"""Domain-specific exceptions. Pure domain layer, no infrastructure."""


class DomainError(Exception):
    """Base for all domain-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Raised when a location candidate fails validation. Nothing is persisted."""


class UnknownLocationTypeError(ValidationError):
    """Raised when no ingestion reader recognizes the type and target combination."""

    def __init__(self, type: str, target: str) -> None:
        self.type = type
        self.target = target
        super().__init__(f"Unknown location type {type} {target}")


class UnreadableLocationError(ValidationError):
    """Raised when an ingestion reader reports an error for the target."""

    def __init__(self, target: str, error: str) -> None:
        self.target = target
        self.error = error
        super().__init__(f"Can't read location at {target}, {error}")


class NotFoundError(DomainError):
    """Raised by storage when a location id does not exist."""
