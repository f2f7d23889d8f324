"""Domain-layer error definitions."""


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidArgumentError(DomainError, ValueError):
    """Raised when a group field is given a missing or blank value."""

    def __init__(self, field: str, label: str | None = None) -> None:
        label = label or field.replace("_", " ").capitalize()
        super().__init__(f"{label} cannot be empty")
        self.field = field
