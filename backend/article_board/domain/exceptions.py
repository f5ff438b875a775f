"""Domain-specific exceptions: framework-independent."""

from dataclasses import dataclass


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


@dataclass(frozen=True)
class FieldError:
    """A single failed constraint, attributed to the field that caused it."""

    field: str
    message: str


class ValidationError(Exception):
    """Raised when one or more required fields fail validation.

    Carries every offending field, so callers can redisplay a form with
    all problems at once instead of one at a time.
    """

    def __init__(self, errors: list[FieldError]):
        self.errors = list(errors)
        fields = ", ".join(e.field for e in self.errors)
        super().__init__(f"Validation failed for: {fields}")

    @property
    def messages(self) -> list[str]:
        return [e.message for e in self.errors]
