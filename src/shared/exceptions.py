"""Custom exceptions for the application."""
from typing import Any


class EntityNotFound(Exception):
    """Raised when an entity is not found in the client store."""

    def __init__(self, entity_name: str, entity_id: Any):
        """
        Initialize the exception.

        Args:
            entity_name: Name of the entity that was not found
            entity_id: ID of the entity that was not found
        """
        super().__init__(f"{entity_name} with ID {entity_id} not found")
        self.entity_name = entity_name
        self.entity_id = entity_id


class ConflictingEntityFound(Exception):
    """Raised when an entity with a conflicting field already exists."""

    def __init__(self, entity_name: str, field_name: str, field_value: Any):
        """
        Initialize the exception.

        Args:
            entity_name: Name of the entity
            field_name: Name of the conflicting field
            field_value: Value of the conflicting field
        """
        super().__init__(f"{entity_name} with {field_name} '{field_value}' already exists")
        self.entity_name = entity_name
        self.field_name = field_name
        self.field_value = field_value


class ClientValidationError(ValueError):
    """Raised when submitted form fields break a validation rule."""

    def __init__(self, message: str, field_name: str | None = None):
        """
        Initialize the exception.

        Args:
            message: User-facing description of the first violated rule
            field_name: Form field that failed, None when several are missing
        """
        super().__init__(message)
        self.message = message
        self.field_name = field_name


class NoClientSelected(Exception):
    """Raised when the detail view is asked to act without a selected client."""

    def __init__(self, message: str = "No client selected to edit."):
        super().__init__(message)
        self.message = message


class ExerciseCatalogError(Exception):
    """Raised when the exercise catalog cannot be reached or answers badly."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code

    @property
    def is_network_error(self) -> bool:
        return self.status_code is None
