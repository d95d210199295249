"""
Custom Exceptions - TalentFlow
talentflow/core/exceptions.py

Exception classes for repository, settings and feedback operations.
"""


class RepositoryException(Exception):
    """Base exception for repository operations."""

    pass


class EntityNotFoundException(RepositoryException):
    """Entity not found in the store."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with ID {entity_id} not found")


class DuplicateEntityException(RepositoryException):
    """Duplicate entity violation."""

    def __init__(self, message: str = "Entity already exists"):
        self.message = message
        super().__init__(message)


class ImmutableEntityException(RepositoryException):
    """Stored entity cannot be modified (evaluations)."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with ID {entity_id} cannot be modified once stored")


class StorageBackendException(RepositoryException):
    """Persistence backend failure (unreadable file, Redis down, ...)."""

    def __init__(self, message: str = "Storage backend failure"):
        self.message = message
        super().__init__(message)


class InvalidThresholdsException(Exception):
    """Level thresholds rejected at edit time."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class FeedbackGenerationError(Exception):
    """The external feedback generator failed to produce text."""

    pass
