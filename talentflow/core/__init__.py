"""
Core Package - TalentFlow
talentflow/core/__init__.py

Core infrastructure: exceptions. Dependency providers live in
talentflow.core.dependencies and are imported from there directly.
"""

from talentflow.core.exceptions import (
    DuplicateEntityException,
    EntityNotFoundException,
    FeedbackGenerationError,
    ImmutableEntityException,
    InvalidThresholdsException,
    RepositoryException,
    StorageBackendException,
)

__all__ = [
    "DuplicateEntityException",
    "EntityNotFoundException",
    "FeedbackGenerationError",
    "ImmutableEntityException",
    "InvalidThresholdsException",
    "RepositoryException",
    "StorageBackendException",
]
