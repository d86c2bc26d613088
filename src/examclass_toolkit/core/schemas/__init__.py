"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_document,
    check_solution_nesting,
    ValidationError,
    SUPPORTED_API_MAJOR,
)

__all__ = [
    "validate_document",
    "check_solution_nesting",
    "ValidationError",
    "SUPPORTED_API_MAJOR",
]
