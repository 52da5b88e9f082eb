"""
Errors raised while resolving schema references.
"""
from typing import Optional


class SchemaReferenceError(ValueError):
    """Base class for all reference resolution errors."""

    def __init__(self, message: str, reference: Optional[str] = None):
        super().__init__(message)
        self.reference = reference


class InvalidReferenceRoot(SchemaReferenceError):
    """Raised when a reference does not start at the document root (#)."""

    def __init__(self, reference: str):
        super().__init__("Schema reference must start with document root (#)", reference)


class InvalidReferenceTarget(SchemaReferenceError):
    """Raised when a reference does not point into #/definitions."""

    def __init__(self, reference: str):
        super().__init__("Schema reference must be reference to #/definitions", reference)


class ReferenceNotFound(SchemaReferenceError):
    """Raised when a reference walks through a key that does not exist."""

    def __init__(self, reference: str):
        super().__init__(f"Reference to {reference} does not exist", reference)
