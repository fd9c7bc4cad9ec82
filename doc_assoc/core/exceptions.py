"""DocAssoc exception hierarchy.

Every error raised by the association layer derives from DocAssocError.
Errors surface synchronously to the caller of the failing operation.
"""

from __future__ import annotations


class DocAssocError(Exception):
    """Base exception for all DocAssoc errors."""


# --- Type resolution ---


class TypeResolutionError(DocAssocError):
    """Base for document type registry errors."""


class UnresolvedTypeError(TypeResolutionError):
    """Raised when a type name is not registered at resolution time."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"Unresolved document type: '{type_name}'")


# --- Associations ---


class AssociationError(DocAssocError):
    """Base for association declaration and assignment errors."""


class AssociationTypeError(AssociationError):
    """Raised when an assigned or appended value fails the association's type check."""

    def __init__(self, name: str, owner: str, expected: str, value: str) -> None:
        self.name = name
        self.owner = owner
        self.expected = expected
        self.value = value
        super().__init__(
            f"Invalid value for association '{name}' of {owner}: "
            f"expected {expected}, got {value}"
        )


class AssociationOptionsError(AssociationError):
    """Raised when an association is declared with invalid options."""

    def __init__(self, name: str, detail: str) -> None:
        self.name = name
        super().__init__(f"Invalid options for association '{name}': {detail}")


class UnknownAssociationError(AssociationError):
    """Raised when a registry is asked for an association it does not hold."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Association not found: '{name}'")


# --- Store ---


class StoreError(DocAssocError):
    """Base for document store errors."""


class StoreNotConfiguredError(StoreError):
    """Raised when a document class is used before a store is bound to it."""

    def __init__(self, class_name: str) -> None:
        self.class_name = class_name
        super().__init__(f"No store configured for {class_name}")


class DocumentNotFoundError(StoreError):
    """Raised when a document key does not exist in its bucket."""

    def __init__(self, bucket: str, key: str) -> None:
        self.bucket = bucket
        self.key = key
        super().__init__(f"Document not found: {bucket}/{key}")
