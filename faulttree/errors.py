"""Exceptions raised while building and classifying fault trees."""

from __future__ import annotations

from typing import Optional


class FaultTreeError(Exception):
    """Base exception for all faulttree errors."""


class LockedModificationError(FaultTreeError, RuntimeError):
    """A registration was attempted after the tree was classified."""


class DuplicateIdentifierError(FaultTreeError, ValueError):
    """An identifier collides with one already defined in the tree."""

    def __init__(self, identifier: str, message: Optional[str] = None) -> None:
        self.identifier = identifier
        super().__init__(message or f"Trying to doubly define '{identifier}'")


class UninitializedEventError(FaultTreeError, ValueError):
    """A child reference resolves to neither a gate nor a primary event."""

    def __init__(
        self,
        identifier: str,
        parent: Optional[str] = None,
        message: Optional[str] = None,
    ) -> None:
        self.identifier = identifier
        self.parent = parent
        where = f" (child of gate '{parent}')" if parent else ""
        super().__init__(message or f"Event '{identifier}'{where} is not initialized")
