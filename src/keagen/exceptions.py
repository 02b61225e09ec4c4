"""Exceptions for the Kea configuration generator."""

from typing import Any, Dict, Optional


class KeaGenError(Exception):
    """Base exception for keagen."""


class IncompleteConfigError(KeaGenError, ValueError):
    """A required section was empty, so only part of the document was built."""

    def __init__(self, missing: str, document: Optional[Dict[str, Any]] = None):
        self.missing = missing
        self.document = document if document is not None else {}
        super().__init__(f"{missing} is empty, document is incomplete")
