"""
Exceptions raised while loading and querying a document store.
"""

from pathlib import Path
from typing import Sequence, Union


class DocumentStoreError(Exception):
    """Base class for all document store errors."""


class NotFoundError(DocumentStoreError, LookupError):
    """A content directory or a document id does not exist."""


class DuplicateIdError(DocumentStoreError):
    """Two files in the content directory normalize to the same document id."""

    def __init__(self, doc_id: str, paths: Sequence[Union[str, Path]]):
        self.doc_id = doc_id
        self.paths = [Path(p) for p in paths]
        names = ", ".join(p.name for p in self.paths)
        super().__init__(f"Duplicate document id '{doc_id}' from files: {names}")


class ReadError(DocumentStoreError):
    """A file could not be read or decoded as text."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not read {self.path}: {reason}")


class SeparatorConflictError(DocumentStoreError):
    """Separator discovery found more than one distinct token."""

    def __init__(self, tokens: Sequence[str]):
        self.tokens = sorted(tokens)
        super().__init__(f"Found {len(self.tokens)} distinct separator tokens: {self.tokens}")
