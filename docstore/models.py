"""
Shared data models for the document store.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterator, Mapping, Optional, Tuple
from dataclasses import dataclass, field

from .exceptions import NotFoundError


@dataclass(frozen=True)
class Document:
    """A single loaded source file split into ordered segments."""

    id: str
    raw_text: str
    segments: Tuple[str, ...]
    source_path: Optional[Path] = field(default=None, compare=False)

    def __post_init__(self):
        # Accept any iterable but always store a tuple
        object.__setattr__(self, "segments", tuple(self.segments))
        if not self.segments:
            raise ValueError(f"Document '{self.id}' must have at least one segment")

    @property
    def body(self) -> str:
        """Primary article body (segment 0)."""
        return self.segments[0]

    @property
    def related_blocks(self) -> Tuple[str, ...]:
        """Appended content blocks following the primary body."""
        return self.segments[1:]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "source_path": str(self.source_path) if self.source_path else None,
            "segment_count": len(self.segments),
            "segments": list(self.segments),
        }


class DocumentStore:
    """
    Immutable in-memory mapping from document id to Document.

    Iteration follows load order. There is no mutation API: a refreshed
    collection is a new DocumentStore (see StoreHolder).
    """

    def __init__(self, documents: Mapping[str, Document], separator: str):
        self._documents: Mapping[str, Document] = MappingProxyType(dict(documents))
        self.separator = separator

    def __getitem__(self, doc_id: str) -> Document:
        return self._documents[doc_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._documents)

    def __contains__(self, doc_id) -> bool:
        return doc_id in self._documents

    def __len__(self) -> int:
        return len(self._documents)

    def __eq__(self, other) -> bool:
        if not isinstance(other, DocumentStore):
            return NotImplemented
        return (
            self.separator == other.separator
            and list(self._documents.items()) == list(other._documents.items())
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"DocumentStore({len(self)} documents, separator={self.separator!r})"

    def get(self, doc_id: str) -> Document:
        """
        Look up a document by id.

        Args:
            doc_id: Document identifier (filename stem)

        Returns:
            The matching Document

        Raises:
            NotFoundError: If no document has this id
        """
        try:
            return self._documents[doc_id]
        except KeyError:
            raise NotFoundError(f"No document with id '{doc_id}'") from None

    def segments_of(self, doc_id: str) -> Tuple[str, ...]:
        return self.get(doc_id).segments

    def list_ids(self) -> FrozenSet[str]:
        return frozenset(self._documents)

    def documents(self) -> Dict[str, Document]:
        """Return a plain dict copy of the mapping in load order."""
        return dict(self._documents)
