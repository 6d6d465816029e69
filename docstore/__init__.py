"""
Document Store & Relation Resolver
==================================

Loads a directory of static articles into an immutable, queryable store.
Each article is split on a literal separator token into ordered segments;
segment 0 is the article body and any later segments are related content
blocks, from which a "related documents" relation is derived.
"""

__version__ = "0.1.0"

from .exceptions import (
    DocumentStoreError,
    NotFoundError,
    DuplicateIdError,
    ReadError,
    SeparatorConflictError,
)
from .models import Document, DocumentStore
from .loader import DocumentLoader, load, get, segments_of, list_ids
from .relations import RelationIndex
from .holder import StoreHolder

__all__ = [
    "Document",
    "DocumentStore",
    "DocumentLoader",
    "RelationIndex",
    "StoreHolder",
    "load",
    "get",
    "segments_of",
    "list_ids",
    "DocumentStoreError",
    "NotFoundError",
    "DuplicateIdError",
    "ReadError",
    "SeparatorConflictError",
]
