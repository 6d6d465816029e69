"""
Related-document resolution from co-located segments.
"""

import logging
from typing import Dict, FrozenSet, List, Set, Tuple

from .exceptions import NotFoundError
from .models import DocumentStore

logger = logging.getLogger(__name__)


def _normalize(segment: str) -> str:
    return segment.strip()


class RelationIndex:
    """
    Undirected "related documents" relation derived from a DocumentStore.

    Two documents are related when the primary body of one appears as an
    appended segment of the other. Segments are compared with surrounding
    whitespace stripped; blank segments never match anything.
    """

    def __init__(
        self,
        adjacency: Dict[str, FrozenSet[str]],
        orphans: Dict[str, Tuple[str, ...]],
    ):
        self._adjacency = adjacency
        self._orphans = orphans

    @classmethod
    def build(cls, store: DocumentStore) -> "RelationIndex":
        """
        Build the relation index for a store.

        Args:
            store: Loaded document store

        Returns:
            RelationIndex covering every document in the store
        """
        # Several documents may share an identical body
        bodies: Dict[str, List[str]] = {}
        for doc_id in store:
            body = _normalize(store[doc_id].body)
            if body:
                bodies.setdefault(body, []).append(doc_id)

        adjacency: Dict[str, Set[str]] = {doc_id: set() for doc_id in store}
        orphans: Dict[str, List[str]] = {doc_id: [] for doc_id in store}

        for doc_id in store:
            for block in store[doc_id].related_blocks:
                key = _normalize(block)
                if not key:
                    continue
                matches = [other for other in bodies.get(key, []) if other != doc_id]
                if not matches:
                    orphans[doc_id].append(block)
                for other in matches:
                    adjacency[doc_id].add(other)
                    adjacency[other].add(doc_id)

        edge_count = sum(len(related) for related in adjacency.values()) // 2
        logger.info(f"Resolved {edge_count} related-document links across {len(store)} documents")

        return cls(
            adjacency={doc_id: frozenset(related) for doc_id, related in adjacency.items()},
            orphans={doc_id: tuple(blocks) for doc_id, blocks in orphans.items()},
        )

    def related_ids(self, doc_id: str) -> FrozenSet[str]:
        """
        Return the ids of documents related to a document.

        Raises:
            NotFoundError: If the id is not in the indexed store
        """
        try:
            return self._adjacency[doc_id]
        except KeyError:
            raise NotFoundError(f"No document with id '{doc_id}'") from None

    def orphan_segments(self, doc_id: str) -> Tuple[str, ...]:
        """Appended segments of a document that match no loaded document's body."""
        try:
            return self._orphans[doc_id]
        except KeyError:
            raise NotFoundError(f"No document with id '{doc_id}'") from None

    def edges(self) -> List[Tuple[str, str]]:
        """Every related pair once, as sorted (id, id) tuples."""
        pairs = {
            tuple(sorted((doc_id, other)))
            for doc_id, related in self._adjacency.items()
            for other in related
        }
        return sorted(pairs)
