"""
Owned, swappable reference to the current DocumentStore.
"""

import logging
import threading
from pathlib import Path
from typing import Optional, Union

from .loader import load
from .models import DocumentStore

logger = logging.getLogger(__name__)


class StoreHolder:
    """
    Holds the "current" store for a hosting application.

    Readers always see a complete store: refresh() builds a new store off to
    the side and only swaps the reference once loading has succeeded. A
    failed refresh leaves the previous store in place and re-raises.
    """

    def __init__(
        self,
        directory: Union[str, Path],
        separator: Optional[str] = None,
        load_now: bool = True,
    ):
        """
        Initialize the holder.

        Args:
            directory: Content directory to load from
            separator: Literal separator token, or "auto"
            load_now: Whether to load the store immediately
        """
        self.directory = Path(directory)
        self.separator = separator
        self._lock = threading.Lock()
        self._store: Optional[DocumentStore] = None

        if load_now:
            self.refresh()

    @property
    def loaded(self) -> bool:
        return self._store is not None

    @property
    def current(self) -> DocumentStore:
        store = self._store
        if store is None:
            raise RuntimeError(f"No document store loaded yet for {self.directory}")
        return store

    def refresh(self) -> DocumentStore:
        """
        Load a new store from the directory and make it current.

        Returns:
            The newly loaded store
        """
        # Refreshes are serialized so an older load never replaces a newer one
        with self._lock:
            store = load(self.directory, separator=self.separator)
            previous = self._store
            self._store = store

        if previous is None:
            logger.info(f"Loaded document store with {len(store)} documents")
        else:
            logger.info(f"Swapped document store: {len(previous)} -> {len(store)} documents")
        return store
