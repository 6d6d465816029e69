"""
Loads a directory of text files into an immutable DocumentStore.
"""

import logging
from pathlib import Path
from typing import Dict, FrozenSet, List, Optional, Tuple, Union

from . import config
from .exceptions import DuplicateIdError, NotFoundError, ReadError
from .models import Document, DocumentStore
from .splitter import SegmentSplitter, discover_separator

logger = logging.getLogger(__name__)


class DocumentLoader:
    """
    Reads every file directly under a content directory into Documents.

    This class is responsible for:
    1. Enumerating files (non-recursive, sorted by filename)
    2. Deriving document ids from filename stems and rejecting collisions
    3. Decoding file contents and splitting them on the separator token

    A load either returns a complete store or raises; a single bad file
    aborts the whole load.
    """

    def __init__(
        self,
        directory: Union[str, Path],
        separator: Optional[str] = None,
        encoding: Optional[str] = None,
    ):
        """
        Initialize the loader.

        Args:
            directory: Path to the content directory
            separator: Literal separator token, or "auto" to discover it from
                the files (default: DOCSTORE_SEPARATOR)
            encoding: Text encoding of the files (default: DOCSTORE_ENCODING)
        """
        self.directory = Path(directory)
        self.separator = separator or config.SEPARATOR or config.DEFAULT_SEPARATOR
        self.encoding = encoding or config.ENCODING

    def list_files(self) -> List[Path]:
        """
        List the regular files directly under the content directory.

        Returns:
            File paths sorted by filename

        Raises:
            NotFoundError: If the directory does not exist or is not a directory
            ReadError: If the directory cannot be listed
        """
        try:
            exists = self.directory.exists()
            is_dir = exists and self.directory.is_dir()
        except OSError as e:
            logger.error(f"Error accessing {self.directory}: {str(e)}")
            raise ReadError(self.directory, str(e)) from e

        if not exists:
            logger.error(f"Content directory not found: {self.directory}")
            raise NotFoundError(f"Content directory not found: {self.directory}")
        if not is_dir:
            logger.error(f"Content path is not a directory: {self.directory}")
            raise NotFoundError(f"Content path is not a directory: {self.directory}")

        try:
            files = [path for path in self.directory.iterdir() if path.is_file()]
        except OSError as e:
            logger.error(f"Error listing {self.directory}: {str(e)}")
            raise ReadError(self.directory, str(e)) from e

        return sorted(files, key=lambda p: p.name)

    def assign_ids(self, files: List[Path]) -> List[Tuple[str, Path]]:
        """
        Derive a document id for each file, failing on the first collision.

        Raises:
            DuplicateIdError: If two files share a filename stem
        """
        seen: Dict[str, Path] = {}
        for path in files:
            doc_id = path.stem
            if doc_id in seen:
                logger.error(f"Duplicate document id '{doc_id}': {seen[doc_id].name}, {path.name}")
                raise DuplicateIdError(doc_id, [seen[doc_id], path])
            seen[doc_id] = path
        return list(seen.items())

    def read_text(self, path: Path) -> str:
        """
        Read a file as text without newline translation.

        Raises:
            ReadError: If the file cannot be read or decoded
        """
        try:
            data = path.read_bytes()
        except OSError as e:
            logger.error(f"Error reading {path}: {str(e)}")
            raise ReadError(path, str(e)) from e

        try:
            return data.decode(self.encoding)
        except UnicodeDecodeError as e:
            logger.error(f"Error decoding {path} as {self.encoding}: {str(e)}")
            raise ReadError(path, f"not valid {self.encoding} text") from e

    def resolve_separator(self, texts: List[str]) -> str:
        """Return the configured separator, discovering it when set to auto."""
        if self.separator != config.AUTO_SEPARATOR:
            return self.separator

        discovered = discover_separator(texts)
        return discovered or config.DEFAULT_SEPARATOR

    def load(self) -> DocumentStore:
        """
        Load every file in the directory into a DocumentStore.

        Returns:
            A fully populated, immutable DocumentStore

        Raises:
            NotFoundError: If the directory does not exist
            DuplicateIdError: If two files normalize to the same id
            ReadError: If any file cannot be read as text
        """
        logger.info(f"Loading documents from {self.directory}")

        entries = self.assign_ids(self.list_files())
        texts = [self.read_text(path) for _, path in entries]

        separator = self.resolve_separator(texts)
        splitter = SegmentSplitter(separator)

        documents = {}
        for (doc_id, path), text in zip(entries, texts):
            documents[doc_id] = Document(
                id=doc_id,
                raw_text=text,
                segments=tuple(splitter.split(text)),
                source_path=path,
            )

        related_count = sum(1 for doc in documents.values() if len(doc.segments) > 1)
        logger.info(
            f"Loaded {len(documents)} documents ({related_count} with related blocks) "
            f"from {self.directory}"
        )
        return DocumentStore(documents, separator=separator)


def load(
    directory_path: Union[str, Path],
    separator: Optional[str] = None,
    encoding: Optional[str] = None,
) -> DocumentStore:
    """
    Load a content directory into an immutable DocumentStore.

    Args:
        directory_path: Path to a readable directory of text files
        separator: Literal separator token, or "auto" (default: DOCSTORE_SEPARATOR)
        encoding: Text encoding of the files (default: DOCSTORE_ENCODING)

    Returns:
        A fully populated DocumentStore
    """
    return DocumentLoader(directory_path, separator=separator, encoding=encoding).load()


def get(store: DocumentStore, doc_id: str) -> Document:
    return store.get(doc_id)


def segments_of(store: DocumentStore, doc_id: str) -> Tuple[str, ...]:
    return store.segments_of(doc_id)


def list_ids(store: DocumentStore) -> FrozenSet[str]:
    return store.list_ids()
