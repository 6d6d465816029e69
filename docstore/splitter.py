"""
Literal splitting of raw document text into ordered segments.
"""

import re
import logging
from typing import Iterable, List, Optional, Sequence

from .exceptions import SeparatorConflictError

logger = logging.getLogger(__name__)


class SegmentSplitter:
    """
    Splits raw document text on a fixed separator token.

    The separator is an opaque marker: it is matched byte-for-byte, never as a
    regular expression and never with any knowledge of Markdown structure.
    """

    def __init__(self, separator: str):
        """
        Initialize the splitter.

        Args:
            separator: Exact literal token delimiting segments
        """
        if not separator:
            raise ValueError("Separator token must be a non-empty string")
        self.separator = separator

    def split(self, text: str) -> List[str]:
        """
        Split text into segments on the separator.

        Args:
            text: Raw document text

        Returns:
            Ordered list of segments. Never empty; text without the separator
            yields a single segment equal to the text.
        """
        return text.split(self.separator)

    def join(self, segments: Sequence[str]) -> str:
        """Reinsert the separator between segments."""
        return self.separator.join(segments)


def split_segments(text: str, separator: str) -> List[str]:
    return SegmentSplitter(separator).split(text)


def join_segments(segments: Sequence[str], separator: str) -> str:
    return SegmentSplitter(separator).join(segments)


# Tokens look like <|RELATED_DOC_SEP|> with an optional suffix before the closing bar
SEPARATOR_PATTERN = re.compile(r"<\|RELATED_DOC_SEP[^|<>\s]*\|>")


def discover_separator(texts: Iterable[str]) -> Optional[str]:
    """
    Find the separator token used across a set of documents.

    Args:
        texts: Raw text of every document in the collection

    Returns:
        The single distinct token found, or None when no document contains one

    Raises:
        SeparatorConflictError: If the documents use more than one distinct token
    """
    tokens = set()
    for text in texts:
        tokens.update(SEPARATOR_PATTERN.findall(text))

    if len(tokens) > 1:
        logger.error(f"Conflicting separator tokens: {sorted(tokens)}")
        raise SeparatorConflictError(list(tokens))

    if not tokens:
        logger.debug("No separator token found in documents")
        return None

    token = tokens.pop()
    logger.info(f"Discovered separator token: {token}")
    return token
