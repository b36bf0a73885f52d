"""Parsing and serialization of line-based ``key=value`` properties text."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .exceptions import InvalidPropertyError, ParseError
from .types import PropertyPair

logger = logging.getLogger(__name__)


class PropertiesDocument:
    """Ordered ``key=value`` pairs with O(1) lookup by key.

    Pairs keep file order; new pairs are added at the end. Keys are unique.
    """

    def __init__(
        self, pairs: list[PropertyPair] | None = None, *, trailing_newline: bool = False
    ) -> None:
        self._pairs: list[PropertyPair] = []
        self._positions: dict[str, int] = {}
        self._trailing_newline = trailing_newline
        for key, value in pairs or []:
            self.append(key, value)

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[PropertyPair]:
        return iter(list(self._pairs))

    def __contains__(self, key: object) -> bool:
        return key in self._positions

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PropertiesDocument):
            return NotImplemented
        return self._pairs == other._pairs and self.trailing_newline == other.trailing_newline

    def __repr__(self) -> str:
        return f"PropertiesDocument({self._pairs!r}, trailing_newline={self.trailing_newline})"

    @property
    def trailing_newline(self) -> bool:
        """Whether serialized text ends with ``\\n``; never set for an empty document."""
        return self._trailing_newline and bool(self._pairs)

    @trailing_newline.setter
    def trailing_newline(self, value: bool) -> None:
        self._trailing_newline = value

    @property
    def pairs(self) -> list[PropertyPair]:
        return list(self._pairs)

    def keys(self) -> list[str]:
        return [key for key, _ in self._pairs]

    def get(self, key: str, default: str | None = None) -> str | None:
        position = self._positions.get(key)
        if position is None:
            return default
        return self._pairs[position][1]

    def append(self, key: str, value: str) -> None:
        """Add a new pair at the end of the document."""
        _check_pair(key, value)
        if key in self._positions:
            raise KeyError(f"Duplicate property key: {key}")
        self._positions[key] = len(self._pairs)
        self._pairs.append((key, value))

    def set(self, key: str, value: str) -> None:
        """Replace the value of ``key`` in place, or append it when absent."""
        _check_pair(key, value)
        position = self._positions.get(key)
        if position is None:
            self.append(key, value)
        else:
            self._pairs[position] = (key, value)

    def rename(self, old_key: str, new_key: str) -> None:
        """Change a key without moving its pair or touching its value."""
        if old_key == new_key:
            return
        _check_pair(new_key, "")
        if new_key in self._positions:
            raise KeyError(f"Duplicate property key: {new_key}")
        position = self._positions.pop(old_key)
        self._pairs[position] = (new_key, self._pairs[position][1])
        self._positions[new_key] = position

    def remove(self, key: str) -> str:
        """Delete ``key`` and return its value."""
        position = self._positions.pop(key)
        _, value = self._pairs.pop(position)
        # Pairs after the removed one shift left by one
        for later_key, _ in self._pairs[position:]:
            self._positions[later_key] -= 1
        return value


def _check_pair(key: str, value: str) -> None:
    """Reject pairs that would not read back as the same key and value."""
    if "=" in key or "\n" in key:
        raise InvalidPropertyError(f"Property key may not contain '=' or a newline: {key!r}")
    if "\n" in value:
        raise InvalidPropertyError(f"Property value may not contain a newline: {value!r}")


def parse(text: str) -> PropertiesDocument:
    """Parse properties text into a :class:`PropertiesDocument`.

    Each non-empty line is split on its first ``=``; the value is everything
    after it, untrimmed. A key repeated later in the text keeps its first
    position and takes the later value.

    Args:
        text: Raw file contents using ``\\n`` line separators

    Returns:
        Document with pairs in file order

    Raises:
        ParseError: If a non-empty line contains no ``=``
    """
    document = PropertiesDocument()

    for line_number, line in enumerate(text.split("\n"), start=1):
        if not line:
            continue
        key, sep, value = line.partition("=")
        if not sep:
            raise ParseError(line_number, line)
        if key in document:
            logger.warning(f"Duplicate key '{key}' on line {line_number}, keeping last value")
        document.set(key, value)

    document.trailing_newline = bool(document) and text.endswith("\n")
    logger.debug(f"Parsed {len(document)} properties")
    return document


def serialize(document: PropertiesDocument) -> str:
    """Render a document as ``key=value`` lines joined by ``\\n``.

    A trailing ``\\n`` is written only when the document was parsed from text
    that had one.
    """
    text = "\n".join(f"{key}={value}" for key, value in document)
    if document.trailing_newline and text:
        text += "\n"
    return text
