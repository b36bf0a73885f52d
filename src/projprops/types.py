"""Type definitions for projprops data structures."""

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class LibraryReference:
    """A numbered ``android.library.reference.<N>`` entry."""

    index: int
    key: str
    value: str


# Type aliases for common data structures
PropertyPair = tuple[str, str]
ReferenceMap = dict[int, str]
