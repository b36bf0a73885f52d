"""Library reference management for Android ``project.properties`` files."""

import enum
import logging
import re
from pathlib import Path

from .config import LIBRARY_REFERENCE_PREFIX, TARGET_KEY, ProjectConfig
from .exceptions import ReferenceNotFoundError
from .fileio import FileSystem, LocalFileSystem
from .properties import PropertiesDocument, parse, serialize
from .types import LibraryReference, ReferenceMap

logger = logging.getLogger(__name__)

# Pattern for reference keys: android.library.reference.<N>, N >= 1
REFERENCE_KEY_PATTERN = re.compile(r"^" + re.escape(LIBRARY_REFERENCE_PREFIX) + r"([0-9]+)$")


class MissingReferencePolicy(enum.Enum):
    """What ``remove_project_reference`` does when the value is not referenced."""

    RAISE = "raise"
    IGNORE = "ignore"


def reference_key(index: int) -> str:
    """Return the property key for reference number ``index``."""
    return f"{LIBRARY_REFERENCE_PREFIX}{index}"


def extract_references(document: PropertiesDocument) -> list[LibraryReference]:
    """Collect library references from a document, ascending by index.

    Keys with a zero index are not references.
    """
    references: list[LibraryReference] = []
    for key, value in document:
        match = REFERENCE_KEY_PATTERN.match(key)
        if not match:
            continue
        index = int(match.group(1))
        if index < 1:
            continue
        references.append(LibraryReference(index=index, key=key, value=value))

    references.sort(key=lambda reference: reference.index)
    return references


def renumber_references(
    document: PropertiesDocument, references: list[LibraryReference]
) -> list[LibraryReference]:
    """Rename reference keys in place so indices run ``1..len(references)``.

    ``references`` must be ascending by index. Line positions and values are
    kept. Returns the renumbered references.
    """
    renumbered = [
        LibraryReference(index=new_index, key=reference_key(new_index), value=reference.value)
        for new_index, reference in enumerate(references, start=1)
    ]
    changed = [
        (old, new) for old, new in zip(references, renumbered, strict=True) if old.key != new.key
    ]
    if not changed:
        return renumbered

    # Move changed keys through placeholders so a shift never collides with a live key
    for old, _new in changed:
        document.rename(old.key, f"{old.key}\0renumber")
    for old, new in changed:
        document.rename(f"{old.key}\0renumber", new.key)
        logger.debug(f"Renumbered {old.key} -> {new.key}")

    return renumbered


class AndroidProjectPropertiesManager:
    """Reads and updates library references in ``<directory>/project.properties``.

    Every operation reads the file, transforms it in memory and writes it back;
    nothing is cached between calls. Mutating operations leave reference
    indices contiguous from 1, repairing any gaps in the input.
    """

    def __init__(
        self,
        directory_path: str | Path,
        fs: FileSystem | None = None,
        missing_policy: MissingReferencePolicy = MissingReferencePolicy.RAISE,
    ) -> None:
        self.config = ProjectConfig.from_directory(directory_path)
        self.fs: FileSystem = fs if fs is not None else LocalFileSystem()
        self.missing_policy = missing_policy

    @property
    def properties_path(self) -> Path:
        return self.config.properties_path

    def _load(self) -> PropertiesDocument:
        text = self.fs.read_text(self.properties_path)
        return parse(text)

    def _save(self, document: PropertiesDocument) -> None:
        self.fs.write_file(self.properties_path, serialize(document))
        logger.debug(f"Saved {len(document)} properties to {self.properties_path}")

    def get_library_references(self) -> list[LibraryReference]:
        """Return all library references, ascending by index.

        Raises:
            FileOperationError: If the properties file cannot be read
            ParseError: If the properties file is malformed
        """
        return extract_references(self._load())

    def get_project_references(self) -> ReferenceMap:
        """Return library references as a mapping of index to value.

        Raises:
            FileOperationError: If the properties file cannot be read
            ParseError: If the properties file is malformed
        """
        return {reference.index: reference.value for reference in self.get_library_references()}

    def add_project_reference(self, value: str) -> int:
        """Append a library reference with the next free index.

        The same value may be referenced more than once.

        Args:
            value: Referenced library path

        Returns:
            Index assigned to the new reference

        Raises:
            FileOperationError: If the properties file cannot be read or written
            ParseError: If the properties file is malformed
        """
        document = self._load()
        references = renumber_references(document, extract_references(document))

        next_index = max((reference.index for reference in references), default=0) + 1
        document.append(reference_key(next_index), value)

        self._save(document)
        logger.info(f"Added library reference {next_index}: {value}")
        return next_index

    def remove_project_reference(self, value: str) -> int | None:
        """Remove the first library reference whose value is exactly ``value``.

        References after it move down by one index; everything else keeps its
        position.

        Args:
            value: Referenced library path to remove

        Returns:
            Index the removed reference had, or ``None`` if nothing matched and
            the manager ignores missing references

        Raises:
            ReferenceNotFoundError: If nothing matched and the policy is ``RAISE``
            FileOperationError: If the properties file cannot be read or written
            ParseError: If the properties file is malformed
        """
        document = self._load()
        references = extract_references(document)

        target = next((reference for reference in references if reference.value == value), None)
        if target is None:
            if self.missing_policy is MissingReferencePolicy.RAISE:
                raise ReferenceNotFoundError(value)
            logger.warning(f"Library reference not found, nothing removed: {value}")
            return None

        document.remove(target.key)
        remaining = [reference for reference in references if reference is not target]
        renumber_references(document, remaining)

        self._save(document)
        logger.info(f"Removed library reference {target.index}: {value}")
        return target.index

    def get_target(self) -> str | None:
        """Return the build target, or ``None`` if the file does not set one."""
        return self._load().get(TARGET_KEY)

    def set_target(self, target: str) -> None:
        """Set the build target, keeping the line in place when it exists."""
        document = self._load()
        document.set(TARGET_KEY, target)
        self._save(document)
        logger.info(f"Set {TARGET_KEY} to {target}")
