"""Project configuration for projprops operations."""

from dataclasses import dataclass
from pathlib import Path

PROJECT_PROPERTIES_FILE = "project.properties"
LIBRARY_REFERENCE_PREFIX = "android.library.reference."
TARGET_KEY = "target"


@dataclass
class ProjectConfig:
    """Configuration for project file paths."""

    project_dir: Path
    properties_path: Path

    @classmethod
    def from_directory(cls, directory: str | Path) -> "ProjectConfig":
        """Create configuration from an Android project directory.

        Args:
            directory: Path to the project root directory

        Returns:
            ProjectConfig with the standard properties file path
        """
        project_dir = Path(directory)
        return cls(
            project_dir=project_dir,
            properties_path=project_dir / PROJECT_PROPERTIES_FILE,
        )
