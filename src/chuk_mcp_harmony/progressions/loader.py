"""
Progression loader - discovers and loads progression documents.

Progressions can come from:
1. Built-in library (shipped with package)
2. Project progressions (user's project/progressions directory)
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from chuk_mcp_harmony.models.progression import Progression

logger = logging.getLogger(__name__)


class ProgressionLoader:
    """
    Discovers and loads progression definitions.

    Progressions are loaded from YAML files in the library and project
    directories. Project progressions override library progressions with
    the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the progression loader.

        Args:
            library_path: Path to built-in progression library
            project_path: Path to project progressions directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, Progression] = {}

    def list_progressions(self) -> list[Progression]:
        """
        List all available progressions.

        Returns progressions from both library and project, with project
        progressions taking precedence. Sorted by name.
        """
        progressions: dict[str, Progression] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                progression = self._load_progression_file(path)
                if progression:
                    progressions[progression.name] = progression

        return [progressions[name] for name in sorted(progressions)]

    def get_progression(self, name: str) -> Progression | None:
        """
        Get a progression by name.

        Project progressions take precedence over library progressions.

        Args:
            name: Progression name (file stem)

        Returns:
            Progression if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{name}.yaml"
            if path.exists():
                progression = self._load_progression_file(path)
                if progression:
                    self._cache[name] = progression
                    return progression

        return None

    def save_progression(self, progression: Progression) -> Path:
        """
        Save a progression to the project directory.

        Returns:
            Path to the written file
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        self.project_path.mkdir(parents=True, exist_ok=True)
        path = self.project_path / f"{progression.name}.yaml"
        with open(path, "w") as f:
            yaml.safe_dump(progression.to_yaml_dict(), f, sort_keys=False)

        self._cache.pop(progression.name, None)
        logger.info(f"Saved progression '{progression.name}' to {path}")
        return path

    def _load_progression_file(self, path: Path) -> Progression | None:
        """Load a progression from a YAML file; None if unreadable or invalid."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return Progression.from_yaml_dict(data)
        except (OSError, yaml.YAMLError, ValidationError, KeyError, TypeError) as e:
            logger.warning(f"Skipping progression file {path}: {e}")
            return None

    def clear_cache(self) -> None:
        """Clear the progression cache."""
        self._cache.clear()
