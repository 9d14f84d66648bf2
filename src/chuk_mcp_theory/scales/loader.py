"""
Scale library - discovers and loads scale types described in YAML.

Scales can come from:
1. Built-in library (shipped with package)
2. Project scales (user's project/scales directory)

Built-in ScaleType constants are always available; catalog files add more
patterns (modes of melodic minor, exotic heptatonics) without code changes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_theory.core.note import NoteName
from chuk_mcp_theory.core.scale import BUILTIN_SCALE_TYPES, Scale, ScaleType
from chuk_mcp_theory.errors import InvalidScale
from chuk_mcp_theory.models.scale import ScaleDefinition, ScaleMetadata

logger = logging.getLogger(__name__)


def _normalize(name: str) -> str:
    return name.strip().lower().replace(" ", "_").replace("-", "_")


class ScaleLibrary:
    """
    Discovers and loads scale definitions.

    Scales are loaded from YAML files in the library and project directories.
    Project scales override library scales with the same name, and both
    override the built-in constants.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the scale library.

        Args:
            library_path: Path to built-in scale library
            project_path: Path to project scales directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, ScaleDefinition] | None = None

    def _definitions(self) -> dict[str, ScaleDefinition]:
        if self._cache is not None:
            return self._cache

        definitions: dict[str, ScaleDefinition] = {}
        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                for definition in self._load_scale_file(path):
                    definitions[_normalize(definition.name)] = definition

        self._cache = definitions
        logger.debug("Loaded %d catalog scales", len(definitions))
        return definitions

    def list_scales(self) -> list[ScaleMetadata]:
        """
        List all catalog scales.

        Returns scales from both library and project, with project
        scales taking precedence.
        """
        return [ScaleMetadata.from_definition(d) for d in self._definitions().values()]

    def names(self) -> list[str]:
        """Every name get_scale_type accepts: built-ins, catalog names and aliases."""
        names = set(BUILTIN_SCALE_TYPES)
        for key, definition in self._definitions().items():
            names.add(key)
            names.update(_normalize(alias) for alias in definition.aliases)
        return sorted(names)

    def get_scale_type(self, name: str) -> ScaleType:
        """
        Get a scale type by name or alias.

        Catalog entries win over built-ins with the same name.

        Raises:
            InvalidScale: If no scale has this name
        """
        key = _normalize(name)
        definitions = self._definitions()
        if key in definitions:
            return definitions[key].to_scale_type()
        for definition in definitions.values():
            if key in (_normalize(alias) for alias in definition.aliases):
                return definition.to_scale_type()
        return ScaleType.parse(key)

    def get_scale(self, root: str, name: str) -> Scale:
        """Resolve a root note and scale name to a spelled Scale."""
        return Scale(NoteName.parse(root), self.get_scale_type(name))

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library scale file to the project for customization.

        Args:
            name: Scale file name (without .yaml)

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise InvalidScale("No project path configured")

        library_file = self.library_path / f"{name}.yaml"
        if not library_file.exists():
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{name}.yaml"
        if dest_file.exists():
            raise InvalidScale(f"Scale file already exists in project: {name}")

        dest_file.write_text(library_file.read_text())
        self.clear_cache()
        return dest_file

    def _load_scale_file(self, path: Path) -> list[ScaleDefinition]:
        """Load scale definitions from a YAML file, skipping invalid entries."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError):
            logger.warning("Could not read scale file %s", path, exc_info=True)
            return []
        return self._parse_scales(data, path)

    def _parse_scales(self, data: Any, path: Path) -> list[ScaleDefinition]:
        """Parse one scale or a `scales:` list from YAML data."""
        if not isinstance(data, dict):
            logger.warning("Scale file %s is not a mapping", path)
            return []
        entries = data.get("scales", [data])

        definitions = []
        for entry in entries:
            try:
                definitions.append(ScaleDefinition.model_validate(entry))
            except ValidationError as e:
                logger.warning("Skipping invalid scale in %s: %s", path, e)
        return definitions

    def clear_cache(self) -> None:
        """Clear the scale cache."""
        self._cache = None
