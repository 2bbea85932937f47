"""Type-safe YAML loader for project settings files.

Provides a configured ruamel.yaml instance. JSON documents load through the
same instance since JSON is a subset of YAML 1.2.
"""

from pathlib import Path
from typing import Protocol, TextIO, Union, cast

from ruamel.yaml import YAML

# Recursive type for nested YAML structures
ConfigValue = Union[str, int, float, bool, None, 'ConfigDict', list['ConfigValue']]
ConfigDict = dict[str, ConfigValue]


class YAMLLoader(Protocol):
    """Protocol for the subset of the ruamel.yaml API used here."""
    preserve_quotes: bool

    def load(self, stream: TextIO) -> ConfigValue:
        """Load YAML from stream."""
        ...


def _create_yaml_loader() -> YAMLLoader:
    """Create the round-trip YAML loader instance.

    Returns:
        YAML loader with quote preservation.
    """
    yaml_obj = YAML()
    yaml_obj.preserve_quotes = True
    return cast(YAMLLoader, yaml_obj)


yaml: YAMLLoader = _create_yaml_loader()


def load_yaml_file(file_path: Path) -> ConfigValue:
    """Load a YAML (or JSON) file.

    ruamel.yaml's load() is safe by default (unlike PyYAML's load()).

    Args:
        file_path: Path to the file to load

    Returns:
        The parsed document. Callers check the shape themselves.

    Raises:
        FileNotFoundError: If file does not exist
        ruamel.yaml.YAMLError: If the document cannot be parsed
    """
    if not file_path.exists():
        raise FileNotFoundError(f"YAML file not found: {file_path}")

    with file_path.open(encoding='utf-8') as f:
        return yaml.load(f)

