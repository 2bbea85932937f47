"""Locate and load the project settings file."""

from __future__ import annotations

from pathlib import Path

from ruamel.yaml.error import YAMLError

from frontgen.core.configuration import Configuration, load
from frontgen.core.errors import ConfigError
from frontgen.helpers.yaml_loader import load_yaml_file

SETTINGS_FILENAMES = (".frontgen.yaml", ".frontgen.yml", ".frontgen.json")


def find_settings_file(start: Path | None = None) -> Path | None:
    """Search upwards from ``start`` (default: cwd) for a settings file.

    Returns:
        Path to the first settings file found, or None.
    """
    current = (start or Path.cwd()).resolve()
    for parent in [current, *current.parents]:
        for filename in SETTINGS_FILENAMES:
            candidate = parent / filename
            if candidate.is_file():
                return candidate
    return None


def get_project_root(settings_file: Path | None = None) -> Path:
    """Return the directory generated paths are relative to.

    That is the directory holding the settings file; falls back to the
    current directory when there is none.
    """
    if settings_file is None:
        settings_file = find_settings_file()
    if settings_file is None:
        return Path.cwd()
    return settings_file.resolve().parent


def load_project_config(settings_file: Path | None = None) -> Configuration | ConfigError:
    """Load and validate project settings.

    Args:
        settings_file: Explicit settings path. Discovered from the current
            directory when omitted.

    Returns:
        Configuration, or ConfigError with field ``<file>`` for I/O and
        parse problems.
    """
    if settings_file is None:
        settings_file = find_settings_file()
    if settings_file is None:
        names = ", ".join(SETTINGS_FILENAMES)
        return ConfigError("<file>", f"no settings file found (looked for {names})")

    try:
        raw = load_yaml_file(settings_file)
    except FileNotFoundError:
        return ConfigError("<file>", f"settings file not found: {settings_file}")
    except UnicodeDecodeError as exc:
        return ConfigError(
            "<file>", f"{settings_file.name} is not valid UTF-8: {exc.reason}",
        )
    except OSError as exc:
        return ConfigError("<file>", f"cannot read {settings_file}: {exc.strerror}")
    except YAMLError as exc:
        return ConfigError("<file>", f"cannot parse {settings_file.name}: {exc}")

    return load(raw)
