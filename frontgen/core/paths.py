"""Output path resolution.

All slug and path rules live here. Paths are POSIX strings relative to the
project root; nothing in this module touches the filesystem.
"""

from __future__ import annotations

import re
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from frontgen.core.errors import InternalInvariantViolation

if TYPE_CHECKING:
    from frontgen.core.configuration import Configuration
    from frontgen.core.requests import GenerationRequest
    from frontgen.core.rules import TemplateSelection

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")
_PLACEHOLDER_RE = re.compile(r"\{([a-z]+)\}")


def slugify(name: str) -> str:
    """Lower-case a name and collapse every other character run into '-'.

    Example:
        "My Page" -> "my-page"
        "  Main__View!! " -> "main-view"
    """
    return _NON_ALNUM_RE.sub("-", name.strip().lower()).strip("-")


def resolve_destination(
    destination_key: str,
    request: GenerationRequest,
    config: Configuration,
) -> str:
    """Expand ``{root}``, ``{directory}`` and ``{slug}`` in a destination key.

    Raises:
        InternalInvariantViolation: If the key uses an unknown placeholder.
    """
    values = {
        "root": config.root_dir,
        "directory": request.options.directory,
        "slug": slugify(request.name),
    }

    def _substitute(match: re.Match[str]) -> str:
        token = match.group(1)
        if token not in values:
            raise InternalInvariantViolation(
                f"Unknown placeholder '{{{token}}}' in destination '{destination_key}'"
            )
        return values[token]

    return _PLACEHOLDER_RE.sub(_substitute, destination_key)


def resolve(
    selection: TemplateSelection,
    request: GenerationRequest,
    config: Configuration,
) -> str:
    """Compute the output path for one template selection.

    File name is ``<slug><suffix>.<extension>`` under the expanded
    destination directory.
    """
    slug = slugify(request.name)
    if not slug:
        raise InternalInvariantViolation(
            f"Path requested for unusable name '{request.name}'"
        )
    directory = PurePosixPath(
        resolve_destination(selection.destination_key, request, config)
    )
    return str(directory / f"{slug}{selection.suffix}.{selection.extension}")
