"""Generation requests: one per CLI invocation, immutable."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePosixPath

from frontgen.core.errors import Rejection
from frontgen.core.paths import slugify

DEFAULT_FACTORY_DIRECTORY = "client/app"


class Generator(str, Enum):
    """Subgenerator invoked by the request."""

    VIEW = "view"
    FACTORY = "factory"
    MODEL = "model"


class ViewType(str, Enum):
    """Value of ``--type`` for the view subgenerator."""

    PAGE = "page"
    COMPONENT = "component"
    TEMPLATE = "template"


@dataclass(frozen=True)
class RequestOptions:
    """Per-invocation flags.

    Attributes:
        dashboard: Register the generated page on the dashboard.
        no_import: Do not add an import for the generated view.
        use_template: Build the page on the shared layout template.
        directory: Destination directory for factories.
    """

    dashboard: bool = False
    no_import: bool = False
    use_template: bool = False
    directory: str = DEFAULT_FACTORY_DIRECTORY


@dataclass(frozen=True)
class GenerationRequest:
    generator: Generator
    name: str
    view_type: ViewType = ViewType.PAGE
    options: RequestOptions = field(default_factory=RequestOptions)


def normalize_directory(raw: str) -> str | None:
    """Normalize a project-relative directory to POSIX form.

    Returns:
        The normalized path, or None when it is absolute or escapes the
        project through ``..``.
    """
    candidate = raw.strip().replace("\\", "/")
    if not candidate or candidate.startswith("/"):
        return None
    parts = [part for part in PurePosixPath(candidate).parts if part != "."]
    if not parts or ".." in parts:
        return None
    return str(PurePosixPath(*parts))


def check_name(name: str) -> Rejection | None:
    """Reject a blank name or one that yields an empty slug."""
    if not name.strip():
        return Rejection("name-required", "Name cannot be empty")
    if not slugify(name):
        return Rejection(
            "name-required",
            f"Name '{name}' must contain at least one letter or digit",
        )
    return None


def build_request(
    generator: Generator,
    name: str | None,
    view_type: str = ViewType.PAGE.value,
    dashboard: bool = False,
    no_import: bool = False,
    use_template: bool = False,
    directory: str = DEFAULT_FACTORY_DIRECTORY,
) -> GenerationRequest | Rejection:
    """Build a request from raw CLI values.

    The name is checked before any other value, so a missing name is
    always reported as ``name-required``. The rule engine repeats the check
    for requests constructed directly.
    """
    name_rejection = check_name(name or "")
    if name_rejection is not None:
        return name_rejection

    try:
        parsed_type = ViewType(view_type.strip().lower())
    except ValueError:
        allowed = ", ".join(v.value for v in ViewType)
        return Rejection(
            "unsupported-view-kind",
            f"Must use a supported type: {allowed}. Got '{view_type}'",
        )

    normalized_dir = normalize_directory(directory)
    if normalized_dir is None:
        return Rejection(
            "invalid-directory",
            f"Directory '{directory}' must be a relative path inside the project",
        )

    return GenerationRequest(
        generator=generator,
        name=name or "",
        view_type=parsed_type,
        options=RequestOptions(
            dashboard=dashboard,
            no_import=no_import,
            use_template=use_template,
            directory=normalized_dir,
        ),
    )
