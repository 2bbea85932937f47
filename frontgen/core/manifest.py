"""Output manifest: the ordered (template id, output path) hand-off."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from frontgen.core.configuration import Configuration
from frontgen.core.errors import InternalInvariantViolation
from frontgen.core.paths import resolve
from frontgen.core.requests import GenerationRequest
from frontgen.core.rules import TemplateSelection


@dataclass(frozen=True)
class ManifestEntry:
    template_id: str
    output_path: str

    def to_dict(self) -> dict[str, str]:
        return {"template_id": self.template_id, "output_path": self.output_path}


@dataclass(frozen=True)
class OutputManifest:
    """Immutable, ordered list of artifacts for one request.

    Output paths are pairwise distinct.
    """

    entries: tuple[ManifestEntry, ...] = ()

    def __iter__(self) -> Iterator[ManifestEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def paths(self) -> list[str]:
        return [entry.output_path for entry in self.entries]

    def template_ids(self) -> list[str]:
        return [entry.template_id for entry in self.entries]

    def to_dict(self) -> list[dict[str, str]]:
        return [entry.to_dict() for entry in self.entries]


def build(
    selections: Iterable[TemplateSelection],
    request: GenerationRequest,
    config: Configuration,
) -> OutputManifest:
    """Pair each selection with its resolved path, preserving order.

    Raises:
        InternalInvariantViolation: If two selections resolve to the same
            path. The selection tables are wrong in that case.
    """
    entries: list[ManifestEntry] = []
    seen: dict[str, str] = {}
    for selection in selections:
        output_path = resolve(selection, request, config)
        if output_path in seen:
            raise InternalInvariantViolation(
                f"Templates '{seen[output_path]}' and '{selection.template_id}' "
                + f"both resolve to '{output_path}'"
            )
        seen[output_path] = selection.template_id
        entries.append(ManifestEntry(selection.template_id, output_path))
    return OutputManifest(entries=tuple(entries))
