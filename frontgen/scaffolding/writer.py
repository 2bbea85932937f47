"""Write a rendered manifest under the project root."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from frontgen.core.manifest import OutputManifest

from .templates import RenderContext, render_template


@dataclass
class WriteReport:
    """Paths written and skipped, relative to the project root."""

    written: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def write_manifest(
    manifest: OutputManifest,
    project_root: Path,
    context: RenderContext,
    force: bool = False,
) -> WriteReport:
    """Render each entry and write it, creating parent directories.

    Existing files are left alone unless ``force`` is set. Every entry is
    rendered before the first file is written, so an unknown template id
    leaves the tree untouched.

    Raises:
        KeyError: If an entry names a template that is not bundled.
    """
    rendered = [
        (entry.output_path, render_template(entry.template_id, context))
        for entry in manifest
    ]

    report = WriteReport()
    for output_path, content in rendered:
        target = project_root / output_path
        if target.exists() and not force:
            report.skipped.append(output_path)
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        report.written.append(output_path)
    return report
