"""Rendering and writing of generation manifests.

This package sits outside the decision core: it turns manifest entries
into file contents and writes them under the project root.

Public API:
    RenderContext: Values available to every template
    render_template: Render one template id to text
    write_manifest: Render and write every manifest entry
"""

from .templates import RenderContext, render_template, template_ids
from .writer import WriteReport, write_manifest

__all__ = [
    "RenderContext",
    "WriteReport",
    "render_template",
    "template_ids",
    "write_manifest",
]
