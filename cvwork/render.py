"""
Section rendering pipeline.

Load a work section from JSON, format it, and hand the content to a
named renderer.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

from .fields import as_field
from .loader import load_section
from .logging_utils import LOG
from .renderers import get_renderer
from .section import format_section
from .shared import WorkSection

# ------------------------- Rendering -------------------------

def render_section_from_json(
    json_path: Path,
    output_path: Path,
    renderer: str = "docx",
    title: Optional[str] = None,
    marker: Optional[str] = None,
    date_format: Optional[str] = None,
    **renderer_kwargs,
) -> Tuple[Path, List[str]]:
    """
    Render a work section JSON file to ``output_path``.

    Args:
        json_path: Section JSON (see cvwork.loader)
        output_path: Where the rendered document goes
        renderer: Registered renderer name
        title: Overrides the title stored in the JSON
        marker: List marker passed through to the renderer
        date_format: strftime pattern for calendar dates
        **renderer_kwargs: Renderer constructor options; ones the
            selected renderer does not take are ignored

    Returns:
        Tuple of (rendered path, loader warnings)

    Raises:
        ValueError: If the renderer is unknown or the JSON is invalid
    """
    instance = get_renderer(renderer, **renderer_kwargs)

    result = load_section(json_path)
    section = result.section
    if title is not None:
        section = WorkSection(entries=section.entries, title=as_field(title))

    content = format_section(section, marker=marker, date_format=date_format)
    out = instance.render(content, Path(output_path))
    LOG.info("Rendered %d entries from %s to %s", len(section.entries), json_path, out)
    return out, result.warnings
