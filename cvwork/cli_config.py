"""
CLI configuration data structures.

Defines the render stage configuration and UserConfig built from
command-line arguments.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class RenderStage:
    """Configuration for the render stage."""
    data: Path  # Input section JSON
    output: Path  # Output document
    renderer: str = "docx"
    template: Optional[Path] = None  # Template .docx (docx, docx-template)
    title: Optional[str] = None  # Overrides the title in the JSON
    marker: Optional[str] = None  # List marker, renderer default when None
    date_format: Optional[str] = None  # strftime pattern for calendar dates
    width: Optional[int] = None  # Line width (text renderer)

    def renderer_kwargs(self) -> dict:
        """Constructor arguments for the selected renderer."""
        kwargs = {}
        if self.template is not None:
            kwargs["template_path"] = self.template
        if self.width is not None:
            kwargs["width"] = self.width
        return kwargs


@dataclass
class UserConfig:
    """Configuration gathered from user input."""

    render: Optional[RenderStage] = None

    # Execution settings
    strict: bool = False
    debug: bool = False
    verbosity: int = 0
    log_file: Optional[str] = None
    list_renderers: bool = False
