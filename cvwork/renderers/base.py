"""
Base interface for content renderers.

Defines the contract for pluggable rendering implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Tuple

from ..content import Content


class ContentRenderer(ABC):
    """
    Abstract base class for content renderers.

    Implementations of this interface materialize a content tree (as
    produced by format_experience / format_section) into an output file.
    """

    # Constructor options this renderer takes; the registry drops the rest
    options: Tuple[str, ...] = ()

    @abstractmethod
    def render(self, content: Content, output_path: Path) -> Path:
        """
        Render content to an output file.

        Args:
            content: Content tree to render
            output_path: Path where the rendered output should be saved

        Returns:
            Path to the rendered output file

        Raises:
            FileNotFoundError: If a configured template does not exist
            ValueError: If a configured template has the wrong type
        """
        pass
