"""
Renderer registry for managing named content renderers.

Lets the CLI choose between rendering strategies by name. Options that a
renderer does not list in its ``options`` are dropped with a warning, so
flags like --width and --template can be given whatever renderer is
selected.
"""

from __future__ import annotations

from typing import Any, Dict, List, Type

from .base import ContentRenderer
from ..logging_utils import LOG

# Global renderer registry
_RENDERER_REGISTRY: Dict[str, Type[ContentRenderer]] = {}


def register_renderer(name: str, renderer_class: Type[ContentRenderer]) -> None:
    """
    Register a renderer class in the global registry.

    Args:
        name: The name to register the renderer under (e.g., "docx")
        renderer_class: The renderer class to register
    """
    _RENDERER_REGISTRY[name] = renderer_class


def _accepted_options(renderer_class: Type[ContentRenderer], options: Dict[str, Any]) -> Dict[str, Any]:
    accepted = {}
    for key, value in options.items():
        if key in renderer_class.options:
            accepted[key] = value
        else:
            LOG.warning("Renderer %s ignores option %r", renderer_class.__name__, key)
    return accepted


def get_renderer(name: str, **options) -> ContentRenderer:
    """
    Get a renderer instance by name.

    Args:
        name: The renderer name (e.g., "docx")
        **options: Constructor arguments; those missing from the
            renderer's ``options`` are dropped

    Returns:
        Renderer instance

    Raises:
        ValueError: If no renderer is registered under ``name``
    """
    renderer_class = _RENDERER_REGISTRY.get(name)
    if renderer_class is None:
        known = ", ".join(sorted(_RENDERER_REGISTRY)) or "none"
        raise ValueError(f"Unknown renderer: {name} (available: {known})")
    return renderer_class(**_accepted_options(renderer_class, options))


def list_renderers() -> List[Dict[str, str]]:
    """
    List all registered renderers with the first line of their docstring.

    Returns:
        List of dicts with 'name' and 'description' keys, sorted by name
    """
    renderers = []
    for name, renderer_class in _RENDERER_REGISTRY.items():
        doc = (renderer_class.__doc__ or "").strip()
        description = doc.split('\n')[0] if doc else "No description available"
        renderers.append({'name': name, 'description': description})
    return sorted(renderers, key=lambda x: x['name'])


def unregister_renderer(name: str) -> None:
    """Remove a renderer from the registry; unknown names are ignored."""
    _RENDERER_REGISTRY.pop(name, None)


__all__ = [
    "register_renderer",
    "get_renderer",
    "list_renderers",
    "unregister_renderer",
]
