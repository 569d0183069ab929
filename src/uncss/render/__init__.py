"""Document acquisition: renderer protocol and implementations."""

from uncss.errors import ArgumentError
from uncss.render.base import Renderer
from uncss.render.process import BROWSER_SCRIPT, SubprocessRenderer
from uncss.render.static import StaticRenderer
from uncss.render.stub import StubRenderer

RENDERERS = ("browser", "static")


def create_renderer(name: str = "browser") -> Renderer:
    """Build the renderer registered under *name*."""
    if name == "browser":
        return SubprocessRenderer()
    if name == "static":
        return StaticRenderer()
    raise ArgumentError(f"Unknown renderer {name!r}; expected one of {', '.join(RENDERERS)}")


__all__ = [
    "BROWSER_SCRIPT",
    "RENDERERS",
    "Renderer",
    "StaticRenderer",
    "StubRenderer",
    "SubprocessRenderer",
    "create_renderer",
]
