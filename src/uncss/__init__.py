"""uncss: remove unused CSS rules from the stylesheets of HTML pages."""
from __future__ import annotations

from uncss.config import UncssOptions
from uncss.detect import detect_unused_css
from uncss.errors import ArgumentError, ParseFailure, RenderFailure, UncssError
from uncss.pipeline import Pipeline, PipelineResult, Stage

__version__ = "0.1.0"

__all__ = [
    "ArgumentError",
    "ParseFailure",
    "Pipeline",
    "PipelineResult",
    "RenderFailure",
    "Stage",
    "UncssError",
    "UncssOptions",
    "__version__",
    "detect_unused_css",
]
