"""Event system: bus and event types for the uncss run lifecycle."""

from uncss.events.bus import EventBus
from uncss.events.types import (
    NoStylesheetsFound,
    PipelineCompleted,
    PipelineFailed,
    PipelineStarted,
    RenderCompleted,
    RenderStarted,
    StageCompleted,
    StageStarted,
    StylesheetSkipped,
)

__all__ = [
    "EventBus",
    "NoStylesheetsFound",
    "PipelineCompleted",
    "PipelineFailed",
    "PipelineStarted",
    "RenderCompleted",
    "RenderStarted",
    "StageCompleted",
    "StageStarted",
    "StylesheetSkipped",
]
