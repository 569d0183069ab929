"""Event types emitted during an uncss run."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PipelineStarted:
    sources: int
    inline: bool


@dataclass(frozen=True)
class PipelineCompleted:
    selectors_removed: int
    output_chars: int


@dataclass(frozen=True)
class PipelineFailed:
    stage: str
    error: str


@dataclass(frozen=True)
class StageStarted:
    stage: str


@dataclass(frozen=True)
class StageCompleted:
    stage: str


@dataclass(frozen=True)
class RenderStarted:
    source: str


@dataclass(frozen=True)
class RenderCompleted:
    source: str
    chars: int


@dataclass(frozen=True)
class NoStylesheetsFound:
    """The first document links no stylesheet; the run ends with empty output."""

    origin: str


@dataclass(frozen=True)
class StylesheetSkipped:
    """A resolved stylesheet path does not exist and was left out."""

    path: str
