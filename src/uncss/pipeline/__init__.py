"""Orchestration: the staged uncss pipeline."""

from uncss.pipeline.pipeline import Pipeline, PipelineResult, Stage

__all__ = ["Pipeline", "PipelineResult", "Stage"]
