"""Ingestion pipeline and orchestrator."""

from .ingestion import IngestionPipeline
from .orchestrator import PipelineOrchestrator

__all__ = ["IngestionPipeline", "PipelineOrchestrator"]
