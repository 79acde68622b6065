"""Faded Memory Generator - turn photos into 1986 film snapshots."""

__version__ = "0.1.0"

from fadedmemory.core.config import FadedMemoryConfig, config
from fadedmemory.core.orchestrator import TransformOrchestrator
from fadedmemory.core.services import service_registry

__all__ = [
    "FadedMemoryConfig",
    "TransformOrchestrator",
    "config",
    "service_registry",
]
