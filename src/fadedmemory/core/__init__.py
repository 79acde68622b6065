"""Core functionality for the Faded Memory Generator.

This module provides the UI-independent pieces of the application:

- **FadedMemoryConfig / config**: Configuration management using Pydantic Settings
- **build_prompt**: Instruction text compilation (crop + retro filter)
- **ImageInput / load_image_input**: Selected file loading and format checks
- **TransformState**: Immutable request state with pure transitions
- **TransformOrchestrator**: One-request-at-a-time transform driver
- **service_registry**: Registry of generation services (Gemini, Dry-Run)

Usage Example
-------------
    from fadedmemory.core import TransformOrchestrator, config, service_registry
    from fadedmemory.core import TransformRequest, load_image_input

    service = service_registry.instantiate(config.default_service, config)
    orchestrator = TransformOrchestrator(service)
    request = TransformRequest(primary=load_image_input("photo.jpg"))
    state = await orchestrator.transform(request)
"""

from fadedmemory.core.config import FadedMemoryConfig, config
from fadedmemory.core.errors import (
    FadedMemoryError,
    InputRejectedError,
    ReadFailureError,
    ServiceFailureError,
    TransformInProgressError,
    ValidationError,
)
from fadedmemory.core.images import ImageInput, load_image_input
from fadedmemory.core.orchestrator import TransformOrchestrator
from fadedmemory.core.prompt_builder import build_prompt, format_date_stamp
from fadedmemory.core.services import service_registry
from fadedmemory.core.transform import TransformRequest, TransformState, TransformStatus

__all__ = [
    "FadedMemoryConfig",
    "FadedMemoryError",
    "ImageInput",
    "InputRejectedError",
    "ReadFailureError",
    "ServiceFailureError",
    "TransformInProgressError",
    "TransformOrchestrator",
    "TransformRequest",
    "TransformState",
    "TransformStatus",
    "ValidationError",
    "build_prompt",
    "config",
    "format_date_stamp",
    "load_image_input",
    "service_registry",
]
