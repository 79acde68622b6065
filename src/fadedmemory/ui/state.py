"""State management utilities for the Faded Memory UI.

This module handles the initialization and management of per-session UI
state: the selected images, the composition instruction and the transform
orchestrator.
"""

import logging
from pathlib import Path

from fadedmemory.core.config import config
from fadedmemory.core.errors import TransformInProgressError
from fadedmemory.core.images import load_image_input
from fadedmemory.core.orchestrator import TransformOrchestrator
from fadedmemory.core.prompt_builder import resolve_retro_filter
from fadedmemory.core.services import service_registry
from fadedmemory.core.transform import IN_PROGRESS_MESSAGE

from .models import PRIMARY_SLOT, SECONDARY_SLOT, UIState

logger = logging.getLogger(__name__)


def initialize_ui_state(state: UIState | None = None, service_name: str | None = None) -> UIState:
    """Initialize or ensure UI state is ready.

    Creates the generation service and orchestrator on first use.

    Args:
        state: Existing UIState or None
        service_name: Name of the generation service (default: from config)

    Returns:
        Initialized UIState instance
    """
    if state is None:
        logger.info("Creating new UIState")
        state = UIState()

    if service_name:
        state.service_name = service_name
    if not state.service_name:
        state.service_name = config.default_service

    if state.is_initialized():
        logger.debug("UIState already initialized")
        return state

    logger.info(f"Initializing orchestrator with service: {state.service_name}")
    try:
        service = service_registry.instantiate(state.service_name, config)
        state.orchestrator = TransformOrchestrator(
            service,
            retro_filter=resolve_retro_filter(config.retro_filter_style),
            date_stamp_year=config.date_stamp_year,
            fallback_mime_type=config.fallback_mime_type,
        )
    except Exception as e:
        logger.error(f"Error initializing UIState: {e}", exc_info=True)
        raise

    logger.info(f"UIState initialization complete: {state}")
    return state


def select_image(state: UIState, slot: str, path: str | Path | None) -> UIState:
    """Store (or clear) the image selected for ``slot``.

    A new selection discards any previous transform result or error, the
    same as starting over with fresh inputs. While a transform is running
    the selection is stored but the running request's state is left alone.

    Args:
        state: UI state
        slot: PRIMARY_SLOT or SECONDARY_SLOT
        path: Path of the selected file, or None to clear the slot

    Returns:
        Updated state

    Raises:
        InputRejectedError: If the file is not a supported image
        ReadFailureError: If the file cannot be read
    """
    if slot not in (PRIMARY_SLOT, SECONDARY_SLOT):
        raise ValueError(f"Unknown image slot: {slot}")

    # Load first so a rejected file never replaces the current selection
    image = load_image_input(path, max_bytes=config.max_upload_bytes) if path else None

    if slot == PRIMARY_SLOT:
        state.primary = image
    else:
        state.secondary = image
    logger.info(f"Selected {slot} image: {image!r}")

    if state.orchestrator is not None and not state.orchestrator.is_busy:
        state.orchestrator.reset()
    return state


def set_instruction(state: UIState, instruction: str | None) -> UIState:
    """Store the composition instruction for the second image."""
    state.instruction = instruction or ""
    return state


def reset_session(state: UIState) -> UIState:
    """Forget all selections and any result.

    Raises:
        TransformInProgressError: If a transform is running
    """
    if state.orchestrator is not None and state.orchestrator.is_busy:
        raise TransformInProgressError(IN_PROGRESS_MESSAGE)

    logger.info("Resetting UI session")
    state.primary = None
    state.secondary = None
    state.instruction = ""
    if state.orchestrator is not None:
        state.orchestrator.reset()
    return state
