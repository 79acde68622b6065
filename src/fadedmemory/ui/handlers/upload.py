"""Image selection and composition instruction handlers."""

import logging

import gradio as gr
from PIL import Image

from fadedmemory.core.errors import FadedMemoryError

from ..formatting import format_selection, format_system_error, format_unexpected_error
from ..models import PRIMARY_SLOT, SECONDARY_SLOT, UIState
from ..state import initialize_ui_state, select_image, set_instruction
from ..validation import validate_instruction

logger = logging.getLogger(__name__)


def stored_preview(state: UIState | None, slot: str) -> Image.Image | None:
    """Decode the image currently stored for ``slot`` so the slot can show it again."""
    if state is None:
        return None
    stored = state.primary if slot == PRIMARY_SLOT else state.secondary
    return stored.to_pil() if stored is not None else None


def _handle_selection(
    slot: str, path: str | None, state: UIState
) -> tuple[gr.update, str, gr.update, UIState]:
    """Store a selection and describe the outcome.

    Returns:
        Tuple of (image_slot_update, status_markdown, result_update, updated_state)
    """
    try:
        state = initialize_ui_state(state)
        busy = state.orchestrator.is_busy
        state = select_image(state, slot, path)
        # A fresh selection clears the previous result unless a request is running
        result_update = gr.update() if busy else gr.update(value=None)
        return gr.update(), format_selection(state), result_update, state

    except FadedMemoryError as e:
        logger.warning(f"Rejected {slot} selection: {e}")
        # Show the selection that is still stored, not the rejected file
        slot_update = gr.update(value=stored_preview(state, slot))
        return slot_update, format_system_error(str(e)), gr.update(), state

    except Exception as e:
        logger.error(f"Error selecting {slot} image: {e}", exc_info=True)
        slot_update = gr.update(value=stored_preview(state, slot))
        return slot_update, format_unexpected_error(e), gr.update(), state


def select_primary_image(
    path: str | None, state: UIState
) -> tuple[gr.update, str, gr.update, UIState]:
    """Handle upload or clear of image 1.

    Args:
        path: Uploaded file path, or None when the slot was cleared
        state: UI state

    Returns:
        Tuple of (image_slot_update, status_markdown, result_update, updated_state)
    """
    return _handle_selection(PRIMARY_SLOT, path, state)


def select_secondary_image(
    path: str | None, instruction: str, state: UIState
) -> tuple[gr.update, str, gr.update, UIState]:
    """Handle upload or clear of image 2.

    The instruction box is read at the same time so the composition text
    typed before choosing the file is never lost. An over-long instruction
    rejects the whole selection.
    """
    try:
        validate_instruction(instruction or "")
    except FadedMemoryError as e:
        logger.warning(f"Rejected {SECONDARY_SLOT} selection: {e}")
        slot_update = gr.update(value=stored_preview(state, SECONDARY_SLOT))
        return slot_update, format_system_error(str(e)), gr.update(), state

    state = set_instruction(state, instruction)
    return _handle_selection(SECONDARY_SLOT, path, state)


def update_instruction(instruction: str, state: UIState) -> tuple[str, UIState]:
    """Store the composition instruction as the user types.

    An over-long instruction is reported and the last accepted one is kept.

    Returns:
        Tuple of (status_markdown, updated_state)
    """
    try:
        validate_instruction(instruction or "")
    except FadedMemoryError as e:
        logger.warning(f"Rejected instruction: {e}")
        return format_system_error(str(e)), state

    state = set_instruction(state, instruction)
    return format_selection(state), state
