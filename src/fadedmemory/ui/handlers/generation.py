"""Transform and reset handlers."""

import io
import logging
import random
from collections.abc import AsyncIterator

import gradio as gr
from PIL import Image

from fadedmemory.core.errors import FadedMemoryError, ValidationError
from fadedmemory.core.transform import TransformState, TransformStatus

from ..formatting import (
    format_loading,
    format_selection,
    format_system_error,
    format_transform_status,
    format_unexpected_error,
)
from ..models import LOADING_MESSAGES, UIState
from ..state import initialize_ui_state, reset_session
from ..validation import validate_transform_inputs

logger = logging.getLogger(__name__)

TransformOutputs = tuple[Image.Image | None, str, gr.update, UIState]


def decode_result_image(transform_state: TransformState) -> Image.Image | None:
    """Decode a succeeded state's image bytes for display."""
    if transform_state.status is not TransformStatus.SUCCEEDED or not transform_state.image:
        return None
    image = Image.open(io.BytesIO(transform_state.image))
    image.load()
    return image


async def transform_image(state: UIState) -> AsyncIterator[TransformOutputs]:
    """Run a transform for the session's current selections.

    Yields twice on the happy path: once with a loading message and the
    Transform button disabled, then with the result (or error) and the
    button re-enabled.

    Args:
        state: UI state

    Yields:
        Tuple of (result_image, status_markdown, transform_button_update, updated_state)
    """
    try:
        state = initialize_ui_state(state)
        validate_transform_inputs(state)
    except ValidationError as e:
        logger.warning(f"Validation error: {e}")
        yield None, format_system_error(str(e)), gr.update(), state
        return
    except Exception as e:
        logger.error(f"Error preparing transform: {e}", exc_info=True)
        yield None, format_unexpected_error(e), gr.update(interactive=True), state
        return

    yield None, format_loading(random.choice(LOADING_MESSAGES)), gr.update(interactive=False), state

    try:
        transform_state = await state.orchestrator.transform(state.to_request())
        result_image = decode_result_image(transform_state)
        yield result_image, format_transform_status(transform_state), gr.update(interactive=True), state

    except FadedMemoryError as e:
        # Raised only if the UI gate was bypassed between validation and dispatch
        logger.warning(f"Transform rejected: {e}")
        yield None, format_system_error(str(e)), gr.update(interactive=True), state

    except Exception as e:
        logger.error(f"Error displaying transform result: {e}", exc_info=True)
        yield None, format_unexpected_error(e), gr.update(interactive=True), state


def reset_app(
    state: UIState,
) -> tuple[gr.update, gr.update, gr.update, Image.Image | None, str, UIState]:
    """Clear both image slots, the instruction and any result.

    Returns:
        Tuple of (image_1_update, image_2_update, instruction_update,
        result_image, status_markdown, updated_state)
    """
    try:
        state = initialize_ui_state(state)
        state = reset_session(state)
    except FadedMemoryError as e:
        logger.warning(f"Reset rejected: {e}")
        return gr.update(), gr.update(), gr.update(), gr.update(), format_system_error(str(e)), state

    return (
        gr.update(value=None),
        gr.update(value=None),
        gr.update(value=""),
        None,
        format_selection(state),
        state,
    )
