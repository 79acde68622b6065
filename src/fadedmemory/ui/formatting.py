"""Markdown formatting helpers for the Faded Memory status panel."""

from fadedmemory.core.transform import TransformState, TransformStatus

from .models import UIState

READY_MESSAGE = "*Select image 1 to begin*"


def format_loading(message: str) -> str:
    """Status text shown while a transform is running."""
    return f"⏳ **{message}**"


def format_system_error(message: str) -> str:
    """Status text for any failure, styled like the app's error banner."""
    return f"❌ **SYSTEM ERROR:**\n\n{message}"


def format_unexpected_error(error: Exception) -> str:
    """Status text for errors that were not anticipated."""
    return format_system_error(
        f"An unexpected error occurred. Check logs for details.\n\n`{error}`"
    )


def format_selection(state: UIState) -> str:
    """Describe the current image selections."""
    if state.primary is None:
        return READY_MESSAGE

    lines = [f"**Image 1:** {state.primary.name or 'selected'} ({state.primary.mime_type})"]
    if state.secondary is not None:
        lines.append(
            f"**Image 2:** {state.secondary.name or 'selected'} ({state.secondary.mime_type})"
        )
        instruction = state.instruction.strip()
        lines.append(f"**Composition:** {instruction if instruction else '(creative blend)'}")
    return "\n".join(lines)


def format_transform_status(transform_state: TransformState, selection: str = "") -> str:
    """Render the status panel for a transform state.

    Args:
        transform_state: Current transform state
        selection: Selection summary shown when idle

    Returns:
        Markdown for the status panel
    """
    status = transform_state.status
    if status is TransformStatus.LOADING:
        return format_loading("Developing film...")
    if status is TransformStatus.FAILED:
        return format_system_error(transform_state.error or "")
    if status is TransformStatus.SUCCEEDED:
        size_kb = len(transform_state.image or b"") / 1024
        return (
            "✅ **Welcome to 1986!**\n\n"
            f"**Format:** {transform_state.mime_type}\n"
            f"**Size:** {size_kb:.1f} KB\n"
            f"**Attempt:** {transform_state.attempt}"
        )
    return selection or READY_MESSAGE
