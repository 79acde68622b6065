"""Validation utilities for Faded Memory UI inputs."""

import logging

from fadedmemory.core.config import config
from fadedmemory.core.errors import TransformInProgressError, ValidationError
from fadedmemory.core.orchestrator import MISSING_PRIMARY_MESSAGE
from fadedmemory.core.transform import IN_PROGRESS_MESSAGE

from .models import UIState

logger = logging.getLogger(__name__)


def validate_transform_inputs(state: UIState) -> None:
    """Check that a transform can be dispatched for this session.

    The orchestrator performs the same checks; running them here first lets
    the handler report the problem without flashing a loading message.

    Args:
        state: UI state

    Raises:
        TransformInProgressError: If a transform is already running
        ValidationError: If no primary image is selected
    """
    if state.orchestrator is not None and state.orchestrator.is_busy:
        raise TransformInProgressError(IN_PROGRESS_MESSAGE)
    if state.primary is None:
        raise ValidationError(MISSING_PRIMARY_MESSAGE)


def validate_instruction(instruction: str, max_length: int | None = None) -> None:
    """Validate composition instruction text.

    Args:
        instruction: Instruction typed by the user
        max_length: Maximum allowed length in characters
            (default: from config)

    Raises:
        ValidationError: If the instruction is too long
    """
    if max_length is None:
        max_length = config.max_instruction_length

    if len(instruction) > max_length:
        raise ValidationError(
            f"Instruction is too long ({len(instruction)} characters). "
            f"Maximum is {max_length} characters."
        )
