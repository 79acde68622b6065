"""Data models for Faded Memory UI session state."""

import logging
from dataclasses import dataclass
from typing import Any

from fadedmemory.core.images import ImageInput
from fadedmemory.core.transform import TransformRequest, TransformState

logger = logging.getLogger(__name__)


@dataclass
class UIState:
    """Session state for the Gradio UI.

    Each browser session gets its own UIState instance (via ``gr.State``),
    so selections and the in-flight request are never shared between users.

    Attributes
    ----------
    primary : ImageInput | None
        Required first image
    secondary : ImageInput | None
        Optional second image to compose with the first
    instruction : str
        Composition instruction; only used when ``secondary`` is set
    orchestrator : Any | None
        TransformOrchestrator instance (created lazily)
    service_name : str
        Name of the generation service backing the orchestrator
    """

    primary: ImageInput | None = None
    secondary: ImageInput | None = None
    instruction: str = ""

    orchestrator: Any | None = None  # TransformOrchestrator instance
    service_name: str = ""

    def is_initialized(self) -> bool:
        """Check if the orchestrator has been created."""
        return self.orchestrator is not None

    @property
    def transform_state(self) -> TransformState:
        """Current transform state, IDLE if nothing has run yet."""
        if self.orchestrator is None:
            return TransformState()
        return self.orchestrator.state

    def to_request(self) -> TransformRequest:
        """Snapshot the current selections as a transform request."""
        return TransformRequest(
            primary=self.primary,
            secondary=self.secondary,
            instruction=self.instruction,
        )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"UIState(initialized={self.is_initialized()}, "
            f"service={self.service_name or '-'}, "
            f"primary={self.primary is not None}, "
            f"secondary={self.secondary is not None}, "
            f"status={self.transform_state.status.value})"
        )


# Image slot identifiers
PRIMARY_SLOT = "primary"
SECONDARY_SLOT = "secondary"

# Shown while a transform is running; one is picked per request
LOADING_MESSAGES = [
    "Accessing flux capacitor...",
    "Calibrating time circuits...",
    "Traveling to 1986...",
    "Composing multiple timelines...",
    "Developing film in dark room...",
    "Applying retro filter...",
    "Engaging Nano-Banana AI...",
]

# File picker filter
ACCEPTED_FILE_TYPES = [".jpg", ".jpeg", ".png", ".webp"]
