"""Transform request values and the request state machine.

A session's transform progress is a single immutable :class:`TransformState`
value. It is never mutated; each event produces a new value through one of
the pure transition functions below:

    IDLE ──start──> LOADING ──succeed──> SUCCEEDED
                       │                     │
                       └──fail──> FAILED     │
                                    │        │
         SUCCEEDED / FAILED ──start──> LOADING (prior result cleared)
         any state but LOADING ──reset──> IDLE

No state is final. ``start`` refuses to leave LOADING, which is what keeps
at most one request in flight.
"""

from dataclasses import dataclass, replace
from enum import Enum

from .errors import TransformInProgressError
from .images import ImageInput

IN_PROGRESS_MESSAGE = "A transformation is already in progress. Please wait for it to finish."


class TransformStatus(str, Enum):
    """Lifecycle status of a session's transform request."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class TransformRequest:
    """Inputs for one transform, assembled right before dispatch."""

    primary: ImageInput | None
    secondary: ImageInput | None = None
    instruction: str = ""

    @property
    def has_secondary(self) -> bool:
        return self.secondary is not None

    @property
    def images(self) -> list[ImageInput]:
        """Images in the order they are sent: primary first."""
        return [image for image in (self.primary, self.secondary) if image is not None]


@dataclass(frozen=True)
class TransformSuccess:
    """Image returned by a successful transform."""

    image: bytes
    mime_type: str


@dataclass(frozen=True)
class TransformFailure:
    """User-visible reason a transform failed."""

    message: str


TransformResult = TransformSuccess | TransformFailure


@dataclass(frozen=True)
class TransformState:
    """Snapshot of a session's transform progress.

    Attributes:
        status: Current lifecycle status
        image: Result image bytes (SUCCEEDED only)
        mime_type: MIME type used to display ``image``
        error: User-visible failure message (FAILED only)
        prompt: Instruction text of the latest dispatched request
        attempt: Number of requests dispatched so far
    """

    status: TransformStatus = TransformStatus.IDLE
    image: bytes | None = None
    mime_type: str | None = None
    error: str | None = None
    prompt: str | None = None
    attempt: int = 0

    @property
    def is_loading(self) -> bool:
        return self.status is TransformStatus.LOADING

    @property
    def result(self) -> TransformResult | None:
        """The terminal result, or None while idle or loading."""
        if self.status is TransformStatus.SUCCEEDED and self.image is not None:
            return TransformSuccess(image=self.image, mime_type=self.mime_type or "")
        if self.status is TransformStatus.FAILED:
            return TransformFailure(message=self.error or "")
        return None

    def __repr__(self) -> str:
        size = len(self.image) if self.image is not None else 0
        return (
            f"TransformState(status={self.status.value}, attempt={self.attempt}, "
            f"image_bytes={size}, error={self.error!r})"
        )


def start(state: TransformState, prompt: str | None = None) -> TransformState:
    """Enter LOADING, clearing any previous result or error.

    Raises:
        TransformInProgressError: If ``state`` is already LOADING
    """
    if state.is_loading:
        raise TransformInProgressError(IN_PROGRESS_MESSAGE)
    return TransformState(
        status=TransformStatus.LOADING,
        prompt=prompt,
        attempt=state.attempt + 1,
    )


def succeed(state: TransformState, image: bytes, mime_type: str) -> TransformState:
    """Record a returned image and leave LOADING."""
    _require_loading(state, "succeed")
    return replace(
        state,
        status=TransformStatus.SUCCEEDED,
        image=image,
        mime_type=mime_type,
        error=None,
    )


def fail(state: TransformState, message: str) -> TransformState:
    """Record a failure message and leave LOADING."""
    _require_loading(state, "fail")
    return replace(
        state,
        status=TransformStatus.FAILED,
        image=None,
        mime_type=None,
        error=message,
    )


def reset(state: TransformState) -> TransformState:
    """Return to IDLE, discarding any result or error.

    Raises:
        TransformInProgressError: If ``state`` is LOADING
    """
    if state.is_loading:
        raise TransformInProgressError(IN_PROGRESS_MESSAGE)
    return TransformState(attempt=state.attempt)


def _require_loading(state: TransformState, transition: str) -> None:
    if not state.is_loading:
        raise ValueError(f"Cannot {transition} from state '{state.status.value}'")
