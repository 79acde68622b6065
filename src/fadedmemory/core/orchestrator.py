"""Single-request transform orchestration.

:class:`TransformOrchestrator` owns one session's :class:`TransformState` and
drives it through a request:

1. Refuse if a request is already in flight (``TransformInProgressError``).
2. Refuse if no primary image was selected (``ValidationError``); the state
   is left untouched and no service call is made.
3. Build the instruction text and enter LOADING, clearing any stale result.
4. Await the generation service.
5. Land in SUCCEEDED (decodable image returned) or FAILED (exception,
   cancellation, or no usable image).

Steps 1 to 3 run before the first ``await``, so under asyncio's cooperative
scheduling no second request can slip in between the check and the switch
to LOADING.

Service failures never propagate out of :meth:`transform`; they are turned
into a FAILED state whose message starts with :data:`FAILURE_PREFIX`.
Cancellation of the awaiting task (a timeout, or the UI dropping the event)
also lands in FAILED before the ``CancelledError`` is re-raised, so the
session never stays LOADING.
"""

import asyncio
import logging
from collections.abc import Callable
from datetime import date

from . import transform as transitions
from .errors import TransformInProgressError, ValidationError
from .images import is_decodable_image
from .prompt_builder import build_prompt, format_date_stamp
from .services.base import GenerationServiceBase
from .transform import IN_PROGRESS_MESSAGE, TransformRequest, TransformState

logger = logging.getLogger(__name__)

MISSING_PRIMARY_MESSAGE = "Please select image 1 to begin."
FAILURE_PREFIX = "Failed to transform image."
NO_IMAGE_MESSAGE = (
    "API did not return an image. It might have refused the request for safety reasons."
)
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."
CANCELLED_MESSAGE = "The request was cancelled before the service replied."
INVALID_IMAGE_MESSAGE = "API returned data that is not a valid image."


class TransformOrchestrator:
    """Runs at most one transform at a time for a single session.

    Args:
        service: Generation service that performs the transform
        clock: Returns today's date for the date stamp
        retro_filter: Retro filter template (defaults to the detailed one)
        date_stamp_year: Two-digit year printed in the date stamp
        fallback_mime_type: Result MIME type when the primary has none
    """

    def __init__(
        self,
        service: GenerationServiceBase,
        *,
        clock: Callable[[], date] = date.today,
        retro_filter: str | None = None,
        date_stamp_year: str = "86",
        fallback_mime_type: str = "image/png",
    ) -> None:
        self.service = service
        self.clock = clock
        self.retro_filter = retro_filter
        self.date_stamp_year = date_stamp_year
        self.fallback_mime_type = fallback_mime_type
        self._state = TransformState()

    @property
    def state(self) -> TransformState:
        return self._state

    @property
    def is_busy(self) -> bool:
        return self._state.is_loading

    def build_instruction(self, request: TransformRequest) -> str:
        """Compile the instruction text for ``request`` using today's stamp."""
        stamp = format_date_stamp(self.clock(), self.date_stamp_year)
        return build_prompt(
            request.has_secondary,
            request.instruction,
            stamp,
            retro_filter=self.retro_filter,
        )

    async def transform(self, request: TransformRequest) -> TransformState:
        """Dispatch ``request`` and return the terminal state.

        Raises:
            TransformInProgressError: If a transform is already running
            ValidationError: If ``request`` has no primary image
        """
        if self._state.is_loading:
            logger.warning("Rejected transform: another request is in flight")
            raise TransformInProgressError(IN_PROGRESS_MESSAGE)
        if request.primary is None:
            logger.warning("Rejected transform: no primary image selected")
            raise ValidationError(MISSING_PRIMARY_MESSAGE)

        instruction = self.build_instruction(request)
        self._state = transitions.start(self._state, instruction)
        logger.info(
            f"Transform #{self._state.attempt} started via {self.service.name} "
            f"(images={len(request.images)}, composition={request.has_secondary})"
        )

        try:
            result = await self.service.generate(request.images, instruction)
        except asyncio.CancelledError:
            logger.warning(f"Transform #{self._state.attempt} cancelled")
            self._state = transitions.fail(self._state, _wrap_failure(CANCELLED_MESSAGE))
            raise
        except Exception as e:
            logger.error(f"Transform #{self._state.attempt} failed: {e}", exc_info=True)
            self._state = transitions.fail(self._state, _wrap_failure(str(e)))
            return self._state

        if not result.has_image:
            logger.warning(f"Transform #{self._state.attempt} returned no image: {result.text!r}")
            self._state = transitions.fail(self._state, _wrap_failure(result.text or NO_IMAGE_MESSAGE))
            return self._state

        if not is_decodable_image(result.image):
            logger.warning(f"Transform #{self._state.attempt} returned undecodable image data")
            self._state = transitions.fail(self._state, _wrap_failure(INVALID_IMAGE_MESSAGE))
            return self._state

        # The displayed MIME type follows the primary input, not the service's report.
        mime_type = request.primary.mime_type or self.fallback_mime_type
        self._state = transitions.succeed(self._state, result.image, mime_type)
        logger.info(f"Transform #{self._state.attempt} succeeded ({len(result.image)} bytes)")
        return self._state

    def reset(self) -> TransformState:
        """Discard any result or error and return to IDLE.

        Raises:
            TransformInProgressError: If a transform is running
        """
        self._state = transitions.reset(self._state)
        return self._state


def _wrap_failure(message: str) -> str:
    detail = message.strip() or UNKNOWN_ERROR_MESSAGE
    return f"{FAILURE_PREFIX} {detail}"
