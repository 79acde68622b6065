"""Exception hierarchy for the Faded Memory Generator.

Every error the application raises on purpose derives from
:class:`FadedMemoryError`. The messages are written for end users: UI
handlers display them as-is in the status panel.

Taxonomy
--------
ValidationError
    A transform was requested without the inputs it needs.
TransformInProgressError
    A transform was requested while another one is still running.
InputRejectedError
    A selected file is not one of the supported image formats.
ReadFailureError
    A selected file could not be read from disk.
ServiceFailureError
    The generation service could not be reached or configured.
"""


class FadedMemoryError(Exception):
    """Base class for all user-facing application errors."""

    pass


class ValidationError(FadedMemoryError):
    """User-friendly validation error.

    Raised before any service call is made. The message is intended to be
    displayed directly to the user.
    """

    pass


class TransformInProgressError(ValidationError):
    """A transform is already in flight for this session."""

    pass


class InputRejectedError(FadedMemoryError):
    """A selected file has an unsupported type; the selection is not stored."""

    pass


class ReadFailureError(FadedMemoryError):
    """A selected file could not be read; the selection is not stored."""

    pass


class ServiceFailureError(FadedMemoryError):
    """The generation service failed before or while handling a request."""

    pass
