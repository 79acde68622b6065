"""UI event handlers organized by feature area.

This package provides handlers for all Gradio UI events:
- upload: Image selection and composition instruction
- generation: Transform dispatch and session reset
"""

from .generation import (
    decode_result_image,
    reset_app,
    transform_image,
)
from .upload import (
    select_primary_image,
    select_secondary_image,
    update_instruction,
)

__all__ = [
    # Generation handlers
    "decode_result_image",
    "reset_app",
    "transform_image",
    # Upload handlers
    "select_primary_image",
    "select_secondary_image",
    "update_instruction",
]
