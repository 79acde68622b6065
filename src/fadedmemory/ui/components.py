"""Reusable UI components for the Faded Memory Gradio interface."""

import gradio as gr

from fadedmemory.core.config import config

from .models import ACCEPTED_FILE_TYPES


class ImageSlotUI:
    """Upload slot for one source photo.

    Each slot has:
    - Title
    - Image upload (file path is handed to the selection handler)
    - Optional composition instruction box (second slot only)
    """

    def __init__(self, name: str, required: bool = False, with_instruction: bool = False):
        """Initialize an image slot component.

        Args:
            name: Display name of the slot (e.g., "Image 1")
            required: Whether the slot must be filled before transforming
            with_instruction: Add a composition instruction textbox
        """
        self.name = name
        self.required = required

        suffix = "Required" if required else "Optional"
        with gr.Group():
            self.title = gr.Markdown(f"**{name}** *({suffix})*")
            self.image = gr.Image(
                label=name,
                type="filepath",
                sources=["upload", "clipboard"],
                height=260,
            )
            self.instruction = None
            if with_instruction:
                self.instruction = gr.Textbox(
                    label="How should the images be combined?",
                    placeholder=(
                        "e.g., 'the two friends standing on a sunset beach' "
                        "(leave empty for a creative blend)"
                    ),
                    lines=2,
                    max_length=config.max_instruction_length,
                    value="",
                )
            self.accepted = gr.Markdown(
                f"*Accepted: {', '.join(ext.lstrip('.').upper() for ext in ACCEPTED_FILE_TYPES)}*"
            )

    def get_input_components(self) -> list:
        """Components whose values feed the selection handler."""
        components = [self.image]
        if self.instruction is not None:
            components.append(self.instruction)
        return components


class ResultPanelUI:
    """Output panel: transformed image plus status text."""

    def __init__(self, title: str = "[ 1986 VERSION ]"):
        with gr.Group():
            gr.Markdown(f"### {title}")
            self.image = gr.Image(
                label="Result",
                type="pil",
                interactive=False,
                height=420,
            )
            self.status = gr.Markdown(value="*Select image 1 to begin*")
