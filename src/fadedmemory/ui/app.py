"""Gradio UI for the Faded Memory Generator."""

import logging

import gradio as gr

from fadedmemory import __version__
from fadedmemory.core.config import config
from fadedmemory.core.services import service_registry

from .components import ImageSlotUI, ResultPanelUI
from .handlers import (
    reset_app,
    select_primary_image,
    select_secondary_image,
    transform_image,
    update_instruction,
)
from .models import UIState

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

CUSTOM_CSS = """
.retro-title { font-family: 'VT323', monospace; letter-spacing: 0.05em; }
.footer-note { text-align: center; opacity: 0.8; }
"""


def create_ui() -> tuple[gr.Blocks, str]:
    """Create the Gradio UI.

    Returns:
        Tuple of (Gradio Blocks app, custom CSS string)
    """
    app = gr.Blocks(title="Faded Memory Generator")

    with app:
        # Session state - one instance per user
        ui_state = gr.State(UIState())

        gr.Markdown(
            """
            # Faded Memory Generator
            ### Turn your photos into 1986 point-and-shoot snapshots
            """,
            elem_classes="retro-title",
        )

        with gr.Row():
            with gr.Column(scale=1):
                gr.Markdown("### [ ORIGINAL(S) ]")
                primary_slot = ImageSlotUI("Image 1", required=True)
                secondary_slot = ImageSlotUI("Image 2", with_instruction=True)

                with gr.Row():
                    transform_btn = gr.Button("Transform to 1986", variant="primary")
                    reset_btn = gr.Button("Reset", variant="secondary")

            with gr.Column(scale=2):
                result_panel = ResultPanelUI()

        gr.Markdown(
            f"*A Faded Memory Generator // v{__version__} // service: {config.default_service}*",
            elem_classes="footer-note",
        )

        # Image 1 selection
        for event in (primary_slot.image.upload, primary_slot.image.clear):
            event(
                fn=select_primary_image,
                inputs=[primary_slot.image, ui_state],
                outputs=[primary_slot.image, result_panel.status, result_panel.image, ui_state],
            )

        # Image 2 selection (reads the instruction box at the same time)
        for event in (secondary_slot.image.upload, secondary_slot.image.clear):
            event(
                fn=select_secondary_image,
                inputs=[*secondary_slot.get_input_components(), ui_state],
                outputs=[secondary_slot.image, result_panel.status, result_panel.image, ui_state],
            )

        secondary_slot.instruction.change(
            fn=update_instruction,
            inputs=[secondary_slot.instruction, ui_state],
            outputs=[result_panel.status, ui_state],
        )

        # Transform. The orchestrator allows one request per session; the
        # event-level limit caps concurrent service calls across all sessions.
        transform_btn.click(
            fn=transform_image,
            inputs=[ui_state],
            outputs=[result_panel.image, result_panel.status, transform_btn, ui_state],
            concurrency_limit=1,
        )

        reset_btn.click(
            fn=reset_app,
            inputs=[ui_state],
            outputs=[
                primary_slot.image,
                secondary_slot.image,
                secondary_slot.instruction,
                result_panel.image,
                result_panel.status,
                ui_state,
            ],
        )

    return app, CUSTOM_CSS


def main():
    """Main entry point for the application."""
    logger.info("Starting Faded Memory Generator...")
    # Never log the credential itself
    logger.info(f"Configuration: {config.model_dump(exclude={'api_key'})}")
    logger.info(f"Available services: {service_registry.list_available()}")

    if config.default_service == "Gemini" and not config.has_api_key():
        logger.warning("No API key configured; transforms will fail until one is set")

    app, custom_css = create_ui()

    logger.info(f"Launching Gradio UI on {config.gradio_server_name}:{config.gradio_server_port}")

    app.launch(
        server_name=config.gradio_server_name,
        server_port=config.gradio_server_port,
        share=config.gradio_share,
        show_error=True,
        inbrowser=False,
        css=custom_css,
    )


if __name__ == "__main__":
    main()
