"""Integration tests for UI components."""

from unittest.mock import patch

from fadedmemory.ui.components import ImageSlotUI, ResultPanelUI


class TestImageSlotUI:
    """Integration tests for ImageSlotUI component."""

    def test_primary_slot(self):
        with (
            patch("gradio.Group"),
            patch("gradio.Markdown") as MockMarkdown,
            patch("gradio.Image") as MockImage,
            patch("gradio.Textbox") as MockTextbox,
        ):
            slot = ImageSlotUI("Image 1", required=True)

            assert slot.name == "Image 1"
            assert slot.required is True
            assert slot.instruction is None
            MockTextbox.assert_not_called()
            assert MockImage.call_args.kwargs["type"] == "filepath"
            assert "Required" in MockMarkdown.call_args_list[0].args[0]

    def test_secondary_slot_has_instruction(self):
        with (
            patch("gradio.Group"),
            patch("gradio.Markdown"),
            patch("gradio.Image"),
            patch("gradio.Textbox") as MockTextbox,
        ):
            slot = ImageSlotUI("Image 2", with_instruction=True)

            assert slot.instruction is MockTextbox.return_value
            assert slot.get_input_components() == [slot.image, slot.instruction]

    def test_input_components_without_instruction(self):
        with (
            patch("gradio.Group"),
            patch("gradio.Markdown"),
            patch("gradio.Image"),
            patch("gradio.Textbox"),
        ):
            slot = ImageSlotUI("Image 1")

            assert slot.get_input_components() == [slot.image]


class TestResultPanelUI:
    def test_result_panel(self):
        with (
            patch("gradio.Group"),
            patch("gradio.Markdown") as MockMarkdown,
            patch("gradio.Image") as MockImage,
        ):
            panel = ResultPanelUI()

            assert panel.image is MockImage.return_value
            assert MockImage.call_args.kwargs["interactive"] is False
            assert panel.status is MockMarkdown.return_value
