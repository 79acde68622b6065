"""Unit tests for UI formatting utilities."""

from fadedmemory.core import transform as transitions
from fadedmemory.core.transform import TransformState
from fadedmemory.ui.formatting import (
    READY_MESSAGE,
    format_loading,
    format_selection,
    format_system_error,
    format_transform_status,
    format_unexpected_error,
)
from fadedmemory.ui.models import UIState


class TestFormatSelection:
    """Tests for format_selection function."""

    def test_nothing_selected(self):
        assert format_selection(UIState()) == READY_MESSAGE

    def test_primary_only(self, jpeg_input):
        result = format_selection(UIState(primary=jpeg_input))

        assert "**Image 1:** photo.jpg (image/jpeg)" in result
        assert "Image 2" not in result

    def test_two_images_with_instruction(self, jpeg_input, webp_input):
        result = format_selection(UIState(primary=jpeg_input, secondary=webp_input, instruction=" beach "))

        assert "**Image 2:** friend.webp (image/webp)" in result
        assert "**Composition:** beach" in result

    def test_two_images_blank_instruction(self, jpeg_input, webp_input):
        result = format_selection(UIState(primary=jpeg_input, secondary=webp_input, instruction="  "))

        assert "(creative blend)" in result


class TestFormatTransformStatus:
    """Tests for format_transform_status function."""

    def test_idle_shows_selection(self):
        assert format_transform_status(TransformState(), "sel") == "sel"
        assert format_transform_status(TransformState()) == READY_MESSAGE

    def test_loading(self):
        assert format_transform_status(transitions.start(TransformState())).startswith("⏳")

    def test_failed(self):
        state = transitions.fail(transitions.start(TransformState()), "Failed to transform image. boom")

        result = format_transform_status(state)

        assert "SYSTEM ERROR" in result
        assert "Failed to transform image. boom" in result

    def test_succeeded(self):
        state = transitions.succeed(transitions.start(TransformState()), b"x" * 2048, "image/jpeg")

        result = format_transform_status(state)

        assert "✅" in result
        assert "**Format:** image/jpeg" in result
        assert "**Size:** 2.0 KB" in result
        assert "**Attempt:** 1" in result


class TestMessageHelpers:
    def test_format_loading(self):
        assert format_loading("Traveling to 1986...") == "⏳ **Traveling to 1986...**"

    def test_format_system_error(self):
        assert format_system_error("oops") == "❌ **SYSTEM ERROR:**\n\noops"

    def test_format_unexpected_error(self):
        result = format_unexpected_error(RuntimeError("kaboom"))

        assert "unexpected error" in result
        assert "`kaboom`" in result
