"""Unit tests for validation utilities."""

from unittest.mock import Mock, patch

import pytest

from fadedmemory.core.errors import (
    FadedMemoryError,
    InputRejectedError,
    ReadFailureError,
    ServiceFailureError,
    TransformInProgressError,
    ValidationError,
)
from fadedmemory.ui.models import UIState
from fadedmemory.ui.validation import validate_instruction, validate_transform_inputs


class TestErrorHierarchy:
    """Tests for the exception taxonomy."""

    @pytest.mark.parametrize(
        "error_class",
        [ValidationError, TransformInProgressError, InputRejectedError, ReadFailureError, ServiceFailureError],
    )
    def test_all_are_app_errors(self, error_class):
        assert issubclass(error_class, FadedMemoryError)

    def test_message_preserved(self):
        msg = "Custom validation error"
        with pytest.raises(ValidationError, match=msg):
            raise ValidationError(msg)


class TestValidateTransformInputs:
    """Tests for validate_transform_inputs function."""

    def test_missing_primary(self, ui_state):
        with pytest.raises(ValidationError, match="Please select image 1 to begin."):
            validate_transform_inputs(ui_state)

    def test_primary_present(self, jpeg_input):
        validate_transform_inputs(UIState(primary=jpeg_input))  # Should not raise

    def test_secondary_alone_is_not_enough(self, png_input):
        with pytest.raises(ValidationError):
            validate_transform_inputs(UIState(secondary=png_input))

    def test_busy(self, jpeg_input):
        state = UIState(primary=jpeg_input, orchestrator=Mock(is_busy=True))

        with pytest.raises(TransformInProgressError):
            validate_transform_inputs(state)


class TestValidateInstruction:
    """Tests for validate_instruction function."""

    def test_empty_is_valid(self):
        validate_instruction("")  # Should not raise

    def test_too_long(self):
        with pytest.raises(ValidationError, match="too long"):
            validate_instruction("x" * 2001)

    def test_custom_limit(self):
        with pytest.raises(ValidationError):
            validate_instruction("hello", max_length=3)

    def test_default_limit_comes_from_config(self, test_config):
        limited = test_config.model_copy(update={"max_instruction_length": 5})

        with patch("fadedmemory.ui.validation.config", limited):
            validate_instruction("x" * 5)  # Should not raise
            with pytest.raises(ValidationError, match="Maximum is 5 characters"):
                validate_instruction("x" * 6)
