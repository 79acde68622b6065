"""Unit tests for UI data models."""

from unittest.mock import Mock

from fadedmemory.core.transform import TransformRequest, TransformState, TransformStatus
from fadedmemory.ui.models import ACCEPTED_FILE_TYPES, LOADING_MESSAGES, UIState


class TestUIState:
    """Tests for UIState dataclass."""

    def test_default_values(self):
        state = UIState()

        assert state.primary is None
        assert state.secondary is None
        assert state.instruction == ""
        assert state.orchestrator is None
        assert state.is_initialized() is False

    def test_transform_state_defaults_to_idle(self):
        assert UIState().transform_state.status is TransformStatus.IDLE

    def test_transform_state_from_orchestrator(self):
        loading = TransformState(status=TransformStatus.LOADING)
        state = UIState(orchestrator=Mock(state=loading))

        assert state.transform_state is loading

    def test_to_request(self, jpeg_input, webp_input):
        state = UIState(primary=jpeg_input, secondary=webp_input, instruction="beach")

        assert state.to_request() == TransformRequest(
            primary=jpeg_input, secondary=webp_input, instruction="beach"
        )

    def test_repr(self, jpeg_input):
        text = repr(UIState(primary=jpeg_input, service_name="Gemini"))

        assert "service=Gemini" in text
        assert "primary=True" in text
        assert "status=idle" in text


class TestConstants:
    def test_loading_messages(self):
        assert "Traveling to 1986..." in LOADING_MESSAGES
        assert len(LOADING_MESSAGES) == 7

    def test_accepted_file_types(self):
        assert set(ACCEPTED_FILE_TYPES) == {".jpg", ".jpeg", ".png", ".webp"}
