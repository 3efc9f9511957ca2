"""Unit tests for banking value objects."""

import pytest
from pydantic import ValidationError

from tanflow.domain.banking.value_objects import (
    AuthenticationMode,
    AuthenticationRequest,
    ChallengeImage,
    ConnectionOptions,
    FlickerPattern,
)
from tanflow.domain.shared.value_objects import SecureString


class TestAuthenticationMode:
    """Tests for AuthenticationMode."""

    def test_defaults(self):
        mode = AuthenticationMode()

        assert mode.is_decoupled is False
        assert mode.is_interactive is True
        assert mode.allows_automated_polling is False
        assert mode.allows_manual_confirmation is False
        assert mode.max_poll_attempts == 0
        assert mode.has_poll_limit is False

    def test_decoupled_mode(self):
        mode = AuthenticationMode(
            code="940",
            name="DKB App",
            is_decoupled=True,
            allows_automated_polling=True,
            first_poll_delay_seconds=5,
            periodic_poll_delay_seconds=2,
            max_poll_attempts=999,
        )

        assert mode.has_poll_limit is True
        assert str(mode) == "940: DKB App (decoupled)"

    @pytest.mark.parametrize(
        "field",
        ["first_poll_delay_seconds", "periodic_poll_delay_seconds", "max_poll_attempts"],
    )
    def test_negative_values_rejected(self, field):
        with pytest.raises(ValidationError):
            AuthenticationMode(**{field: -1})

    def test_is_frozen(self):
        mode = AuthenticationMode(code="940")

        with pytest.raises(ValidationError):
            mode.code = "972"


class TestAuthenticationRequest:
    """Tests for AuthenticationRequest."""

    def test_all_fields_optional(self):
        request = AuthenticationRequest()

        assert request.instructions is None
        assert request.medium_name is None
        assert request.challenge_payload is None
        assert request.has_visual is False

    def test_has_visual(self):
        assert AuthenticationRequest(challenge_payload=b"x").has_visual is True
        assert AuthenticationRequest(challenge_payload=b"").has_visual is False

    def test_str(self):
        request = AuthenticationRequest(
            instructions="Login",
            medium_name="Phone",
            challenge_payload=b"x",
        )

        assert str(request) == (
            "Authentication Request\nInstructions: Login\nMedium: Phone\n"
            "Challenge visual available"
        )


class TestChallengeVisual:
    """Tests for FlickerPattern and ChallengeImage."""

    def test_flicker_pattern_length(self):
        frame = (True, False, False, True, False)
        pattern = FlickerPattern(code="0F", frames=(frame, frame))

        assert len(pattern) == 2

    def test_flicker_pattern_needs_frames(self):
        with pytest.raises(ValidationError):
            FlickerPattern(code="0F", frames=())

    def test_image_data_uri(self):
        image = ChallengeImage(mime_type="image/png", data=b"abc")

        assert image.to_data_uri() == "data:image/png;base64,YWJj"

    def test_image_html_escapes_mime_type(self):
        image = ChallengeImage(mime_type='image/"png', data=b"abc")

        assert image.to_html() == '<img src="data:image/&quot;png;base64,YWJj" />'


class TestConnectionOptions:
    """Tests for ConnectionOptions."""

    @pytest.fixture
    def values(self):
        return {
            "blz": "12345678",
            "server_url": "https://banking.example.com/fints",
            "product_id": "ABCDEF0123456789",
            "user_id": "user",
            "pin": "secret",
        }

    def test_valid_options(self, values):
        options = ConnectionOptions(**values)

        assert isinstance(options.pin, SecureString)
        assert options.pin.get_value() == "secret"
        assert options.product_version == "1.0"
        assert options.tan_mechanism is None

    def test_pin_never_shown(self, values):
        options = ConnectionOptions(**values)

        assert "secret" not in repr(options)
        assert "secret" not in str(options)

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("blz", "1234567"),
            ("blz", "1234567X"),
            ("server_url", "http://banking.example.com"),
            ("product_id", ""),
            ("tan_mechanism", "abc"),
        ],
    )
    def test_invalid_values_rejected(self, values, field, value):
        values[field] = value

        with pytest.raises(ValidationError):
            ConnectionOptions(**values)
