"""Unit tests for SvgFlickerRenderer."""

import pytest

from tanflow.domain.banking.value_objects import FlickerPattern
from tanflow.infrastructure.banking.svg_flicker_renderer import SvgFlickerRenderer


class TestSvgFlickerRenderer:
    """Tests for the SVG output."""

    @pytest.fixture
    def pattern(self):
        return FlickerPattern(
            code="0F",
            frames=(
                (True, False, True, False, True),
                (False, True, False, True, False),
            ),
        )

    def test_one_animated_bar_per_channel(self, pattern):
        svg = SvgFlickerRenderer().render(pattern)

        assert svg.startswith("<svg")
        assert svg.endswith("</svg>")
        assert svg.count("<animate ") == 5

    def test_bar_values_follow_frames(self, pattern):
        svg = SvgFlickerRenderer().render(pattern)

        assert 'values="white;black"' in svg  # clock bar
        assert 'values="black;white"' in svg

    def test_duration_scales_with_frames(self, pattern):
        svg = SvgFlickerRenderer(frame_ms=40).render(pattern)

        assert 'dur="80ms"' in svg

    def test_frame_duration_must_be_positive(self):
        with pytest.raises(ValueError):
            SvgFlickerRenderer(frame_ms=0)
