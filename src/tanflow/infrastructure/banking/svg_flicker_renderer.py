"""Render flicker patterns as animated SVG."""

from tanflow.domain.banking.ports import FlickerRendererPort
from tanflow.domain.banking.value_objects import FlickerPattern

BAR_COUNT = 5


class SvgFlickerRenderer(FlickerRendererPort):
    """Five vertical bars switching between black and white.

    Every frame is shown for ``frame_ms`` milliseconds. The animation loops
    so the TAN generator can pick it up at any time.
    """

    def __init__(
        self,
        frame_ms: int = 50,
        bar_width: int = 40,
        bar_height: int = 120,
        gap: int = 10,
    ):
        if frame_ms <= 0:
            msg = "frame_ms must be positive"
            raise ValueError(msg)
        self._frame_ms = frame_ms
        self._bar_width = bar_width
        self._bar_height = bar_height
        self._gap = gap

    def render(self, pattern: FlickerPattern) -> str:
        width = BAR_COUNT * self._bar_width + (BAR_COUNT + 1) * self._gap
        height = self._bar_height + 2 * self._gap
        duration = len(pattern.frames) * self._frame_ms

        parts = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" '
            f'height="{height}" viewBox="0 0 {width} {height}">',
            f'<rect width="{width}" height="{height}" fill="black"/>',
        ]
        for bar in range(BAR_COUNT):
            values = ";".join(
                "white" if frame[bar] else "black" for frame in pattern.frames
            )
            x = self._gap + bar * (self._bar_width + self._gap)
            parts.append(
                f'<rect x="{x}" y="{self._gap}" width="{self._bar_width}" '
                f'height="{self._bar_height}" fill="black">'
                f'<animate attributeName="fill" values="{values}" '
                f'dur="{duration}ms" calcMode="discrete" repeatCount="indefinite"/>'
                "</rect>"
            )
        parts.append("</svg>")
        return "".join(parts)
