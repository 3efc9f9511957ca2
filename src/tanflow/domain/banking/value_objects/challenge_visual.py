"""Challenge visual value objects.

A challenge payload renders either as an animated flicker code (chipTAN
optical) or as a static image (photoTAN, QR code). Both are derived from the
payload on demand and never persisted.
"""

import base64
from html import escape
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

FlickerFrame = tuple[bool, bool, bool, bool, bool]


class FlickerPattern(BaseModel):
    """Frames of an HHD flicker code.

    Each frame holds five bars: the clock bar followed by the four data bits
    of one half byte, least significant bit first.
    """

    code: str = Field(..., min_length=1, description="Flicker code as hex string")
    frames: tuple[FlickerFrame, ...] = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        return len(self.frames)


class ChallengeImage(BaseModel):
    """Static challenge image delivered by the bank."""

    mime_type: str = Field(..., min_length=1, description="e.g. 'image/png'")
    data: bytes = Field(...)

    model_config = ConfigDict(frozen=True)

    def to_data_uri(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"

    def to_html(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f'<img src="data:{escape(self.mime_type)};base64,{encoded}" />'


ChallengeVisual = Union[FlickerPattern, ChallengeImage]
