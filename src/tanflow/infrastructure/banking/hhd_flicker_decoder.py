"""HHD flicker code decoder (chipTAN optical) on top of python-fints.

python-fints parses the HHDUC challenge (HHD 1.4, the Sparda variant with
3 digit data element lengths and HHD 1.3), renders the flicker code the TAN
generator expects and expands it into the bar frames.
"""

from __future__ import annotations

import logging
from typing import Optional

from fints.hhd.flicker import code_to_bitstream, parse

from tanflow.domain.banking.ports import FlickerDecoderPort
from tanflow.domain.banking.value_objects import FlickerFrame, FlickerPattern

logger = logging.getLogger(__name__)


def bits_to_frame(bits: str) -> FlickerFrame:
    """Convert one python-fints frame like '10110' (clock bar first)."""
    clock, b1, b2, b3, b4 = (bit == "1" for bit in bits)
    return (clock, b1, b2, b3, b4)


class HhdFlickerDecoder(FlickerDecoderPort):
    """Flicker decoder for HHDUC challenges."""

    def try_decode(self, payload: bytes) -> Optional[FlickerPattern]:
        try:
            text = "".join(payload.decode("ascii").split())
        except UnicodeDecodeError:
            logger.debug("Payload is not ASCII, so not a flicker code")
            return None

        if not text:
            return None

        try:
            code = parse(text).render()
        except (ValueError, IndexError) as e:
            logger.debug("Payload is not a flicker code: %s", e)
            return None

        frames = tuple(bits_to_frame(bits) for bits in code_to_bitstream(code))
        return FlickerPattern(code=code, frames=frames)
