"""Decoder for photoTAN / QR challenge images.

Payload layout (all lengths are 2 byte big-endian):

    len(mime type) | mime type | len(image) | image
"""

from __future__ import annotations

from tanflow.domain.banking.exceptions import ChallengeDecodeError
from tanflow.domain.banking.ports import ImageDecoderPort
from tanflow.domain.banking.value_objects import ChallengeImage

_LENGTH_PREFIX = 2


class ChallengeImageDecoder(ImageDecoderPort):
    """Extract MIME type and image bytes from a challenge payload."""

    def decode(self, payload: bytes) -> ChallengeImage:
        mime_type_raw, pos = _read_block(payload, 0, "MIME type")
        data, pos = _read_block(payload, pos, "image data")

        if pos != len(payload):
            msg = (
                f"Challenge image has {len(payload) - pos} unexpected "
                "trailing bytes"
            )
            raise ChallengeDecodeError(msg, payload_length=len(payload))

        try:
            mime_type = mime_type_raw.decode("ascii")
        except UnicodeDecodeError as e:
            msg = "Challenge image MIME type is not ASCII"
            raise ChallengeDecodeError(msg, payload_length=len(payload)) from e

        if "/" not in mime_type:
            msg = f"Invalid challenge image MIME type {mime_type!r}"
            raise ChallengeDecodeError(msg, payload_length=len(payload))

        return ChallengeImage(mime_type=mime_type, data=data)

    @staticmethod
    def encode(mime_type: str, data: bytes) -> bytes:
        """Build a payload in the layout decode() expects."""
        mime = mime_type.encode("ascii")
        return (
            len(mime).to_bytes(_LENGTH_PREFIX, "big")
            + mime
            + len(data).to_bytes(_LENGTH_PREFIX, "big")
            + data
        )


def _read_block(payload: bytes, pos: int, what: str) -> tuple[bytes, int]:
    header = payload[pos : pos + _LENGTH_PREFIX]
    if len(header) != _LENGTH_PREFIX:
        msg = f"Challenge image is too short to contain the {what} length"
        raise ChallengeDecodeError(msg, payload_length=len(payload))

    length = int.from_bytes(header, "big")
    start = pos + _LENGTH_PREFIX
    block = payload[start : start + length]
    if len(block) != length:
        msg = f"Challenge image {what} is truncated"
        raise ChallengeDecodeError(msg, payload_length=len(payload))

    return block, start + length
