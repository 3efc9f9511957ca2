"""Unit tests for the HHD flicker decoder."""

import pytest

from tanflow.infrastructure.banking.challenge_image_decoder import (
    ChallengeImageDecoder,
)
from tanflow.infrastructure.banking.hhd_flicker_decoder import (
    HhdFlickerDecoder,
    bits_to_frame,
)

# HHD 1.4: start code 1049063, account 9876543210, BLZ 12345678, amount 1,00
CHALLENGE = "039870110490631098765432100812345678041,00"
FLICKER_CODE = "1784011049063F059876543210041234567844312C303019"

# HHD 1.3, two digit LC
CHALLENGE_HHD13 = "1784011044406104010"
FLICKER_CODE_HHD13 = "0A82011044046104010F49"


@pytest.fixture
def decoder():
    return HhdFlickerDecoder()


class TestFlickerCode:
    """Tests for the flicker code shown to the TAN generator."""

    def test_hhd14_code(self, decoder):
        pattern = decoder.try_decode(CHALLENGE.encode("ascii"))

        # LC counts the checksum byte; Luhn 1, XOR 9
        assert pattern.code == FLICKER_CODE

    def test_hhd13_code(self, decoder):
        pattern = decoder.try_decode(CHALLENGE_HHD13.encode("ascii"))

        assert pattern is not None
        assert pattern.code == FLICKER_CODE_HHD13

    def test_whitespace_is_ignored(self, decoder):
        spaced = b" 039 8701 1049063 10 9876543210 08 12345678 04 1,00 "

        assert decoder.try_decode(spaced).code == FLICKER_CODE


class TestFlickerFrames:
    """Tests for expanding a code into frames."""

    def test_sync_is_sent_in_order(self, decoder):
        frames = decoder.try_decode(CHALLENGE.encode("ascii")).frames

        assert frames[:3] == (
            (True, False, False, False, False),
            (False, False, False, False, False),
            (True, True, True, True, True),
        )

    def test_code_bytes_low_nibble_first(self, decoder):
        frames = decoder.try_decode(CHALLENGE.encode("ascii")).frames

        # last byte "19": low nibble 1 goes out last, clock high then low
        assert frames[-2] == (True, True, False, False, False)
        assert frames[-1] == (False, True, False, False, False)
        # two frames per nibble after the sync
        assert len(frames) > 2 * len(FLICKER_CODE)

    def test_bits_to_frame(self):
        assert bits_to_frame("10110") == (True, False, True, True, False)


class TestNotAFlickerCode:
    """Payloads that must fall through to the image decoder."""

    def test_image_payload(self, decoder):
        payload = ChallengeImageDecoder.encode("image/png", b"\x89PNG\r\n")

        assert decoder.try_decode(payload) is None

    def test_non_ascii_payload(self, decoder):
        assert decoder.try_decode(b"\xff\xfe\x00") is None

    @pytest.mark.parametrize("payload", [b"", b"   ", b"hello"])
    def test_text_without_structure(self, decoder, payload):
        assert decoder.try_decode(payload) is None
