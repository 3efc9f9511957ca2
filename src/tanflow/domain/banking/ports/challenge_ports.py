"""Challenge decoding and rendering port interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from tanflow.domain.banking.value_objects import ChallengeImage, FlickerPattern


class FlickerDecoderPort(ABC):
    """Turns a challenge payload into a flicker pattern."""

    @abstractmethod
    def try_decode(self, payload: bytes) -> Optional[FlickerPattern]:
        """
        Decode a flicker code challenge.

        Returns
        -------
        The flicker pattern, or None if the payload is not shaped like a
        flicker code (e.g. because it is an image)
        """


class ImageDecoderPort(ABC):
    """Turns a challenge payload into a static image."""

    @abstractmethod
    def decode(self, payload: bytes) -> ChallengeImage:
        """
        Decode a challenge image.

        Raises
        ------
        ChallengeDecodeError
            If the payload is not a well-formed challenge image
        """


class FlickerRendererPort(ABC):
    """Produces something a user can look at from a flicker pattern."""

    @abstractmethod
    def render(self, pattern: FlickerPattern) -> str:
        """Return a presentable representation (e.g. SVG markup)."""
