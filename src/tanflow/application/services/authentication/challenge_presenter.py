"""Present authentication challenges to the user."""

from __future__ import annotations

import logging
from typing import Optional

from tanflow.domain.banking.exceptions import ChallengeDecodeError
from tanflow.domain.banking.ports import (
    FlickerDecoderPort,
    FlickerRendererPort,
    ImageDecoderPort,
    UserIOPort,
)
from tanflow.domain.banking.value_objects import (
    AuthenticationRequest,
    ChallengeVisual,
)

logger = logging.getLogger(__name__)


class ChallengePresenter:
    """Turn a server-issued challenge into output a human can act on.

    Stateless apart from its collaborators.
    """

    def __init__(
        self,
        user_io: UserIOPort,
        flicker_decoder: FlickerDecoderPort,
        image_decoder: ImageDecoderPort,
        flicker_renderer: FlickerRendererPort,
    ):
        self._io = user_io
        self._flicker_decoder = flicker_decoder
        self._image_decoder = image_decoder
        self._flicker_renderer = flicker_renderer

    def present(
        self,
        request: Optional[AuthenticationRequest],
        intro: str,
        medium_prompt: str = "Please use this device",
    ) -> None:
        line = intro
        if request is not None and request.instructions is not None:
            line += f" Instructions: {request.instructions}"
        self._io.present(line)

        if request is not None and request.medium_name is not None:
            self._io.present(f"{medium_prompt}: {request.medium_name}")

    def render_challenge_visual(self, payload: bytes) -> ChallengeVisual:
        pattern = self._flicker_decoder.try_decode(payload)
        if pattern is not None:
            logger.debug("Challenge is a flicker code with %d frames", len(pattern))
            self._io.present("There is a challenge flicker.")
            self._io.present(self._flicker_renderer.render(pattern))
            return pattern

        # Not a flicker code, so it has to be an image
        try:
            image = self._image_decoder.decode(payload)
        except ChallengeDecodeError:
            logger.error(
                "Challenge payload (%d bytes) is neither flicker code nor image",
                len(payload),
            )
            raise

        logger.debug("Challenge is an image of type %s", image.mime_type)
        self._io.present("There is a challenge image.")
        self._io.present(image.to_html())
        return image
