"""Interactive TAN authentication."""

from __future__ import annotations

import logging

from tanflow.application.services.authentication.challenge_presenter import (
    ChallengePresenter,
)
from tanflow.domain.banking.entities import BankingAction
from tanflow.domain.banking.ports import ProtocolEnginePort, UserIOPort

logger = logging.getLogger(__name__)


class TanAuthenticator:
    """Strong authentication where the user types a TAN into this application.

    Blocking: authenticate() returns once the TAN was submitted. Errors from
    the submission (wrong TAN, expired challenge) propagate unchanged and
    are not retried here.
    """

    def __init__(
        self,
        engine: ProtocolEnginePort,
        user_io: UserIOPort,
        presenter: ChallengePresenter,
    ):
        self._engine = engine
        self._io = user_io
        self._presenter = presenter

    def authenticate(self, action: BankingAction) -> None:
        request = action.authentication_request
        logger.info("TAN required for %s", action.description)

        self._presenter.present(
            request,
            intro="The bank requested a TAN.",
            medium_prompt="Please use this device",
        )
        if request is not None and request.challenge_payload:
            self._presenter.render_challenge_visual(request.challenge_payload)

        self._io.present("Please enter the TAN:")
        tan = self._io.read_line().strip()

        self._io.present(f"Submitting TAN: {tan}")
        self._engine.submit_auth_code(action, tan)
        logger.info("TAN submitted for %s", action.description)
