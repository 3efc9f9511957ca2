"""Decoupled (out-of-band) authentication."""

from __future__ import annotations

import logging
import time
from typing import Callable

from tanflow.application.services.authentication.challenge_presenter import (
    ChallengePresenter,
)
from tanflow.domain.banking.entities import BankingAction
from tanflow.domain.banking.exceptions import (
    PollExhaustedError,
    UnsupportedAuthModeError,
)
from tanflow.domain.banking.ports import ProtocolEnginePort, UserIOPort
from tanflow.domain.banking.value_objects import AuthenticationMode

logger = logging.getLogger(__name__)

DEFAULT_CONFIRMATION_TOKEN = "done"


class DecoupledAuthenticator:
    """Strong authentication confirmed on another device (e.g. a banking app).

    Two ways to find out that the user confirmed:

    - automated polling, if the bank allows it: wait the first delay, then
      check periodically until confirmed or until the attempt limit is hit
      (a limit of 0 polls forever, cancellation is up to the caller)
    - manual confirmation: the user types the confirmation token, then we
      check once; if the bank has not seen the confirmation yet, ask again

    The sleep function is injectable so the waits can be replaced by another
    timer mechanism (or skipped in tests).
    """

    def __init__(
        self,
        engine: ProtocolEnginePort,
        user_io: UserIOPort,
        presenter: ChallengePresenter,
        sleep: Callable[[float], None] = time.sleep,
        confirmation_token: str = DEFAULT_CONFIRMATION_TOKEN,
    ):
        self._engine = engine
        self._io = user_io
        self._presenter = presenter
        self._sleep = sleep
        self._confirmation_token = confirmation_token

    def authenticate(self, action: BankingAction, mode: AuthenticationMode) -> None:
        logger.info(
            "Decoupled authentication required for %s (mode %s)",
            action.description,
            mode,
        )
        self._presenter.present(
            action.authentication_request,
            intro="The bank requested authentication on another device.",
            medium_prompt="Please check this device",
        )

        if mode.allows_automated_polling:
            self._poll(action, mode)
        elif mode.allows_manual_confirmation:
            self._confirm_manually(action)
        else:
            raise UnsupportedAuthModeError(mode_code=mode.code or None)

    def _poll(self, action: BankingAction, mode: AuthenticationMode) -> None:
        self._io.present(
            "Polling server to detect when the decoupled authentication is complete."
        )
        self._sleep(mode.first_poll_delay_seconds)

        attempt = 0
        while not mode.has_poll_limit or attempt < mode.max_poll_attempts:
            if self._engine.check_confirmation(action):
                logger.info(
                    "%s confirmed after %d unsuccessful checks",
                    action.description,
                    attempt,
                )
                self._io.present("Confirmed.")
                return
            self._io.present("Still waiting...")
            self._sleep(mode.periodic_poll_delay_seconds)
            attempt += 1

        logger.warning(
            "%s not confirmed after %d attempts", action.description, attempt
        )
        raise PollExhaustedError(attempts=attempt)

    def _confirm_manually(self, action: BankingAction) -> None:
        while True:
            self._io.present(
                f"Please type '{self._confirmation_token}' and hit Return when "
                "you've completed the authentication on the other device."
            )
            while self._io.read_line().strip() != self._confirmation_token:
                self._io.present("Try again.")
            self._io.present("Confirming that the action is done.")

            if self._engine.check_confirmation(action):
                break
            logger.info("%s not yet confirmed by the bank", action.description)

        self._io.present("Confirmed.")
