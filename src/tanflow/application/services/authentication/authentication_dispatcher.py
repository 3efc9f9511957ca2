"""Route strong authentication to the matching authenticator."""

from __future__ import annotations

import logging
from typing import Optional

from tanflow.application.services.authentication.decoupled_authenticator import (
    DecoupledAuthenticator,
)
from tanflow.application.services.authentication.tan_authenticator import (
    TanAuthenticator,
)
from tanflow.domain.banking.entities import BankingAction
from tanflow.domain.banking.value_objects import AuthenticationMode

logger = logging.getLogger(__name__)


class AuthenticationDispatcher:
    """Pick exactly one authenticator for an action that needs SCA.

    Most actions (transfers, statements, even the login) can ask for strong
    authentication, but whether they do depends on the bank, the amount, the
    time span and when the action was last authorized. Callers therefore
    check after every action and hand over to this dispatcher.

    The negotiated mode alone decides: decoupled modes go to the
    DecoupledAuthenticator, everything else (including no mode at all) to
    the TanAuthenticator.
    """

    def __init__(
        self,
        tan_authenticator: TanAuthenticator,
        decoupled_authenticator: DecoupledAuthenticator,
    ):
        self._tan = tan_authenticator
        self._decoupled = decoupled_authenticator

    def handle(
        self,
        action: BankingAction,
        current_mode: Optional[AuthenticationMode],
    ) -> None:
        if current_mode is None or current_mode.is_interactive:
            logger.debug("Routing %s to TAN authentication", action.description)
            self._tan.authenticate(action)
        else:
            logger.debug("Routing %s to decoupled authentication", action.description)
            self._decoupled.authenticate(action, current_mode)
