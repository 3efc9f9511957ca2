"""python-fints adapter - Anti-Corruption Layer for the FinTS protocol engine.

This adapter implements the ProtocolEnginePort using the python-fints
library. It translates NeedTANResponse objects into authentication requests
and fints exceptions into domain exceptions.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Optional

from fints.client import FinTS3PinTanClient, NeedTANResponse
from fints.exceptions import FinTSError

from tanflow.domain.banking.exceptions import ProtocolError, SessionStateError
from tanflow.domain.banking.ports import ProtocolEnginePort
from tanflow.domain.banking.value_objects import (
    AuthenticationMode,
    AuthenticationRequest,
)
from tanflow.infrastructure.banking.challenge_image_decoder import (
    ChallengeImageDecoder,
)
from tanflow.infrastructure.banking.fints_actions import FinTsAction, LoginAction

if TYPE_CHECKING:
    from tanflow.domain.banking.entities import BankingAction

logger = logging.getLogger(__name__)

ClientFactory = Callable[[Optional[bytes]], FinTS3PinTanClient]


class PythonFintsAdapter(ProtocolEnginePort):
    """
    python-fints Adapter - Anti-Corruption Layer.

    Responsibilities:
    1. Implement ProtocolEnginePort on top of FinTS3PinTanClient
    2. Translate NeedTANResponse into AuthenticationRequest
    3. Read the negotiated TAN mechanism as AuthenticationMode
    4. Convert fints errors to domain exceptions

    The client is created by ``client_factory``, which receives the session
    blob to restore (or None for a fresh session).
    """

    def __init__(self, client_factory: ClientFactory):
        self._client_factory = client_factory
        self._client = client_factory(None)
        self._dialog_open = False
        self._last_challenge_decoupled: Optional[bool] = None

    @property
    def client(self) -> FinTS3PinTanClient:
        return self._client

    def login(self) -> BankingAction:
        action = LoginAction()
        self.execute(action)
        self._dialog_open = True
        return action

    def execute(self, action: BankingAction) -> None:
        fints_action = self._as_fints_action(action)
        logger.info("Executing %s", fints_action.description)

        try:
            result = fints_action.run(self._client)
        except FinTSError as e:
            logger.error("%s failed: %s", fints_action.description, e)
            msg = f"{fints_action.description} failed: {e}"
            raise ProtocolError(msg, operation=fints_action.description) from e

        self._apply_result(fints_action, result)

    def submit_auth_code(self, action: BankingAction, code: str) -> None:
        fints_action = self._as_fints_action(action)
        response = self._pending_response(fints_action)

        try:
            result = self._client.send_tan(response, code)
        except FinTSError as e:
            logger.error("TAN rejected for %s: %s", fints_action.description, e)
            msg = f"TAN submission failed: {e}"
            raise ProtocolError(msg, operation=fints_action.description) from e

        self._apply_result(fints_action, result)

    def check_confirmation(self, action: BankingAction) -> bool:
        fints_action = self._as_fints_action(action)
        response = self._pending_response(fints_action)

        try:
            # Decoupled mode: an empty TAN asks the bank for the status
            result = self._client.send_tan(response, "")
        except FinTSError as e:
            logger.error("Status check failed for %s: %s", fints_action.description, e)
            msg = f"Checking decoupled confirmation failed: {e}"
            raise ProtocolError(msg, operation=fints_action.description) from e

        self._apply_result(fints_action, result)
        return fints_action.is_done

    def current_mode(self) -> Optional[AuthenticationMode]:
        code = self._client.get_current_tan_mechanism()
        if not code:
            return None

        params = self._client.get_tan_mechanisms().get(code)
        if params is None:
            logger.warning("Selected TAN mechanism %s is unknown to the bank", code)
            return None

        return _map_tan_mechanism(code, params, self._last_challenge_decoupled)

    def serialize_session(self) -> bytes:
        return self._client.deconstruct(including_private=True)

    def restore_session(self, blob: bytes) -> None:
        if self._dialog_open:
            msg = "Cannot restore session state while a dialog is open"
            raise SessionStateError(msg)

        try:
            self._client = self._client_factory(blob)
        except (FinTSError, ValueError, TypeError) as e:
            msg = f"Stored session state could not be restored: {e}"
            raise SessionStateError(msg) from e

    def close(self) -> None:
        if not self._dialog_open:
            return

        try:
            self._client.__exit__(None, None, None)
        except FinTSError as e:
            msg = f"Closing the dialog failed: {e}"
            raise ProtocolError(msg, operation="close") from e
        finally:
            self._dialog_open = False

    def _apply_result(self, action: FinTsAction, result: Any) -> None:
        if isinstance(result, NeedTANResponse):
            self._last_challenge_decoupled = bool(getattr(result, "decoupled", False))
            action.remember_pending_response(result)
            action.mark_authentication_required(_map_tan_request(result))
            logger.info("%s needs strong authentication", action.description)
            return

        if isinstance(action, LoginAction):
            self._client.init_tan_response = None
        action.mark_completed(result)
        logger.info("%s completed", action.description)

    @staticmethod
    def _as_fints_action(action: BankingAction) -> FinTsAction:
        if not isinstance(action, FinTsAction):
            msg = f"{action!r} cannot be executed by python-fints"
            raise TypeError(msg)
        return action

    @staticmethod
    def _pending_response(action: FinTsAction) -> NeedTANResponse:
        response = action.pending_response
        if response is None:
            msg = f"{action.description} is not waiting for authentication"
            raise ValueError(msg)
        return response


def _map_tan_request(response: NeedTANResponse) -> AuthenticationRequest:
    payload: Optional[bytes] = None

    hhduc = getattr(response, "challenge_hhduc", None)
    matrix = getattr(response, "challenge_matrix", None)
    if hhduc:
        payload = hhduc.encode("latin-1")
    elif matrix:
        mime_type, data = matrix
        payload = ChallengeImageDecoder.encode(mime_type, data)

    tan_request = getattr(response, "tan_request", None)
    medium_name = getattr(tan_request, "tan_medium_name", None)

    return AuthenticationRequest(
        instructions=getattr(response, "challenge", None) or None,
        medium_name=medium_name or None,
        challenge_payload=payload,
    )


def _map_tan_mechanism(
    code: str,
    params: Any,
    challenge_decoupled: Optional[bool],
) -> AuthenticationMode:
    max_polls = getattr(params, "decoupled_max_poll_number", None)

    # The last challenge knows best; fall back to the HITANS parameters
    if challenge_decoupled is not None:
        is_decoupled = challenge_decoupled
    else:
        is_decoupled = max_polls is not None

    return AuthenticationMode(
        code=code,
        name=getattr(params, "name", None) or "",
        is_decoupled=is_decoupled,
        allows_automated_polling=bool(
            getattr(params, "automated_polling_allowed", False)
        ),
        allows_manual_confirmation=bool(
            getattr(params, "manual_confirmation_allowed", False)
        ),
        first_poll_delay_seconds=max(
            int(getattr(params, "wait_before_first_poll", None) or 0), 0
        ),
        periodic_poll_delay_seconds=max(
            int(getattr(params, "wait_before_next_poll", None) or 0), 0
        ),
        max_poll_attempts=max(int(max_polls or 0), 0),
    )
