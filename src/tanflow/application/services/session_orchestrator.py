"""Run banking operations including any strong authentication they need."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from tanflow.application.services.authentication import AuthenticationDispatcher
from tanflow.domain.banking.entities import BankingAction
from tanflow.domain.banking.ports import ProtocolEnginePort, SessionStorePort

logger = logging.getLogger(__name__)


class OperationState(str, Enum):
    """Where the current operation is."""

    IDLE = "idle"
    EXECUTING = "executing"
    AUTHENTICATION_PENDING = "authentication_pending"
    AUTHENTICATING = "authenticating"
    COMPLETED = "completed"
    FAILED = "failed"


class SessionOrchestrator:
    """Sequence one operation at a time against the protocol engine.

    Each operation runs IDLE -> EXECUTING and then either straight to
    COMPLETED, or through AUTHENTICATION_PENDING -> AUTHENTICATING to
    COMPLETED or FAILED. Errors are recorded as FAILED and re-raised.

    If a session store is configured, the engine state is saved after every
    completed operation so the next process can pick the session up.
    """

    def __init__(
        self,
        engine: ProtocolEnginePort,
        dispatcher: AuthenticationDispatcher,
        session_store: Optional[SessionStorePort] = None,
    ):
        self._engine = engine
        self._dispatcher = dispatcher
        self._session_store = session_store
        self._state = OperationState.IDLE

    @property
    def state(self) -> OperationState:
        return self._state

    def restore_session(self) -> bool:
        if self._session_store is None:
            return False

        blob = self._session_store.load()
        if blob is None:
            logger.debug("No stored session state found")
            return False

        self._engine.restore_session(blob)
        logger.info("Restored session state (%d bytes)", len(blob))
        return True

    def login(self) -> BankingAction:
        self._transition(OperationState.IDLE)
        self._transition(OperationState.EXECUTING)
        try:
            action = self._engine.login()
        except Exception:
            self._transition(OperationState.FAILED)
            raise

        self._authenticate_if_needed(action)
        return action

    def perform_action(self, action: BankingAction) -> BankingAction:
        self._transition(OperationState.IDLE)
        self._transition(OperationState.EXECUTING)
        try:
            self._engine.execute(action)
        except Exception:
            self._transition(OperationState.FAILED)
            raise

        # Only known after the engine attempted the action
        self._authenticate_if_needed(action)
        return action

    def _authenticate_if_needed(self, action: BankingAction) -> None:
        if action.needs_strong_authentication:
            self._transition(OperationState.AUTHENTICATION_PENDING)
            try:
                mode = self._engine.current_mode()
                self._transition(OperationState.AUTHENTICATING)
                self._dispatcher.handle(action, mode)
            except Exception:
                self._transition(OperationState.FAILED)
                raise

        self._transition(OperationState.COMPLETED)
        self.persist_session()

    def persist_session(self) -> None:
        if self._session_store is None:
            return

        blob = self._engine.serialize_session()
        self._session_store.save(blob)
        logger.debug("Persisted session state (%d bytes)", len(blob))

    def _transition(self, new_state: OperationState) -> None:
        logger.debug("Operation state %s -> %s", self._state.value, new_state.value)
        self._state = new_state
