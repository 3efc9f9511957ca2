"""Protocol engine port interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from tanflow.domain.banking.entities import BankingAction
    from tanflow.domain.banking.value_objects import AuthenticationMode


class ProtocolEnginePort(ABC):
    """
    Interface for the engine that speaks the banking protocol.

    The engine does message framing, signing and server round-trips. The
    authentication flow only needs the operations below. A single engine
    instance is not safe for concurrent use and belongs to one session.
    """

    @abstractmethod
    def login(self) -> BankingAction:
        """
        Open a session with the bank.

        Returns
        -------
        The login action; it may need strong authentication

        Raises
        ------
        ProtocolError
            If the bank rejects the login or cannot be reached
        """

    @abstractmethod
    def execute(self, action: BankingAction) -> None:
        """
        Execute an action against the bank.

        Populates the action's post-execution state: it is either completed
        or marked as needing strong authentication.

        Raises
        ------
        ProtocolError
            If execution fails
        """

    @abstractmethod
    def submit_auth_code(self, action: BankingAction, code: str) -> None:
        """
        Submit a TAN for an action waiting for strong authentication.

        Raises
        ------
        ProtocolError
            Wrong TAN, expired challenge or network failure
        """

    @abstractmethod
    def check_confirmation(self, action: BankingAction) -> bool:
        """
        Ask the bank whether a decoupled authentication was confirmed.

        Returns
        -------
        True once the action went through, False while still pending

        Raises
        ------
        ProtocolError
            If the status check itself fails
        """

    @abstractmethod
    def current_mode(self) -> Optional[AuthenticationMode]:
        """Return the authentication mode negotiated for this session, if any."""

    @abstractmethod
    def serialize_session(self) -> bytes:
        """Return an opaque snapshot of the session state."""

    @abstractmethod
    def restore_session(self, blob: bytes) -> None:
        """
        Restore a snapshot produced by serialize_session().

        Raises
        ------
        SessionStateError
            If the blob cannot be restored
        """
