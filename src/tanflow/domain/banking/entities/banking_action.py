"""Banking action entity."""

from typing import Any, Optional

from tanflow.domain.banking.value_objects import AuthenticationRequest


class BankingAction:
    """
    A unit of protocol work submitted to the bank (login, statement, ...).

    Lifecycle:
    - created by the caller, not yet executed
    - executed by the protocol engine, which either completes it or marks
      it as waiting for strong authentication
    - completed once the TAN was accepted or the decoupled confirmation
      was observed

    Whether strong authentication is needed is only known after the engine
    attempted the execution.
    """

    def __init__(self, description: str = "action"):
        self._description = description
        self._executed = False
        self._authentication_request: Optional[AuthenticationRequest] = None
        self._needs_strong_authentication = False
        self._done = False
        self._result: Any = None

    @property
    def description(self) -> str:
        return self._description

    @property
    def is_executed(self) -> bool:
        return self._executed

    @property
    def needs_strong_authentication(self) -> bool:
        return self._needs_strong_authentication

    @property
    def authentication_request(self) -> Optional[AuthenticationRequest]:
        return self._authentication_request

    @property
    def is_done(self) -> bool:
        return self._done

    @property
    def result(self) -> Any:
        if not self._done:
            msg = f"Result of {self._description} is not available yet"
            raise ValueError(msg)
        return self._result

    def mark_authentication_required(self, request: AuthenticationRequest) -> None:
        if self._done:
            msg = f"{self._description} is already completed"
            raise ValueError(msg)

        self._executed = True
        self._needs_strong_authentication = True
        self._authentication_request = request

    def mark_completed(self, result: Any = None) -> None:
        self._executed = True
        self._needs_strong_authentication = False
        self._done = True
        self._result = result

    def __repr__(self) -> str:
        if self._done:
            state = "done"
        elif self._needs_strong_authentication:
            state = "needs_authentication"
        elif self._executed:
            state = "executed"
        else:
            state = "new"
        return f"{self.__class__.__name__}({self._description!r}, state={state})"
