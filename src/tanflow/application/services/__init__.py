"""Application services."""

from tanflow.application.services.authentication import (
    AuthenticationDispatcher,
    ChallengePresenter,
    DecoupledAuthenticator,
    TanAuthenticator,
)
from tanflow.application.services.session_orchestrator import (
    OperationState,
    SessionOrchestrator,
)

__all__ = [
    "AuthenticationDispatcher",
    "ChallengePresenter",
    "DecoupledAuthenticator",
    "OperationState",
    "SessionOrchestrator",
    "TanAuthenticator",
]
