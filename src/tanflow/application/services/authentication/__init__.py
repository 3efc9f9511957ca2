"""Strong customer authentication services."""

from tanflow.application.services.authentication.authentication_dispatcher import (
    AuthenticationDispatcher,
)
from tanflow.application.services.authentication.challenge_presenter import (
    ChallengePresenter,
)
from tanflow.application.services.authentication.decoupled_authenticator import (
    DEFAULT_CONFIRMATION_TOKEN,
    DecoupledAuthenticator,
)
from tanflow.application.services.authentication.tan_authenticator import (
    TanAuthenticator,
)

__all__ = [
    "DEFAULT_CONFIRMATION_TOKEN",
    "AuthenticationDispatcher",
    "ChallengePresenter",
    "DecoupledAuthenticator",
    "TanAuthenticator",
]
