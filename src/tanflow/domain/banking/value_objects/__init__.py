"""Value objects for banking domain."""

from tanflow.domain.banking.value_objects.authentication_mode import (
    AuthenticationMode,
)
from tanflow.domain.banking.value_objects.authentication_request import (
    AuthenticationRequest,
)
from tanflow.domain.banking.value_objects.challenge_visual import (
    ChallengeImage,
    ChallengeVisual,
    FlickerFrame,
    FlickerPattern,
)
from tanflow.domain.banking.value_objects.connection_options import (
    ConnectionOptions,
)

__all__ = [
    "AuthenticationMode",
    "AuthenticationRequest",
    "ChallengeImage",
    "ChallengeVisual",
    "ConnectionOptions",
    "FlickerFrame",
    "FlickerPattern",
]
