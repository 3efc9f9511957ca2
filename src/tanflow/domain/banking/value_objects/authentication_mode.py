"""Authentication mode value object.

Describes the TAN method negotiated for the current session. It is set once
by the protocol engine when the TAN mechanism is selected and read-only to
the authentication flow.
"""

from pydantic import BaseModel, ConfigDict, Field


class AuthenticationMode(BaseModel):
    """The negotiated strong authentication mode of a session."""

    code: str = Field(default="", description="Security function, e.g. '940'")
    name: str = Field(default="", description="e.g. 'SecureGo plus'")
    is_decoupled: bool = Field(
        default=False,
        description="True if confirmation happens on another device",
    )

    # Decoupled polling configuration (HITANS version 7)
    allows_automated_polling: bool = Field(default=False)
    allows_manual_confirmation: bool = Field(default=False)
    first_poll_delay_seconds: int = Field(default=0, ge=0)
    periodic_poll_delay_seconds: int = Field(default=0, ge=0)
    max_poll_attempts: int = Field(
        default=0,
        ge=0,
        description="0 means polling is unbounded",
    )

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
    )

    def __str__(self) -> str:
        type_str = " (decoupled)" if self.is_decoupled else ""
        return f"{self.code}: {self.name}{type_str}"

    @property
    def is_interactive(self) -> bool:
        return not self.is_decoupled

    @property
    def has_poll_limit(self) -> bool:
        return self.max_poll_attempts > 0
