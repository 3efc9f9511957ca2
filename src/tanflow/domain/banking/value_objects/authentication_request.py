"""Authentication request value object."""

from pydantic import BaseModel, ConfigDict, Field


class AuthenticationRequest(BaseModel):
    """What the bank asks for before it executes an action.

    Issued by the server together with a pending action. Every field is
    optional because banks fill them depending on the TAN method.
    """

    instructions: str | None = Field(
        default=None,
        description="Human-readable text what the authentication is for",
    )
    medium_name: str | None = Field(
        default=None,
        description="TAN medium to use, e.g. 'SecureGo' or a phone name",
    )
    # Protocol specific encoding: HHD flicker code or a photoTAN image
    challenge_payload: bytes | None = Field(default=None)

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
    )

    @property
    def has_visual(self) -> bool:
        return bool(self.challenge_payload)

    def __str__(self) -> str:
        parts = ["Authentication Request"]

        if self.instructions:
            parts.append(f"Instructions: {self.instructions}")

        if self.medium_name:
            parts.append(f"Medium: {self.medium_name}")

        if self.has_visual:
            parts.append("Challenge visual available")

        return "\n".join(parts)
