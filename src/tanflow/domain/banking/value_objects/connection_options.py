"""Connection options value object."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tanflow.domain.shared.value_objects.secure_string import SecureString


class ConnectionOptions(BaseModel):
    """
    Everything needed to open a FinTS session with a bank.

    - BLZ (Bankleitzahl) and server URL identify the bank
    - product id and version identify this software to the bank
    - user id and PIN authenticate the customer (PIN is a SecureString)
    - TAN mechanism and medium select the strong authentication method
    """

    blz: str = Field(..., min_length=8, max_length=8, description="Bankleitzahl")
    server_url: str = Field(..., min_length=1, description="FinTS endpoint URL")
    product_id: str = Field(..., min_length=1, description="Registered product id")
    product_version: str = Field(default="1.0", min_length=1, max_length=5)
    user_id: str = Field(..., min_length=1, description="Login ID")
    pin: SecureString = Field(..., description="PIN for authentication")
    tan_mechanism: str | None = Field(
        default=None,
        description="Security function code, e.g. '940' or '972'",
    )
    tan_medium: str | None = Field(default=None, description="e.g. 'SecureGo'")

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("blz")
    @classmethod
    def validate_blz(cls, v: str) -> str:
        if not v.isdigit():
            msg = "BLZ must contain only digits"
            raise ValueError(msg)
        return v

    @field_validator("server_url")
    @classmethod
    def validate_server_url(cls, v: str) -> str:
        if not v.startswith("https://"):
            msg = "FinTS server URL must use https"
            raise ValueError(msg)
        return v

    @field_validator("tan_mechanism")
    @classmethod
    def validate_tan_mechanism(cls, v: str | None) -> str | None:
        if v is not None and not v.isdigit():
            msg = "TAN mechanism must be a numeric security function code"
            raise ValueError(msg)
        return v or None

    def __repr__(self) -> str:
        return (
            f"ConnectionOptions(blz={self.blz}, server_url={self.server_url}, "
            f"user_id={self.user_id}, pin=*****)"
        )

    def __str__(self) -> str:
        return f"ConnectionOptions(blz={self.blz}, server_url={self.server_url})"
