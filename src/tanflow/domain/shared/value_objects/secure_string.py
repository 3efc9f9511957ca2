"""Secure string value object for PINs and other secrets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


@dataclass(frozen=True)
class SecureString:
    """
    Wraps a sensitive string so it never shows up in logs or tracebacks.

    The real value is only reachable through get_value().
    """

    _value: str

    def __post_init__(self):
        if not isinstance(self._value, str):
            msg = "SecureString value must be a string"
            raise TypeError(msg)

        if not self._value:
            msg = "SecureString cannot be empty"
            raise ValueError(msg)

    def get_value(self) -> str:
        return self._value

    def __str__(self) -> str:
        return "*****"

    def __repr__(self) -> str:
        return "SecureString(*****)"

    def __len__(self) -> int:
        return len(self._value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        """Let pydantic models declare SecureString fields directly.

        Plain strings are wrapped on validation; serialization is always
        masked.
        """
        return core_schema.no_info_plain_validator_function(
            cls._pydantic_validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda _: "*****",
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def _pydantic_validate(cls, value: Any) -> SecureString:
        if isinstance(value, cls):
            return value

        if not isinstance(value, str):
            msg = "SecureString value must be a string"
            raise TypeError(msg)

        if not value:
            msg = "SecureString cannot be empty"
            raise ValueError(msg)

        return cls(value)
