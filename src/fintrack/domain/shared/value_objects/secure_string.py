"""Masked string value object for bank passwords and login names."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

MASK = "*****"


@dataclass(frozen=True)
class SecureString:
    """
    Wrap a secret so it never leaks through ``str``, ``repr`` or logs.

    Import sessions hold bank credentials for the duration of one
    connection attempt. Anything that formats a session (log lines,
    exception details, debug output) only ever sees the mask; the raw
    value is reachable through :meth:`get_value` alone.
    """

    _value: str

    def __post_init__(self):
        if not isinstance(self._value, str):
            msg = "SecureString value must be a string"
            raise TypeError(msg)
        if not self._value.strip():
            msg = "SecureString cannot be empty"
            raise ValueError(msg)

    def get_value(self) -> str:
        return self._value

    def __str__(self) -> str:
        return MASK

    def __repr__(self) -> str:
        return f"SecureString({MASK})"

    def __len__(self) -> int:
        return len(self._value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        """Validate plain strings into SecureString; always dump the mask."""
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda _: MASK,
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def _coerce(cls, value: Any) -> SecureString:
        if isinstance(value, cls):
            return value
        return cls(value)
