"""Validation models: error kinds and the structured failures returned by validators.

Failures are values, not exceptions: a validator returns None for a valid
code or list and one of the models below otherwise. Equality is structural,
so callers can compare or branch on `kind` without parsing messages.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ErrorKind(str, Enum):
    """Closed set of validation failure kinds."""

    INVALID_CODE_LENGTH = "INVALID_CODE_LENGTH"
    INVALID_CODE_CONTENTS = "INVALID_CODE_CONTENTS"
    INVALID_CODELIST = "INVALID_CODELIST"


class ValidationError(BaseModel):
    """Base for all validation failures."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind

    def __str__(self) -> str:
        return f"Validation failed: {self.kind.value}"


class InvalidCodeLength(ValidationError):
    """Code length is outside the coding system's bounds."""

    kind: Literal[ErrorKind.INVALID_CODE_LENGTH] = ErrorKind.INVALID_CODE_LENGTH
    code: str
    reason: str

    def __str__(self) -> str:
        return f"Code {self.code} is an invalid length. Reason: {self.reason}"


class InvalidCodeContents(ValidationError):
    """Code has an acceptable length but fails the structural grammar."""

    kind: Literal[ErrorKind.INVALID_CODE_CONTENTS] = ErrorKind.INVALID_CODE_CONTENTS
    code: str
    reason: str

    def __str__(self) -> str:
        return f"Code {self.code} contents is invalid. Reason: {self.reason}"


class InvalidCodelist(ValidationError):
    """Aggregate failure over an entire list.

    `reasons` holds one (code, reason) pair per invalid entry, in scan order.
    It is never empty: a list with no failures is valid, not an empty error.
    """

    kind: Literal[ErrorKind.INVALID_CODELIST] = ErrorKind.INVALID_CODELIST
    reasons: tuple[tuple[str, str], ...] = Field(min_length=1)

    @property
    def invalid_codes(self) -> list[str]:
        return [code for code, _ in self.reasons]

    def __len__(self) -> int:
        return len(self.reasons)

    def __str__(self) -> str:
        details = "; ".join(f"{code}: {reason}" for code, reason in self.reasons)
        return f"Some codes in the list are invalid. Details: {details}"
