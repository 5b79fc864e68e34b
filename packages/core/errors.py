"""
Errors surfaced at the read/parse/write boundary.

The conversion itself never raises; every failure is one of these and is
terminal for the invocation.
"""

from __future__ import annotations

STDIN_SOURCE = "<stdin>"


class ProfileError(Exception):
    stage = "run"

    def __init__(self, message: str, source: str = STDIN_SOURCE) -> None:
        super().__init__(message)
        self.message = message
        self.source = source

    def __str__(self) -> str:
        return f"{self.stage} {self.source}: {self.message}"


class InputReadError(ProfileError):
    stage = "read"


class FormatConversionError(ProfileError):
    stage = "decode"


class SchemaParseError(ProfileError):
    stage = "parse"


class OutputSerializationError(ProfileError):
    stage = "write"
