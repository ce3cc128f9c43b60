# primkit/errors.py
from __future__ import annotations


class PrimkitError(Exception):
    """Base class for errors raised by primkit."""


class InvalidParameterError(PrimkitError, ValueError):
    """A shape parameter is out of range. Raised before any sampling happens."""

    def __init__(self, name: str, value: object, reason: str) -> None:
        super().__init__(f"Invalid parameter '{name}'={value!r}: {reason}")
        self.name = name
        self.value = value
