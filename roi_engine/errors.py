"""Error taxonomy for the projection engine."""

from __future__ import annotations

from typing import Any


class EngineError(Exception):
    """Base class for every error raised by the engine."""


class InvalidInputError(EngineError, ValueError):
    """An input is missing, out of range, or not an allowed discrete value.

    ``field`` names the offending input so a form can attribute the message
    to the right control.
    """

    def __init__(self, field: str, message: str, value: Any = None):
        self.field = field
        self.value = value
        super().__init__(f"{field}: {message}")


class DomainError(EngineError, ArithmeticError):
    """A derived value has no finite answer for the given inputs."""
