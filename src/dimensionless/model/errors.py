"""Exceptions raised by the calculator model."""
from __future__ import annotations

from typing import Iterable


class CalculatorError(Exception):
    """Base class for all calculator errors."""


class UnknownCalculatorError(CalculatorError, KeyError):
    """Raised when a calculator key is not in the registry."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"No calculator registered for key '{self.key}'"


class MissingOrInvalidInputError(CalculatorError, ValueError):
    """Raised when one or more required inputs are blank, non-numeric or not finite."""

    def __init__(self, calculator_key: str, field_keys: Iterable[str]) -> None:
        self.calculator_key = calculator_key
        self.field_keys: tuple[str, ...] = tuple(field_keys)
        super().__init__(
            f"Missing or invalid input for '{calculator_key}': {', '.join(self.field_keys)}"
        )
