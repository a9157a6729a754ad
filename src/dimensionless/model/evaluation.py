"""
Evaluation Driver
=================
Turns the raw text a user typed into a computed, classified result.

The flow is a single pass: look up the calculator, parse every declared input
(all-or-nothing), run the formula, run the classifier.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Union
import logging
import math
import re

from dimensionless.model.calculators import CalculatorDefinition, Classification, get_calculator
from dimensionless.model.errors import CalculatorError, MissingOrInvalidInputError, UnknownCalculatorError
from dimensionless.model.formatting import format_value
from dimensionless.model.i18n import Language

logger = logging.getLogger(__name__)

RawValue = Union[str, float, int, None]

# Plain ASCII decimal or exponential notation; no digit separators or words
NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

__all__ = [
    "CalculatorError",
    "EvaluationResult",
    "MissingOrInvalidInputError",
    "UnknownCalculatorError",
    "evaluate",
    "parse_inputs",
    "parse_number",
]


@dataclass(frozen=True)
class EvaluationResult:
    calculator_key: str
    value: float
    classification: Classification
    inputs: Dict[str, float] = field(default_factory=dict)

    @property
    def regime(self):
        return self.classification.regime

    @property
    def formatted_value(self) -> str:
        return format_value(self.value)

    def label(self, language: Language | str) -> str:
        return self.classification.text.get(language)


def parse_number(raw: RawValue) -> float | None:
    """
    Parse one raw input. Returns None when blank, non-numeric or not finite.

    Text must be plain ASCII notation such as "-2.5" or "1e-9"; digit
    separators, non-ASCII digits and words like "inf" are rejected.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
        if NUMBER_PATTERN.fullmatch(raw) is None:
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_inputs(definition: CalculatorDefinition, raw_inputs: Mapping[str, RawValue]) -> Dict[str, float]:
    """
    Parse every declared field of `definition` from `raw_inputs`.

    Raises:
        MissingOrInvalidInputError: listing every field that is missing,
            blank, non-numeric or not finite.
    """
    values: Dict[str, float] = {}
    invalid: list[str] = []
    for input_field in definition.inputs:
        value = parse_number(raw_inputs.get(input_field.key))
        if value is None:
            invalid.append(input_field.key)
        else:
            values[input_field.key] = value

    if invalid:
        raise MissingOrInvalidInputError(definition.key, invalid)
    return values


def evaluate(key: str, raw_inputs: Mapping[str, RawValue]) -> EvaluationResult:
    """Compute and classify the dimensionless number `key` from raw user input."""
    definition = get_calculator(key)
    try:
        values = parse_inputs(definition, raw_inputs)
    except MissingOrInvalidInputError as e:
        logger.info(f"Rejected input for '{key}': {', '.join(e.field_keys)}")
        raise

    value = definition.compute(values)
    classification = definition.classify(value)
    logger.debug(f"{definition.symbol}({values}) = {value!r} -> {classification.regime}")

    return EvaluationResult(
        calculator_key=str(definition.key),
        value=value,
        classification=classification,
        inputs=values,
    )
