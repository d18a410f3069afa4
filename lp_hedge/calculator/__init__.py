"""Calculator module - form state, validation, math and rendering"""

from .fields import FIELDS, FIELD_NAMES, DEFAULT_VALUES, FieldSpec, lookup_field
from .types import (
    FormInputs,
    ValidatedInputs,
    Positions,
    PriceRange,
    CalculationResult,
    CalculatorState,
)
from .math import calculate_positions, derive_price_range
from .validation import validate_inputs
from .controller import CalculatorController, run_calculation

__all__ = [
    "FIELDS",
    "FIELD_NAMES",
    "DEFAULT_VALUES",
    "FieldSpec",
    "lookup_field",
    "FormInputs",
    "ValidatedInputs",
    "Positions",
    "PriceRange",
    "CalculationResult",
    "CalculatorState",
    "calculate_positions",
    "derive_price_range",
    "validate_inputs",
    "CalculatorController",
    "run_calculation",
]
