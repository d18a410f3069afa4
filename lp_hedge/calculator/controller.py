"""Calculator controller: form state, the Calculate trigger and its outcome"""

import math
import logging

from ..core.config import Config
from ..core.exceptions import ValidationError
from .math import calculate_positions, derive_price_range
from .types import CalculationResult, CalculatorState, FormInputs
from .validation import validate_inputs

logger = logging.getLogger(__name__)


def run_calculation(inputs):
    """
    Compute the full result for validated inputs.

    Args:
        inputs: ValidatedInputs

    Returns:
        CalculationResult

    Raises:
        ValidationError: If any computed value is not finite
    """
    positions = calculate_positions(
        inputs.token1_price, inputs.token2_price, inputs.total_liquidity
    )
    price_range = derive_price_range(
        positions.pair_price, inputs.upper_bound, inputs.lower_bound
    )
    result = CalculationResult.build(
        inputs.token1_symbol, inputs.token2_symbol, positions, price_range
    )

    overflowed = [key for key, value in _numbers(result.to_dict()) if not math.isfinite(value)]
    if overflowed:
        raise ValidationError(
            [f"Result is out of range ({', '.join(overflowed)}); check the prices and total liquidity"]
        )
    return result


def _numbers(data, prefix=""):
    """Yield (dotted key, value) for every float in a result dict"""
    for key, value in data.items():
        if isinstance(value, dict):
            yield from _numbers(value, prefix + key + ".")
        elif isinstance(value, float):
            yield prefix + key, value


class CalculatorController:
    """
    Owns the form, the last result and the last error.

    Editing a field never recomputes; only calculate() does. After a
    failed calculate() there is an error and no result, after a
    successful one there is a result and no error.
    """

    def __init__(self, form=None, config=None):
        """
        Args:
            form: FormInputs to start from (configured defaults if None)
            config: Config instance (created if None)
        """
        self.config = config or Config()
        self.form = form or FormInputs.from_mapping(self.config.form_defaults)
        self.result = None
        self.error = ""
        self.errors = []
        self.error_fields = []
        self.state = CalculatorState.IDLE

    def set_field(self, name, value):
        """Update one field and go back to IDLE"""
        canonical = self.form.set(name, value)
        if self.state is not CalculatorState.IDLE:
            logger.debug("%s edited, %s -> idle", canonical, self.state.value)
        self.state = CalculatorState.IDLE
        return canonical

    def calculate(self):
        """
        Validate the form and, if valid, compute a new result.

        Returns:
            CalculationResult, or None if validation failed (see self.error)
        """
        self.state = CalculatorState.VALIDATING
        try:
            inputs = validate_inputs(self.form)
            result = run_calculation(inputs)
        except ValidationError as e:
            logger.debug("Validation failed for %s: %s", ", ".join(e.fields), e)
            self.result = None
            self.error = str(e)
            self.errors = e.errors
            self.error_fields = e.fields
            self.state = CalculatorState.ERROR_DISPLAYED
            return None

        self.result = result
        self.error = ""
        self.errors = []
        self.error_fields = []
        self.state = CalculatorState.DISPLAYING
        logger.debug("Calculated %s/%s position", inputs.token1_symbol, inputs.token2_symbol)
        return self.result

    def reset(self):
        """Restore default inputs and clear any result or error"""
        self.form = FormInputs.from_mapping(self.config.form_defaults)
        self.result = None
        self.error = ""
        self.errors = []
        self.error_fields = []
        self.state = CalculatorState.IDLE
