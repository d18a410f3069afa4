"""Validation of raw form input"""

from ..core.exceptions import ValidationError
from ..core.parsing import parse_number
from .types import ValidatedInputs

# (field, minimum, inclusive, message)
NUMERIC_RULES = (
    ("token1_price", 0.0, False, "Token 1 price must be a positive number"),
    ("token2_price", 0.0, False, "Token 2 price must be a positive number"),
    ("total_liquidity", 0.0, False, "Total liquidity must be a positive number"),
    ("upper_bound", 0.0, True, "Upper bound must be a non-negative number"),
    ("lower_bound", 0.0, True, "Lower bound must be a non-negative number"),
)

SYMBOL_RULES = (
    ("token1_symbol", "Token 1 symbol is required"),
    ("token2_symbol", "Token 2 symbol is required"),
)


def _check_number(text, minimum, inclusive):
    """Parsed value if it clears the minimum, else None"""
    parsed = parse_number(text)
    if not parsed.ok:
        return None
    if inclusive:
        return parsed.value if parsed.value >= minimum else None
    return parsed.value if parsed.value > minimum else None


def collect_errors(form):
    """
    Check every field of a FormInputs.

    Returns:
        (values, errors, fields): parsed numbers and trimmed symbols by field
        name, plus the failed messages and field names in field order
    """
    values = {}
    errors = []
    failed = []

    for name, minimum, inclusive, message in NUMERIC_RULES:
        value = _check_number(getattr(form, name), minimum, inclusive)
        if value is None:
            errors.append(message)
            failed.append(name)
        else:
            values[name] = value

    for name, message in SYMBOL_RULES:
        symbol = (getattr(form, name) or "").strip()
        if not symbol:
            errors.append(message)
            failed.append(name)
        else:
            values[name] = symbol

    return values, errors, failed


def validate_inputs(form):
    """
    Validate a FormInputs and parse it.

    Returns:
        ValidatedInputs

    Raises:
        ValidationError: Listing every violated constraint
    """
    values, errors, failed = collect_errors(form)
    if errors:
        raise ValidationError(errors, failed)
    return ValidatedInputs(**values)
