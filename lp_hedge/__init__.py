"""
LP Hedge - position and hedge sizing for fixed-range AMM liquidity
"""

from .core.config import Config
from .core.exceptions import LPCalcError, ConfigError, ValidationError, UnknownFieldError
from .calculator import CalculatorController, CalculationResult, FormInputs, PriceRange

__version__ = "0.1.0"
__all__ = [
    "Config",
    "LPCalcError",
    "ConfigError",
    "ValidationError",
    "UnknownFieldError",
    "CalculatorController",
    "CalculationResult",
    "FormInputs",
    "PriceRange",
]
