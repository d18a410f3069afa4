"""Core module - configuration, exceptions, and input parsing"""

from .config import Config
from .exceptions import LPCalcError, ConfigError, ValidationError, UnknownFieldError
from .parsing import ParseResult, parse_number

__all__ = [
    "Config",
    "LPCalcError",
    "ConfigError",
    "ValidationError",
    "UnknownFieldError",
    "ParseResult",
    "parse_number",
]
