"""Custom exceptions for the LP hedge calculator"""


class LPCalcError(Exception):
    """Base exception for all calculator errors"""
    pass


class ConfigError(LPCalcError):
    """Configuration-related errors"""
    pass


class ValidationError(LPCalcError):
    """
    One or more form fields failed validation.

    Attributes:
        errors: Individual messages, in field order
        fields: Names of the offending fields, aligned with errors
    """

    def __init__(self, errors, fields=None):
        self.errors = list(errors)
        self.fields = list(fields or [])
        super().__init__(". ".join(self.errors))


class UnknownFieldError(LPCalcError):
    """Attempt to read or set a form field that does not exist"""
    pass
