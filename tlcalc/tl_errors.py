# tlcalc/tl_errors.py
"""Error taxonomy of the calculator. Every validation error names the offending field."""

class TransmissionLineError(Exception):
    """Base class for calculator failures."""

class ValidationError(TransmissionLineError, ValueError):
    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message

class OutOfRangeError(ValidationError):
    pass

class NegativeValueError(ValidationError):
    pass

class NonPositiveError(ValidationError):
    pass

class NotFiniteError(ValidationError):
    pass

class DegenerateGeometryError(TransmissionLineError, ArithmeticError):
    """ZL + Z0 vanished, so the reflection coefficient is undefined."""
