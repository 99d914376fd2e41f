# tlcalc/tl_complex.py
from __future__ import annotations
import math
from dataclasses import dataclass

@dataclass(frozen=True)
class ComplexNumber:
    real: float
    imag: float = 0.0

    def __add__(self, other: "ComplexNumber") -> "ComplexNumber":
        return ComplexNumber(self.real + other.real, self.imag + other.imag)

    def __sub__(self, other: "ComplexNumber") -> "ComplexNumber":
        return ComplexNumber(self.real - other.real, self.imag - other.imag)

    def __mul__(self, other: "ComplexNumber") -> "ComplexNumber":
        return ComplexNumber(
            self.real*other.real - self.imag*other.imag,
            self.real*other.imag + self.imag*other.real,
        )

    def __truediv__(self, other: "ComplexNumber") -> "ComplexNumber":
        """self * conj(other) / |other|^2, scaled by the larger component of other
           (Smith's method) so |other|^2 is never formed and cannot overflow."""
        a, b, c, d = self.real, self.imag, other.real, other.imag
        if c == 0 and d == 0:
            raise ZeroDivisionError("complex division by (0, 0)")
        if abs(c) >= abs(d):
            r = d/c
            den = c + d*r
            return ComplexNumber((a + b*r)/den, (b - a*r)/den)
        r = c/d
        den = c*r + d
        return ComplexNumber((a*r + b)/den, (b*r - a)/den)

    def conjugate(self) -> "ComplexNumber":
        return ComplexNumber(self.real, -self.imag)

    def magnitude(self) -> float:
        return math.hypot(self.real, self.imag)

    def angle(self) -> float:
        """Argument in (-pi, pi], straight from atan2."""
        return math.atan2(self.imag, self.real)

    def to_complex(self) -> complex:
        return complex(self.real, self.imag)
