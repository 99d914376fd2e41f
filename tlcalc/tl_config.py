# tlcalc/tl_config.py
from __future__ import annotations
from dataclasses import dataclass
from scipy import constants

@dataclass(frozen=True)
class CalculatorConfig:
    speed_of_light: float = constants.c   # m/s, ideal line (velocity factor 1)
    default_point_count: int = 200
    z0_min: float = 25.0                  # ohm
    z0_max: float = 150.0                 # ohm
    degenerate_tolerance: float = 0.0     # |ZL+Z0| at or below this is degenerate
    max_extrema_count: int = 100_000      # half wavelengths a line may span

DEFAULT_CONFIG = CalculatorConfig()

# Form defaults: 50 ohm line, 75+j30 load, 100 MHz, 2 m
DEFAULT_VALUES = {
    'Z0': 50.0,
    'R': 75.0,
    'X': 30.0,
    'frequency': 100.0,
    'frequency_unit': 'MHz',
    'length': 2.0,
    'length_unit': 'm',
}

FREQUENCY_UNITS = {
    'Hz': 1.0,
    'kHz': constants.kilo,
    'MHz': constants.mega,
    'GHz': constants.giga,
}

LENGTH_UNITS = {
    'm': 1.0,
    'cm': constants.centi,
    'mm': constants.milli,
}

def unit_factor(unit: str, table: dict) -> float:
    try:
        return table[unit]
    except KeyError:
        raise ValueError(f"unknown unit {unit!r}, expected one of {', '.join(table)}") from None

def to_si(value: float, unit: str, table: dict) -> float:
    """Scale a display value to SI using one of the unit tables above."""
    return value * unit_factor(unit, table)

def from_si(value: float, unit: str, table: dict) -> float:
    return value / unit_factor(unit, table)
