# tlcalc/tl_core.py
from __future__ import annotations
import logging
import math
import numpy as np
import pandas as pd
from dataclasses import dataclass
from typing import Tuple

from .tl_complex import ComplexNumber
from .tl_config import CalculatorConfig, DEFAULT_CONFIG, FREQUENCY_UNITS, LENGTH_UNITS, to_si
from .tl_errors import (
    DegenerateGeometryError, NegativeValueError, NonPositiveError,
    NotFiniteError, OutOfRangeError,
)

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class LineParameters:
    Z0: float          # ohm, characteristic impedance
    R: float           # ohm, load resistance
    X: float           # ohm, load reactance
    frequency: float   # Hz
    length: float      # m

    @classmethod
    def from_units(cls, Z0, R, X, frequency, length,
                   frequency_unit='MHz', length_unit='m') -> "LineParameters":
        """Build SI parameters from form-style values (e.g. 100 MHz, 20 cm)."""
        return cls(
            Z0=float(Z0), R=float(R), X=float(X),
            frequency=to_si(float(frequency), frequency_unit, FREQUENCY_UNITS),
            length=to_si(float(length), length_unit, LENGTH_UNITS),
        )

@dataclass(frozen=True)
class CalculationResult:
    z0: float
    frequency: float
    length: float
    load_impedance: ComplexNumber
    normalized_impedance: ComplexNumber
    reflection_coefficient: ComplexNumber
    gamma_magnitude: float
    gamma_angle: float           # rad, [0, 2pi)
    gamma_angle_degrees: float   # [0, 360)
    vswr: float
    return_loss_db: float
    wavelength: float
    first_max_distance: float    # m from the load, [0, lambda/2)
    first_min_distance: float
    voltage_max_positions: Tuple[float, ...]
    voltage_min_positions: Tuple[float, ...]

@dataclass(frozen=True)
class DistributionSample:
    """|V| and |I| along the line, each normalized to its own peak.
       positions are measured from the generator (z=0) towards the load (z=l)."""
    positions: np.ndarray
    voltage: np.ndarray
    current: np.ndarray
    max_voltage: float
    max_current: float

    def __len__(self):
        return len(self.positions)

    def __iter__(self):
        return zip(self.positions.tolist(), self.voltage.tolist(), self.current.tolist())

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({
            'position_m': self.positions,
            'voltage': self.voltage,
            'current': self.current,
        })

def validate(params: LineParameters, config: CalculatorConfig = DEFAULT_CONFIG) -> None:
    """Raise on the first violated constraint, in the order Z0, R, frequency, length."""
    if not (config.z0_min <= params.Z0 <= config.z0_max):
        raise OutOfRangeError(
            'Z0', f'characteristic impedance must be between {config.z0_min:g} Ω and {config.z0_max:g} Ω')
    if params.R < 0:
        raise NegativeValueError('R', 'load resistance must be >= 0')
    if params.frequency <= 0:
        raise NonPositiveError('frequency', 'frequency must be greater than 0')
    if params.length <= 0:
        raise NonPositiveError('length', 'length must be greater than 0')
    for name in ('R', 'X', 'frequency', 'length'):
        if not math.isfinite(getattr(params, name)):
            raise NotFiniteError(name, 'enter a finite numeric value')
    _check_span(params.length, config.speed_of_light/params.frequency, config.max_extrema_count)

def _check_span(length: float, wavelength: float, max_count: int) -> None:
    # one maximum and one minimum per half wavelength
    half_waves = 2*length/wavelength
    if half_waves > max_count:
        raise OutOfRangeError(
            'length', f'line spans {half_waves:.3g} half wavelengths, at most {max_count} supported')

def reflection_coefficient(ZL: ComplexNumber, Z0: float,
                           config: CalculatorConfig = DEFAULT_CONFIG) -> ComplexNumber:
    """Gamma = (ZL - Z0)/(ZL + Z0)."""
    z0 = ComplexNumber(Z0, 0.0)
    den = ZL + z0
    if den.magnitude() <= config.degenerate_tolerance:
        raise DegenerateGeometryError(f'ZL + Z0 vanishes for ZL={ZL}, Z0={Z0}')
    return (ZL - z0) / den

def vswr_from_gamma(gamma_mag: float) -> float:
    if gamma_mag >= 1:
        return math.inf
    return (1 + gamma_mag)/(1 - gamma_mag)

def return_loss_from_gamma(gamma_mag: float) -> float:
    # only the perfect match needs its own branch, log10(0) is undefined
    if gamma_mag == 0:
        return math.inf
    return -20*math.log10(gamma_mag)

def _fold(x: float, period: float) -> float:
    """x mod period, guaranteed in [0, period)."""
    r = x % period
    # a tiny negative x rounds up to exactly `period`
    return 0.0 if r >= period else r

def _positions(first: float, step: float, length: float) -> Tuple[float, ...]:
    if first > length:
        return ()
    n = math.floor((length - first)/step)
    pts = first + step*np.arange(n + 1)
    return tuple(float(p) for p in pts if p <= length)

def voltage_extrema(gamma_angle: float, wavelength: float, length: float,
                    max_count: int = DEFAULT_CONFIG.max_extrema_count):
    """First max/min distance from the load and every max/min on [0, length].
       Maxima sit where the reflected wave returns in phase: 2*beta*d = angle(Gamma) (mod 2pi)."""
    _check_span(length, wavelength, max_count)
    half = wavelength/2
    d_max = _fold(-gamma_angle*wavelength/(4*np.pi), half)
    d_min = d_max + wavelength/4
    if d_min >= half:
        d_min -= half
    return d_max, d_min, _positions(d_max, half, length), _positions(d_min, half, length)

def calculate(params: LineParameters, config: CalculatorConfig = DEFAULT_CONFIG) -> CalculationResult:
    validate(params, config)

    ZL = ComplexNumber(params.R, params.X)
    zL = ComplexNumber(params.R/params.Z0, params.X/params.Z0)
    Gamma = reflection_coefficient(ZL, params.Z0, config)

    gamma_mag = Gamma.magnitude()
    angle = _fold(Gamma.angle(), 2*np.pi)
    angle_deg = _fold(math.degrees(angle), 360.0)

    VSWR = vswr_from_gamma(gamma_mag)
    RL_dB = return_loss_from_gamma(gamma_mag)
    lamb = config.speed_of_light/params.frequency
    d_max, d_min, max_pos, min_pos = voltage_extrema(angle, lamb, params.length, config.max_extrema_count)

    logger.debug('Gamma=%s |Gamma|=%.6g VSWR=%.6g RL=%.6g dB lambda=%.6g m',
                 Gamma, gamma_mag, VSWR, RL_dB, lamb)
    return CalculationResult(
        z0=params.Z0, frequency=params.frequency, length=params.length,
        load_impedance=ZL, normalized_impedance=zL,
        reflection_coefficient=Gamma,
        gamma_magnitude=gamma_mag, gamma_angle=angle, gamma_angle_degrees=angle_deg,
        vswr=VSWR, return_loss_db=RL_dB, wavelength=lamb,
        first_max_distance=d_max, first_min_distance=d_min,
        voltage_max_positions=max_pos, voltage_min_positions=min_pos,
    )

def sample_distribution(result: CalculationResult, point_count: int | None = None,
                        config: CalculatorConfig = DEFAULT_CONFIG) -> DistributionSample:
    """Sample |V(z)| and |I(z)| at point_count+1 evenly spaced positions.
       V ~ e^{-j phi} + Gamma e^{j phi}, I ~ e^{-j phi} - Gamma e^{j phi}, phi = beta*d."""
    n = config.default_point_count if point_count is None else point_count
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n <= 0:
        raise NonPositiveError('point_count', 'point count must be a positive integer')

    gr, gi = result.reflection_coefficient.real, result.reflection_coefficient.imag
    beta = 2*np.pi/result.wavelength
    z = (np.arange(n + 1)/n)*result.length   # from the generator
    d = result.length - z                     # from the load
    c, s = np.cos(beta*d), np.sin(beta*d)

    V = np.hypot(c + gr*c - gi*s, -s + gr*s + gi*c)
    I = np.hypot(c - gr*c + gi*s, -s - gr*s - gi*c)
    Vmax, Imax = float(V.max()), float(I.max())

    v_norm, i_norm = V/Vmax, I/Imax
    for arr in (z, v_norm, i_norm):
        arr.setflags(write=False)
    logger.debug('sampled %d points, peak |V|=%.6g peak |I|=%.6g', n + 1, Vmax, Imax)
    return DistributionSample(z, v_norm, i_norm, Vmax, Imax)
