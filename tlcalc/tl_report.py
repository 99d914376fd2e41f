# tlcalc/tl_report.py
from __future__ import annotations
import math
from datetime import datetime
from typing import Optional

from .tl_complex import ComplexNumber
from .tl_config import FREQUENCY_UNITS, LENGTH_UNITS, from_si
from .tl_core import CalculationResult, LineParameters

RULE = '=' * 50

def format_complex(z: ComplexNumber, decimals: int = 2) -> str:
    """'a + jb' / 'a - jb' with the imaginary magnitude after the j."""
    sign = '+' if z.imag >= 0 else '-'
    return f'{z.real:.{decimals}f} {sign} j{abs(z.imag):.{decimals}f}'

def format_polar(mag: float, angle_deg: float, decimals: int = 3) -> str:
    return f'|Γ| = {mag:.{decimals}f} ∠ {angle_deg:.2f}°'

def format_vswr(vswr: float) -> str:
    return '∞' if math.isinf(vswr) else f'{vswr:.2f}'

def format_return_loss(rl_db: float) -> str:
    if math.isinf(rl_db):
        return '∞ dB'
    if math.isnan(rl_db):
        return 'Error'
    return f'{rl_db:.1f} dB'

def format_distance(d: float) -> str:
    return f'{d:.3f} m'

def _numbered(positions) -> str:
    return '\n'.join(f'  {i}. {format_distance(p)}' for i, p in enumerate(positions, 1))

def format_report(params: LineParameters, result: CalculationResult,
                  frequency_unit: str = 'MHz', length_unit: str = 'm',
                  timestamp: Optional[datetime] = None) -> str:
    """Plain-text summary of one calculation. Inputs are shown back in display units;
       the date line is only added when a timestamp is given."""
    f_disp = from_si(params.frequency, frequency_unit, FREQUENCY_UNITS)
    l_disp = from_si(params.length, length_unit, LENGTH_UNITS)
    x_sign = '+' if params.X >= 0 else '-'

    lines = [
        'TRANSMISSION LINE ANALYSIS',
        RULE,
        '',
        'Input parameters:',
        f'- Characteristic impedance (Z0): {params.Z0:g} Ω',
        f'- Load impedance: {params.R:g} {x_sign} j{abs(params.X):g} Ω',
        f'- Operating frequency: {f_disp:g} {frequency_unit}',
        f'- Line length: {l_disp:g} {length_unit}',
        '',
        'Results:',
        f'- Normalized impedance: {format_complex(result.normalized_impedance, 2)}',
        f'- Reflection coefficient (Γ): {format_complex(result.reflection_coefficient, 3)}',
        f'  {format_polar(result.gamma_magnitude, result.gamma_angle_degrees)}',
        f'- VSWR: {format_vswr(result.vswr)}',
        f'- Return loss: {format_return_loss(result.return_loss_db)}',
        f'- Wavelength: {result.wavelength:.2f} m',
        f'- First voltage maximum from load: {format_distance(result.first_max_distance)}',
        f'- First voltage minimum from load: {format_distance(result.first_min_distance)}',
        '',
        'Voltage maxima (Vmax):',
        _numbered(result.voltage_max_positions) or '  none within the line',
        '',
        'Voltage minima (Vmin):',
        _numbered(result.voltage_min_positions) or '  none within the line',
        '',
        'Note: the line is treated as ideal (lossless).',
        '',
        RULE,
    ]
    if timestamp is not None:
        lines.append(f'Generated: {timestamp:%Y-%m-%d %H:%M}')
    return '\n'.join(lines) + '\n'
