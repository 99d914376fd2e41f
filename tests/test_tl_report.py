# tests/test_tl_report.py
import math
from datetime import datetime

import pytest

from tlcalc.tl_complex import ComplexNumber
from tlcalc.tl_core import LineParameters, calculate
from tlcalc.tl_report import (
    format_complex, format_distance, format_polar, format_report,
    format_return_loss, format_vswr,
)

def test_format_complex():
    assert format_complex(ComplexNumber(1.5, 0.6)) == '1.50 + j0.60'
    assert format_complex(ComplexNumber(1.5, -0.6)) == '1.50 - j0.60'
    assert format_complex(ComplexNumber(0.25, 0.125), 3) == '0.250 + j0.125'
    assert format_complex(ComplexNumber(0.0, 0.0)) == '0.00 + j0.00'

def test_format_polar():
    assert format_polar(0.30378, 36.6987) == '|Γ| = 0.304 ∠ 36.70°'
    assert format_polar(1.0, 180.0, 1) == '|Γ| = 1.0 ∠ 180.00°'

def test_infinite_and_invalid_values():
    assert format_vswr(math.inf) == '∞'
    assert format_vswr(1.87267) == '1.87'
    assert format_return_loss(math.inf) == '∞ dB'
    assert format_return_loss(math.nan) == 'Error'
    assert format_return_loss(10.3487) == '10.3 dB'
    assert format_distance(1.3461557) == '1.346 m'

def test_report_contents():
    p = LineParameters.from_units(50, 75, 30, 100, 2, frequency_unit='MHz', length_unit='m')
    text = format_report(p, calculate(p))
    assert text.startswith('TRANSMISSION LINE ANALYSIS\n')
    assert '- Characteristic impedance (Z0): 50 Ω' in text
    assert '- Load impedance: 75 + j30 Ω' in text
    assert '- Operating frequency: 100 MHz' in text
    assert '- Line length: 2 m' in text
    assert '- Normalized impedance: 1.50 + j0.60' in text
    assert '- Reflection coefficient (Γ): 0.244 + j0.182' in text
    assert '|Γ| = 0.304 ∠ 36.70°' in text
    assert '- VSWR: 1.87' in text
    assert '- Return loss: 10.3 dB' in text
    assert '- Wavelength: 3.00 m' in text
    assert '- First voltage maximum from load: 1.346 m' in text
    assert '- First voltage minimum from load: 0.597 m' in text
    assert '  1. 1.346 m' in text
    assert '  1. 0.597 m' in text
    assert 'Generated:' not in text

def test_report_display_units_and_timestamp():
    p = LineParameters.from_units(75, 10, -25, 1.5, 30, frequency_unit='GHz', length_unit='cm')
    text = format_report(p, calculate(p), 'GHz', 'cm', timestamp=datetime(2026, 10, 18, 9, 5))
    assert '- Operating frequency: 1.5 GHz' in text
    assert '- Line length: 30 cm' in text
    assert '- Load impedance: 10 - j25 Ω' in text
    assert text.rstrip().endswith('Generated: 2026-10-18 09:05')

def test_report_matched_load():
    p = LineParameters(50.0, 50.0, 0.0, 100e6, 2.0)
    text = format_report(p, calculate(p))
    assert '- VSWR: 1.00' in text
    assert '- Return loss: ∞ dB' in text

def test_report_unknown_unit():
    p = LineParameters(50.0, 75.0, 30.0, 100e6, 2.0)
    res = calculate(p)
    with pytest.raises(ValueError, match='unknown unit'):
        format_report(p, res, frequency_unit='THz')
    with pytest.raises(ValueError, match='unknown unit'):
        format_report(p, res, length_unit='ft')
