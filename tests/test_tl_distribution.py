# tests/test_tl_distribution.py
import numpy as np
import pytest

from tlcalc.tl_core import LineParameters, calculate, sample_distribution
from tlcalc.tl_errors import NonPositiveError

def reference_result(**kw):
    base = dict(Z0=50.0, R=75.0, X=30.0, frequency=100e6, length=2.0)
    base.update(kw)
    return calculate(LineParameters(**base))

def test_default_point_count():
    s = sample_distribution(reference_result())
    assert len(s) == 201
    assert s.positions[0] == 0.0
    assert s.positions[-1] == 2.0
    assert np.all(np.diff(s.positions) > 0)

@pytest.mark.parametrize('n', [1, 7, 200, 1000])
def test_normalized_series(n):
    s = sample_distribution(reference_result(), n)
    assert len(s) == n + 1
    assert s.voltage.max() == 1.0
    assert s.current.max() == 1.0
    assert np.all(s.voltage <= 1.0)
    assert np.all(s.current <= 1.0)
    assert np.all(s.voltage > 0)
    assert s.max_voltage > 0 and s.max_current > 0

def test_peaks_follow_standing_wave():
    """Sampled |V| peaks at the first voltage maximum, |I| peaks at the voltage minimum."""
    res = reference_result()
    n = 4000
    s = sample_distribution(res, n)
    step = res.length/n
    z_vmax = res.length - res.first_max_distance
    z_vmin = res.length - res.first_min_distance
    assert abs(s.positions[np.argmax(s.voltage)] - z_vmax) <= step
    assert abs(s.positions[np.argmax(s.current)] - z_vmin) <= step
    # |V|max/|V|min over a full half wavelength recovers the VSWR
    ratio = 1/s.voltage.min()
    assert abs(ratio - res.vswr) < 1e-3*res.vswr

def test_unnormalized_peaks():
    # incident amplitude 1: |V| peaks at 1+|Gamma|
    res = reference_result(length=10.0)
    s = sample_distribution(res, 5000)
    assert abs(s.max_voltage - (1 + res.gamma_magnitude)) < 1e-5
    assert abs(s.max_current - (1 + res.gamma_magnitude)) < 1e-5

def test_matched_line_is_flat():
    s = sample_distribution(reference_result(R=50.0, X=0.0), 50)
    assert np.allclose(s.voltage, 1.0)
    assert np.allclose(s.current, 1.0)
    assert abs(s.max_voltage - 1.0) < 1e-12

def test_resolution_does_not_touch_result():
    res = reference_result()
    before = calculate(LineParameters(50.0, 75.0, 30.0, 100e6, 2.0))
    sample_distribution(res, 10)
    sample_distribution(res, 10000)
    assert res == before

def test_sampling_is_repeatable():
    res = reference_result()
    a, b = sample_distribution(res, 300), sample_distribution(res, 300)
    assert np.array_equal(a.voltage, b.voltage)
    assert np.array_equal(a.current, b.current)

def test_iteration_and_frame():
    s = sample_distribution(reference_result(), 10)
    triples = list(s)
    assert len(triples) == 11
    z, v, i = triples[0]
    assert z == 0.0 and 0 < v <= 1 and 0 < i <= 1
    df = s.to_frame()
    assert list(df.columns) == ['position_m', 'voltage', 'current']
    assert len(df) == 11
    assert df['voltage'].max() == 1.0

def test_samples_read_only():
    s = sample_distribution(reference_result(), 10)
    with pytest.raises(ValueError):
        s.voltage[0] = 2.0

@pytest.mark.parametrize('n', [0, -3, 2.5, True])
def test_bad_point_count(n):
    with pytest.raises(NonPositiveError) as e:
        sample_distribution(reference_result(), n)
    assert e.value.field == 'point_count'
