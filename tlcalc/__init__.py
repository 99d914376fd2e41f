from .tl_complex import ComplexNumber
from .tl_config import (
    CalculatorConfig, DEFAULT_CONFIG, DEFAULT_VALUES,
    FREQUENCY_UNITS, LENGTH_UNITS, to_si, from_si
)
from .tl_errors import (
    TransmissionLineError, ValidationError, OutOfRangeError, NegativeValueError,
    NonPositiveError, NotFiniteError, DegenerateGeometryError
)
from .tl_core import (
    LineParameters, CalculationResult, DistributionSample,
    validate, calculate, sample_distribution,
    reflection_coefficient, vswr_from_gamma, return_loss_from_gamma, voltage_extrema
)
from .tl_report import (
    format_complex, format_polar, format_vswr, format_return_loss,
    format_distance, format_report
)
from .tl_waveforms import (
    plot_envelopes, plot_standing_wave, plot_smith_chart, load_circles
)
