# tlcalc/tl_cli.py
import argparse, logging, os
from .tl_config import DEFAULT_VALUES, FREQUENCY_UNITS, LENGTH_UNITS
from .tl_core import LineParameters, calculate, sample_distribution
from .tl_errors import TransmissionLineError
from .tl_report import format_report
from .tl_waveforms import plot_envelopes, plot_smith_chart, plot_standing_wave

logger = logging.getLogger('tlcalc')

def build_parser():
    ap = argparse.ArgumentParser(description='Lossless transmission line calculator')
    ap.add_argument('--Z0', type=float, default=DEFAULT_VALUES['Z0'], help='characteristic impedance (ohm)')
    ap.add_argument('--R', type=float, default=DEFAULT_VALUES['R'], help='load resistance (ohm)')
    ap.add_argument('--X', type=float, default=DEFAULT_VALUES['X'], help='load reactance (ohm)')
    ap.add_argument('--f', type=float, default=DEFAULT_VALUES['frequency'])
    ap.add_argument('--f-unit', choices=list(FREQUENCY_UNITS), default=DEFAULT_VALUES['frequency_unit'])
    ap.add_argument('--l', type=float, default=DEFAULT_VALUES['length'])
    ap.add_argument('--l-unit', choices=list(LENGTH_UNITS), default=DEFAULT_VALUES['length_unit'])
    ap.add_argument('--points', type=int, default=None, help='distribution sample count (default 200)')
    ap.add_argument('--plots_dir', default='figures')
    ap.add_argument('--no-plots', action='store_true')
    ap.add_argument('--csv', default=None, help='write the sampled V/I distribution to this CSV file')
    ap.add_argument('--log-level', default='WARNING', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return ap

def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        params = LineParameters.from_units(args.Z0, args.R, args.X, args.f, args.l,
                                           frequency_unit=args.f_unit, length_unit=args.l_unit)
        res = calculate(params)
        sample = sample_distribution(res, args.points)
    except TransmissionLineError as e:
        logger.error('calculation failed: %s', e)
        return 2

    print(format_report(params, res, args.f_unit, args.l_unit))

    if args.csv:
        sample.to_frame().to_csv(args.csv, index=False)
        logger.info('wrote %s', args.csv)
    if not args.no_plots:
        os.makedirs(args.plots_dir, exist_ok=True)
        plot_envelopes(res, f'{args.plots_dir}/envelopes.png', args.points)
        plot_standing_wave(res, f'{args.plots_dir}/standing_wave.png')
        plot_smith_chart(res, f'{args.plots_dir}/smith_chart.png')
    return 0

if __name__ == '__main__':
    raise SystemExit(main())
