import argparse
import logging
import sys

from dotenv import load_dotenv

from .bitdepth import BitDepth
from .config import DEFAULT_BIT_DEPTH, DEFAULT_SAMPLE_COUNT, DEFAULT_SAMPLE_RATE, configure_logging
from .errors import WaverError
from .wave import Wave, WaveFunc
from .waveform import Waveform

logger = logging.getLogger("waver.cli")


def parse_wave(text):
    """Parse FUNC:FREQ[:AMPL[:PHASE]] into a Wave."""
    parts = text.split(':')
    if not 2 <= len(parts) <= 4:
        raise argparse.ArgumentTypeError(f"expected FUNC:FREQ[:AMPL[:PHASE]], got {text!r}")
    try:
        func = WaveFunc.parse(parts[0])
        numbers = [float(p) for p in parts[1:]]
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None

    fields = dict(zip(('frequency', 'amplitude', 'phase'), numbers))
    return Wave(func=func, **fields)


def parse_bit_depth(text):
    try:
        return BitDepth(text)
    except TypeError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser():
    parser = argparse.ArgumentParser(
        prog='waver',
        description="Generate quantized samples of superposed periodic waves.",
    )
    parser.add_argument('--sample-rate', type=float, default=DEFAULT_SAMPLE_RATE,
                        help="samples per second (default: %(default)s)")
    parser.add_argument('--bit-depth', type=parse_bit_depth, default=DEFAULT_BIT_DEPTH,
                        help="numpy integer type of the samples (default: %(default)s)")
    parser.add_argument('--count', type=int, default=DEFAULT_SAMPLE_COUNT,
                        help="number of samples to print (default: %(default)s)")
    parser.add_argument('--wave', dest='waves', type=parse_wave, action='append', required=True,
                        metavar='FUNC:FREQ[:AMPL[:PHASE]]',
                        help="a wave component, repeat to superpose several")
    parser.add_argument('--normalize', action='store_true',
                        help="give every component an equal share of the amplitude")
    parser.add_argument('--play', type=float, metavar='SECONDS',
                        help="play the waveform instead of printing samples")
    parser.add_argument('--log-level', default=None,
                        help="logging level (default: $LOG_LEVEL or INFO)")
    return parser


def main(argv=None):
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        waveform = Waveform(args.sample_rate, BitDepth.of(args.bit_depth))
        for wave in args.waves:
            waveform.append(wave)
        if args.normalize:
            waveform.normalize_amplitudes()
        logger.debug("Generating %s", waveform)

        if args.play is not None:
            # Imported here so printing samples works without PortAudio
            from . import playback
            playback.play(waveform, args.play)
            return 0

        samples = waveform.samples(args.count)
    except (WaverError, ValueError) as e:
        print(f"waver: error: {e}", file=sys.stderr)
        return 2

    for sample in samples:
        print(sample)
    if len(samples) < args.count:
        print(f"waver: overflow after {len(samples)} of {args.count} samples, "
              "try --normalize", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
