"""Single-tone wave descriptors and their sample iterators."""

import math
from dataclasses import dataclass
from enum import Enum
from itertools import islice

import numpy as np

from .errors import SampleRateError

TWO_PI = 2 * math.pi


class WaveFunc(Enum):
    SINE = 'sine'
    COSINE = 'cosine'
    SQUARE = 'square'
    SAWTOOTH = 'sawtooth'
    TRIANGLE = 'triangle'

    @classmethod
    def parse(cls, text):
        """Look up a wave function by name, ignoring case."""
        try:
            return cls(text.strip().lower())
        except ValueError:
            names = ', '.join(func.value for func in cls)
            raise ValueError(f"Unknown wave function {text!r}, expected one of: {names}") from None

    def shape(self, angle):
        """Map an angle in radians to a value in [-1.0, 1.0]."""
        if not math.isfinite(angle):
            return math.nan
        if self is WaveFunc.SINE:
            return math.sin(angle)
        elif self is WaveFunc.COSINE:
            return math.cos(angle)
        elif self is WaveFunc.SQUARE:
            s = math.sin(angle)
            # -0.0 maps to -1.0
            return s if math.isnan(s) else math.copysign(1.0, s)
        elif self is WaveFunc.SAWTOOTH:
            return (angle % TWO_PI) / math.pi - 1.0
        else:
            return (2 / math.pi) * math.asin(math.sin(angle))

    def __str__(self):
        return self.value.capitalize()


def format_number(value):
    """Shortest round-trip rendering, without a trailing '.0' on integral values."""
    if math.isnan(value):
        return 'NaN'
    return np.format_float_positional(float(value), trim='-')


@dataclass(frozen=True)
class Wave:
    """A sinusoidal-family wave.

    Every field defaults to zero except the amplitude, which defaults to
    1.0 (the full available amplitude), and the function, which defaults
    to a sine.
    """
    sample_rate: float = 0.0  # Hz
    frequency: float = 0.0  # Hz
    phase: float = 0.0  # radians
    amplitude: float = 1.0  # 0..1
    func: WaveFunc = WaveFunc.SINE

    def generate(self):
        """An infinite iterator over the samples of this wave.

        Each call returns an independent iterator starting at the origin.

        Raises:
            SampleRateError: If the sample rate is not a positive number
        """
        return WaveIterator(self)

    def __iter__(self):
        return self.generate()

    def samples(self, count):
        """The first `count` samples as a float64 array."""
        return np.fromiter(islice(self.generate(), count), dtype=np.float64, count=count)

    def __str__(self):
        return (
            f"<Func: {self.func}, Freq: {format_number(self.frequency)}Hz, "
            f"Ampl: {format_number(self.amplitude)}, "
            f"Sampling Freq: {format_number(self.sample_rate)}Hz>"
        )


class WaveIterator:
    """Cursor over the samples of a Wave.

    The sample index wraps back to 0 after one second of samples, which
    keeps the time value fed into the wave function in [0, 1).
    """

    def __init__(self, wave):
        if not (math.isfinite(wave.sample_rate) and wave.sample_rate > 0):
            raise SampleRateError(wave.sample_rate)
        self.wave = wave
        self.index = 0

    def __iter__(self):
        return self

    def _index_inc(self):
        """Post-increment the cyclic index."""
        idx = self.index
        self.index += 1
        if self.index >= self.wave.sample_rate:
            self.index = 0
        return idx

    def __next__(self):
        wave = self.wave
        t = self._index_inc() / wave.sample_rate
        return wave.amplitude * wave.func.shape(TWO_PI * t * wave.frequency + wave.phase)
