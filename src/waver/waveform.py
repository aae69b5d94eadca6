"""Superposition of waves and quantization into integer samples."""

import dataclasses
import logging
import math
from itertools import islice

import numpy as np

from .bitdepth import I16, BitDepth
from .errors import EmptyWaveformError, QuantizationError, SampleRateError

logger = logging.getLogger(__name__)


class Waveform:
    """A set of wave components sharing one sample rate.

    Components are summed sample by sample and the superposition is scaled
    to the full range of the bit depth. Every appended wave is re-sampled
    at the waveform's sample rate.
    """

    def __init__(self, sample_rate, bit_depth=I16):
        if not (math.isfinite(sample_rate) and sample_rate > 0):
            raise SampleRateError(sample_rate)
        self._sample_rate = sample_rate
        self.bit_depth = BitDepth.of(bit_depth)
        self._components = []

    @classmethod
    def with_wave(cls, sample_rate, wave, bit_depth=I16):
        """Construct a waveform with a single wave component.

        This is identical to constructing an empty waveform and appending
        the wave.
        """
        return cls(sample_rate, bit_depth).append(wave)

    @property
    def sample_rate(self):
        return self._sample_rate

    @property
    def components(self):
        return tuple(self._components)

    def append(self, wave):
        """Add a wave component.

        Args:
            wave (Wave): The component, its sample rate is replaced by the
                waveform's

        Returns:
            Waveform: self, to allow chaining
        """
        component = dataclasses.replace(wave, sample_rate=self.sample_rate)
        self._components.append(component)
        logger.debug("Appended component %s", component)
        return self

    def normalize_amplitudes(self):
        """Give every component an equal share of the amplitude.

        Superposed components whose amplitude weights add up to more than
        1.0 can overshoot the range of the bit depth, which stops the
        sample iterator. Normalizing avoids that.

        Returns:
            Waveform: self, to allow chaining

        Raises:
            EmptyWaveformError: If there are no components to normalize
        """
        if not self._components:
            raise EmptyWaveformError("Cannot normalize the amplitudes of an empty waveform")
        ratio = 1.0 / len(self._components)
        self._components = [dataclasses.replace(c, amplitude=ratio) for c in self._components]
        logger.debug("Normalized %d components to amplitude %s", len(self._components), ratio)
        return self

    def generate(self):
        """An infinite iterator over the quantized superposition.

        The iterator stops early only when a sample overflows the bit depth.
        """
        return WaveformIterator(self)

    def __iter__(self):
        return self.generate()

    def samples(self, count):
        """Up to `count` quantized samples as an array of the bit depth's dtype."""
        return np.fromiter(islice(self.generate(), count), dtype=self.bit_depth.dtype)

    def __len__(self):
        return len(self._components)

    def __str__(self):
        waves = ', '.join(str(c) for c in self._components)
        return f"<Waveform {self.bit_depth} @ {self.sample_rate}Hz: [{waves}]>"

    def __repr__(self):
        return (
            f"Waveform(sample_rate={self.sample_rate!r}, bit_depth={self.bit_depth!r}, "
            f"components={self._components!r})"
        )


class WaveformIterator:
    """Cursor over the quantized samples of a Waveform.

    Holds one WaveIterator per component, snapshotted at creation, and
    advances them in lock-step.
    """

    def __init__(self, waveform):
        self.bit_depth = waveform.bit_depth
        self.iters = [c.generate() for c in waveform.components]
        self.scale = float(self.bit_depth.max_magnitude())
        self.index = 0
        self.overflowed = False

    def __iter__(self):
        return self

    def step(self):
        """Produce the next sample, or None once the sequence has overflowed."""
        if self.overflowed:
            return None
        superposition = sum(next(it) for it in self.iters)
        try:
            sample = self.bit_depth.try_from_float(superposition * self.scale)
        except QuantizationError as e:
            self.overflowed = True
            logger.debug("Sample %d overflowed: %s", self.index, e)
            return None
        self.index += 1
        return sample

    def __next__(self):
        sample = self.step()
        if sample is None:
            raise StopIteration
        return sample
