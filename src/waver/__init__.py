"""Periodic waveform generation and quantization.

A waveform can be a single sinusoidal wave or a superposition of waves of
varying function, frequency, phase and amplitude, quantized to a fixed-width
integer sample type.
"""

from .bitdepth import I8, I16, I32, I64, U8, U16, U32, U64, BitDepth
from .errors import EmptyWaveformError, QuantizationError, SampleRateError, WaverError
from .wave import Wave, WaveFunc, WaveIterator
from .waveform import Waveform, WaveformIterator

__version__ = "0.1.0"

__all__ = [
    "BitDepth",
    "EmptyWaveformError",
    "I8",
    "I16",
    "I32",
    "I64",
    "QuantizationError",
    "SampleRateError",
    "U8",
    "U16",
    "U32",
    "U64",
    "Wave",
    "WaveFunc",
    "WaveIterator",
    "Waveform",
    "WaveformIterator",
    "WaverError",
]
