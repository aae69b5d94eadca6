import math

import numpy as np

from .errors import QuantizationError


class BitDepth:
    """Integer sample type a waveform is quantized into.

    Wraps a numpy integer dtype and exposes the two capabilities the
    quantizer needs: the largest representable value and a checked
    float-to-integer conversion.
    """

    def __init__(self, dtype):
        self.dtype = np.dtype(dtype)
        if self.dtype.kind not in 'iu':
            raise TypeError(f"Bit depth must be an integer type, got {self.dtype}")
        self._info = np.iinfo(self.dtype)

    @classmethod
    def of(cls, value):
        """Coerce a BitDepth or anything numpy accepts as a dtype."""
        if isinstance(value, cls):
            return value
        return cls(value)

    @property
    def name(self):
        return self.dtype.name

    @property
    def bits(self):
        return self._info.bits

    @property
    def signed(self):
        return self.dtype.kind == 'i'

    def max_magnitude(self):
        """Largest value of the integer type, as a Python int."""
        return int(self._info.max)

    def try_from_float(self, value):
        """Convert a float into this integer type, truncating toward zero.

        Args:
            value (float): The scaled sample

        Returns:
            numpy integer scalar of this bit depth

        Raises:
            QuantizationError: If the value is NaN, infinite or out of range
        """
        if not math.isfinite(value):
            raise QuantizationError(value, self)
        truncated = math.trunc(value)
        if not self._info.min <= truncated <= self._info.max:
            raise QuantizationError(value, self)
        return self.dtype.type(truncated)

    def __eq__(self, other):
        if not isinstance(other, BitDepth):
            return NotImplemented
        return self.dtype == other.dtype

    def __hash__(self):
        return hash(self.dtype)

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"BitDepth({self.name!r})"


I8 = BitDepth(np.int8)
I16 = BitDepth(np.int16)
I32 = BitDepth(np.int32)
I64 = BitDepth(np.int64)
U8 = BitDepth(np.uint8)
U16 = BitDepth(np.uint16)
U32 = BitDepth(np.uint32)
U64 = BitDepth(np.uint64)
