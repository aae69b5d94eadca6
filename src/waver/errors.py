class WaverError(Exception):
    """Base class for all waver errors."""


class SampleRateError(WaverError, ValueError):
    """A sample rate that cannot drive sample generation."""

    def __init__(self, sample_rate):
        self.sample_rate = sample_rate
        super().__init__(f"Sample rate must be a positive number, got {sample_rate}")


class EmptyWaveformError(WaverError, ValueError):
    """An operation that needs at least one wave component got none."""


class QuantizationError(WaverError, OverflowError):
    """A sample that does not fit the target integer type."""

    def __init__(self, value, bit_depth):
        self.value = value
        self.bit_depth = bit_depth
        super().__init__(f"{value} is not representable as {bit_depth.name}")
