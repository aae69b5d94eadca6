"""Play a bounded block of waveform samples through the sound card."""

import logging

import sounddevice as sd

logger = logging.getLogger(__name__)

# Integer sample formats PortAudio accepts
SUPPORTED_DTYPES = ('int8', 'int16', 'int32', 'uint8')


def play(waveform, seconds, blocking=True):
    """Render `seconds` of a waveform and play it.

    Args:
        waveform (Waveform): The signal to play
        seconds (float): Duration of the rendered block
        blocking (bool): Wait for playback to finish before returning

    Returns:
        numpy.ndarray: The samples handed to the sound card
    """
    if seconds <= 0:
        raise ValueError(f"Playback duration must be positive, got {seconds}")
    if waveform.bit_depth.name not in SUPPORTED_DTYPES:
        raise ValueError(
            f"Cannot play {waveform.bit_depth} samples, use one of: {', '.join(SUPPORTED_DTYPES)}"
        )

    count = int(round(seconds * waveform.sample_rate))
    samples = waveform.samples(count)
    if len(samples) < count:
        logger.warning("Waveform overflowed after %d of %d samples", len(samples), count)
        if len(samples) == 0:
            return samples

    logger.info("Playing %d samples at %sHz", len(samples), waveform.sample_rate)
    sd.play(samples, samplerate=waveform.sample_rate, blocking=False)
    if blocking:
        sd.wait()
        logger.info("Playback finished")
    return samples


def stop():
    """Stop any playback started without blocking."""
    sd.stop()
    logger.info("Playback stopped")
