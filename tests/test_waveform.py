from itertools import islice

import numpy as np
import pytest

from waver import (
    I8,
    I16,
    U8,
    EmptyWaveformError,
    SampleRateError,
    Wave,
    WaveFunc,
    Waveform,
)


def take(iterable, n):
    return list(islice(iterable, n))


def test_waveform_single_wave_match():
    w3khz = Wave(sample_rate=44100.0, frequency=3000.0)
    wf = Waveform.with_wave(44100.0, w3khz)

    w1 = take(wf.generate(), 100)
    w2 = [int(c * 32767) for c in take(w3khz.generate(), 100)]

    assert w1 == w2


def test_waveform_empty_zeros():
    wf = Waveform(44100.0, I8)
    assert take(wf, 10) == [0] * 10


def test_waveform_iteration():
    it = iter(Waveform(44100.0, I8))
    assert next(it) == 0
    assert it.step() == 0


def test_waveform_construct():
    wf1 = Waveform.with_wave(44100.0, Wave(frequency=3400.0, amplitude=1.0))
    wf2 = Waveform(44100.0)

    v1 = take(wf1, 100)
    v2 = take(wf2.append(Wave(frequency=3400.0)), 100)

    assert v1 == v2


def test_append_overrides_sample_rate():
    wf = Waveform(44100.0)
    wave = Wave(sample_rate=8000.0, frequency=440.0)
    wf.append(wave)

    assert wf.components[0].sample_rate == 44100.0
    assert wf.components[0].frequency == 440.0
    # The caller's wave is untouched
    assert wave.sample_rate == 8000.0


def test_append_chains_and_keeps_order():
    wf = Waveform(1000.0)
    result = wf.append(Wave(frequency=1.0)).append(Wave(frequency=2.0)).append(Wave(frequency=3.0))

    assert result is wf
    assert [c.frequency for c in wf.components] == [1.0, 2.0, 3.0]
    assert len(wf) == 3


def test_waveform_amplitude_normalization():
    wf = Waveform.with_wave(44100.0, Wave(frequency=4000.0, amplitude=1.5))
    wf.append(Wave(frequency=5000.0, amplitude=0.5)).normalize_amplitudes()

    assert all(c.amplitude == 0.5 for c in wf.components)


def test_normalization_three_components():
    wf = Waveform(44100.0)
    for freq in (100.0, 200.0, 300.0):
        wf.append(Wave(frequency=freq))

    assert wf.normalize_amplitudes() is wf
    assert [c.amplitude for c in wf.components] == [1 / 3] * 3


def test_normalize_empty_waveform_raises():
    with pytest.raises(EmptyWaveformError):
        Waveform(44100.0).normalize_amplitudes()


def test_waveform_iterator_halt_numerical_instability():
    wf = Waveform.with_wave(44100.0, Wave(frequency=4000.0, amplitude=1.0))
    v = take(wf.append(Wave(frequency=5000.0, amplitude=0.5)), 100)

    assert len(v) != 100


def test_overflow_terminates_for_good():
    wf = Waveform(44100.0, I8)
    wf.append(Wave(func=WaveFunc.COSINE)).append(Wave(func=WaveFunc.COSINE))
    it = wf.generate()

    assert it.step() is None
    assert it.overflowed
    assert it.step() is None
    with pytest.raises(StopIteration):
        next(it)


def test_normalized_waveform_runs_full_length():
    wf = Waveform.with_wave(44100.0, Wave(frequency=4000.0, amplitude=1.0))
    wf.append(Wave(frequency=5000.0, amplitude=0.5)).normalize_amplitudes()

    it = wf.generate()
    assert len(take(it, 1000)) == 1000
    assert not it.overflowed


def test_cosine_full_scale():
    wf = Waveform.with_wave(1000.0, Wave(func=WaveFunc.COSINE, frequency=10.0))
    assert take(wf, 1) == [32767]


def test_unsigned_rejects_negative_half():
    wf = Waveform.with_wave(1000.0, Wave(func=WaveFunc.SQUARE, frequency=10.0), bit_depth=U8)
    # Full scale for the first half period, then the negative half overflows
    samples = take(wf, 1000)
    assert 0 < len(samples) < 100
    assert set(samples) == {255}


def test_iterator_snapshots_components():
    wf = Waveform.with_wave(1000.0, Wave(frequency=10.0, amplitude=0.5))
    it = wf.generate()
    wf.append(Wave(frequency=20.0, amplitude=0.5))

    assert len(it.iters) == 1
    assert len(wf.generate().iters) == 2


def test_independent_waveform_traversals():
    wf = Waveform(8000.0)
    wf.append(Wave(frequency=300.0, amplitude=0.3)).append(Wave(frequency=700.0, amplitude=0.3))
    first = wf.generate()
    take(first, 17)

    assert take(wf, 50) == take(wf, 50)


@pytest.mark.parametrize('sample_rate', [0.0, -1.0, float('nan')])
def test_invalid_sample_rate(sample_rate):
    with pytest.raises(SampleRateError):
        Waveform(sample_rate)


def test_samples_array():
    wf = Waveform.with_wave(44100.0, Wave(frequency=440.0), bit_depth=I16)
    samples = wf.samples(64)

    assert samples.dtype == np.int16
    assert samples.tolist() == take(wf, 64)


def test_samples_short_on_overflow():
    wf = Waveform(44100.0, I8)
    wf.append(Wave(func=WaveFunc.COSINE)).append(Wave(func=WaveFunc.COSINE))

    assert len(wf.samples(10)) == 0


def test_bit_depth_from_dtype():
    wf = Waveform(44100.0, np.int8)
    assert wf.bit_depth == I8
    assert Waveform(44100.0).bit_depth == I16


def test_waveform_display():
    wf = Waveform.with_wave(8000.0, Wave(frequency=100.0))
    assert str(wf) == (
        "<Waveform int16 @ 8000.0Hz: "
        "[<Func: Sine, Freq: 100Hz, Ampl: 1, Sampling Freq: 8000Hz>]>"
    )


def test_overflowing_angle_ends_sequence():
    wf = Waveform(2.0).append(Wave(frequency=1e308, amplitude=0.5))
    it = wf.generate()

    assert take(it, 4) == [0]
    assert it.overflowed


def test_sample_rate_is_read_only():
    wf = Waveform.with_wave(44100.0, Wave(frequency=440.0))
    with pytest.raises(AttributeError):
        wf.sample_rate = 8000.0
    assert wf.sample_rate == 44100.0
    assert wf.components[0].sample_rate == 44100.0
