#### synthesis and playback of fretted notes.
#### waves are 1d numpy arrays of samples at the sample rate given in _settings.

from .util import log
from . import _settings

import numpy as np
from scipy.fft import fft

# global sampling frequency:
fs = _settings.SAMPLE_RATE


def normalise(x, ceil=None):
    if ceil is None:
        ceil = np.max(np.abs(x))
    return x / ceil

### create pure wave:
def sine_wave(freq, duration, amplitude=1):
    # duration is in seconds
    samples = np.linspace(0, duration, int(fs*duration))
    wave = np.sin(2 * np.pi * freq * samples) * amplitude
    return wave

# pure exponential falloff function: (timbre over pure sine wave sounds harp-like, or like an electric piano)
def exp_falloff(wave, sharpness=5, peak_at=0.05):
    """peak_at is float, in seconds"""
    start_samples = int(fs * peak_at)
    start = np.copy(wave[:start_samples])
    end = np.copy(wave[start_samples:])
    end_samples = len(end)
    # climbup at the very beginning:
    up_profile = np.linspace(0,sharpness, start_samples)
    start *= normalise(np.exp(up_profile))

    # falloff at the end
    down_profile = np.linspace(sharpness, 0, end_samples)
    end *= normalise(np.exp(down_profile))
    return np.concatenate([start, end], axis=0)

def lin_falloff(wave, start_at=0.0):
    start_samples = int(fs * start_at)
    end = np.copy(wave[start_samples:])
    end_samples = len(end)

    # falloff at the end
    down_profile = np.linspace(1, 0, end_samples)
    end *= down_profile
    return np.concatenate([wave[:start_samples], end], axis=0)

def arrange_chord(waves, norm=False):
    """sums waves together so that they all sound at once"""
    start_max = np.max([np.max(w) for w in waves])
    longest = max([len(w) for w in waves])
    chord_wave = np.zeros(longest)
    for wave in waves:
        chord_wave[:len(wave)] += wave
    if norm:
        chord_wave = chord_wave / start_max
    return chord_wave

def arrange_melody(waves, delay=0.5, norm=False):
    """overlays waves one after the other, each starting 'delay' seconds after the last"""
    if len(waves) == 0:
        raise ValueError('Cannot arrange a melody out of no waves')
    start_max = np.max([np.max(w) for w in waves])

    delay_frames = int(delay * fs)
    melody_wave = np.copy(waves[0])
    for i, wave in enumerate(waves[1:]):
        start = delay_frames * (i+1)
        end = start + len(wave)
        if end > len(melody_wave):
            padding = np.zeros(end - len(melody_wave))
            melody_wave = np.concatenate([melody_wave, padding])
        melody_wave[start : end] += wave
    if norm:
        melody_wave = melody_wave / start_max
    return melody_wave


def karplus_strong(freq, duration, wave_table_reso=fs):
    """synthesises sound sample of a desired frequency and duration
    according to Karplus-Strong algorithm for guitar-pluck timbre"""

    log(f'Desired freq is: {freq:.1f}')
    num_samples = int(duration * wave_table_reso)
    table_len = int(round(wave_table_reso / freq))
    log(f'Desired note duration of {num_samples} ({duration}*{wave_table_reso}) gives wave table length of: {table_len}')
    # the plucked string starts as a burst of noise:
    wave_table = (np.random.randint(0, 2, table_len)*2 -1).astype(float)

    samples = np.zeros(num_samples)
    samples[:table_len] = wave_table[:num_samples]
    # every later sample averages the two samples one period before it,
    # which low-pass filters the noise into a decaying tone, one period at a time:
    for start in range(table_len, num_samples, table_len):
        end = min(start + table_len, num_samples)
        prev = samples[start-table_len : end-table_len]
        prev_shifted = samples[start-table_len-1 : end-table_len-1] if start > table_len else np.concatenate([[0.], prev[:-1]])
        samples[start:end] = (prev + prev_shifted) * 0.5
    if log.verbose and num_samples > table_len:
        log(f'Actual frequency of output is: {detect_freq(samples):.1f}')
    return samples

wave_cache = {}

def synth_wave(freq, duration, type='KS', falloff=True, cache=True):
    """type must be one of:
    'pure': sine wave synthesis
    'KS': karplus-strong algorithm"""
    params = (freq, duration, type, falloff)
    if cache and params in wave_cache:
        return wave_cache[params]

    if type == 'pure':
        wave = sine_wave(freq, duration)
        if falloff:
            wave = exp_falloff(wave)
    elif type == 'KS':
        wave = karplus_strong(freq, duration)
        if falloff:
            wave = lin_falloff(wave)
    else:
        raise ValueError(f'type arg supplied to synth_wave must be one of: pure, KS, but got: {type}')
    if cache:
        wave_cache[params] = wave
    return wave

def detect_freq(arr):
    """uses fft to detect the strongest frequency in a composite signal"""
    N = len(arr)
    xf = np.linspace(0.0, 1.0/(2.0*(1/fs)), N//2)
    f = fft(arr)
    yf = 2./N * np.abs(f[:N//2])

    # skip zero-index to avoid DC signals
    max_power = np.argmax(yf[1:]) + 1
    freq = xf[max_power]
    return round(float(freq), 2)

### sd solution
def play_wave(wave, amplitude=1, block=False):
    # sounddevice needs a working audio backend, so it is only imported on playback:
    import sounddevice as sd
    log(f'Playing wave of {len(wave)/fs:.2f} seconds')
    sd.play(wave*amplitude, fs, blocking=block)
