from __future__ import annotations

import io
import logging
from typing import Optional, Sequence

import numpy as np
import soundfile as sf

from app.core.config import settings
from app.services.guitar.fretboard import STANDARD_TUNING, voicing_pitches

_LOG = logging.getLogger(__name__)


def _freq_from_midi(pitch_midi: int) -> float:
    return 440.0 * (2.0 ** ((float(pitch_midi) - 69.0) / 12.0))


def _envelope(n: int, sr: int, attack_s: float, volume: float) -> np.ndarray:
    t = np.arange(n, dtype=np.float64) / float(sr)
    duration_s = float(n) / float(sr)
    attack_s = min(float(attack_s), duration_s)
    # linear ramp up to `volume`, then linear ramp back to silence at the end
    xp = [0.0, attack_s, duration_s]
    fp = [0.0, float(volume), 0.0]
    return np.interp(t, xp, fp)


def render_voicing(
    frets: Sequence[Optional[int]],
    *,
    sr: int | None = None,
    duration_s: float | None = None,
    volume: float | None = None,
    attack_s: float | None = None,
    tuning: tuple[int, ...] = STANDARD_TUNING,
) -> np.ndarray:
    """
    Strike every played string at once as a sine voice.

    Returns a mono float32 buffer, or an empty one when no string is played.
    """
    sr = int(sr or settings.SYNTH_SAMPLE_RATE)
    duration_s = float(duration_s if duration_s is not None else settings.SYNTH_DURATION_S)
    volume = float(volume if volume is not None else settings.SYNTH_VOLUME)
    attack_s = float(attack_s if attack_s is not None else settings.SYNTH_ATTACK_S)
    if sr <= 0 or duration_s <= 0.0:
        raise ValueError(f"Invalid synth parameters: sr={sr}, duration_s={duration_s}")

    pitches = voicing_pitches(frets, tuning)
    if not pitches:
        return np.zeros(0, dtype=np.float32)

    n = int(round(duration_s * sr))
    t = np.arange(n, dtype=np.float64) / float(sr)
    env = _envelope(n, sr, attack_s, volume)

    y = np.zeros(n, dtype=np.float64)
    for pitch in pitches:
        y += np.sin(2.0 * np.pi * _freq_from_midi(pitch) * t) * env

    _LOG.debug("Rendered %d voices (%s) over %.2fs", len(pitches), pitches, duration_s)
    return y.astype(np.float32)


def peak_normalize(y: np.ndarray, eps: float = 1e-9) -> np.ndarray:
    m = float(np.max(np.abs(y)) + eps)
    return (y / m).astype(np.float32)


def voicing_to_wav_bytes(frets: Sequence[Optional[int]], *, sr: int | None = None) -> bytes:
    sr = int(sr or settings.SYNTH_SAMPLE_RATE)
    y = render_voicing(frets, sr=sr)
    if y.size == 0:
        raise ValueError("Voicing has no played strings.")
    # six voices at full volume can clip
    if float(np.max(np.abs(y))) > 1.0:
        y = peak_normalize(y)
    buf = io.BytesIO()
    sf.write(buf, y, sr, format="WAV", subtype="PCM_16")
    return buf.getvalue()
