# -*- coding: utf-8 -*-

from __future__ import annotations

import logging
from typing import Optional, Protocol

import numpy as np

from forest_focus.core.config import AMBIENT_GAIN, DEFAULT_VOLUME, clamp, is_real_number
from forest_focus.domain.models import Mode
from forest_focus.storage.repos import StateStore

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100

FOCUS_CHIME_HZ = (440.0, 659.25, 880.0)  # A4, E5, A5
BREAK_CHIME_HZ = (392.0, 523.25)  # G4, C5
NOTE_STAGGER_S = 0.15
NOTE_LENGTH_S = 0.8
NOTE_ATTACK_S = 0.01
NOTE_DECAY_S = 0.75  # level is 1/5000 of peak by then

BROWN_NOISE_SECONDS = 2.0
BROWN_NOISE_GAIN = 3.5


class AudioPlayer(Protocol):
    def play(self, samples: np.ndarray, sample_rate: int) -> None: ...

    def start_loop(self, samples: np.ndarray, sample_rate: int, gain: float) -> None: ...

    def set_loop_gain(self, gain: float) -> None: ...

    def stop_loop(self) -> None: ...


def chime_samples(kind: Mode, volume: float, sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """
    Rising chime after focus (uplifting), two soft notes after break.
    Each note fades in over NOTE_ATTACK_S, then decays exponentially.
    """
    notes = FOCUS_CHIME_HZ if kind is Mode.FOCUS else BREAK_CHIME_HZ
    note_len = int(NOTE_LENGTH_S * sample_rate)
    stagger = int(NOTE_STAGGER_S * sample_rate)

    t = np.arange(note_len) / sample_rate
    attack = np.minimum(t / NOTE_ATTACK_S, 1.0)
    decay = np.exp(-t * np.log(5000.0) / NOTE_DECAY_S)
    envelope = attack * decay

    out = np.zeros(stagger * (len(notes) - 1) + note_len, dtype=np.float64)
    for i, freq in enumerate(notes):
        level = 0.5 * (1 - i * 0.15)
        start = i * stagger
        out[start:start + note_len] += level * envelope * np.sin(2 * np.pi * freq * t)

    peak = np.max(np.abs(out))
    if peak > 1.0:
        out /= peak
    return (out * clamp(volume, 0.0, 1.0)).astype(np.float32)


def brown_noise_samples(
    seconds: float = BROWN_NOISE_SECONDS,
    sample_rate: int = SAMPLE_RATE,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """Leaky-integrated white noise, scaled up and clipped to [-1, 1]."""
    rng = rng or np.random.default_rng()
    white = rng.uniform(-1.0, 1.0, int(seconds * sample_rate))
    out = np.empty_like(white)
    last = 0.0
    for i, w in enumerate(white):
        last = (last + 0.02 * w) / 1.02
        out[i] = last
    return np.clip(out * BROWN_NOISE_GAIN, -1.0, 1.0).astype(np.float32)


class AudioService:
    """
    Sound preferences + chimes + ambient loop.

    Preferences live in the same durable record as the timer
    (soundMuted, volume, ambientOn). Playback problems are logged and
    ignored; without a player the service only tracks preferences.
    """

    def __init__(
        self,
        store: StateStore,
        player: Optional[AudioPlayer] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.store = store
        self.player = player
        self._rng = rng
        self._noise: Optional[np.ndarray] = None
        self._looping = False

        prefs = store.load() or {}
        self.is_muted = prefs.get("soundMuted") is True
        volume = prefs.get("volume")
        self.volume = clamp(volume, 0.0, 1.0) if is_real_number(volume) else DEFAULT_VOLUME
        self.is_ambient_on = prefs.get("ambientOn") is True
        self._save()

    @property
    def ambient_gain(self) -> float:
        if self.is_muted or not self.is_ambient_on:
            return 0.0
        return self.volume * AMBIENT_GAIN

    def start(self) -> None:
        """Bring back the ambient loop if it was on last time."""
        if self.is_ambient_on:
            self._start_ambient()

    def close(self) -> None:
        self._stop_ambient()

    def mute(self) -> None:
        self.is_muted = True
        self._apply_ambient_gain()
        self._save()

    def unmute(self) -> None:
        self.is_muted = False
        self._apply_ambient_gain()
        self._save()

    def set_volume(self, value) -> None:
        self.volume = clamp(value, 0.0, 1.0)
        self._apply_ambient_gain()
        self._save()

    def toggle_ambient(self, on) -> None:
        self.is_ambient_on = bool(on)
        if self.is_ambient_on:
            self._start_ambient()
        else:
            self._stop_ambient()
        self._save()

    def on_session_completed(self, kind: Mode) -> None:
        self.play_chime(kind)

    def play_chime(self, kind: Mode = Mode.FOCUS) -> None:
        if self.is_muted or self.player is None:
            return
        try:
            self.player.play(chime_samples(kind, self.volume), SAMPLE_RATE)
        except Exception as e:
            logger.warning("chime playback failed: %s", e)

    # ----- Ambient loop -----
    def _start_ambient(self) -> None:
        if self.player is None or self._looping:
            return
        if self._noise is None:
            self._noise = brown_noise_samples(rng=self._rng)
        try:
            self.player.start_loop(self._noise, SAMPLE_RATE, self.ambient_gain)
            self._looping = True
        except Exception as e:
            logger.warning("ambient playback failed: %s", e)

    def _stop_ambient(self) -> None:
        if self.player is None or not self._looping:
            return
        self._looping = False
        try:
            self.player.stop_loop()
        except Exception as e:
            logger.warning("stopping ambient failed: %s", e)

    def _apply_ambient_gain(self) -> None:
        if self.player is None or not self._looping:
            return
        try:
            self.player.set_loop_gain(self.ambient_gain)
        except Exception as e:
            logger.warning("ambient volume change failed: %s", e)

    def _save(self) -> None:
        self.store.save(
            {
                "soundMuted": self.is_muted,
                "volume": self.volume,
                "ambientOn": self.is_ambient_on,
            }
        )
