# -*- coding: utf-8 -*-

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import sounddevice as sd

logger = logging.getLogger(__name__)


class SoundDevicePlayer:
    """
    One-shot sounds go through sd.play(); the ambient loop owns its own
    OutputStream so a chime never cuts it off.
    """

    def __init__(self):
        self._loop_stream: Optional[sd.OutputStream] = None
        self._loop_buf: Optional[np.ndarray] = None
        self._loop_pos = 0
        self._loop_gain = 0.0

    def play(self, samples: np.ndarray, sample_rate: int) -> None:
        sd.play(samples, sample_rate)

    def start_loop(self, samples: np.ndarray, sample_rate: int, gain: float) -> None:
        self.stop_loop()
        self._loop_buf = samples
        self._loop_pos = 0
        self._loop_gain = gain
        self._loop_stream = sd.OutputStream(
            samplerate=sample_rate,
            channels=1,
            dtype="float32",
            callback=self._fill_loop,
        )
        self._loop_stream.start()
        logger.debug("ambient loop started (%d samples)", len(samples))

    def set_loop_gain(self, gain: float) -> None:
        self._loop_gain = gain

    def stop_loop(self) -> None:
        if self._loop_stream is None:
            return
        try:
            self._loop_stream.stop()
            self._loop_stream.close()
        finally:
            self._loop_stream = None

    def _fill_loop(self, outdata, frames, time_info, status) -> None:
        # runs on the PortAudio thread
        if status:
            logger.debug("ambient stream status: %s", status)
        buf = self._loop_buf
        if buf is None or len(buf) == 0:
            outdata.fill(0)
            return
        idx = (self._loop_pos + np.arange(frames)) % len(buf)
        outdata[:, 0] = buf[idx] * self._loop_gain
        self._loop_pos = (self._loop_pos + frames) % len(buf)
