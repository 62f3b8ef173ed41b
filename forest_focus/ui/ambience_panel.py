# -*- coding: utf-8 -*-

import tkinter as tk
from tkinter import ttk

from forest_focus.services.audio_service import AudioService


class AmbiencePanel(ttk.Frame):
    """Mute, brown noise and volume controls."""

    def __init__(self, master, audio_service: AudioService):
        super().__init__(master)
        self.audio_service = audio_service

        self.muted_var = tk.BooleanVar(value=audio_service.is_muted)
        self.ambient_var = tk.BooleanVar(value=audio_service.is_ambient_on)
        self.volume_var = tk.DoubleVar(value=audio_service.volume)

        ttk.Checkbutton(
            self, text="Mute", variable=self.muted_var, command=self._on_mute
        ).grid(row=0, column=0, padx=(0, 10))
        ttk.Checkbutton(
            self, text="Ambience", variable=self.ambient_var, command=self._on_ambient
        ).grid(row=0, column=1, padx=(0, 10))

        ttk.Label(self, text="Volume").grid(row=0, column=2, padx=(0, 6))
        ttk.Scale(
            self,
            from_=0.0,
            to=1.0,
            variable=self.volume_var,
            command=self._on_volume,
            length=140,
        ).grid(row=0, column=3)

        if audio_service.player is None:
            ttk.Label(self, text="(no audio device)", foreground="#4B6B57").grid(
                row=0, column=4, padx=(10, 0)
            )

    def _on_mute(self):
        if self.muted_var.get():
            self.audio_service.mute()
        else:
            self.audio_service.unmute()

    def _on_ambient(self):
        self.audio_service.toggle_ambient(self.ambient_var.get())

    def _on_volume(self, value):
        self.audio_service.set_volume(float(value))
