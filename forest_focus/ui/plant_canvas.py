# -*- coding: utf-8 -*-

import random
import tkinter as tk
from dataclasses import dataclass
from typing import List, Optional, Tuple

from forest_focus.core.config import clamp01
from forest_focus.domain.models import Mode, Species

STEM = "#2E7D6B"
FROND = "#3F8F6B"
LEAF = "#8CC7A2"
BAMBOO = "#4E9E7B"
SOIL = "#6B4F3A"
FALLING_LEAF = "#C58B3A"

VIEW = 200.0  # drawings are authored in a 200x200 box, base at (100, 180)


@dataclass
class _FallingLeaf:
    x: float
    y: float
    speed: float
    drift: float
    size: float


class PlantCanvas(tk.Canvas):
    """
    Species drawing that grows with progress (scale 0.6 -> 1.2).
    During break a few leaves drift down.
    """

    def __init__(self, master, size: int = 220, bg: str = "#EAF4EC", leaf_count: int = 12):
        super().__init__(master, width=size, height=size, bg=bg, highlightthickness=0)
        self.size = size
        self._leaf_count = leaf_count
        self._leaves: List[_FallingLeaf] = []
        self._last: Optional[Tuple[Species, Mode, int]] = None

    def render(self, species: Species, progress: float, mode: Mode) -> None:
        step = int(clamp01(progress) * 200)
        key = (species, mode, step)
        if key != self._last:
            self._last = key
            self.delete("plant")
            self._draw_plant(species, step / 200.0)
        self._animate_leaves(mode)

    # ---- plant ----
    def _draw_plant(self, species: Species, progress: float) -> None:
        scale = (0.6 + 0.6 * progress) * self.size / VIEW
        ox = self.size / 2
        oy = self.size * 0.9 + (1 - progress) * 4

        def pt(x, y):
            return ox + x * scale, oy + y * scale

        self.create_rectangle(0, oy, self.size, self.size, fill=SOIL, width=0, tags="plant")

        if species is Species.FERN:
            self.create_polygon(*pt(-3, 0), *pt(0, -140), *pt(3, 0), fill=STEM, tags="plant")
            for i in range(8):
                y = -20 - i * 14
                w = 10 + i * 5
                for side in (-1, 1):
                    self.create_line(
                        *pt(0, y), *pt(side * w, y - 6), *pt(side * w * 1.4, y - 12),
                        fill=FROND, width=max(1, 4 * scale), smooth=True,
                        capstyle="round", tags="plant",
                    )
        elif species is Species.SPROUT:
            self.create_rectangle(*pt(-3, -80), *pt(3, 0), fill=STEM, width=0, tags="plant")
            for cx in (-12, 12):
                self.create_oval(*pt(cx - 16, -88), *pt(cx + 16, -68), fill=LEAF, width=0, tags="plant")
        elif species is Species.BAMBOO:
            for i in range(4):
                dx = (i - 1.5) * 16
                self.create_rectangle(*pt(dx - 3, -140), *pt(dx + 3, 0), fill=BAMBOO, width=0, tags="plant")
                for j in range(5):
                    cy = -110 + j * 28
                    self.create_oval(*pt(dx - 8, cy - 4), *pt(dx + 8, cy + 4), fill=FROND, width=0, tags="plant")
        else:
            self.create_polygon(*pt(-2, 0), *pt(0, -120), *pt(2, 0), fill=STEM, tags="plant")
            self.create_oval(*pt(-20, -110), *pt(0, -90), fill=LEAF, width=0, tags="plant")
            self.create_oval(*pt(0, -90), *pt(20, -70), fill=LEAF, width=0, tags="plant")

    # ---- falling leaves ----
    def _animate_leaves(self, mode: Mode) -> None:
        if mode is not Mode.BREAK:
            if self._leaves:
                self._leaves = []
                self.delete("leaf")
            return

        if not self._leaves:
            self._leaves = [self._new_leaf(top=False) for _ in range(self._leaf_count)]

        self.delete("leaf")
        for i, leaf in enumerate(self._leaves):
            leaf.y += leaf.speed
            leaf.x += leaf.drift
            if leaf.y > self.size:
                leaf = self._leaves[i] = self._new_leaf(top=True)
            r = leaf.size
            self.create_oval(
                leaf.x - r, leaf.y - r / 2, leaf.x + r, leaf.y + r / 2,
                fill=FALLING_LEAF, width=0, tags="leaf",
            )

    def _new_leaf(self, top: bool) -> _FallingLeaf:
        return _FallingLeaf(
            x=random.uniform(0, self.size),
            y=-10.0 if top else random.uniform(-self.size, self.size),
            speed=random.uniform(0.3, 0.8),
            drift=random.uniform(-0.3, 0.3),
            size=random.uniform(3.0, 6.0),
        )
