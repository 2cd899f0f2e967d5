from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np


class RenderMode(enum.Enum):
    TRUECOLOR = "truecolor"
    MONOCHROME = "monochrome"
    INVERT = "invert"
    CLASSIC = "classic"


@dataclass
class ScaledGrid:
    colours: np.ndarray  # (rows, cols, 3) uint8
    luminance: np.ndarray  # (rows, cols) uint8

    @property
    def rows(self) -> int:
        return self.colours.shape[0]

    @property
    def cols(self) -> int:
        return self.colours.shape[1]
