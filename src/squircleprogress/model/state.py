"""
Progress State (Data Model)
===========================
This module defines the long-lived state of one progress bar.

Why is this file needed?
------------------------
1. State Management: mode, progress, colors and the sweep position live in one
   plain object that the renderer reads and advances.
2. Decoupling: hosts write through the renderer's setters, which flip the
   `dirty` flag; nothing here knows how the bar gets painted.

Classes:
    Mode: Determinate or indeterminate drawing.
    ProgressState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional, Tuple, Union

# Opaque for the model: passed through to whatever fills the outlines
Color = Union[str, Tuple[int, int, int]]


class Mode(StrEnum):
    DETERMINATE = "determinate"
    INDETERMINATE = "indeterminate"


@dataclass
class ProgressState:
    mode: Mode = Mode.DETERMINATE
    progress: int = 50
    sweep_rate: int = 50
    sweep_width: float = -1.0  # negative = not derived from the track yet
    sweep_offset: Optional[float] = None
    radius: float = 0.0
    track_color: Color = "#FFFFFF"
    fill_color: Color = "#000000"

    # A render is owed since the last tick
    dirty: bool = True

    @property
    def indeterminate(self) -> bool:
        return self.mode == Mode.INDETERMINATE
