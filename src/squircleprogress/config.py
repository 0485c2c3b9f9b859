"""
Configuration & Defaults
========================
This module is the central registry of the progress bar's default options
and global constants.

Why is this file needed?
------------------------
1. Abstraction: defaults (colors, rates, sizes) are defined once instead of
   being scattered through the renderer and the Qt widget.
2. Hosts hand over one configuration bundle; the renderer is built from it.

Exports:
    ProgressBarConfig: Dataclass with the recognised options.
    SWEEP_WIDTH_DIVISOR (float): Track width / divisor = automatic sweep width.
    DEFAULT_FRAME_INTERVAL_MS (int): Delay between indeterminate frames in the Qt host.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
import logging
from typing import Any, Dict, Mapping

from squircleprogress.model.state import Color

logger = logging.getLogger(__name__)

# Global Constants
SWEEP_WIDTH_DIVISOR: float = 2.6
DEFAULT_FRAME_INTERVAL_MS: int = 16

# camelCase attribute names accepted by from_dict
_CAMEL_CASE_KEYS: Dict[str, str] = {
    "progressColor": "progress_color",
    "backgroundColor": "background_color",
    "indeterminateRate": "indeterminate_rate",
    "indeterminateWidth": "indeterminate_width",
}


@dataclass
class ProgressBarConfig:
    radius: float = 0.0
    indeterminate: bool = False
    progress_color: Color = "#000000"
    background_color: Color = "#FFFFFF"
    indeterminate_rate: int = 50
    progress: int = 50
    indeterminate_width: float = -1.0  # negative = derive from the track width

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> ProgressBarConfig:
        """
        Build a config from a plain mapping. Both snake_case and the
        camelCase option names are accepted; unknown keys are ignored.
        """
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in options.items():
            name = _CAMEL_CASE_KEYS.get(key, key)
            if name in known:
                values[name] = value
            else:
                logger.debug(f"Ignoring unknown progress bar option '{key}'.")
        return cls(**values)
