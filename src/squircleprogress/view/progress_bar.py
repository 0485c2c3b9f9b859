"""
Horizontal Progress Bar Widget
Qt host for the ProgressRenderer: supplies the widget rect, fills the returned
outlines and schedules the next indeterminate frame.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QTimer
from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QWidget

from squircleprogress.config import DEFAULT_FRAME_INTERVAL_MS, ProgressBarConfig
from squircleprogress.model.renderer import ProgressRenderer
from squircleprogress.model.state import Color, Mode
from squircleprogress.view.painter_path import rect_from_widget, to_qcolor, to_qpainter_path

logger = logging.getLogger(__name__)


class HorizontalProgressBar(QWidget):
    """
    Progress bar widget with squircle-style corners, either filled up to the
    progress value or showing a sweep that runs across the track.
    """
    def __init__(self, config: ProgressBarConfig | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.renderer = ProgressRenderer.from_config(config or ProgressBarConfig())
        self.renderer.add_listener(self.update)

        # single-shot: restarting while pending never queues a second frame
        self._frame_timer = QTimer(self)
        self._frame_timer.setSingleShot(True)
        self._frame_timer.setInterval(DEFAULT_FRAME_INTERVAL_MS)
        self._frame_timer.timeout.connect(self.update)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def set_progress(self, progress: int) -> None:
        self.renderer.set_progress(progress)

    def set_indeterminate(self, indeterminate: bool) -> None:
        self.renderer.set_indeterminate(indeterminate)
        if self.renderer.mode == Mode.DETERMINATE:
            self._frame_timer.stop()

    def set_indeterminate_rate(self, rate: int) -> None:
        self.renderer.set_sweep_rate(rate)

    def set_indeterminate_width(self, width: float) -> None:
        self.renderer.set_sweep_width(width)

    def set_radius(self, radius: float) -> None:
        self.renderer.set_radius(radius)

    def set_progress_color(self, color: Color) -> None:
        self.renderer.set_fill_color(color)

    def set_track_color(self, color: Color) -> None:
        self.renderer.set_track_color(color)

    def set_frame_interval(self, msec: int) -> None:
        """Delay between two indeterminate frames."""
        self._frame_timer.setInterval(msec)

    def is_animating(self) -> bool:
        return self._frame_timer.isActive()

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def paintEvent(self, event) -> None:
        rect = rect_from_widget(self.width(), self.height())
        frame = self.renderer.render_tick(rect)

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setClipPath(to_qpainter_path(self.renderer.clip_outline(rect)))
        for outline, color in frame.layers:
            painter.fillPath(to_qpainter_path(outline), to_qcolor(color))
        painter.end()

        if frame.needs_next_frame:
            self._frame_timer.start()
        else:
            self._frame_timer.stop()
