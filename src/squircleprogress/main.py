"""
Demo Application
================
Opens a small window with a determinate and an indeterminate progress bar.

Why is this file needed?
------------------------
It is the composition root of the demo. It:
1. Sets up logging.
2. Creates the Qt Application.
3. Builds both bars from ProgressBarConfig and wires a slider to the
   determinate one.
"""
import logging
import sys

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication, QSlider, QVBoxLayout, QWidget

from squircleprogress.config import ProgressBarConfig
from squircleprogress.logging_config import setup_logging
from squircleprogress.view.progress_bar import HorizontalProgressBar


def build_demo_window() -> QWidget:
    window = QWidget()
    window.setWindowTitle("Squircle progress")
    layout = QVBoxLayout(window)

    determinate = HorizontalProgressBar(ProgressBarConfig(
        radius=10.0, progress=50, progress_color="#3A7BFF", background_color="#E6E9F0",
    ))
    determinate.setFixedHeight(20)

    indeterminate = HorizontalProgressBar(ProgressBarConfig(
        radius=10.0, indeterminate=True, indeterminate_rate=6,
        progress_color="#3A7BFF", background_color="#E6E9F0",
    ))
    indeterminate.setFixedHeight(20)

    slider = QSlider(Qt.Orientation.Horizontal)
    slider.setRange(0, 100)
    slider.setValue(50)
    slider.valueChanged.connect(determinate.set_progress)

    layout.addWidget(determinate)
    layout.addWidget(slider)
    layout.addWidget(indeterminate)
    window.resize(360, 120)
    return window


def main() -> None:
    # Use logging.DEBUG to follow mode/radius changes and sweep restarts
    setup_logging(level=logging.INFO)

    app = QApplication(sys.argv)
    app.setApplicationName("squircleprogress")

    window = build_demo_window()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
