# ripples/viewer/app.py
import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtGui import QSurfaceFormat

from ripples import __version__
from ripples.viewer.logging_config import setup_logging
from ripples.viewer.main_window import MainWindow

dark_stylesheet = """
    QWidget {
        background-color: #2b2b2b;
        color: #f0f0f0;
        border: none;
    }
    QMainWindow {
        background-color: #3c3c3c;
    }
    QSlider::groove:horizontal {
        height: 4px;
        background: #555;
    }
    QSlider::handle:horizontal {
        background: #0078d7;
        width: 12px;
        margin: -5px 0;
        border-radius: 6px;
    }
    QToolTip {
        background-color: #4a4a4a;
        color: #f0f0f0;
        border: 1px solid #000;
    }
"""


def default_surface_format():
    """OpenGL 3.3 core with depth, alpha and 4x multisampling."""
    format = QSurfaceFormat()
    format.setVersion(3, 3)
    format.setProfile(QSurfaceFormat.CoreProfile)
    format.setDepthBufferSize(24)
    format.setStencilBufferSize(8)
    format.setAlphaBufferSize(8)
    format.setSamples(4)
    return format


def main():
    log = setup_logging()
    log.info("Starting Matcap Ripples %s", __version__)

    # Must be set before the QApplication is created
    QSurfaceFormat.setDefaultFormat(default_surface_format())

    app = QApplication(sys.argv)
    app.setApplicationName("Matcap Ripples")
    app.setStyleSheet(dark_stylesheet)

    main_win = MainWindow()
    main_win.show()

    status = app.exec_()
    log.info("Exiting with status %d", status)
    return status
