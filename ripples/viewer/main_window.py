# ripples/viewer/main_window.py
import logging

from PyQt5.QtWidgets import QApplication, QMainWindow, QMessageBox, QWidget, QVBoxLayout, QHBoxLayout

from ripples.engine.constants import MATCAP_URLS, DEFAULT_MATCAP_INDEX
from ripples.engine.library import MatcapLibrary
from ripples.engine.material import MatcapMaterial
from ripples.engine.parameters import Parameters
from ripples.viewer.loader import MatcapLoader
from ripples.viewer.matcap_strip import MatcapStrip
from ripples.viewer.parameter_panel import ParameterPanel
from ripples.viewer.surface_view import SurfaceView

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Owns the shared state (parameters, material, matcap library) and wires the
    viewport, the preview strip and the parameter panel to it.
    """
    def __init__(self, matcap_urls=MATCAP_URLS, default_index=DEFAULT_MATCAP_INDEX):
        super().__init__()
        self.setWindowTitle("Matcap Ripples")
        self.setGeometry(100, 100, 1280, 800)

        self.parameters = Parameters()
        self.material = MatcapMaterial(double_sided=True)
        self.library = MatcapLibrary(len(matcap_urls), self.material, default_index=default_index)

        self.view = SurfaceView(self.parameters, self.material)
        self.strip = MatcapStrip(self.library)
        self.panel = ParameterPanel(self.parameters)

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        layout.addWidget(self.view, 1)

        bottom_row = QHBoxLayout()
        bottom_row.addStretch(1)
        bottom_row.addWidget(self.strip)
        bottom_row.addStretch(1)
        bottom_row.addWidget(self.panel)
        layout.addLayout(bottom_row)
        self.setCentralWidget(central)

        self.view.viewport_layout.on_resize(self.on_viewport_resized)
        self.library.on_all_loaded(self.on_matcaps_loaded)
        self.view.initializationFailed.connect(self.on_initialization_failed)

        self.loader = MatcapLoader(self.library, self)
        self.loader.load_all(matcap_urls)

    def on_viewport_resized(self, viewport_layout):
        self.strip.set_strip_width(viewport_layout.thumbnail_width)

    def on_matcaps_loaded(self, library):
        self.view.viewport_layout.refresh()

    def on_initialization_failed(self, message):
        QMessageBox.critical(self, "OpenGL Error", f"The 3D view could not be started.\n\n{message}")
        QApplication.exit(1)
