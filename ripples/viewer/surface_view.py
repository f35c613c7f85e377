# ripples/viewer/surface_view.py
import logging

from PyQt5.QtWidgets import QOpenGLWidget
from PyQt5.QtCore import Qt, QTimer, QPoint, QElapsedTimer, pyqtSignal

from ripples.engine.camera import Camera, OrbitControls
from ripples.engine.constants import FRAME_INTERVAL_MS
from ripples.engine.errors import InitializationError
from ripples.engine.noise import PerlinNoise
from ripples.engine.renderer import Renderer
from ripples.engine.surface import GridMesh, SurfaceAnimator
from ripples.engine.viewport import ViewportLayout

logger = logging.getLogger(__name__)


class SurfaceView(QOpenGLWidget):
    """
    The 3D viewport. Owns the camera, the orbit controls, the mesh and its
    animator, and the renderer, and drives them from a frame timer.
    """
    initializationFailed = pyqtSignal(str)

    def __init__(self, parameters, material, parent=None):
        super().__init__(parent)
        self.parameters = parameters
        self.material = material

        self.camera = Camera()
        self.controls = OrbitControls(self.camera)
        self.viewport_layout = ViewportLayout(self.camera)

        self.mesh = GridMesh.create_plane()
        self.animator = SurfaceAnimator(self.mesh, PerlinNoise(), parameters)

        self.renderer = None
        self.initialization_error = None

        # Input state
        self.dragging = False
        self.last_mouse_pos = QPoint()

        self.clock = QElapsedTimer()
        self.clock.start()

        self.timer = QTimer(self)
        self.timer.setInterval(FRAME_INTERVAL_MS)
        self.timer.timeout.connect(self._tick)
        self.timer.start()

        self.setFocusPolicy(Qt.ClickFocus)
        self.setMinimumSize(320, 240)

    def initializeGL(self):
        """Compiles shaders and uploads the mesh. Any failure here is fatal for the view."""
        try:
            self.renderer = Renderer()
            self.renderer.upload_mesh(self.mesh)
        except InitializationError as e:
            self._fail(str(e))
            return
        self.context().aboutToBeDestroyed.connect(self.cleanup)
        logger.info("Viewport initialized (%d vertices)", self.mesh.vertex_count)

    def has_valid_context(self):
        context = self.context()
        return context is not None and context.isValid()

    def _tick(self):
        # initializeGL never runs when Qt cannot create or bind a context.
        if self.renderer is None and self.initialization_error is None and self.isVisible():
            if not self.has_valid_context():
                self._fail("OpenGL context could not be created")
                return
        self.update()

    def _fail(self, message):
        if self.initialization_error is not None:
            return
        logger.critical("Viewport initialization failed: %s", message)
        self.renderer = None
        self.initialization_error = message
        self.timer.stop()
        # Report once the widget has finished showing
        QTimer.singleShot(0, lambda: self.initializationFailed.emit(message))

    def paintGL(self):
        """One tick: ease the camera, ripple the surface, draw."""
        if not self.renderer:
            return
        self.controls.update()
        self.animator.update(self.clock.elapsed())
        self.renderer.render(self.camera.projection_matrix, self.camera.get_view_matrix(),
                             self.mesh, self.material)

    def resizeGL(self, w, h):
        self.viewport_layout.resize(self.width(), self.height())

    def cleanup(self):
        if not self.renderer:
            return
        self.makeCurrent()
        self.renderer.cleanup()
        self.renderer = None
        self.doneCurrent()

    def mousePressEvent(self, event):
        if event.button() != Qt.LeftButton:
            super().mousePressEvent(event)
            return
        self.dragging = True
        self.last_mouse_pos = event.pos()
        self.setCursor(Qt.ClosedHandCursor)

    def mouseMoveEvent(self, event):
        if not self.dragging:
            super().mouseMoveEvent(event)
            return
        dx, dy = event.x() - self.last_mouse_pos.x(), event.y() - self.last_mouse_pos.y()
        self.last_mouse_pos = event.pos()
        self.controls.rotate(dx, dy, self.height())

    def mouseReleaseEvent(self, event):
        if self.dragging:
            self.dragging = False
            self.setCursor(Qt.ArrowCursor)
            return
        super().mouseReleaseEvent(event)

    def wheelEvent(self, event):
        delta = event.angleDelta().y()
        if delta:
            self.controls.dolly(0.95 if delta > 0 else 1 / 0.95)
        event.accept()
