# ripples/engine/viewport.py
import logging

from .constants import PREVIEW_PADDING, PREVIEW_STRIP_FRACTION

logger = logging.getLogger(__name__)


class ViewportLayout:
    """
    Everything that depends on the size of the drawing surface.

    ``resize`` keeps the camera aspect, the renderer size and the width of the
    matcap previews in step with the container. It knows nothing about Qt so
    the widget code only has to forward its resize events here.
    """

    def __init__(self, camera, padding=PREVIEW_PADDING, strip_fraction=PREVIEW_STRIP_FRACTION):
        self.camera = camera
        self.padding = padding
        self.strip_fraction = strip_fraction
        self.width = 0
        self.height = 0
        self.renderer_size = (0, 0)
        self.thumbnail_width = 0.0
        self._listeners = []

    def on_resize(self, callback):
        """Registers ``callback(layout)``, called after every accepted resize."""
        self._listeners.append(callback)

    def resize(self, width, height):
        """Returns False and keeps the previous layout when either dimension is not positive."""
        if width <= 0 or height <= 0:
            logger.debug("Ignoring degenerate viewport size %sx%s", width, height)
            return False

        self.width, self.height = int(width), int(height)
        self.camera.aspect = self.width / self.height
        self.camera.update_projection_matrix()
        self.renderer_size = (self.width, self.height)
        self.thumbnail_width = self.strip_fraction * min(self.width, self.height) - 4 * self.padding

        for callback in self._listeners:
            callback(self)
        return True

    def refresh(self):
        """Re-runs the last accepted resize, e.g. once the preview strip is fully populated."""
        if self.width and self.height:
            self.resize(self.width, self.height)
