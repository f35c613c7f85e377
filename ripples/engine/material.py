# ripples/engine/material.py
import logging

logger = logging.getLogger(__name__)


class MatcapMaterial:
    """The one material of the scene: a matcap texture plus render-side flags."""

    def __init__(self, double_sided=True):
        self.matcap = None
        self.double_sided = double_sided
        self.needs_update = False

    def set_matcap(self, texture):
        """Swaps the active matcap. The renderer picks the change up on its next frame."""
        if texture is self.matcap:
            return
        self.matcap = texture
        self.needs_update = True
        logger.debug("Matcap set to %s", getattr(texture, 'source', None))
