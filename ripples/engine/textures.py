# ripples/engine/textures.py
import io
import logging

from PIL import Image, UnidentifiedImageError

from .errors import TextureLoadError

logger = logging.getLogger(__name__)


class MatcapTexture:
    """A decoded matcap image. The GL texture object is created lazily by the renderer."""

    def __init__(self, image, source=None):
        self.image = image.convert("RGBA")
        self.source = source
        self.gl_id = None

    @property
    def width(self):
        return self.image.width

    @property
    def height(self):
        return self.image.height

    def rgba_bytes(self):
        """Pixel rows top to bottom, as shown in thumbnails."""
        return self.image.tobytes()

    def gl_bytes(self):
        """Pixel rows bottom to top, as OpenGL expects them."""
        return self.image.transpose(Image.Transpose.FLIP_TOP_BOTTOM).tobytes()

    def __repr__(self):
        return f"MatcapTexture({self.source!r}, {self.width}x{self.height})"


def decode_texture(data, source=None):
    """Decodes encoded image bytes (PNG, JPEG, ...) into a MatcapTexture."""
    if not data:
        raise TextureLoadError(f"Empty image data from '{source}'")
    try:
        image = Image.open(io.BytesIO(bytes(data)))
        image.load()
    except (UnidentifiedImageError, OSError) as e:
        raise TextureLoadError(f"Could not decode image from '{source}': {e}") from e
    logger.debug("Decoded %s (%dx%d, %s)", source, image.width, image.height, image.mode)
    return MatcapTexture(image, source)

