# ripples/viewer/matcap_strip.py
from PyQt5.QtWidgets import QWidget, QLabel, QHBoxLayout
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QImage, QPixmap

from ripples.engine.constants import PREVIEW_PADDING


class MatcapStrip(QWidget):
    """
    A row of clickable matcap previews.

    Thumbnails appear as their images arrive, always in URL order. The strip
    mirrors the library's active slot and forwards clicks to it; it holds no
    selection state of its own.
    """
    def __init__(self, library, parent=None):
        super().__init__(parent)
        self.library = library
        self.thumbnails = {}
        self.strip_width = 0

        self.row = QHBoxLayout(self)
        self.row.setContentsMargins(0, 0, 0, 0)
        self.row.setSpacing(0)
        self.row.setAlignment(Qt.AlignCenter)

        library.on_texture_added(self.add_thumbnail)
        library.on_active_changed(self.on_active_changed)

    def add_thumbnail(self, index, texture):
        thumbnail = MatcapThumbnail(index, texture, self)
        position = sum(1 for i in self.thumbnails if i < index)
        self.row.insertWidget(position, thumbnail)
        self.thumbnails[index] = thumbnail
        if index == self.library.active_index:
            thumbnail.select()
        if self.strip_width:
            self._apply_width()

    def thumbnail_clicked(self, index):
        self.library.activate(index)

    def on_active_changed(self, previous, index):
        if previous in self.thumbnails:
            self.thumbnails[previous].deselect()
        if index in self.thumbnails:
            self.thumbnails[index].select()

    def set_strip_width(self, width):
        """Spreads ``width`` pixels evenly over the thumbnails that exist."""
        self.strip_width = max(0, int(width))
        self._apply_width()

    def _apply_width(self):
        if not self.thumbnails or not self.strip_width:
            return
        cell = self.strip_width // len(self.thumbnails)
        for thumbnail in self.thumbnails.values():
            thumbnail.set_display_width(cell - 4 * PREVIEW_PADDING)


class MatcapThumbnail(QLabel):
    """
    A single preview. Shown at the image's natural size until the strip
    assigns it a width.
    """
    def __init__(self, index, texture, strip):
        super().__init__()
        self.index = index
        self.strip = strip
        self.is_selected = False

        image = QImage(texture.rgba_bytes(), texture.width, texture.height,
                       texture.width * 4, QImage.Format_RGBA8888).copy()
        self.source_pixmap = QPixmap.fromImage(image)
        self.setPixmap(self.source_pixmap)
        self.setFixedSize(texture.width + 4 * PREVIEW_PADDING, texture.height + 4 * PREVIEW_PADDING)
        self.setAlignment(Qt.AlignCenter)
        self.setCursor(Qt.PointingHandCursor)
        self.setToolTip(str(texture.source))

        self.update_style()

    def set_display_width(self, width):
        width = max(1, int(width))
        scaled = self.source_pixmap.scaledToWidth(width, Qt.SmoothTransformation)
        self.setPixmap(scaled)
        self.setFixedSize(scaled.width() + 4 * PREVIEW_PADDING, scaled.height() + 4 * PREVIEW_PADDING)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.strip.thumbnail_clicked(self.index)

    def select(self):
        self.is_selected = True
        self.update_style()

    def deselect(self):
        self.is_selected = False
        self.update_style()

    def update_style(self):
        if self.is_selected:
            background = "#0078d7"
        else:
            background = "transparent"
        self.setStyleSheet(f"""
            MatcapThumbnail {{
                margin: {PREVIEW_PADDING}px;
                padding: {PREVIEW_PADDING}px;
                background-color: {background};
                border-radius: 4px;
            }}
            MatcapThumbnail:hover {{
                border: 1px solid #6a6a6a;
            }}
        """)
