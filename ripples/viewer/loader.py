# ripples/viewer/loader.py
import functools
import logging
import os

from PyQt5.QtCore import QObject, QUrl
from PyQt5.QtNetwork import QNetworkAccessManager, QNetworkReply, QNetworkRequest

from ripples.engine.errors import TextureLoadError
from ripples.engine.textures import decode_texture

logger = logging.getLogger(__name__)


def to_qurl(location):
    """Turns a URL or a filesystem path into a QUrl the network manager can fetch."""
    url = QUrl(location)
    # A one-letter scheme is a Windows drive letter, not a protocol.
    if url.isRelative() or len(url.scheme()) <= 1:
        url = QUrl.fromLocalFile(os.path.abspath(location))
    return url


class MatcapLoader(QObject):
    """
    Fetches matcap images without blocking the GUI thread.

    One request goes out per location; replies come back on the event loop
    in whatever order they finish and each one is reported to the library as
    a loaded texture or as a failure. There are no retries.
    """

    def __init__(self, library, parent=None):
        super().__init__(parent)
        self.library = library
        self.manager = QNetworkAccessManager(self)
        self.pending = {}

    def load_all(self, locations):
        for index, location in enumerate(locations):
            self._request(index, location)

    def _request(self, index, location):
        request = QNetworkRequest(to_qurl(location))
        request.setAttribute(QNetworkRequest.RedirectPolicyAttribute, QNetworkRequest.NoLessSafeRedirectPolicy)
        reply = self.manager.get(request)
        self.pending[index] = reply
        reply.finished.connect(functools.partial(self._on_finished, index, location, reply))
        logger.debug("Requested matcap %d from %s", index, location)

    def _on_finished(self, index, location, reply):
        self.pending.pop(index, None)
        try:
            if reply.error() != QNetworkReply.NoError:
                raise TextureLoadError(f"{location}: {reply.errorString()}")
            texture = decode_texture(reply.readAll().data(), location)
        except TextureLoadError as e:
            self.library.texture_failed(index, str(e))
        else:
            self.library.texture_loaded(index, texture)
        finally:
            reply.deleteLater()
