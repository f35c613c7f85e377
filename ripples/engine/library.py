# ripples/engine/library.py
import logging

from .constants import DEFAULT_MATCAP_INDEX

logger = logging.getLogger(__name__)


class MatcapLibrary:
    """
    Bookkeeping for the matcap slots behind the preview strip.

    Every slot resolves exactly once, to a texture or to a failure, in any
    order. Both outcomes count toward completion, and the all-loaded listeners
    run once when the last slot resolves. The default slot is activated from
    its own completion, so it does not matter when the other slots arrive.
    At most one slot is active and the active slot's texture is always the
    material's matcap.

    Listeners:
        on_texture_added(index, texture)
        on_active_changed(previous_index, index)
        on_all_loaded(library)
    """

    def __init__(self, count, material, default_index=DEFAULT_MATCAP_INDEX):
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        self.count = count
        self.material = material
        self.default_index = default_index
        self.textures = {}
        self.failures = {}
        self.active_index = None
        self._resolved = set()
        self._all_loaded_fired = False

        self._texture_added = []
        self._active_changed = []
        self._all_loaded = []

    # --- Listener registration ---
    def on_texture_added(self, callback):
        self._texture_added.append(callback)

    def on_active_changed(self, callback):
        self._active_changed.append(callback)

    def on_all_loaded(self, callback):
        self._all_loaded.append(callback)

    # --- State ---
    @property
    def completed(self):
        return len(self._resolved)

    @property
    def is_complete(self):
        return self.completed == self.count

    def texture(self, index):
        return self.textures.get(index)

    def loaded_indices(self):
        return sorted(self.textures)

    # --- Load results ---
    def texture_loaded(self, index, texture):
        if not self._accept(index):
            return
        self.textures[index] = texture
        logger.debug("Matcap %d loaded: %r", index, texture)
        for callback in self._texture_added:
            callback(index, texture)
        self._activate_default(index)
        self._count_completion()

    def texture_failed(self, index, reason):
        if not self._accept(index):
            return
        self.failures[index] = reason
        logger.warning("Matcap %d failed to load: %s", index, reason)
        self._count_completion()

    def _accept(self, index):
        if not 0 <= index < self.count:
            raise IndexError(f"Matcap index {index} out of range for {self.count} slots")
        if index in self._resolved:
            logger.warning("Ignoring repeated completion for matcap %d", index)
            return False
        self._resolved.add(index)
        return True

    def _activate_default(self, index):
        if index == self.default_index and self.active_index is None:
            self.activate(index)

    def _count_completion(self):
        if self.is_complete and not self._all_loaded_fired:
            self._all_loaded_fired = True
            logger.info("All %d matcaps resolved (%d failed)", self.count, len(self.failures))
            for callback in self._all_loaded:
                callback(self)

    # --- Selection ---
    def activate(self, index):
        """Makes slot ``index`` the active one and hands its texture to the material."""
        texture = self.textures.get(index)
        if texture is None:
            raise ValueError(f"Matcap {index} has no loaded texture")
        previous = self.active_index
        self.active_index = index
        self.material.set_matcap(texture)
        if previous != index:
            for callback in self._active_changed:
                callback(previous, index)
