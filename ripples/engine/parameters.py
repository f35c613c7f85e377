# ripples/engine/parameters.py
from .constants import AMPLITUDE_MIN, AMPLITUDE_MAX, DEFAULT_AMPLITUDE


class Parameters:
    """Live tweakables read by the animator every tick."""

    def __init__(self, amplitude=DEFAULT_AMPLITUDE):
        self.amplitude = DEFAULT_AMPLITUDE
        self.set_amplitude(amplitude)

    def set_amplitude(self, value):
        """Stores ``value`` clamped into the amplitude range and returns what was stored."""
        self.amplitude = max(AMPLITUDE_MIN, min(AMPLITUDE_MAX, float(value)))
        return self.amplitude
