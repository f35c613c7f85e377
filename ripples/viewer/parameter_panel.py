# ripples/viewer/parameter_panel.py
from PyQt5.QtWidgets import QWidget, QLabel, QSlider, QHBoxLayout
from PyQt5.QtCore import Qt

from ripples.engine.constants import AMPLITUDE_MIN, AMPLITUDE_MAX

SLIDER_STEPS_PER_UNIT = 100


class ParameterPanel(QWidget):
    """The amplitude slider. Writes straight into the shared Parameters record."""
    def __init__(self, parameters, parent=None):
        super().__init__(parent)
        self.parameters = parameters

        layout = QHBoxLayout(self)
        layout.setContentsMargins(5, 5, 5, 5)

        layout.addWidget(QLabel("noise amplitude"))

        self.amplitude_slider = QSlider(Qt.Horizontal)
        self.amplitude_slider.setRange(int(AMPLITUDE_MIN * SLIDER_STEPS_PER_UNIT),
                                       int(AMPLITUDE_MAX * SLIDER_STEPS_PER_UNIT))
        self.amplitude_slider.setValue(round(parameters.amplitude * SLIDER_STEPS_PER_UNIT))
        self.amplitude_slider.setMinimumWidth(160)
        self.amplitude_slider.valueChanged.connect(self.on_amplitude_changed)
        layout.addWidget(self.amplitude_slider)

        self.amplitude_label = QLabel(f"{parameters.amplitude:.2f}")
        self.amplitude_label.setMinimumWidth(36)
        layout.addWidget(self.amplitude_label)

    def on_amplitude_changed(self, value):
        amplitude = self.parameters.set_amplitude(value / SLIDER_STEPS_PER_UNIT)
        self.amplitude_label.setText(f"{amplitude:.2f}")
