"""Start-up failure reporting of the 3D view."""
import pytest

from ripples.engine.material import MatcapMaterial
from ripples.engine.parameters import Parameters
from ripples.viewer.surface_view import SurfaceView


@pytest.fixture
def view(qapp):
    view = SurfaceView(Parameters(), MatcapMaterial())
    yield view
    view.timer.stop()
    view.deleteLater()


def test_hidden_view_waits_for_a_context(view):
    view._tick()
    assert view.initialization_error is None
    assert view.timer.isActive()


def test_missing_context_is_reported(view, monkeypatch, wait_until):
    failures = []
    view.initializationFailed.connect(failures.append)
    monkeypatch.setattr(view, "isVisible", lambda: True)
    monkeypatch.setattr(view, "context", lambda: None)

    view._tick()

    assert view.initialization_error == "OpenGL context could not be created"
    assert not view.timer.isActive()
    wait_until(lambda: failures)
    assert failures == ["OpenGL context could not be created"]


def test_failure_is_reported_once(view, monkeypatch, wait_until, qapp):
    failures = []
    view.initializationFailed.connect(failures.append)
    monkeypatch.setattr(view, "isVisible", lambda: True)
    monkeypatch.setattr(view, "context", lambda: None)

    view._tick()
    view._fail("Shader compilation error: boom")
    wait_until(lambda: failures)
    for _ in range(20):
        qapp.processEvents()
    assert failures == ["OpenGL context could not be created"]
