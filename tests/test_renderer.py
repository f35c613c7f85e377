"""GL failures while building the renderer surface as InitializationError."""
import pytest

pytest.importorskip("OpenGL.GL")

from OpenGL.error import NullFunctionError

from ripples.engine import renderer as renderer_module
from ripples.engine.errors import InitializationError
from ripples.engine.renderer import Renderer
from ripples.engine.surface import GridMesh


def missing(name):
    def call(*args, **kwargs):
        raise NullFunctionError(f"Attempt to call an undefined function {name}, check for bool({name}) before calling")
    return call


def bare_renderer():
    renderer = Renderer.__new__(Renderer)
    renderer.vao = None
    renderer.buffers = {}
    renderer.index_count = 0
    renderer.uploaded = []
    return renderer


def test_missing_vertex_array_support(monkeypatch):
    monkeypatch.setattr(renderer_module.gl, "glGenVertexArrays", missing("glGenVertexArrays"))
    mesh = GridMesh(1, 1, 2, 2)
    with pytest.raises(InitializationError, match="mesh buffers"):
        bare_renderer().upload_mesh(mesh)
    assert mesh.needs_update


def test_link_failure(monkeypatch):
    def fail_link(*shaders):
        raise RuntimeError("Link failure")
    monkeypatch.setattr(renderer_module, "compileShader", lambda source, kind: source)
    monkeypatch.setattr(renderer_module, "compileProgram", fail_link)
    with pytest.raises(InitializationError, match="Shader compilation error"):
        Renderer()


def test_missing_function_during_state_setup(monkeypatch):
    monkeypatch.setattr(renderer_module, "compileShader", lambda source, kind: source)
    monkeypatch.setattr(renderer_module, "compileProgram", lambda *shaders: 3)
    monkeypatch.setattr(renderer_module.gl, "glClearColor", missing("glClearColor"))
    with pytest.raises(InitializationError, match="state setup"):
        Renderer()
