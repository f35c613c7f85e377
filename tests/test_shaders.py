import pytest

from ripples.engine import shaders
from ripples.engine.errors import InitializationError, RipplesError


def test_matcap_sources_load():
    vertex, fragment = shaders.matcap_sources()
    assert vertex.startswith("#version 330")
    assert fragment.startswith("#version 330")
    assert "matcap" in fragment


def test_missing_file_raises(tmp_path):
    with pytest.raises(InitializationError):
        shaders.load_shader_from_file(str(tmp_path / "missing.glsl"))


def test_empty_file_raises(tmp_path):
    path = tmp_path / "empty.glsl"
    path.write_text("  \n")
    with pytest.raises(RipplesError):
        shaders.load_shader_from_file(str(path))
