import os

from .errors import InitializationError

shader_dir = os.path.join(os.path.dirname(__file__), 'shaders')

VERTEX_SHADER_MATCAP = os.path.join(shader_dir, 'matcap_vertex.glsl')
FRAGMENT_SHADER_MATCAP = os.path.join(shader_dir, 'matcap_fragment.glsl')


def load_shader_from_file(filepath):
    """Loads a shader from a file and returns its content as a string."""
    try:
        with open(filepath, 'r') as f:
            source = f.read()
    except OSError as e:
        raise InitializationError(f"Could not read shader file {filepath}: {e}") from e
    if not source.strip():
        raise InitializationError(f"Shader file is empty: {filepath}")
    return source


def matcap_sources():
    """(vertex, fragment) sources of the matcap program."""
    return load_shader_from_file(VERTEX_SHADER_MATCAP), load_shader_from_file(FRAGMENT_SHADER_MATCAP)
