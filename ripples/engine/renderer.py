# ripples/engine/renderer.py
import logging

import glm
import OpenGL.GL as gl
from OpenGL.error import GLError, NullFunctionError
from OpenGL.GL.shaders import compileProgram, compileShader

from . import shaders
from .constants import CLEAR_COLOR
from .errors import InitializationError

logger = logging.getLogger(__name__)

# A missing entry point raises NullFunctionError, which is not a GLError.
GL_FAILURES = (GLError, NullFunctionError)


class Renderer:
    """Draws the rippling surface with the matcap program. Needs a current OpenGL 3.3 context."""

    def __init__(self):
        vertex_source, fragment_source = shaders.matcap_sources()
        try:
            self.shader = compileProgram(
                compileShader(vertex_source, gl.GL_VERTEX_SHADER),
                compileShader(fragment_source, gl.GL_FRAGMENT_SHADER),
            )
        except (RuntimeError, GLError, NullFunctionError) as e:
            raise InitializationError(f"Shader compilation error: {e}") from e

        self.vao = None
        self.buffers = {}
        self.index_count = 0
        self.uploaded = []

        try:
            gl.glClearColor(*CLEAR_COLOR)
            gl.glEnable(gl.GL_DEPTH_TEST)
            gl.glDepthFunc(gl.GL_LESS)
        except GL_FAILURES as e:
            raise InitializationError(f"OpenGL state setup failed: {e}") from e

    def upload_mesh(self, mesh):
        """Creates the VAO for ``mesh``. Positions and normals are streamed again whenever the mesh changes."""
        try:
            if self.vao is not None:
                self._delete_mesh_buffers()
            self._create_mesh_buffers(mesh)
        except GL_FAILURES as e:
            raise InitializationError(f"Could not create mesh buffers: {e}") from e
        mesh.needs_update = False
        logger.debug("Uploaded mesh: %d vertices, %d triangles", mesh.vertex_count, mesh.triangle_count)

    def _create_mesh_buffers(self, mesh):
        self.vao = gl.glGenVertexArrays(1)
        gl.glBindVertexArray(self.vao)

        for location, (name, data) in enumerate((('positions', mesh.positions), ('normals', mesh.normals))):
            vbo = gl.glGenBuffers(1)
            gl.glBindBuffer(gl.GL_ARRAY_BUFFER, vbo)
            gl.glBufferData(gl.GL_ARRAY_BUFFER, data.nbytes, data, gl.GL_DYNAMIC_DRAW)
            gl.glVertexAttribPointer(location, 3, gl.GL_FLOAT, gl.GL_FALSE, 0, None)
            gl.glEnableVertexAttribArray(location)
            self.buffers[name] = vbo

        ebo = gl.glGenBuffers(1)
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, ebo)
        gl.glBufferData(gl.GL_ELEMENT_ARRAY_BUFFER, mesh.indices.nbytes, mesh.indices, gl.GL_STATIC_DRAW)
        self.buffers['indices'] = ebo
        self.index_count = mesh.indices.size

        gl.glBindVertexArray(0)

    def _stream_mesh(self, mesh):
        if not mesh.needs_update:
            return
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self.buffers['positions'])
        gl.glBufferSubData(gl.GL_ARRAY_BUFFER, 0, mesh.positions.nbytes, mesh.positions)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self.buffers['normals'])
        gl.glBufferSubData(gl.GL_ARRAY_BUFFER, 0, mesh.normals.nbytes, mesh.normals)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, 0)
        mesh.needs_update = False

    def _bind_matcap(self, material):
        texture = material.matcap
        if texture is None:
            return False
        if texture.gl_id is None:
            tex_id = gl.glGenTextures(1)
            gl.glBindTexture(gl.GL_TEXTURE_2D, tex_id)
            gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_CLAMP_TO_EDGE)
            gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_CLAMP_TO_EDGE)
            gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR_MIPMAP_LINEAR)
            gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR)
            gl.glPixelStorei(gl.GL_UNPACK_ALIGNMENT, 1)
            gl.glTexImage2D(gl.GL_TEXTURE_2D, 0, gl.GL_RGBA, texture.width, texture.height, 0,
                            gl.GL_RGBA, gl.GL_UNSIGNED_BYTE, texture.gl_bytes())
            gl.glGenerateMipmap(gl.GL_TEXTURE_2D)
            texture.gl_id = tex_id
            self.uploaded.append(texture)
            logger.debug("Uploaded matcap %s as texture %s", texture.source, tex_id)
        gl.glActiveTexture(gl.GL_TEXTURE0)
        gl.glBindTexture(gl.GL_TEXTURE_2D, texture.gl_id)
        return True

    def render(self, projection, view, mesh, material):
        """Main entry point: clears the frame and draws ``mesh`` through ``material``."""
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        if self.vao is None:
            return

        self._stream_mesh(mesh)

        if material.double_sided:
            gl.glDisable(gl.GL_CULL_FACE)
        else:
            gl.glEnable(gl.GL_CULL_FACE)
            gl.glCullFace(gl.GL_BACK)

        shader = self.shader
        gl.glUseProgram(shader)
        gl.glUniformMatrix4fv(gl.glGetUniformLocation(shader, "projection"), 1, gl.GL_FALSE, glm.value_ptr(projection))
        gl.glUniformMatrix4fv(gl.glGetUniformLocation(shader, "view"), 1, gl.GL_FALSE, glm.value_ptr(view))
        gl.glUniformMatrix4fv(gl.glGetUniformLocation(shader, "model"), 1, gl.GL_FALSE, glm.value_ptr(mesh.model_matrix()))
        gl.glUniform1i(gl.glGetUniformLocation(shader, "doubleSided"), int(material.double_sided))

        has_matcap = self._bind_matcap(material)
        gl.glUniform1i(gl.glGetUniformLocation(shader, "hasMatcap"), int(has_matcap))
        gl.glUniform1i(gl.glGetUniformLocation(shader, "matcap"), 0)
        material.needs_update = False

        gl.glBindVertexArray(self.vao)
        gl.glDrawElements(gl.GL_TRIANGLES, self.index_count, gl.GL_UNSIGNED_INT, None)
        gl.glBindVertexArray(0)
        gl.glUseProgram(0)

    def _delete_mesh_buffers(self):
        if self.buffers:
            gl.glDeleteBuffers(len(self.buffers), list(self.buffers.values()))
            self.buffers = {}
        if self.vao is not None:
            gl.glDeleteVertexArrays(1, [self.vao])
            self.vao = None

    def cleanup(self):
        """Releases every GL object this renderer created. The context must be current."""
        self._delete_mesh_buffers()
        if self.uploaded:
            gl.glDeleteTextures([texture.gl_id for texture in self.uploaded])
            for texture in self.uploaded:
                texture.gl_id = None
            self.uploaded = []
        if self.shader:
            gl.glDeleteProgram(self.shader)
            self.shader = 0
