# ripples/engine/surface.py
import glm
import numpy as np

from .constants import (
    PLANE_WIDTH, PLANE_HEIGHT, GRID_RESOLUTION, MESH_ROTATION,
    BASE_FREQUENCY, BASE_SPEED, COUNTER_FREQUENCY, COUNTER_SPEED, COUNTER_WEIGHT,
)


class GridMesh:
    """
    A planar lattice of vertices in the XY plane, centred on the origin.

    Vertices run row by row from the top edge (y = +height/2) downwards, each
    row from x = -width/2 to +width/2. The position, normal and uv arrays are
    allocated once; animation only ever writes the z column of ``positions``
    and the contents of ``normals``.
    """

    def __init__(self, width, height, width_segments, height_segments, rotation=(0.0, 0.0, 0.0)):
        if width_segments < 1 or height_segments < 1:
            raise ValueError("a grid needs at least one segment in each direction")
        self.width, self.height = float(width), float(height)
        self.width_segments, self.height_segments = int(width_segments), int(height_segments)
        self.rotation = tuple(rotation)

        columns, rows = self.width_segments + 1, self.height_segments + 1
        xs = np.arange(columns) * (self.width / self.width_segments) - self.width / 2
        ys = self.height / 2 - np.arange(rows) * (self.height / self.height_segments)
        grid_x, grid_y = np.meshgrid(xs, ys)

        self.positions = np.zeros((rows * columns, 3), dtype=np.float32)
        self.positions[:, 0] = grid_x.ravel()
        self.positions[:, 1] = grid_y.ravel()

        self.normals = np.zeros_like(self.positions)
        self.normals[:, 2] = 1.0

        u, v = np.meshgrid(np.arange(columns) / self.width_segments, 1.0 - np.arange(rows) / self.height_segments)
        self.uvs = np.stack([u.ravel(), v.ravel()], axis=1).astype(np.float32)

        ix, iy = np.meshgrid(np.arange(self.width_segments), np.arange(self.height_segments))
        ix, iy = ix.ravel(), iy.ravel()
        a = ix + columns * iy
        b = ix + columns * (iy + 1)
        c = (ix + 1) + columns * (iy + 1)
        d = (ix + 1) + columns * iy
        # Two counter-clockwise triangles per cell, facing +z.
        self.indices = np.stack([a, b, d, b, c, d], axis=1).reshape(-1, 3).astype(np.uint32)

        self.needs_update = True

    @classmethod
    def create_plane(cls, resolution=GRID_RESOLUTION):
        """The demo surface: a 5 x 4 plane with ``resolution`` segments per unit."""
        return cls(PLANE_WIDTH, PLANE_HEIGHT, PLANE_WIDTH * resolution, PLANE_HEIGHT * resolution,
                   rotation=MESH_ROTATION)

    @property
    def vertex_count(self):
        return len(self.positions)

    @property
    def triangle_count(self):
        return len(self.indices)

    def compute_vertex_normals(self):
        """Area-weighted average of the adjacent face normals, written into ``normals`` in place."""
        i0, i1, i2 = self.indices[:, 0], self.indices[:, 1], self.indices[:, 2]
        v0 = self.positions[i0]
        face_normals = np.cross(self.positions[i1] - v0, self.positions[i2] - v0)

        self.normals.fill(0.0)
        np.add.at(self.normals, i0, face_normals)
        np.add.at(self.normals, i1, face_normals)
        np.add.at(self.normals, i2, face_normals)

        lengths = np.linalg.norm(self.normals, axis=1, keepdims=True)
        np.maximum(lengths, 1e-12, out=lengths)
        self.normals /= lengths

    def model_matrix(self):
        """Object-to-world transform for ``rotation`` applied in XYZ order."""
        rx, ry, rz = self.rotation
        matrix = glm.rotate(glm.mat4(1.0), rx, glm.vec3(1, 0, 0))
        matrix = glm.rotate(matrix, ry, glm.vec3(0, 1, 0))
        return glm.rotate(matrix, rz, glm.vec3(0, 0, 1))


class SurfaceAnimator:
    """Displaces a GridMesh with two octaves of drifting noise every tick."""

    def __init__(self, mesh, noise, parameters):
        self.mesh = mesh
        self.noise = noise
        self.parameters = parameters
        self.time = 0.0

    def update(self, time):
        """Recomputes every vertex height for ``time`` (milliseconds) and refreshes the normals."""
        t = float(time)
        x = self.mesh.positions[:, 0]
        y = self.mesh.positions[:, 1]

        base = self.noise.evaluate(BASE_FREQUENCY * x + BASE_SPEED * t, BASE_FREQUENCY * y + BASE_SPEED * t, 0.0)
        counter = self.noise.evaluate(COUNTER_FREQUENCY * x - COUNTER_SPEED * t,
                                      COUNTER_FREQUENCY * y + COUNTER_SPEED * t, 0.0)
        self.mesh.positions[:, 2] = (base - COUNTER_WEIGHT * counter) * self.parameters.amplitude

        self.mesh.compute_vertex_normals()
        self.mesh.needs_update = True
        self.time = t
