# ripples/engine/camera.py
import math

import glm

from .constants import (
    FOV, NEAR, FAR, CAMERA_POSITION, MIN_POLAR_ANGLE, MAX_POLAR_ANGLE, DAMPING_FACTOR, ROTATE_SPEED,
)

EPS = 1e-6


class Camera:
    """A perspective camera looking at ``target``."""

    def __init__(self, fov=FOV, aspect=1.0, near=NEAR, far=FAR):
        self._pos = glm.vec3(*CAMERA_POSITION)
        self.target = glm.vec3(0.0, 0.0, 0.0)
        self.up = glm.vec3(0.0, 1.0, 0.0)
        self.fov = fov
        self.aspect = aspect
        self.near, self.far = near, far
        self.projection_matrix = glm.mat4(1.0)
        self.update_projection_matrix()

    @property
    def pos(self):
        return self._pos

    @pos.setter
    def pos(self, value):
        """Accepts a glm.vec3, or a list/tuple of three numbers."""
        if isinstance(value, glm.vec3):
            self._pos = glm.vec3(value)
        elif isinstance(value, (list, tuple)):
            self._pos = glm.vec3(*value)
        else:
            raise TypeError(f"Camera position must be glm.vec3, list, or tuple, got {type(value)}")

    def get_view_matrix(self):
        return glm.lookAt(self.pos, self.target, self.up)

    def update_projection_matrix(self):
        """Rebuilds the projection from fov/aspect/near/far. Call after changing any of them."""
        self.projection_matrix = glm.perspective(glm.radians(self.fov), self.aspect, self.near, self.far)


class OrbitControls:
    """
    Drag-to-orbit input for a Camera.

    The camera sits on a sphere around ``target``. Horizontal drags change the
    azimuth, vertical drags the polar angle, which is clamped between
    ``min_polar_angle`` and ``max_polar_angle``. With damping enabled each
    ``update()`` applies only ``damping_factor`` of the pending rotation, so the
    motion eases out and ``update()`` has to run every frame. The target is fixed;
    there is no panning.
    """

    def __init__(self, camera, target=(0.0, 0.0, 0.0)):
        self.camera = camera
        self.target = glm.vec3(*target)

        self.enable_rotate = True
        self.enable_zoom = False
        self.enable_damping = True
        self.damping_factor = DAMPING_FACTOR
        self.rotate_speed = ROTATE_SPEED
        self.min_polar_angle = MIN_POLAR_ANGLE
        self.max_polar_angle = MAX_POLAR_ANGLE
        self.min_distance, self.max_distance = 0.0, math.inf

        self._theta_delta = 0.0
        self._phi_delta = 0.0
        self._scale = 1.0

        self.update()

    def _spherical(self):
        offset = self.camera.pos - self.target
        radius = glm.length(offset)
        if radius < EPS:
            return 0.0, 0.0, 0.0
        theta = math.atan2(offset.x, offset.z)
        phi = math.acos(max(-1.0, min(1.0, offset.y / radius)))
        return radius, theta, phi

    @property
    def azimuth_angle(self):
        return self._spherical()[1]

    @property
    def polar_angle(self):
        return self._spherical()[2]

    def rotate(self, dx, dy, viewport_height):
        """Queues a rotation for a drag of (dx, dy) pixels inside a viewport ``viewport_height`` tall."""
        if not self.enable_rotate or viewport_height <= 0:
            return
        self._theta_delta -= 2 * math.pi * dx / viewport_height * self.rotate_speed
        self._phi_delta -= 2 * math.pi * dy / viewport_height * self.rotate_speed

    def dolly(self, scale):
        """Moves the camera toward (scale < 1) or away from (scale > 1) the target."""
        if not self.enable_zoom or scale <= 0:
            return
        self._scale *= scale

    def update(self):
        """Applies pending input to the camera. Returns True if the camera moved noticeably."""
        radius, theta, phi = self._spherical()
        previous = glm.vec3(self.camera.pos)

        step = self.damping_factor if self.enable_damping else 1.0
        theta += self._theta_delta * step
        phi += self._phi_delta * step
        phi = max(self.min_polar_angle, min(self.max_polar_angle, phi))
        phi = max(EPS, min(math.pi - EPS, phi))
        radius = max(self.min_distance, min(self.max_distance, radius * self._scale))

        offset = glm.vec3(
            radius * math.sin(phi) * math.sin(theta),
            radius * math.cos(phi),
            radius * math.sin(phi) * math.cos(theta),
        )
        self.camera.pos = self.target + offset
        self.camera.target = glm.vec3(self.target)

        if self.enable_damping:
            self._theta_delta *= 1 - self.damping_factor
            self._phi_delta *= 1 - self.damping_factor
        else:
            self._theta_delta = 0.0
            self._phi_delta = 0.0
        self._scale = 1.0

        return glm.distance(previous, self.camera.pos) > EPS
