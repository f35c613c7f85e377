# ripples/engine/noise.py
import random

import numpy as np

# Ken Perlin's reference permutation for improved noise.
REFERENCE_PERMUTATION = (
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225,
    140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23, 190, 6, 148,
    247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32,
    57, 177, 33, 88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175,
    74, 165, 71, 134, 139, 48, 27, 166, 77, 146, 158, 231, 83, 111, 229, 122,
    60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244, 102, 143, 54,
    65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169,
    200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64,
    52, 217, 226, 250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212,
    207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42, 223, 183, 170, 213,
    119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
    129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104,
    218, 246, 97, 228, 251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241,
    81, 51, 145, 235, 249, 14, 239, 107, 49, 192, 214, 31, 181, 199, 106, 157,
    184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254, 138, 236, 205, 93,
    222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
)


class PerlinNoise:
    """
    Improved (2002) Perlin gradient noise in three dimensions.

    The permutation table is built once and never changes, so ``evaluate`` is a
    pure function of its inputs. Coordinates may be scalars or numpy arrays of
    any broadcastable shape; the whole vertex buffer of a mesh is evaluated in
    one call.
    """

    def __init__(self, seed=None):
        self.seed = seed
        if seed is None:
            table = list(REFERENCE_PERMUTATION)
        else:
            table = list(range(256))
            random.Random(seed).shuffle(table)
        self.p = np.array(table + table, dtype=np.int64)

    @staticmethod
    def _fade(t):
        return t * t * t * (t * (t * 6 - 15) + 10)

    @staticmethod
    def _lerp(t, a, b):
        return a + t * (b - a)

    @staticmethod
    def _grad(hash_val, x, y, z):
        h = hash_val & 15
        u = np.where(h < 8, x, y)
        v = np.where(h < 4, y, np.where((h == 12) | (h == 14), x, z))
        return np.where((h & 1) == 0, u, -u) + np.where((h & 2) == 0, v, -v)

    def evaluate(self, x, y, z):
        """Noise value at (x, y, z), roughly in [-1, 1] and zero on integer lattice points."""
        x, y, z = np.broadcast_arrays(
            np.asarray(x, dtype=np.float64),
            np.asarray(y, dtype=np.float64),
            np.asarray(z, dtype=np.float64),
        )
        fx, fy, fz = np.floor(x), np.floor(y), np.floor(z)
        xi = fx.astype(np.int64) & 255
        yi = fy.astype(np.int64) & 255
        zi = fz.astype(np.int64) & 255
        xf, yf, zf = x - fx, y - fy, z - fz
        u, v, w = self._fade(xf), self._fade(yf), self._fade(zf)

        p = self.p
        a = p[xi] + yi
        aa, ab = p[a] + zi, p[a + 1] + zi
        b = p[xi + 1] + yi
        ba, bb = p[b] + zi, p[b + 1] + zi

        grad, lerp = self._grad, self._lerp
        x1 = lerp(u, grad(p[aa], xf, yf, zf), grad(p[ba], xf - 1, yf, zf))
        x2 = lerp(u, grad(p[ab], xf, yf - 1, zf), grad(p[bb], xf - 1, yf - 1, zf))
        y1 = lerp(v, x1, x2)
        x3 = lerp(u, grad(p[aa + 1], xf, yf, zf - 1), grad(p[ba + 1], xf - 1, yf, zf - 1))
        x4 = lerp(u, grad(p[ab + 1], xf, yf - 1, zf - 1), grad(p[bb + 1], xf - 1, yf - 1, zf - 1))
        y2 = lerp(v, x3, x4)

        result = lerp(w, y1, y2)
        if result.ndim == 0:
            return float(result)
        return result
