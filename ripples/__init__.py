"""Matcap ripples: a plane rippled by Perlin noise, shaded with matcaps."""

__version__ = "0.1.0"
