"""A small path tracer with geometry, materials, textures, a PPM camera and Monte Carlo tools."""

__version__ = "0.1.0"