"""A small ray tracer that renders spheres and planes to PPM images."""

__version__ = "0.1.0"