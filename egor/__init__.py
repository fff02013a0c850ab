"""A dead simple 2D graphics engine: shape and text builders, camera, input and a pygame window loop."""

__version__ = "0.2.0"