"""HighGround: nearby high-ground discovery backed by a generative model."""

__version__ = "1.0.0"
