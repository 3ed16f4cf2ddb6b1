"""Egg-shaped face avatar, 2-D affine transforms and Bezier turtle outlines."""

__version__ = "0.1.0"
__all__ = ["__version__"]