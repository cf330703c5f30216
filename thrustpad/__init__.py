"""Arcade movement controller with thrust, gravity and simple signals."""

__version__ = "0.1.0"
__all__ = ["__version__"]