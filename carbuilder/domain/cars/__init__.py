"""Cars domain module."""

from .entities.car import Car

__all__ = ["Car"]
