"""Value objects shared across domain modules."""

from .ids import CarId

__all__ = ["CarId"]
