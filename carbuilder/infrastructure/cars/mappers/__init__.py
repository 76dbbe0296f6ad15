from .car_mapper import CarMapper

__all__ = ["CarMapper"]
