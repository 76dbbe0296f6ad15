from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class CarId(EntityId):
    """Strongly-typed car identifier."""
