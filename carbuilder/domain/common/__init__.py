"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity and lifecycle
- FieldRule: Declarative per-field invariants
- DomainError and its subclasses
"""

from .entity import Entity, EntityId
from .exceptions import DomainError, NotFoundError, ValidationError
from .rules import FieldRule, collect_violations
from .value_object import ValueObject

__all__ = [
    "DomainError",
    "Entity",
    "EntityId",
    "FieldRule",
    "NotFoundError",
    "ValidationError",
    "ValueObject",
    "collect_violations",
]
