"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated or a requested entity is absent.
They are translated to structured responses by the transport layer.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when one or more field rules are broken.

    Carries every violated rule at once as an ordered field -> messages
    mapping. Raised identically by the validation pipeline stage and by the
    entity itself.
    """

    def __init__(self, errors: dict[str, list[str]]) -> None:
        self.errors = {field: list(messages) for field, messages in errors.items()}
        super().__init__("One or more validation failures have occurred", {"errors": self.errors})


class NotFoundError(DomainError):
    """
    Raised when an entity cannot be found.

    The message is the same whether the id never existed or was deleted.
    """

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": str(entity_id)})
        self.entity_type = entity_type
        self.entity_id = entity_id
