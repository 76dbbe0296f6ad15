"""
Application common module.

Contains base classes for the application layer:
- Command / Query: Request values routed by the Dispatcher
- CommandHandler / QueryHandler: Handle exactly one request type
- Repository / UnitOfWork: Staged persistence with atomic commit
- Validator: Declarative field rules per request type
- PipelineBehavior: Cross-cutting stages around handler invocation
- Dispatcher / DispatcherBuilder: Startup-validated request routing
"""

from .behaviors import LoggingBehavior, PipelineBehavior, ValidationBehavior
from .command import Command, CommandHandler
from .dispatcher import Dispatcher, DispatcherBuilder
from .query import Query, QueryHandler
from .request import Request, RequestHandler
from .unit_of_work import Repository, UnitOfWork, UnitOfWorkFactory
from .validation import Validator, ValidatorRegistry

__all__ = [
    "Command",
    "CommandHandler",
    "Dispatcher",
    "DispatcherBuilder",
    "LoggingBehavior",
    "PipelineBehavior",
    "Query",
    "QueryHandler",
    "Repository",
    "Request",
    "RequestHandler",
    "UnitOfWork",
    "UnitOfWorkFactory",
    "ValidationBehavior",
    "Validator",
    "ValidatorRegistry",
]
