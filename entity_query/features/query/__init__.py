"""Identity-guarded query feature."""

from .errors import MissingArgumentError
from .extensions import get, get_async, theorise, theorise_async
from .models import Entity, Identity
from .protocols import AsyncQuery, Query

__all__ = [
    # Operations
    "get",
    "theorise",
    "get_async",
    "theorise_async",
    # Models
    "Entity",
    "Identity",
    # Protocols
    "Query",
    "AsyncQuery",
    # Errors
    "MissingArgumentError",
]
