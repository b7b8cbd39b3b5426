"""Identity-guarded retrieval of entities through query handles."""

from entity_query.features.query import (
    AsyncQuery,
    Entity,
    Identity,
    MissingArgumentError,
    Query,
    get,
    get_async,
    theorise,
    theorise_async,
)

__all__ = [
    "get",
    "theorise",
    "get_async",
    "theorise_async",
    "Entity",
    "Identity",
    "Query",
    "AsyncQuery",
    "MissingArgumentError",
]
