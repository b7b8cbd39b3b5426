"""Protocol definitions for query handles.

A query handle is the capability object that actually executes retrieval
against the underlying data source. This package only consumes it.
"""

from typing import Any, Protocol

from entity_query.features.query.models import TEntity


class Query(Protocol):
    """Protocol for a synchronous query handle.

    Implementations own connection handling, caching and query execution.
    """

    def get(
        self,
        entity_type: type[TEntity],
        identity_value: Any,  # pyright: ignore[reportExplicitAny]
    ) -> TEntity | None:
        """Get a single entity by its raw identity value.

        Args:
            entity_type: The type of entity to retrieve.
            identity_value: The raw identity value.

        Returns:
            The entity instance, or None if no instance is found.
        """
        ...

    def theorise(
        self,
        entity_type: type[TEntity],
        identity_value: Any,  # pyright: ignore[reportExplicitAny]
    ) -> TEntity:
        """Create an entity instance on the theory that it exists in the data source.

        The existence of the entity is not verified. Using a theorised
        entity that does not actually exist may raise an error later on.

        Args:
            entity_type: The type of entity to theorise.
            identity_value: The raw identity value.

        Returns:
            A non-None entity instance.
        """
        ...


class AsyncQuery(Protocol):
    """Protocol for an asynchronous query handle.

    Same contract as Query, with coroutine methods.
    """

    async def get(
        self,
        entity_type: type[TEntity],
        identity_value: Any,  # pyright: ignore[reportExplicitAny]
    ) -> TEntity | None:
        """Get a single entity by its raw identity value."""
        ...

    async def theorise(
        self,
        entity_type: type[TEntity],
        identity_value: Any,  # pyright: ignore[reportExplicitAny]
    ) -> TEntity:
        """Create an entity instance on the theory that it exists in the data source."""
        ...
