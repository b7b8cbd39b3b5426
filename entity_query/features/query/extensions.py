"""Identity-guarded retrieval over query handles.

This module provides get and theorise operations that take a typed
Identity instead of a raw value. When the identity cannot resolve to
anything (it is None, or wraps a None value) the query handle is never
called and None is returned.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from entity_query.features.query.errors import MissingArgumentError
from entity_query.features.query.models import Identity, TEntity
from entity_query.features.query.protocols import AsyncQuery, Query

logger = logging.getLogger(__name__)


def get(query: Query, identity: Identity[TEntity] | None) -> TEntity | None:
    """Get a single entity from the data source, identified by an identity.

    Args:
        query: The query handle on which to operate.
        identity: The identity of the entity, may be None.

    Returns:
        The entity instance, or None if the identity is unusable or no
        instance is found.

    Raises:
        MissingArgumentError: If query is None.
    """
    return _get_single_instance(
        query, identity, lambda q, i: q.get(i.entity_type, i.value)
    )


def theorise(query: Query, identity: Identity[TEntity] | None) -> TEntity | None:
    """Create an entity on the theory that it exists in the data source.

    The query handle always produces an instance when it is called, even
    for an entity that does not actually exist. This function however
    returns None without calling the handle when the identity is None or
    wraps a None value.

    Args:
        query: The query handle on which to operate.
        identity: The identity of the entity, may be None.

    Returns:
        The theorised entity instance, or None if the identity is unusable.

    Raises:
        MissingArgumentError: If query is None.
    """
    return _get_single_instance(
        query, identity, lambda q, i: q.theorise(i.entity_type, i.value)
    )


async def get_async(
    query: AsyncQuery, identity: Identity[TEntity] | None
) -> TEntity | None:
    """Async variant of get, for query handles with coroutine methods."""
    return await _get_single_instance_async(
        query, identity, lambda q, i: q.get(i.entity_type, i.value)
    )


async def theorise_async(
    query: AsyncQuery, identity: Identity[TEntity] | None
) -> TEntity | None:
    """Async variant of theorise, for query handles with coroutine methods."""
    return await _get_single_instance_async(
        query, identity, lambda q, i: q.theorise(i.entity_type, i.value)
    )


def _can_resolve(identity: Identity[TEntity] | None) -> bool:
    """Whether the identity could designate an entity at all."""
    if identity is None:
        logger.debug("Identity is None, skipping query")
        return False
    if identity.value is None:
        logger.debug(
            "Identity for %s has no value, skipping query",
            identity.entity_type.__name__,
        )
        return False
    return True


def _get_single_instance(
    query: Query,
    identity: Identity[TEntity] | None,
    getter: Callable[[Query, Identity[TEntity]], TEntity | None],
) -> TEntity | None:
    """Get a single instance from a query, using a getter delegate."""
    if query is None:
        raise MissingArgumentError("query")

    if not _can_resolve(identity):
        return None

    assert identity is not None
    logger.debug(
        "Querying %s with identity value %r",
        identity.entity_type.__name__,
        identity.value,
    )
    return getter(query, identity)


async def _get_single_instance_async(
    query: AsyncQuery,
    identity: Identity[TEntity] | None,
    getter: Callable[[AsyncQuery, Identity[TEntity]], Awaitable[TEntity | None]],
) -> TEntity | None:
    """Get a single instance from an async query, using a getter delegate."""
    if query is None:
        raise MissingArgumentError("query")

    if not _can_resolve(identity):
        return None

    assert identity is not None
    logger.debug(
        "Querying %s with identity value %r",
        identity.entity_type.__name__,
        identity.value,
    )
    return await getter(query, identity)
