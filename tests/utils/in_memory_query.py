"""In-memory query handles for tests.

These record every call so tests can assert the handle was (or was not)
consulted.
"""

from typing import Any

from entity_query.features.query.models import Entity


class InMemoryQuery:
    """Synchronous query handle backed by a dict keyed on (type, value)."""

    def __init__(self, entities: list[Entity] | None = None):
        self.store: dict[tuple[type[Entity], Any], Entity] = {}
        self.calls: list[tuple[str, type[Entity], Any]] = []
        for entity in entities or []:
            self.store[(type(entity), entity.id)] = entity

    def get(self, entity_type, identity_value):
        self.calls.append(("get", entity_type, identity_value))
        return self.store.get((entity_type, identity_value))

    def theorise(self, entity_type, identity_value):
        self.calls.append(("theorise", entity_type, identity_value))
        existing = self.store.get((entity_type, identity_value))
        if existing is not None:
            return existing
        return entity_type(id=identity_value)


class InMemoryAsyncQuery(InMemoryQuery):
    """Asynchronous flavour of InMemoryQuery."""

    async def get(self, entity_type, identity_value):
        return super().get(entity_type, identity_value)

    async def theorise(self, entity_type, identity_value):
        return super().theorise(entity_type, identity_value)
