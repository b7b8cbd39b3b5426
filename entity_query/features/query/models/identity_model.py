"""Identity models.

This module defines the typed Identity wrapper that designates a single
entity instance within its entity type.
"""

from typing import Any, Generic, TypeVar

from pydantic import ConfigDict, Field
from typing_extensions import Self

from .base_model import EntityQueryBaseModel
from .entity_model import Entity

TEntity = TypeVar("TEntity", bound=Entity)


class Identity(EntityQueryBaseModel, Generic[TEntity]):
    """Represents the identity of one entity instance.

    The entity_type must be an Entity subclass. The value is the raw key
    and is kept as given; it may be None, in which case the identity
    cannot resolve to anything.
    """

    model_config = ConfigDict(  # pyright: ignore[reportUnannotatedClassAttribute]
        frozen=True,
    )

    entity_type: type[Entity] = Field(
        ..., description="The entity type this identity belongs to"
    )
    value: Any | None = Field(  # pyright: ignore[reportExplicitAny]
        default=None, description="The raw identity value (e.g., 42, 'A-1001')"
    )

    @property
    def has_value(self) -> bool:
        """Whether this identity wraps a raw value."""
        return self.value is not None

    @classmethod
    def create(
        cls,
        entity_type: type[TEntity],
        value: Any | None,  # pyright: ignore[reportExplicitAny]
    ) -> Self:
        """Helper method to create an identity for an entity type."""
        return cls(entity_type=entity_type, value=value)
