"""Entity models.

This module defines the Entity capability marker that every type fetched
through a query handle must satisfy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import Field

from .base_model import EntityQueryBaseModel

if TYPE_CHECKING:
    from .identity_model import Identity


class Entity(EntityQueryBaseModel):
    """Marker base class for domain entities.

    Subclass this for every domain type that is retrieved by identity.
    The ``id`` field holds the raw identity value and stays ``None`` until
    the entity has been assigned one.
    """

    id: Any | None = Field(  # pyright: ignore[reportExplicitAny]
        default=None, description="Raw identity value, None when unassigned"
    )

    @property
    def has_identity(self) -> bool:
        """Whether this entity carries an identity value."""
        return self.id is not None

    def get_identity(self) -> Identity[Any] | None:  # pyright: ignore[reportExplicitAny]
        """Build the identity of this entity.

        Returns:
            An Identity for this entity's concrete type and id, or None
            if the entity has no identity value.
        """
        from .identity_model import Identity

        if not self.has_identity:
            return None
        return Identity.create(type(self), self.id)
