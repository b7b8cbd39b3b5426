"""Base model for entity-query models.

This module defines the base configuration shared by the entity marker
and identity models.
"""

from pydantic import BaseModel, ConfigDict


class EntityQueryBaseModel(BaseModel):
    """Base model for all entity-query models with common functionality."""

    model_config = ConfigDict(  # pyright: ignore[reportUnannotatedClassAttribute]
        from_attributes=True,
    )
