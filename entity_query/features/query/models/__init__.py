"""Entity-query models package.

This package contains the Pydantic models for the entity capability
marker and the typed identity wrapper.
"""

# Base models
from .base_model import EntityQueryBaseModel

# Entity marker and identity
from .entity_model import Entity
from .identity_model import Identity, TEntity

__all__ = [
    # Base models
    "EntityQueryBaseModel",
    # Entity marker and identity
    "Entity",
    "Identity",
    "TEntity",
]
