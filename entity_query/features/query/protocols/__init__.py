"""Query handle protocols."""

from .query import AsyncQuery, Query

__all__ = ["Query", "AsyncQuery"]
