"""Infrastructure adapters for the hard-link bounded context."""

from hard_links.infrastructure.in_memory_catalog import (
    DataObjectRecord,
    InMemoryCatalog,
)

__all__ = ["DataObjectRecord", "InMemoryCatalog"]
