"""Ports for the hard-link bounded context.

Protocols and value objects describing the collaborators the engine
consumes: the catalog, the caller's execution context, and the errors the
engine reports back.
"""

from hard_links.ports.catalog import Catalog
from hard_links.ports.context import (
    ClientSession,
    ContextProvider,
    DataObjectCopyInput,
    DataObjectInput,
    ErrorMessage,
    ErrorStack,
    ExecutionContext,
)
from hard_links.ports.exceptions import (
    CatalogError,
    ErrorCode,
    HardLinkError,
    InputFormatError,
    InternalTypeError,
    NotYetSupportedError,
    SourceNotFoundError,
    UnsupportedOperationError,
)
from hard_links.ports.queries import CatalogQuery, Column, Row

__all__ = [
    "Catalog",
    "CatalogError",
    "CatalogQuery",
    "ClientSession",
    "Column",
    "ContextProvider",
    "DataObjectCopyInput",
    "DataObjectInput",
    "ErrorCode",
    "ErrorMessage",
    "ErrorStack",
    "ExecutionContext",
    "HardLinkError",
    "InputFormatError",
    "InternalTypeError",
    "NotYetSupportedError",
    "Row",
    "SourceNotFoundError",
    "UnsupportedOperationError",
]
