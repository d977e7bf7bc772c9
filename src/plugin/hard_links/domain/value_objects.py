"""Value objects for the hard-link domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers and catalog concepts.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from pathlib import PurePosixPath

# Attribute name of the metadata tag binding the members of a group
HARD_LINK_ATTRIBUTE = "irods::hard_link"


@dataclass(frozen=True)
class GroupId:
    """Identifier shared by every member of a hard-link group.

    Stored as the canonical textual UUID form so it can be written as
    a metadata value and matched verbatim by catalog queries.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def from_uuid(cls, value: uuid.UUID) -> GroupId:
        """Create GroupId from a UUID instance."""
        return cls(value=str(value))

    @classmethod
    def from_string(cls, value: str) -> GroupId:
        """Create GroupId from string value.

        Args:
            value: Canonical textual UUID

        Returns:
            GroupId instance

        Raises:
            ValueError: If value is not a canonical UUID string
        """
        try:
            parsed = uuid.UUID(value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid GroupId: {value}") from e

        if str(parsed) != value:
            raise ValueError(f"Invalid GroupId: {value} is not in canonical form")

        return cls(value=value)


@dataclass(frozen=True)
class LogicalPath:
    """Absolute catalog path of a data object (collection + data name)."""

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def from_string(cls, value: str) -> LogicalPath:
        """Create LogicalPath from string value.

        Trailing slashes are removed; the path must be absolute and name a
        data object inside a collection.

        Raises:
            ValueError: If value is empty, relative, or names the root
        """
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Logical path must be a non-empty string")

        path = PurePosixPath(value)
        if not path.is_absolute():
            raise ValueError(f"Logical path must be absolute: {value}")
        if path.name == "" or path.parent == path:
            raise ValueError(f"Logical path must name a data object: {value}")

        return cls(value=str(path))

    @property
    def collection(self) -> str:
        """Parent collection of the data object."""
        return str(PurePosixPath(self.value).parent)

    @property
    def data_name(self) -> str:
        """Name of the data object within its collection."""
        return PurePosixPath(self.value).name

    @classmethod
    def join(cls, collection: str, data_name: str) -> LogicalPath:
        """Build a LogicalPath from a collection and a data name."""
        return cls.from_string(str(PurePosixPath(collection) / data_name))


@dataclass(frozen=True)
class MetadataTag:
    """Attribute/value/unit triple attached to a data object."""

    attribute: str
    value: str
    unit: str = ""


@dataclass(frozen=True)
class Member:
    """A data object participating (or able to participate) in a group.

    Attributes:
        logical_path: Catalog path of the data object
        physical_path: Store-assigned location of the payload
        resource_scope: Identifier of the storage resource backing the object
        group_id: Group tag attached to the object, if any
    """

    logical_path: LogicalPath
    physical_path: str
    resource_scope: str
    group_id: GroupId | None = None
