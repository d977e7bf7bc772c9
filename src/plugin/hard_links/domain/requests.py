"""Typed requests understood by the hard-link engine.

Hook requests are decoded once at the hook boundary from the host's
positional argument list. Direct requests are parsed from the JSON document
embedded in rule text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hard_links.domain.value_objects import LogicalPath


class HookEvent(StrEnum):
    """Policy enforcement points the engine handles."""

    DATA_OBJ_RENAME_POST = "pep_api_data_obj_rename_post"
    DATA_OBJ_UNLINK_PRE = "pep_api_data_obj_unlink_pre"
    DATA_OBJ_TRIM_PRE = "pep_api_data_obj_trim_pre"
    DATA_OBJ_TRIM_POST = "pep_api_data_obj_trim_post"


class DirectOperation(StrEnum):
    """Operation names accepted through rule text."""

    MAKE_LINK = "hard_links_make_link"
    COUNT_LINKS = "hard_links_count_links"
    LIST_DATA_OBJECTS = "hard_links_list_data_objects"


@dataclass(frozen=True)
class RenamePostRequest:
    """A rename finished; ``destination`` is the object's new logical path."""

    source: LogicalPath
    destination: LogicalPath


@dataclass(frozen=True)
class UnlinkPreRequest:
    """A data object is about to be removed."""

    logical_path: LogicalPath


@dataclass(frozen=True)
class TrimPreRequest:
    """Replicas of a data object are about to be trimmed."""

    logical_path: LogicalPath


@dataclass(frozen=True)
class TrimPostRequest:
    """Replicas of a data object were trimmed."""

    logical_path: LogicalPath


HookRequest = RenamePostRequest | UnlinkPreRequest | TrimPreRequest | TrimPostRequest

DeletionRequest = UnlinkPreRequest | TrimPreRequest


class OperationEnvelope(BaseModel):
    """Minimal view of a rule text document used for routing."""

    model_config = ConfigDict(extra="allow")

    operation: str = Field(..., description="Name of the requested operation")


class MakeLinkRequest(BaseModel):
    """Create ``link_name`` as a hard link to ``logical_path``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    operation: Literal["hard_links_make_link"] = DirectOperation.MAKE_LINK.value
    logical_path: str = Field(..., description="Existing data object to link to")
    link_name: str = Field(..., description="Logical path of the new hard link")

    @field_validator("logical_path", "link_name")
    @classmethod
    def validate_path(cls, value: str) -> str:
        """Normalize both paths as absolute logical paths."""
        return LogicalPath.from_string(value).value

    @property
    def source(self) -> LogicalPath:
        return LogicalPath(self.logical_path)

    @property
    def link(self) -> LogicalPath:
        return LogicalPath(self.link_name)
