"""Domain layer of the hard-link bounded context."""

from hard_links.domain.requests import (
    DeletionRequest,
    DirectOperation,
    HookEvent,
    HookRequest,
    MakeLinkRequest,
    OperationEnvelope,
    RenamePostRequest,
    TrimPostRequest,
    TrimPreRequest,
    UnlinkPreRequest,
)
from hard_links.domain.value_objects import (
    HARD_LINK_ATTRIBUTE,
    GroupId,
    LogicalPath,
    Member,
    MetadataTag,
)

__all__ = [
    "HARD_LINK_ATTRIBUTE",
    "DeletionRequest",
    "DirectOperation",
    "GroupId",
    "HookEvent",
    "HookRequest",
    "LogicalPath",
    "MakeLinkRequest",
    "Member",
    "MetadataTag",
    "OperationEnvelope",
    "RenamePostRequest",
    "TrimPostRequest",
    "TrimPreRequest",
    "UnlinkPreRequest",
]
