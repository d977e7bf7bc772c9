"""Execution context handed to the engine by the host.

Every hook and rule invocation receives a callback producing the caller's
context: the catalog connection of the session, the client's credentials
and the error channel that is shown to interactive callers.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from hard_links.ports.catalog import Catalog
from hard_links.ports.exceptions import ErrorCode
from shared_kernel.privileges import PrivilegeLevel


@dataclass
class ClientSession:
    """Identity and authorization state of the connected client."""

    user_name: str
    zone: str
    privilege: PrivilegeLevel = PrivilegeLevel.LOCAL_USER


@dataclass(frozen=True)
class ErrorMessage:
    """One entry of the caller's error channel."""

    code: ErrorCode
    message: str


@dataclass
class ErrorStack:
    """Error channel returned to the client along with the API reply."""

    messages: list[ErrorMessage] = field(default_factory=list)

    def append(self, code: ErrorCode, message: str) -> None:
        self.messages.append(ErrorMessage(code=code, message=message))

    def __len__(self) -> int:
        return len(self.messages)


@dataclass
class ExecutionContext:
    """Catalog connection and session state of one caller."""

    catalog: Catalog
    session: ClientSession
    errors: ErrorStack = field(default_factory=ErrorStack)


ContextProvider = Callable[[], ExecutionContext]


@dataclass(frozen=True)
class DataObjectInput:
    """Input of data object API calls (unlink, trim, ...)."""

    obj_path: str


@dataclass(frozen=True)
class DataObjectCopyInput:
    """Input of data object API calls with a source and a destination."""

    source: DataObjectInput
    destination: DataObjectInput
