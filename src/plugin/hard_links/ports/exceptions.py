"""Exceptions for the hard-link bounded context.

Services raise these; the presentation layer translates them into hook
outcomes or invocation results for the host. Each exception carries the
error class the host should report.
"""

from enum import StrEnum


class ErrorCode(StrEnum):
    """Host-visible error classes."""

    USER_INPUT_FORMAT_ERR = "USER_INPUT_FORMAT_ERR"
    SYS_INTERNAL_ERR = "SYS_INTERNAL_ERR"
    CATALOG_ERROR = "CATALOG_ERROR"
    NOT_YET_SUPPORTED = "NOT_YET_SUPPORTED"
    INVALID_OPERATION = "INVALID_OPERATION"
    RE_RUNTIME_ERROR = "RE_RUNTIME_ERROR"


class HardLinkError(Exception):
    """Base exception for hard-link engine errors."""

    code: ErrorCode = ErrorCode.RE_RUNTIME_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputFormatError(HardLinkError):
    """Raised when rule text does not contain a parsable document.

    This is a user-input error: the caller sent something the engine
    cannot read. It is never retried.
    """

    code = ErrorCode.USER_INPUT_FORMAT_ERR


class InternalTypeError(HardLinkError):
    """Raised when a required field is absent or has the wrong shape.

    Covers both parsed rule text documents and hook argument lists
    handed over by the host.
    """

    code = ErrorCode.SYS_INTERNAL_ERR


class CatalogError(HardLinkError):
    """Raised when a catalog primitive fails.

    Attributes:
        status: Underlying (negative) status returned by the catalog, if any
    """

    code = ErrorCode.CATALOG_ERROR

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status

    def __str__(self) -> str:
        if self.status is None:
            return self.message
        return f"{self.message} [status = {self.status}]"


class SourceNotFoundError(CatalogError):
    """Raised when the physical path of a data object cannot be found."""

    pass


class NotYetSupportedError(HardLinkError):
    """Raised for operations that are recognized but not implemented."""

    code = ErrorCode.NOT_YET_SUPPORTED

    def __init__(self, operation: str):
        super().__init__(f"Operation not yet supported [{operation}]")
        self.operation = operation


class UnsupportedOperationError(HardLinkError):
    """Raised when an operation name is not recognized at all."""

    code = ErrorCode.INVALID_OPERATION

    def __init__(self, operation: str):
        super().__init__(f"Invalid operation [{operation}]")
        self.operation = operation
