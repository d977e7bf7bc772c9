"""Shared Kernel module.

Foundational components shared by the hard-link bounded context and the
plugin infrastructure: observation context for instrumentation and the
scoped privilege guard used around administrative catalog primitives.
"""

from shared_kernel.observability_context import ObservationContext
from shared_kernel.privileges import (
    PrivilegedSession,
    PrivilegeLevel,
    elevated_privileges,
)

__all__ = [
    "ObservationContext",
    "PrivilegedSession",
    "PrivilegeLevel",
    "elevated_privileges",
]
