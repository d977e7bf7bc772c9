"""Observation context for domain-oriented observability.

One context is built per hook or rule invocation and bound into every
probe the invocation uses, so log events can be correlated with the
client the host was serving.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ObservationContext:
    """Invocation-scoped metadata attached to instrumentation events.

    Attributes:
        user_name: Client user the host is acting for (if known).
        zone: Zone of the client user (if known).
        operation: Hook event or direct operation being served.
        extra: Additional contextual metadata.

    Example:
        context = ObservationContext(
            user_name="rods",
            zone="tempZone",
            operation="pep_api_data_obj_unlink_pre",
        )
        probe = DefaultDeletionGuardProbe().with_context(context)
    """

    user_name: str | None = None
    zone: str | None = None
    operation: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        """Flatten into logging kwargs, leaving out unset fields."""
        known = {
            "user_name": self.user_name,
            "zone": self.zone,
            "operation": self.operation,
        }
        return {
            **{key: value for key, value in known.items() if value is not None},
            **self.extra,
        }
