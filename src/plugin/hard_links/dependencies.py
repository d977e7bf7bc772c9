"""Dependency composition for the hard-link bounded context.

Services are built per invocation from the caller's execution context, so
every service talks to the catalog connection of the session it serves and
logs with that session's observation context.
"""

from __future__ import annotations

from hard_links.application.observability import (
    DefaultDeletionGuardProbe,
    DefaultGroupResolverProbe,
    DefaultIdentifierAllocatorProbe,
    DefaultLinkServiceProbe,
    DefaultRenamePropagatorProbe,
)
from hard_links.application.services import (
    DeletionGuard,
    GroupResolver,
    IdentifierAllocator,
    LinkService,
    RenamePropagator,
)
from hard_links.ports.context import ExecutionContext
from infrastructure.settings import HardLinkSettings
from shared_kernel.observability_context import ObservationContext


def get_observation_context(
    context: ExecutionContext, operation: str
) -> ObservationContext:
    """Describe the caller of ``operation`` for instrumentation."""
    return ObservationContext(
        user_name=context.session.user_name,
        zone=context.session.zone,
        operation=operation,
    )


def get_group_resolver(
    context: ExecutionContext,
    settings: HardLinkSettings,
    observation: ObservationContext | None = None,
) -> GroupResolver:
    probe = DefaultGroupResolverProbe()
    if observation is not None:
        probe = probe.with_context(observation)
    return GroupResolver(
        catalog=context.catalog,
        attribute=settings.metadata_attribute,
        scope_by_resource=settings.scope_by_resource,
        probe=probe,
    )


def get_identifier_allocator(
    context: ExecutionContext,
    settings: HardLinkSettings,
    observation: ObservationContext | None = None,
) -> IdentifierAllocator:
    probe = DefaultIdentifierAllocatorProbe()
    if observation is not None:
        probe = probe.with_context(observation)
    return IdentifierAllocator(
        catalog=context.catalog,
        attribute=settings.metadata_attribute,
        probe=probe,
    )


def get_link_service(
    context: ExecutionContext,
    settings: HardLinkSettings,
    observation: ObservationContext | None = None,
) -> LinkService:
    """Get a LinkService bound to the caller's catalog."""
    probe = DefaultLinkServiceProbe()
    if observation is not None:
        probe = probe.with_context(observation)
    return LinkService(
        catalog=context.catalog,
        resolver=get_group_resolver(context, settings, observation),
        allocator=get_identifier_allocator(context, settings, observation),
        attribute=settings.metadata_attribute,
        strict_registration=settings.strict_registration,
        probe=probe,
    )


def get_rename_propagator(
    context: ExecutionContext,
    settings: HardLinkSettings,
    observation: ObservationContext | None = None,
) -> RenamePropagator:
    """Get a RenamePropagator bound to the caller's catalog and session."""
    probe = DefaultRenamePropagatorProbe()
    if observation is not None:
        probe = probe.with_context(observation)
    return RenamePropagator(
        catalog=context.catalog,
        resolver=get_group_resolver(context, settings, observation),
        session=context.session,
        elevate_privileges=settings.elevate_privileges,
        probe=probe,
    )


def get_deletion_guard(
    context: ExecutionContext,
    settings: HardLinkSettings,
    observation: ObservationContext | None = None,
) -> DeletionGuard:
    """Get a DeletionGuard bound to the caller's catalog and session."""
    probe = DefaultDeletionGuardProbe()
    if observation is not None:
        probe = probe.with_context(observation)
    return DeletionGuard(
        catalog=context.catalog,
        resolver=get_group_resolver(context, settings, observation),
        session=context.session,
        elevate_privileges=settings.elevate_privileges,
        probe=probe,
    )
