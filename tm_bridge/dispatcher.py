"""Storage dispatcher for tag listings.

Decides whether the remote store (API storage, where tags are "briefs") is
authoritative for a project. If it is, tag statistics are fetched and shaped
into a RemoteTagsResult; otherwise the request is deferred to the local,
file-based implementation. Nothing here writes to the terminal.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from tm_bridge.core import CoreFactory, CoreHandle, initialize_core, is_remote
from tm_bridge.enums import DeferReason, LogLevel
from tm_bridge.models.inputs import TagsBridgeInput
from tm_bridge.models.outcome import Deferred, DispatchOutcome, Handled
from tm_bridge.models.tags import RemoteTagsResult
from tm_bridge.reporting import Reporter, StructlogReporter
from tm_bridge.utils.parsers import _parse_tags_with_stats, _sort_tags


@dataclass(frozen=True)
class RemoteSession:
    """A core handle whose resolved storage type is remote."""

    handle: CoreHandle
    project_root: str
    reporter: Reporter


async def open_remote(
    project_root: str,
    reporter: Reporter | None = None,
    core_factory: CoreFactory | None = None,
) -> RemoteSession | Deferred:
    """
    Initialize the core and check whether it resolved to remote storage.

    Args:
        project_root: Project directory; empty means the current working directory
        reporter: Diagnostics sink (defaults to structlog)
        core_factory: Async factory for the core handle (defaults to the configured one)

    Returns:
        RemoteSession when remote storage is active, otherwise Deferred
    """
    reporter = reporter or StructlogReporter()
    factory = core_factory or initialize_core
    project_path = project_root or os.getcwd()

    try:
        handle = await factory(project_path)
    except Exception as e:
        reporter.log(LogLevel.WARN, f"TmCore check failed, falling back to file-based tags: {e}")
        return Deferred(DeferReason.CORE_UNAVAILABLE, str(e))

    # Resolved type, not the configured one: "auto" is decided by the core at runtime
    storage_type = handle.get_storage_type()
    if not is_remote(storage_type):
        reporter.log(LogLevel.INFO, "Using file storage - processing tags locally")
        return Deferred(DeferReason.NOT_REMOTE, str(getattr(storage_type, "value", storage_type)))

    reporter.log(LogLevel.INFO, "Fetching tags (briefs) from Hamster")
    return RemoteSession(handle=handle, project_root=project_path, reporter=reporter)


async def fetch_tags(session: RemoteSession) -> RemoteTagsResult:
    """
    Fetch tag statistics from remote storage, current tag first.

    Errors raised by the core are not caught: they are already meant for the
    user and reach the caller unchanged.
    """
    stats = _parse_tags_with_stats(await session.handle.get_tags_with_stats())
    tags = _sort_tags(stats.tags)

    if stats.total_tags != len(tags):
        session.reporter.log(
            LogLevel.DEBUG,
            "Core reported a tag total that differs from the tags returned",
            project=session.project_root,
            reported=stats.total_tags,
            returned=len(tags),
        )

    # Counts are the core's to keep consistent; shown as reported
    for tag in tags:
        if tag.completed_tasks > tag.task_count:
            session.reporter.log(
                LogLevel.DEBUG,
                "Core reported more completed tasks than tasks for a tag",
                project=session.project_root,
                tag=tag.name,
                task_count=tag.task_count,
                completed_tasks=tag.completed_tasks,
            )

    return RemoteTagsResult(
        success=True,
        tags=tags,
        current_tag=stats.current_tag,
        total_tags=len(tags),
        message=f"Found {len(tags)} tag(s)",
    )


async def resolve_tags(
    params: TagsBridgeInput,
    reporter: Reporter | None = None,
    core_factory: CoreFactory | None = None,
) -> DispatchOutcome:
    """
    List tags via remote storage if it is the active backend.

    Args:
        params: TagsBridgeInput with the project root and output preferences
        reporter: Diagnostics sink (defaults to structlog)
        core_factory: Async factory for the core handle (defaults to the configured one)

    Returns:
        Handled(result) when remote storage served the request, or Deferred
        when the caller should use the file-based implementation

    Raises:
        Any error raised by the core while fetching tag statistics
    """
    session = await open_remote(params.project_root, reporter, core_factory)
    if isinstance(session, Deferred):
        return session
    return Handled(await fetch_tags(session))
