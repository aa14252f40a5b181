"""Dispatch outcomes for the storage dispatcher."""

from __future__ import annotations

from dataclasses import dataclass

from tm_bridge.enums import DeferReason
from tm_bridge.models.tags import RemoteTagsResult


@dataclass(frozen=True)
class Handled:
    """Remote storage served the request."""

    result: RemoteTagsResult


@dataclass(frozen=True)
class Deferred:
    """The request belongs to the local, file-based implementation."""

    reason: DeferReason
    detail: str = ""


DispatchOutcome = Handled | Deferred
