"""Interface to the external task-management core.

The core owns task storage and remote brief synchronisation. tm-bridge only
needs a handle that can report its resolved storage type and tag statistics.
"""

from __future__ import annotations

import importlib
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Protocol, runtime_checkable

from tm_bridge.config import get_settings
from tm_bridge.enums import StorageType
from tm_bridge.errors import CoreFactoryError
from tm_bridge.models.tags import TagsWithStats


@runtime_checkable
class CoreHandle(Protocol):
    """A core instance bound to one project."""

    def get_storage_type(self) -> StorageType | str: ...

    async def get_tags_with_stats(self) -> TagsWithStats | Mapping[str, Any]: ...


CoreFactory = Callable[[str], Awaitable[CoreHandle]]


def load_core_factory(import_path: str | None) -> CoreFactory:
    """
    Resolve a core factory from an import path.

    Args:
        import_path: 'package.module:callable', usually from TM_BRIDGE_CORE_FACTORY

    Returns:
        The async factory callable

    Raises:
        CoreFactoryError: If import_path is empty, malformed, or cannot be imported
    """
    if not import_path:
        raise CoreFactoryError("No core factory configured (set TM_BRIDGE_CORE_FACTORY to 'module:callable')")

    module_name, sep, attr = import_path.partition(":")
    if not sep or not module_name or not attr:
        raise CoreFactoryError(f"Invalid core factory '{import_path}', expected 'module:callable'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise CoreFactoryError(f"Cannot import core module '{module_name}': {e}") from e

    factory = getattr(module, attr, None)
    if not callable(factory):
        raise CoreFactoryError(f"Core factory '{import_path}' is not callable")
    return factory


async def initialize_core(project_path: str) -> CoreHandle:
    """Create a core handle using the factory named in settings."""
    factory = load_core_factory(get_settings().core_factory)
    return await factory(project_path)


def is_remote(storage_type: StorageType | str) -> bool:
    """Whether a resolved storage type means tags live in remote storage."""
    return storage_type == StorageType.API
