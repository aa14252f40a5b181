"""Tag and brief view models for tm-bridge."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class SubtaskCounts(BaseModel):
    """Subtask totals for a tag, broken down by status."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    total_subtasks: int = Field(default=0, ge=0)
    subtasks_by_status: dict[str, int] = Field(default_factory=dict)


class TagInfo(BaseModel):
    """A tag (or remote brief) together with its task statistics.

    The core reports fields in camelCase; both spellings are accepted and
    ``model_dump(by_alias=True)`` gives back the core's shape.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, extra="allow")

    name: str
    is_current: bool = False
    task_count: int = Field(default=0, ge=0)
    completed_tasks: int = Field(default=0, ge=0)
    status_breakdown: dict[str, int] = Field(default_factory=dict)
    subtask_counts: SubtaskCounts | None = None

    # Only populated for API storage
    created: str | None = None
    description: str | None = None
    status: str | None = None
    brief_id: str | None = None


class TagsWithStats(BaseModel):
    """Tag statistics as returned by the core, before sorting."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    tags: list[TagInfo] = Field(default_factory=list)
    current_tag: str | None = None
    total_tags: int = Field(default=0, ge=0)


class RemoteTagsResult(BaseModel):
    """Result of a tags listing served by remote storage."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    success: bool = True
    tags: list[TagInfo] = Field(default_factory=list)
    current_tag: str | None = None
    total_tags: int = 0
    message: str = ""

    @model_validator(mode="after")
    def check_total_matches_tags(self) -> RemoteTagsResult:
        if self.total_tags != len(self.tags):
            raise ValueError(f"total_tags ({self.total_tags}) does not match number of tags ({len(self.tags)})")
        return self
