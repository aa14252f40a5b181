"""Pydantic models for tm-bridge."""

from tm_bridge.models.inputs import ListTagsInput, TagsBridgeInput
from tm_bridge.models.outcome import Deferred, DispatchOutcome, Handled
from tm_bridge.models.prompts import PromptPair, PromptParameter, PromptTemplate
from tm_bridge.models.tags import RemoteTagsResult, SubtaskCounts, TagInfo, TagsWithStats

__all__ = [
    # Tag models
    "TagInfo",
    "SubtaskCounts",
    "TagsWithStats",
    "RemoteTagsResult",
    # Dispatch outcomes
    "Handled",
    "Deferred",
    "DispatchOutcome",
    # Input models
    "TagsBridgeInput",
    "ListTagsInput",
    # Prompt template models
    "PromptTemplate",
    "PromptParameter",
    "PromptPair",
]
