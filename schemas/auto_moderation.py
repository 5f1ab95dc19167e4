from typing import Optional, TypedDict

from schemas.base import WireModel


class APIAutoModerationActionMetadata(TypedDict, total=False):
    duration_seconds: Optional[int]
    channel_id: Optional[str]
    custom_message: Optional[str]


class APIAutoModerationAction(TypedDict):
    type: int
    metadata: APIAutoModerationActionMetadata


class AutoModerationActionMetadata(WireModel):
    duration_seconds: Optional[int]
    channel_id: Optional[str]
    custom_message: Optional[str]


class AutoModerationAction(WireModel):
    type: int
    metadata: AutoModerationActionMetadata
