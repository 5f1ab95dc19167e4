from schemas.auto_moderation import (
    APIAutoModerationAction,
    APIAutoModerationActionMetadata,
    AutoModerationAction,
    AutoModerationActionMetadata,
)
from schemas.base import WireModel
from schemas.collectibles import APICollectibles, APINameplate, Collectibles, Nameplate
from schemas.incidents import APIIncidentsData, IncidentActions
from schemas.interaction import APIMessageInteractionMetadata, MessageInteractionMetadata
from schemas.scheduled_event import (
    APIGuildScheduledEventRecurrenceRule,
    GuildScheduledEventRecurrenceRule,
    GuildScheduledEventRecurrenceRuleOptions,
)
from schemas.user import APIUser, User

__all__ = [
    "WireModel",
    "APIAutoModerationAction",
    "APIAutoModerationActionMetadata",
    "AutoModerationAction",
    "AutoModerationActionMetadata",
    "APICollectibles",
    "APINameplate",
    "Collectibles",
    "Nameplate",
    "APIIncidentsData",
    "IncidentActions",
    "APIMessageInteractionMetadata",
    "MessageInteractionMetadata",
    "APIGuildScheduledEventRecurrenceRule",
    "GuildScheduledEventRecurrenceRule",
    "GuildScheduledEventRecurrenceRuleOptions",
    "APIUser",
    "User",
]
