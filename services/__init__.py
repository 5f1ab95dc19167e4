from services.registry import InMemoryUserRegistry, UserRegistry
from services.transforms import (
    transform_api_auto_moderation_action,
    transform_api_guild_scheduled_event_recurrence_rule,
    transform_api_incidents_data,
    transform_api_message_interaction_metadata,
    transform_api_user,
    transform_collectibles,
    transform_guild_scheduled_event_recurrence_rule,
)

__all__ = [
    "UserRegistry",
    "InMemoryUserRegistry",
    "transform_api_auto_moderation_action",
    "transform_api_message_interaction_metadata",
    "transform_guild_scheduled_event_recurrence_rule",
    "transform_api_guild_scheduled_event_recurrence_rule",
    "transform_api_incidents_data",
    "transform_collectibles",
    "transform_api_user",
]
