"""
Hand-written transforms between named wire structures and their internal shapes.
Each transform lists every field it maps; nothing is renamed implicitly.
Optional fields coalesce to None. Missing required fields, unparseable timestamps
and values the internal model rejects raise MalformedPayloadError. Registry
errors are not caught here.
"""
from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from errors import MalformedPayloadError
from schemas.auto_moderation import (
    APIAutoModerationAction,
    AutoModerationAction,
    AutoModerationActionMetadata,
)
from schemas.collectibles import APICollectibles, Collectibles, Nameplate
from schemas.incidents import APIIncidentsData, IncidentActions
from schemas.interaction import APIMessageInteractionMetadata, MessageInteractionMetadata
from schemas.scheduled_event import (
    APIGuildScheduledEventRecurrenceRule,
    GuildScheduledEventRecurrenceRule,
    GuildScheduledEventRecurrenceRuleOptions,
)
from schemas.user import APIUser, User
from utils.case import WireEncodable
from utils.timestamps import Instant, format_timestamp, parse_timestamp

if TYPE_CHECKING:
    from services.registry import UserRegistry

M = TypeVar("M", bound=BaseModel)


def _mapping(data: Any, shape: str, field: str = "<root>") -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise MalformedPayloadError(shape, field, f"expected an object, got {type(data).__name__} for")
    return data


def _require(data: Mapping[str, Any], shape: str, field: str) -> Any:
    try:
        return data[field]
    except KeyError:
        raise MalformedPayloadError(shape, field) from None


def _timestamp(data: Mapping[str, Any], shape: str, field: str) -> Optional[datetime]:
    try:
        return parse_timestamp(data.get(field))
    except (ValueError, TypeError) as e:
        raise MalformedPayloadError(shape, field, "invalid timestamp in") from e


def _build(model: type[M], shape: str, **fields: Any) -> M:
    try:
        return model(**fields)
    except ValidationError as e:
        loc = e.errors()[0]["loc"]
        raise MalformedPayloadError(shape, ".".join(str(p) for p in loc), "invalid value for") from e


def transform_api_auto_moderation_action(auto_moderation_action: APIAutoModerationAction) -> AutoModerationAction:
    """Transforms an API auto moderation action object to its internal shape."""
    shape = "auto_moderation_action"
    data = _mapping(auto_moderation_action, shape)
    metadata = _mapping(_require(data, shape, "metadata"), shape, "metadata")
    return _build(
        AutoModerationAction,
        shape,
        type=_require(data, shape, "type"),
        metadata=_build(
            AutoModerationActionMetadata,
            shape,
            duration_seconds=metadata.get("duration_seconds"),
            channel_id=metadata.get("channel_id"),
            custom_message=metadata.get("custom_message"),
        ),
    )


def transform_api_message_interaction_metadata(
    registry: UserRegistry,
    message_interaction_metadata: APIMessageInteractionMetadata,
) -> MessageInteractionMetadata:
    """
    Transforms an API message interaction metadata object to its internal shape.

    The ``user`` fragment goes through ``registry.add``; the triggering interaction,
    when present, is transformed with the same registry. A null or absent
    triggering interaction ends the chain.
    """
    shape = "message_interaction_metadata"
    data = _mapping(message_interaction_metadata, shape)
    interaction_id = _require(data, shape, "id")
    interaction_type = _require(data, shape, "type")
    user_data = _require(data, shape, "user")
    owners = _require(data, shape, "authorizing_integration_owners")
    triggering = data.get("triggering_interaction_metadata")

    user = registry.add(user_data)

    return _build(
        MessageInteractionMetadata,
        shape,
        id=interaction_id,
        type=interaction_type,
        user=user,
        authorizing_integration_owners=owners,
        original_response_message_id=data.get("original_response_message_id"),
        interacted_message_id=data.get("interacted_message_id"),
        triggering_interaction_metadata=(
            transform_api_message_interaction_metadata(registry, triggering) if triggering else None
        ),
    )


def transform_guild_scheduled_event_recurrence_rule(
    recurrence_rule: GuildScheduledEventRecurrenceRuleOptions | WireEncodable,
) -> dict[str, Any]:
    """
    Transforms recurrence rule options to the snake_case wire payload.
    ``startAt`` may be a datetime, an ISO-8601 string or epoch milliseconds.
    """
    shape = "guild_scheduled_event_recurrence_rule"
    if not isinstance(recurrence_rule, Mapping) and isinstance(recurrence_rule, WireEncodable):
        recurrence_rule = recurrence_rule.to_wire()
    data = _mapping(recurrence_rule, shape)
    start_at: Instant = _require(data, shape, "startAt")
    try:
        start = format_timestamp(start_at)
    except (ValueError, TypeError, OverflowError) as e:
        raise MalformedPayloadError(shape, "startAt", "invalid instant in") from e

    return {
        "start": start,
        "frequency": data.get("frequency"),
        "interval": data.get("interval"),
        "by_weekday": data.get("byWeekday"),
        "by_n_weekday": data.get("byNWeekday"),
        "by_month": data.get("byMonth"),
        "by_month_day": data.get("byMonthDay"),
    }


def transform_api_guild_scheduled_event_recurrence_rule(
    recurrence_rule: APIGuildScheduledEventRecurrenceRule,
) -> GuildScheduledEventRecurrenceRule:
    """Transforms an API recurrence rule to its internal shape."""
    shape = "guild_scheduled_event_recurrence_rule"
    data = _mapping(recurrence_rule, shape)
    start_at = _timestamp(data, shape, "start")
    if start_at is None:
        raise MalformedPayloadError(shape, "start")
    return _build(
        GuildScheduledEventRecurrenceRule,
        shape,
        start_at=start_at,
        end_at=_timestamp(data, shape, "end"),
        frequency=_require(data, shape, "frequency"),
        interval=_require(data, shape, "interval"),
        by_weekday=data.get("by_weekday"),
        by_n_weekday=data.get("by_n_weekday"),
        by_month=data.get("by_month"),
        by_month_day=data.get("by_month_day"),
        by_year_day=data.get("by_year_day"),
        count=data.get("count"),
    )


def transform_api_incidents_data(incidents_data: APIIncidentsData) -> IncidentActions:
    """Transforms API incidents data to its internal shape."""
    shape = "incidents_data"
    data = _mapping(incidents_data, shape)
    return _build(
        IncidentActions,
        shape,
        invites_disabled_until=_timestamp(data, shape, "invites_disabled_until"),
        dms_disabled_until=_timestamp(data, shape, "dms_disabled_until"),
        dm_spam_detected_at=_timestamp(data, shape, "dm_spam_detected_at"),
        raid_detected_at=_timestamp(data, shape, "raid_detected_at"),
    )


def transform_collectibles(collectibles: APICollectibles) -> Collectibles:
    """Transforms a collectibles object. No nameplate means ``nameplate=None``, never an empty one."""
    shape = "collectibles"
    data = _mapping(collectibles, shape)
    nameplate = data.get("nameplate")
    if not nameplate:
        return Collectibles(nameplate=None)

    nameplate = _mapping(nameplate, shape, "nameplate")
    return _build(
        Collectibles,
        shape,
        nameplate=_build(
            Nameplate,
            shape,
            sku_id=_require(nameplate, shape, "sku_id"),
            asset=_require(nameplate, shape, "asset"),
            label=_require(nameplate, shape, "label"),
            palette=_require(nameplate, shape, "palette"),
        ),
    )


def transform_api_user(user: APIUser) -> User:
    """Transforms an API user object; collectibles are delegated to transform_collectibles."""
    shape = "user"
    data = _mapping(user, shape)
    collectibles = data.get("collectibles")
    return _build(
        User,
        shape,
        id=_require(data, shape, "id"),
        username=_require(data, shape, "username"),
        discriminator=data.get("discriminator"),
        global_name=data.get("global_name"),
        avatar=data.get("avatar"),
        bot=bool(data.get("bot")),
        system=bool(data.get("system")),
        collectibles=transform_collectibles(collectibles) if collectibles else None,
    )
