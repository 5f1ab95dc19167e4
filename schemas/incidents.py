from datetime import datetime
from typing import Optional, TypedDict

from schemas.base import WireModel


class APIIncidentsData(TypedDict, total=False):
    invites_disabled_until: Optional[str]
    dms_disabled_until: Optional[str]
    dm_spam_detected_at: Optional[str]
    raid_detected_at: Optional[str]


class IncidentActions(WireModel):
    """Anti-raid state of a guild. Every instant is None when not in effect."""

    invites_disabled_until: Optional[datetime]
    dms_disabled_until: Optional[datetime]
    dm_spam_detected_at: Optional[datetime]
    raid_detected_at: Optional[datetime]
