from datetime import datetime
from typing import Any, Optional, TypedDict

from schemas.base import WireModel


class APIGuildScheduledEventRecurrenceRuleNWeekday(TypedDict):
    n: int
    day: int


class APIGuildScheduledEventRecurrenceRule(TypedDict):
    start: str
    end: Optional[str]
    frequency: int
    interval: int
    by_weekday: Optional[list[int]]
    by_n_weekday: Optional[list[APIGuildScheduledEventRecurrenceRuleNWeekday]]
    by_month: Optional[list[int]]
    by_month_day: Optional[list[int]]
    by_year_day: Optional[list[int]]
    count: Optional[int]


class GuildScheduledEventRecurrenceRuleOptions(TypedDict, total=False):
    """Outbound options as application code writes them (camelCase keys)."""

    startAt: Any
    frequency: int
    interval: int
    byWeekday: Optional[list[int]]
    byNWeekday: Optional[list[APIGuildScheduledEventRecurrenceRuleNWeekday]]
    byMonth: Optional[list[int]]
    byMonthDay: Optional[list[int]]


class GuildScheduledEventRecurrenceRule(WireModel):
    start_at: datetime
    end_at: Optional[datetime]
    frequency: int
    interval: int
    by_weekday: Optional[list[int]]
    by_n_weekday: Optional[list[dict[str, int]]]
    by_month: Optional[list[int]]
    by_month_day: Optional[list[int]]
    by_year_day: Optional[list[int]]
    count: Optional[int]
