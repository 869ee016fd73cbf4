"""Per-kind list ordering and grouping rules."""

from datetime import datetime
from typing import Any, Dict, List

Row = Dict[str, Any]


def order_media(rows: List[Row]) -> List[Row]:
    """Oldest upload first."""
    return sorted(rows, key=lambda row: row["createdAt"])


def order_profiles(rows: List[Row]) -> List[Row]:
    """First name descending, then last name descending."""
    return sorted(rows, key=lambda row: (row["firstName"], row["lastName"]), reverse=True)


def order_calendar(rows: List[Row], now: datetime) -> List[Row]:
    """Upcoming events (latest date first) followed by past events (oldest first)."""
    future = [row for row in rows if row["date"] >= now]
    past = [row for row in rows if row["date"] < now]
    future.sort(key=lambda row: row["date"], reverse=True)
    past.sort(key=lambda row: row["date"])
    return future + past


def order_reports(rows: List[Row]) -> List[Row]:
    return sorted(rows, key=lambda row: row["quarter"])


def order_newsletters(rows: List[Row]) -> List[Row]:
    return sorted(rows, key=lambda row: row["month"], reverse=True)


def distinct_event_names(rows: List[Row]) -> List[str]:
    """Each event name once, the event with the most recent upload first."""
    names: List[str] = []
    for row in sorted(rows, key=lambda row: row["createdAt"], reverse=True):
        if row["eventName"] not in names:
            names.append(row["eventName"])
    return names


def distinct_years(rows: List[Row]) -> List[int]:
    return sorted({row["year"] for row in rows}, reverse=True)
