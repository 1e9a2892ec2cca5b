"""
Unit and display formatting helpers.

All functions here are pure; the card renderer and the normalizer share them.
"""
import math
from datetime import datetime
from typing import Optional

from constants import METERS_PER_KM, METERS_PER_MILE, PLACEHOLDER


def _finite(value) -> float:
    value = float(value or 0.0)
    return value if math.isfinite(value) else 0.0


def format_duration(seconds) -> str:
    """Seconds to 'H:MM:SS' (one hour or more) or 'M:SS'. Non-finite input counts as 0."""
    total = max(0, int(_finite(seconds)))
    hours = total // 3600
    minutes = (total % 3600) // 60
    secs = total % 60
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_distance(meters, use_metric: bool) -> str:
    """Meters to '1.23 km' or '0.77 mi'."""
    meters = _finite(meters)
    if use_metric:
        return f"{meters / METERS_PER_KM:.2f} km"
    return f"{meters / METERS_PER_MILE:.2f} mi"


def format_card_date(created_at: Optional[datetime], now: Optional[datetime] = None) -> str:
    """
    Medium date + short time in local time, e.g. 'Jan 5, 2025 at 7:04 AM'.

    Walks without a parsed timestamp show the current time.
    """
    dt = created_at or now or datetime.now().astimezone()
    if dt.tzinfo is not None:
        dt = dt.astimezone()
    hour = dt.hour % 12 or 12
    return f"{dt.strftime('%b')} {dt.day}, {dt.year} at {hour}:{dt.minute:02d} {dt.strftime('%p')}"


def card_display_values(walk) -> dict:
    """Resolve the strings a walk card shows, with placeholders for gaps."""
    return {
        'date': format_card_date(walk.created_at),
        'distance': walk.distance or PLACEHOLDER['distance'],
        'duration': walk.duration or PLACEHOLDER['duration'],
        'pace': walk.avg_pace or PLACEHOLDER['pace'],
    }
