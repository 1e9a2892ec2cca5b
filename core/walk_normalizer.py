"""Raw walk activity → WalkLog transformation."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from numbers import Real
from typing import Iterable, List, Optional

from constants import DEFAULT_WALK_TYPE
from formatting import format_distance, format_duration
from models import RawActivity, WalkLog


logger = logging.getLogger(__name__)

# Internet date-time, with then without fractional seconds. An offset or 'Z'
# is required in both.
CREATED_AT_FORMATS = (
    '%Y-%m-%dT%H:%M:%S.%f%z',
    '%Y-%m-%dT%H:%M:%S%z',
)


@dataclass(frozen=True)
class ActivityDetail:
    """Fields extracted from the activityData sub-document, each independent."""

    avg_pace: Optional[str] = None
    location_data: Optional[tuple] = None
    coordinate_array: Optional[tuple] = None


def parse_created_at(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    for fmt in CREATED_AT_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def parse_activity_detail(activity_data: Optional[str], activity_id: str = '') -> ActivityDetail:
    """
    Extract pace and route fields from the embedded JSON string.

    A field with the wrong shape is skipped on its own. An unparseable
    payload is logged and yields an empty detail.
    """
    if not activity_data:
        return ActivityDetail()

    try:
        payload = json.loads(activity_data)
    except (ValueError, RecursionError) as e:
        logger.warning("Error parsing activityData for walk %s: %s", activity_id, e)
        return ActivityDetail()

    if not isinstance(payload, dict):
        return ActivityDetail()

    avg_pace = payload.get('averagePace')
    if not isinstance(avg_pace, str):
        avg_pace = None

    location_data = payload.get('locationData')
    if isinstance(location_data, list) and all(isinstance(item, dict) for item in location_data):
        location_data = tuple(location_data)
    else:
        location_data = None

    coordinate_array = payload.get('coordinateArray')
    if isinstance(coordinate_array, list) and all(
        isinstance(item, dict) and all(_is_number(v) for v in item.values())
        for item in coordinate_array
    ):
        coordinate_array = tuple(
            {key: float(v) for key, v in item.items()} for item in coordinate_array
        )
    else:
        coordinate_array = None

    return ActivityDetail(
        avg_pace=avg_pace,
        location_data=location_data,
        coordinate_array=coordinate_array,
    )


def normalize_activity(raw: RawActivity, use_metric: bool) -> Optional[WalkLog]:
    """Build the WalkLog for one record, or None for indoor walks."""
    if raw.is_indoor_walk:
        return None

    detail = parse_activity_detail(raw.activity_data, raw.id)

    return WalkLog(
        id=raw.id,
        created_by=raw.user_id,
        created_at=parse_created_at(raw.created_at),
        duration=format_duration(raw.duration),
        distance=format_distance(raw.distance, use_metric),
        calories_burned=raw.calories,
        walk_type=raw.walk_type or DEFAULT_WALK_TYPE,
        avg_pace=detail.avg_pace,
        location_data=detail.location_data,
        coordinate_array=detail.coordinate_array,
        duration_seconds=raw.duration,
        distance_meters=raw.distance,
        steps=raw.steps,
        avg_heart_rate=raw.avg_heart_rate,
        elevation_gain=raw.elevation_gain,
    )


def normalize_activities(activities: Iterable[RawActivity], use_metric: bool) -> List[WalkLog]:
    """Normalize a batch in response order, dropping omitted records."""
    logs = []
    for raw in activities:
        walk = normalize_activity(raw, use_metric)
        if walk is not None:
            logs.append(walk)
    return logs
