"""
models.py
─────────
Typed records for the walk history pipeline.

  • RawActivity / ActivityListResponse: decoded service payload
  • WalkLog: display-ready record, never mutated
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Tuple

from constants import DEFAULT_WALK_TYPE, INDOOR_WALK_TYPES


def _as_float(value, default: Optional[float] = 0.0) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return default
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return default
    return parsed if math.isfinite(parsed) else default


def _as_int(value) -> Optional[int]:
    parsed = _as_float(value, default=None)
    return int(parsed) if parsed is not None else None


def _as_str(value) -> Optional[str]:
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class RawActivity:
    """One activity record as returned by the walks endpoint."""

    id: str
    user_id: str
    created_at: str
    duration: float = 0.0
    distance: float = 0.0
    calories: float = 0.0
    walk_type: Optional[str] = None
    is_indoor_walk: bool = False
    activity_data: Optional[str] = None
    steps: Optional[int] = None
    avg_heart_rate: Optional[float] = None
    elevation_gain: Optional[float] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "RawActivity":
        """
        Decode a service record.

        The id comes from whichever primary key the backend used. A record is
        indoor when the payload flags it or when walkType/activityType names a
        treadmill or indoor walk.
        """
        activity_id = (
            payload.get('activityId')
            or payload.get('walkId')
            or payload.get('id')
            or ''
        )
        walk_type = _as_str(payload.get('walkType'))

        is_indoor = (
            payload.get('isIndoorWalk') is True
            or walk_type in INDOOR_WALK_TYPES
            or _as_str(payload.get('activityType')) in INDOOR_WALK_TYPES
        )

        activity_data = payload.get('activityData')
        if activity_data is not None and not isinstance(activity_data, str):
            activity_data = None

        return cls(
            id=str(activity_id),
            user_id=str(payload.get('userId') or ''),
            created_at=str(payload.get('createdAt') or ''),
            duration=_as_float(payload.get('duration')),
            distance=_as_float(payload.get('distance')),
            calories=_as_float(payload.get('calories')),
            walk_type=walk_type,
            is_indoor_walk=is_indoor,
            activity_data=activity_data,
            steps=_as_int(payload.get('steps')),
            avg_heart_rate=_as_float(payload.get('avgHeartRate'), default=None),
            elevation_gain=_as_float(payload.get('elevationGain'), default=None),
        )


@dataclass(frozen=True)
class ActivityListData:
    activities: List[RawActivity] = field(default_factory=list)
    next_token: Optional[str] = None
    has_more: bool = False


@dataclass(frozen=True)
class ActivityListResponse:
    success: bool
    data: Optional[ActivityListData] = None
    error: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ActivityListResponse":
        data_payload = payload.get('data')
        data = None
        if isinstance(data_payload, dict):
            records = data_payload.get('activities')
            activities = [
                RawActivity.from_dict(record)
                for record in (records if isinstance(records, list) else [])
                if isinstance(record, dict)
            ]
            data = ActivityListData(
                activities=activities,
                next_token=_as_str(data_payload.get('nextToken')),
                has_more=bool(data_payload.get('hasMore', False)),
            )
        return cls(
            success=bool(payload.get('success', False)),
            data=data,
            error=_as_str(payload.get('error')),
        )


@dataclass(frozen=True)
class WalkLog:
    """Display-ready walk. Built once per load and replaced wholesale."""

    id: str
    created_by: str
    created_at: Optional[datetime] = None
    duration: Optional[str] = None
    distance: Optional[str] = None
    calories_burned: Optional[float] = None
    walk_type: str = DEFAULT_WALK_TYPE
    avg_pace: Optional[str] = None
    location_data: Optional[Tuple[Dict[str, Any], ...]] = None
    coordinate_array: Optional[Tuple[Dict[str, float], ...]] = None
    duration_seconds: float = 0.0
    distance_meters: float = 0.0
    steps: Optional[int] = None
    avg_heart_rate: Optional[float] = None
    elevation_gain: Optional[float] = None
