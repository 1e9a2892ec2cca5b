"""Aggregate view over the walks currently on screen."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from formatting import format_distance, format_duration


@dataclass(frozen=True)
class HistorySummary:
    walk_count: int
    total_distance: str
    total_duration: str
    total_calories: int


class DataManager:
    """Owns the DataFrame cache built from the current WalkLog list."""

    def __init__(self):
        self.df = None
        self.walk_logs = ()

    def set_walk_logs(self, walk_logs):
        """Replace the in-memory walks and rebuild the DataFrame cache."""
        self.walk_logs = tuple(walk_logs or ())
        if self.walk_logs:
            self.df = pd.DataFrame(
                {
                    'id': [w.id for w in self.walk_logs],
                    'distance_m': [w.distance_meters for w in self.walk_logs],
                    'duration_s': [w.duration_seconds for w in self.walk_logs],
                    'calories': [w.calories_burned for w in self.walk_logs],
                }
            )
        else:
            self.df = None
        return self.df

    def summarize(self, use_metric: bool) -> HistorySummary:
        if self.df is None or self.df.empty:
            return HistorySummary(
                walk_count=0,
                total_distance=format_distance(0, use_metric),
                total_duration=format_duration(0),
                total_calories=0,
            )

        return HistorySummary(
            walk_count=len(self.df),
            total_distance=format_distance(self.df['distance_m'].sum(), use_metric),
            total_duration=format_duration(self.df['duration_s'].sum()),
            total_calories=int(round(self.df['calories'].fillna(0).sum())),
        )
