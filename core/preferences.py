"""User display preferences backed by the settings table."""

from __future__ import annotations

from constants import SETTING


_TRUE_VALUES = {'1', 'true', 'yes', 'on'}


class UserPreferences:
    """Read/write view over unit preferences. Metric is the default."""

    def __init__(self, db, default_metric: bool = True) -> None:
        self.db = db
        self.default_metric = default_metric

    @property
    def use_metric_system(self) -> bool:
        value = self.db.get_setting(SETTING.USE_METRIC_SYSTEM)
        if value is None:
            return self.default_metric
        return str(value).strip().lower() in _TRUE_VALUES

    @use_metric_system.setter
    def use_metric_system(self, enabled: bool) -> None:
        self.db.set_setting(SETTING.USE_METRIC_SYSTEM, 'true' if enabled else 'false')
