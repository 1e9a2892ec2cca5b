import tempfile
import unittest
from pathlib import Path

from constants import SETTING
from core.identity import UserIdResolver
from core.preferences import UserPreferences
from db import DatabaseManager


class SettingsTests(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.db = DatabaseManager(str(Path(self.temp_dir.name) / "test.db"))

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_setting_round_trip_and_overwrite(self):
        self.assertIsNone(self.db.get_setting("missing"))
        self.assertEqual(self.db.get_setting("missing", "x"), "x")
        self.db.set_setting("k", "v1")
        self.db.set_setting("k", "v2")
        self.assertEqual(self.db.get_setting("k"), "v2")

    def test_metric_preference(self):
        prefs = UserPreferences(self.db)
        self.assertTrue(prefs.use_metric_system)
        prefs.use_metric_system = False
        self.assertFalse(UserPreferences(self.db).use_metric_system)
        self.db.set_setting(SETTING.USE_METRIC_SYSTEM, "1")
        self.assertTrue(prefs.use_metric_system)

    def test_default_can_be_imperial(self):
        self.assertFalse(UserPreferences(self.db, default_metric=False).use_metric_system)

    def test_user_id_priority(self):
        current = {"id": None}
        resolver = UserIdResolver(self.db, current_user_id_cb=lambda: current["id"])

        with self.assertLogs('core.identity', level='WARNING'):
            self.assertIsNone(resolver.get_best_user_id_for_api())

        self.db.set_setting(SETTING.COGNITO_USER_ID, "cognito-1")
        self.assertEqual(resolver.get_best_user_id_for_api(), "cognito-1")

        current["id"] = "session-1"
        self.assertEqual(resolver.get_best_user_id_for_api(), "session-1")

        self.db.set_setting(SETTING.PARSE_USER_ID, "parse-1")
        self.assertEqual(resolver.get_best_user_id_for_api(), "parse-1")


if __name__ == "__main__":
    unittest.main()
