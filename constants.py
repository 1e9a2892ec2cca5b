"""
constants.py
────────────
Shared constants for the walk history screen.

Runtime overrides (walks URL, unit preference, cached user ids) live in the
settings table, see db.py.
"""

# ── Activity service ──────────────────────────────────────────────────────
DEFAULT_GET_WALKS_URL = "https://2xdutbwfzxzwkwqgf3eak3qazq0uophi.lambda-url.us-east-1.on.aws/"
HISTORY_PAGE_SIZE = 100
REQUEST_TIMEOUT_SEC = 30.0

# ── Settings keys ─────────────────────────────────────────────────────────
class SETTING:
    GET_WALKS_URL = "get_walks_url"
    USE_METRIC_SYSTEM = "use_metric_system"
    PARSE_USER_ID = "parse_user_id"
    COGNITO_USER_ID = "cognito_user_id"


# ── Walk classification ───────────────────────────────────────────────────
DEFAULT_WALK_TYPE = "outdoorWalk"
INDOOR_WALK_TYPES = frozenset({"treadmillWalk", "indoorWalk"})

# ── Units ─────────────────────────────────────────────────────────────────
METERS_PER_KM = 1000.0
METERS_PER_MILE = 1609.34

# Card fallbacks for missing fields
PLACEHOLDER = {
    'duration': '--:--',
    'distance': '0.0 km',
    'pace': '--:--',
}

# ── UI copy ───────────────────────────────────────────────────────────────
UI_COPY = {
    'screen_title': 'Walking History',
    'card_title': 'Walk',
    'empty_title': 'No Walking Workouts',
    'empty_body': 'Start tracking your walking workouts to see them here',
    'metric_distance': 'Distance',
    'metric_duration': 'Duration',
    'metric_pace': 'Pace',
    'summary_walks': 'WALKS',
    'summary_distance': 'DISTANCE',
    'summary_duration': 'TIME',
    'summary_calories': 'CALORIES',
}

BACKGROUND_GRADIENT = "linear-gradient(135deg, #0F0F23 0%, #16213E 50%, #1A1A2E 100%)"
ACCENT_COLOR = 'orange'
