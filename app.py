"""
Walk History
"""

# Standard library imports
import logging

# Third-party imports
from nicegui import ui

# Local imports
from constants import BACKGROUND_GRADIENT, UI_COPY
from db import DatabaseManager
from state import HistoryState, ScreenState
from core.activity_service import ActivityService
from core.data_manager import DataManager
from core.history_loader import HistoryLoader, OverlapPolicy
from core.identity import UserIdResolver
from core.preferences import UserPreferences
from components.walk_history_view import WalkHistoryView


logger = logging.getLogger(__name__)


class MuteFrameworkNoise(logging.Filter):
    def filter(self, record):
        # Filter out the specific NiceGUI warning about event listeners
        return "Event listeners changed after initial definition" not in record.getMessage()


class WalkHistoryScreen:
    """
    Walking history dialog.

    The host opens it with open() and receives the chosen walk through
    `on_walk_selected(walk)`, called at most once. Selecting a walk or
    dismissing the dialog closes the screen and drops any pending load.
    """

    def __init__(
        self,
        activity_service,
        identity_resolver,
        preferences,
        on_walk_selected=None,
        overlap_policy=OverlapPolicy.CANCEL_AND_REPLACE,
        clear_on_failure=True,
    ):
        self.on_walk_selected = on_walk_selected
        self.preferences = preferences

        self.state = HistoryState(ScreenState(loading=True))
        self.data_manager = DataManager()
        self.loader = HistoryLoader(
            state=self.state,
            activity_service=activity_service,
            identity_resolver=identity_resolver,
            preferences=preferences,
            overlap_policy=overlap_policy,
            clear_on_failure=clear_on_failure,
        )
        self.view = WalkHistoryView(
            data_manager=self.data_manager,
            on_select=self.select_walk,
            use_metric_cb=lambda: self.preferences.use_metric_system,
        )
        self._unsubscribe = self.state.subscribe(self.view.render)

        self.dialog = None
        self.closed = False
        self._selection_sent = False

    def build(self):
        """Build the dialog shell: title bar with close button, view body."""
        self.dialog = ui.dialog().props('maximized transition-show=slide-up transition-hide=slide-down')
        self.dialog.on('hide', lambda: self.dismiss())
        with self.dialog, ui.card().classes('w-full h-full p-0 gap-0').style(
            f'background: {BACKGROUND_GRADIENT}; box-shadow: none;'
        ):
            with ui.row().classes('w-full items-center gap-2 p-3'):
                ui.button(icon='close', on_click=self.dismiss, color=None).props(
                    'flat round dense'
                ).style('color: #9ca3af !important;')
                ui.label(UI_COPY['screen_title']).classes('text-lg font-bold text-white')
            self.view.build()
        return self

    def open(self):
        """Show the dialog and start loading. Returns the load task."""
        if self.closed:
            return None
        if self.dialog is None:
            self.build()
        self.view.render(self.state.screen)
        self.dialog.open()
        return self.loader.reload()

    def reload(self):
        return self.loader.reload()

    def select_walk(self, walk):
        if self.closed or self._selection_sent:
            return
        self._selection_sent = True
        if self.on_walk_selected is not None:
            self.on_walk_selected(walk)
        self.dismiss()

    def dismiss(self):
        if self.closed:
            return
        self.closed = True
        self.loader.close()
        self._unsubscribe()
        if self.dialog is not None:
            self.dialog.close()
            self.dialog.delete()
            self.dialog = None


class WalkHistoryApp:
    """Minimal host: one button that opens the walk history screen."""

    def __init__(self, db_path='walk_history.db'):
        self.db = DatabaseManager(db_path)
        self.preferences = UserPreferences(self.db)
        self.identity_resolver = UserIdResolver(self.db)
        self.activity_service = ActivityService(db=self.db)
        self.build_ui()

    def build_ui(self):
        ui.query('body').style(f'background: {BACKGROUND_GRADIENT};')
        with ui.column().classes('w-full items-center p-8 gap-4'):
            ui.button(UI_COPY['screen_title'], icon='directions_walk', on_click=self.open_history).props(
                'no-caps'
            ).classes('bg-zinc-800 text-white')

    def open_history(self):
        screen = WalkHistoryScreen(
            activity_service=self.activity_service,
            identity_resolver=self.identity_resolver,
            preferences=self.preferences,
            on_walk_selected=self.on_walk_selected,
        )
        screen.open()

    def on_walk_selected(self, walk):
        logger.info("Walk selected: %s", walk.id)
        ui.notify(f'{walk.distance} · {walk.duration}', type='positive')


def main():
    """Application entry point."""
    logging.basicConfig(level=logging.INFO)
    # Suppress known NiceGUI framework listener-churn warning noise
    nicegui_logger = logging.getLogger('nicegui')
    nicegui_logger.addFilter(MuteFrameworkNoise())

    WalkHistoryApp()

    try:
        ui.run(
            title=UI_COPY['screen_title'],
            reload=False,
            dark=True,
        )
    except KeyboardInterrupt:
        # Graceful terminal interrupt during local development.
        pass


if __name__ in {"__main__", "__mp_main__"}:
    main()
