"""
components/walk_history_view.py
───────────────────────────────
Declarative body of the walk history dialog.

Owns:
  • choosing between loading / empty / list for a ScreenState
  • the summary strip and the card column

Does not own:
  • loading data or any mutable state beyond element handles
  • what happens on selection (injected `on_select`)
"""
from __future__ import annotations

from enum import Enum

from nicegui import ui

from components.walk_card import create_walk_card
from constants import ACCENT_COLOR, UI_COPY


class ViewMode(str, Enum):
    LOADING = "loading"
    EMPTY = "empty"
    LIST = "list"


def resolve_view_mode(screen_state) -> ViewMode:
    """Loading wins over everything, then an empty list, then the cards."""
    if screen_state.loading:
        return ViewMode.LOADING
    if not screen_state.logs:
        return ViewMode.EMPTY
    return ViewMode.LIST


class WalkHistoryView:
    """Renders a ScreenState into a container; re-render replaces the content."""

    def __init__(self, data_manager, on_select=None, use_metric_cb=None):
        self.data_manager = data_manager
        self.on_select = on_select
        self.use_metric_cb = use_metric_cb
        self.container = None
        self.mode = None

    def build(self):
        self.container = ui.column().classes('w-full h-full items-center justify-center gap-3')
        return self

    def render(self, screen_state):
        self.mode = resolve_view_mode(screen_state)
        if self.container is None:
            return
        self.container.clear()
        with self.container:
            if self.mode is ViewMode.LOADING:
                ui.spinner(size='lg', color=ACCENT_COLOR)
            elif self.mode is ViewMode.EMPTY:
                self._render_empty()
            else:
                self._render_list(screen_state.logs)

    def _render_empty(self):
        with ui.column().classes('items-center gap-4 px-6 text-center'):
            ui.icon('directions_walk', size='64px').classes('text-zinc-500')
            ui.label(UI_COPY['empty_title']).classes('text-xl font-semibold text-white')
            ui.label(UI_COPY['empty_body']).classes('text-zinc-400')

    def _render_summary(self, logs):
        self.data_manager.set_walk_logs(logs)
        use_metric = self.use_metric_cb() if self.use_metric_cb else True
        summary = self.data_manager.summarize(use_metric)
        items = [
            (UI_COPY['summary_walks'], str(summary.walk_count)),
            (UI_COPY['summary_distance'], summary.total_distance),
            (UI_COPY['summary_duration'], summary.total_duration),
            (UI_COPY['summary_calories'], str(summary.total_calories)),
        ]
        with ui.row().classes('w-full justify-between px-2').style('max-width: 720px; margin: 0 auto;'):
            for label, value in items:
                with ui.column().classes('gap-0'):
                    ui.label(label).classes('text-[10px] font-bold tracking-wider text-zinc-500')
                    ui.label(value).classes('text-lg font-bold text-white leading-none tabular-nums')

    def _render_list(self, logs):
        with ui.scroll_area().classes('w-full h-full'):
            with ui.column().classes('w-full gap-3 p-4'):
                self._render_summary(logs)
                for walk in logs:
                    create_walk_card(walk, on_select=self.on_select)
