"""
components/walk_card.py
───────────────────────
Walk history card renderer.

Standalone NiceGUI card with callback injection; no state imports.
"""
from nicegui import ui

from constants import UI_COPY
from formatting import card_display_values


def _metric(icon, value, label):
    with ui.column().classes('gap-1'):
        with ui.row().classes('items-center gap-1 no-wrap'):
            ui.icon(icon, size='12px').classes('text-zinc-400')
            ui.label(value).classes('text-sm font-semibold text-white tabular-nums')
        ui.label(label).classes('text-xs text-zinc-400')


def create_walk_card(walk, *, on_select=None):
    """
    Render one walk card.

    `on_select(walk)` fires when the card is clicked.
    """
    values = card_display_values(walk)

    card = ui.card().classes(
        'w-full p-4 cursor-pointer rounded-xl interactive-card'
    ).style(
        'background: rgba(255, 255, 255, 0.1); box-shadow: none; max-width: 720px; margin: 0 auto;'
    )

    if on_select:
        card.on('click', lambda w=walk: on_select(w))

    with card:
        with ui.column().classes('w-full gap-3'):
            with ui.row().classes('w-full items-center justify-between no-wrap'):
                with ui.column().classes('gap-1'):
                    ui.label(UI_COPY['card_title']).classes('font-bold text-white')
                    ui.label(values['date']).classes('text-xs text-zinc-400')
                ui.icon('chevron_right').classes('text-zinc-400')

            with ui.row().classes('items-start gap-5'):
                _metric('directions_walk', values['distance'], UI_COPY['metric_distance'])
                _metric('schedule', values['duration'], UI_COPY['metric_duration'])
                _metric('timer', values['pace'], UI_COPY['metric_pace'])

    return card
