"""Walk history load cycle: identity → fetch → normalize → state."""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Optional

import httpx

from constants import HISTORY_PAGE_SIZE
from core.activity_service import ActivityServiceError
from core.walk_normalizer import normalize_activities
from state import HistoryState, ScreenState


logger = logging.getLogger(__name__)


class LoadPhase(str, Enum):
    IDLE = "idle"
    RESOLVING = "resolving"
    FETCHING = "fetching"
    NORMALIZING = "normalizing"
    READY = "ready"


class OverlapPolicy(str, Enum):
    CANCEL_AND_REPLACE = "cancel_and_replace"
    IGNORE_WHILE_IN_FLIGHT = "ignore_while_in_flight"


class HistoryLoader:
    """
    Runs one load cycle per screen open and publishes into `state`.

    Collaborators are injected:
      • activity_service: `await get_walks(user_id, limit)`
      • identity_resolver: `get_best_user_id_for_api()`
      • preferences: `use_metric_system`, read once per batch

    Only the newest cycle may publish; a cycle that was superseded or that
    finishes after close() is dropped silently.
    """

    def __init__(
        self,
        state: HistoryState,
        activity_service,
        identity_resolver,
        preferences,
        page_size: int = HISTORY_PAGE_SIZE,
        overlap_policy: OverlapPolicy = OverlapPolicy.CANCEL_AND_REPLACE,
        clear_on_failure: bool = True,
    ) -> None:
        self.state = state
        self.activity_service = activity_service
        self.identity_resolver = identity_resolver
        self.preferences = preferences
        self.page_size = max(1, int(page_size))
        self.overlap_policy = OverlapPolicy(overlap_policy)
        self.clear_on_failure = clear_on_failure

        self.phase = LoadPhase.IDLE
        self._generation = 0
        self._task: Optional[asyncio.Task] = None
        self._closed = False

    @property
    def in_flight(self) -> bool:
        return self._task is not None and not self._task.done()

    def reload(self) -> Optional[asyncio.Task]:
        """Schedule a load cycle on the running loop, honoring the overlap policy."""
        if self._closed:
            return None

        if self.in_flight:
            if self.overlap_policy is OverlapPolicy.IGNORE_WHILE_IN_FLIGHT:
                logger.debug("Walk history load already in flight; ignoring reload")
                return self._task
            self._task.cancel()

        self._task = asyncio.create_task(self.load_history())
        return self._task

    def close(self) -> None:
        """Drop any pending cycle; later responses are discarded."""
        self._closed = True
        self._generation += 1
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()

    def _publish(self, generation: int, logs, loading: bool) -> bool:
        if self._closed or generation != self._generation:
            return False
        self.state.replace(ScreenState.of(logs, loading))
        return True

    def _set_phase(self, phase: LoadPhase) -> None:
        self.phase = phase
        logger.debug("Walk history phase: %s", phase.value)

    async def load_history(self) -> None:
        self._generation += 1
        generation = self._generation
        previous_logs = self.state.logs

        self._publish(generation, previous_logs, True)

        self._set_phase(LoadPhase.RESOLVING)
        try:
            user_id = self.identity_resolver.get_best_user_id_for_api()
        except Exception:
            logger.exception("Error resolving user id for walk history")
            self._set_phase(LoadPhase.READY)
            self._publish(generation, (), False)
            return

        if not user_id:
            self._set_phase(LoadPhase.READY)
            self._publish(generation, previous_logs, False)
            return

        self._set_phase(LoadPhase.FETCHING)
        try:
            response = await self.activity_service.get_walks(user_id, limit=self.page_size)
        except (ActivityServiceError, httpx.HTTPError) as e:
            if generation != self._generation:
                return
            logger.error("Error loading walk history: %s", e)
            self._set_phase(LoadPhase.READY)
            logs = () if self.clear_on_failure else previous_logs
            self._publish(generation, logs, False)
            return

        if self._closed or generation != self._generation:
            return

        activities = response.data.activities if response.data else []
        if not activities:
            self._set_phase(LoadPhase.READY)
            self._publish(generation, (), False)
            return

        self._set_phase(LoadPhase.NORMALIZING)
        try:
            use_metric = bool(self.preferences.use_metric_system)
            logs = normalize_activities(activities, use_metric)
        except Exception:
            logger.exception("Error normalizing walk history")
            logs = ()

        self._set_phase(LoadPhase.READY)
        self._publish(generation, logs, False)
