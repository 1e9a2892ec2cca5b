"""User id resolution for activity API calls."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from constants import SETTING


logger = logging.getLogger(__name__)


class UserIdResolver:
    """
    Picks the user id the activity API should be queried with.

    Priority:
      1. legacy Parse user id (older walks are stored under it)
      2. id of the signed-in user, via `current_user_id_cb`
      3. Cognito id cached in the settings table
    """

    def __init__(self, db, current_user_id_cb: Optional[Callable[[], Optional[str]]] = None) -> None:
        self.db = db
        self.current_user_id_cb = current_user_id_cb

    def get_best_user_id_for_api(self) -> Optional[str]:
        parse_user_id = self.db.get_setting(SETTING.PARSE_USER_ID)
        if parse_user_id:
            logger.debug("Using Parse user id %s", parse_user_id)
            return parse_user_id

        if self.current_user_id_cb is not None:
            current_user_id = self.current_user_id_cb()
            if current_user_id:
                logger.debug("Using current user id %s", current_user_id)
                return current_user_id

        cognito_user_id = self.db.get_setting(SETTING.COGNITO_USER_ID)
        if cognito_user_id:
            logger.debug("Using cached Cognito user id %s", cognito_user_id)
            return cognito_user_id

        logger.warning("No user id available for activity API")
        return None
