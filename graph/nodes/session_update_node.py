from typing import Any, Dict

from ai_services.session_tracker import SessionTracker
from graph.state import JournalState
from utils.logger import logger


class SessionUpdateNode:
    """Node 1: advances the session state machine for the turn"""

    def __init__(self, tracker: SessionTracker):
        self.tracker = tracker

    async def execute(self, state: JournalState) -> Dict[str, Any]:
        client_id = state["client_id"]
        new_state = self.tracker.advance(state["session_state"], state["user_text"])

        logger.debug(
            f"Session advanced to depth {new_state.session_depth}, phase {new_state.phase.value}, "
            f"emotions {[e.value for e in new_state.dominant_emotions]}",
            client_id
        )

        return {"session_state": new_state}
