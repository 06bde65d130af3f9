from typing import List, Optional
from typing_extensions import TypedDict

from database.models import Message, SessionState


class JournalState(TypedDict):
    """State object for the journal response graph"""

    # Turn input
    client_id: str
    user_text: str
    history: List[Message]

    # Advanced once per turn by the session update node
    session_state: SessionState

    # Output
    response_text: Optional[str]
    response_source: Optional[str]
