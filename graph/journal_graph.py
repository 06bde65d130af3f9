from typing import List, Optional, Tuple

from langgraph.graph import END, StateGraph

from ai_services.openrouter_client import OpenRouterClient
from ai_services.session_tracker import SessionTracker
from database.models import Message, SessionState
from graph.nodes.response_generation_node import ResponseGenerationNode
from graph.nodes.session_update_node import SessionUpdateNode
from graph.state import JournalState
from utils.logger import logger

GREETING_FALLBACK = (
    "Hello, I'm your AI Therapy Assistant. I'm here to listen and support you. "
    "How are you feeling today?"
)


class JournalGraph:
    """Response orchestrator built as a LangGraph state graph.

    session_update always runs first; its result decides whether the turn
    goes to the fixed crisis reply or to the chat service.
    """

    def __init__(self, tracker: SessionTracker, chat_client: OpenRouterClient):
        self.chat_client = chat_client
        self.session_update_node = SessionUpdateNode(tracker)
        self.response_generation_node = ResponseGenerationNode(chat_client)
        self.graph = self._build_graph()

    def _build_graph(self):
        """Build the journal response graph"""

        workflow = StateGraph(JournalState)

        workflow.add_node("session_update", self.session_update_node.execute)
        workflow.add_node("crisis_response", self.response_generation_node.crisis_response)
        workflow.add_node("response_generation", self.response_generation_node.execute)

        workflow.set_entry_point("session_update")
        workflow.add_conditional_edges(
            "session_update",
            self._route_after_update,
            {"crisis": "crisis_response", "respond": "response_generation"}
        )
        workflow.add_edge("crisis_response", END)
        workflow.add_edge("response_generation", END)

        return workflow.compile()

    def _route_after_update(self, state: JournalState) -> str:
        return "crisis" if state["session_state"].crisis_detected else "respond"

    async def respond(self, user_text: str, session_state: SessionState,
                      history: Optional[List[Message]] = None,
                      client_id: str = "local") -> Tuple[str, SessionState]:
        """Run one turn and return the reply text with the advanced session state"""

        initial_state = JournalState(
            client_id=client_id,
            user_text=user_text,
            history=list(history or []),
            session_state=session_state,
            response_text=None,
            response_source=None,
        )

        logger.debug("Processing entry through journal graph", client_id)
        result = await self.graph.ainvoke(initial_state)

        logger.info(f"Response ready (source: {result.get('response_source')})", client_id)
        return result["response_text"], result["session_state"]

    async def greet(self, client_id: str = "local") -> str:
        """Opening message from the chat service, or the fixed greeting"""
        try:
            ai_response = await self.chat_client.generate_greeting(client_id)
            if ai_response['success']:
                return ai_response['response']
        except Exception as e:
            logger.error("Error getting initial greeting", client_id, e)

        return GREETING_FALLBACK
