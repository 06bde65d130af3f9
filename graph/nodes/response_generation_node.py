from typing import Any, Dict

from ai_services.crisis_detection import SAFETY_MESSAGE
from ai_services.openrouter_client import OpenRouterClient
from graph.state import JournalState
from utils.logger import logger

SERVICE_FALLBACK = "I apologize, but I encountered an issue processing your request. Please try again."
RESPONSE_FALLBACK = "I'm here to listen and support you. Could you tell me more about how you're feeling?"


class ResponseGenerationNode:
    """Node 2: produces the assistant text for the turn"""

    def __init__(self, chat_client: OpenRouterClient):
        self.chat_client = chat_client

    async def crisis_response(self, state: JournalState) -> Dict[str, Any]:
        """Fixed safety message, the chat service is never contacted"""
        logger.warning("Crisis indicators detected, sending safety message", state["client_id"])
        return {"response_text": SAFETY_MESSAGE, "response_source": "crisis"}

    async def execute(self, state: JournalState) -> Dict[str, Any]:
        """Ask the chat service for a reply, degrading to a fallback string"""
        client_id = state["client_id"]

        try:
            ai_response = await self.chat_client.generate_therapy_response(
                user_message=state["user_text"],
                client_id=client_id,
                conversation_history=state["history"]
            )

            if ai_response['success']:
                return {"response_text": ai_response['response'], "response_source": "model"}

            logger.warning("AI response generation failed, using fallback", client_id)
            return {"response_text": SERVICE_FALLBACK, "response_source": "fallback"}

        except Exception as e:
            logger.error("Error in response generation node", client_id, e)
            return {"response_text": RESPONSE_FALLBACK, "response_source": "fallback"}
