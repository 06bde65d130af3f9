import asyncio
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional

from openai import OpenAI

from config import Config
from database.models import Message, MessageRole
from utils.logger import logger

THERAPY_SYSTEM_PROMPT = """You are an AI Therapy Assistant designed to provide supportive, empathetic responses.
Your goal is to help users explore their thoughts and feelings in a safe space.

Guidelines:
- Respond with empathy and without judgment
- Ask thoughtful follow-up questions to encourage reflection
- Provide evidence-based insights when appropriate
- Recognize emotional states and respond accordingly
- Suggest coping strategies and resources when helpful
- Never diagnose medical or psychological conditions
- Maintain a warm, supportive tone throughout the conversation
- If the user is in crisis, encourage them to seek professional help

Remember that your purpose is to support the user's emotional wellbeing through conversation,
not to replace professional mental health care."""

GREETING_REQUEST = "Hello, I would like to start a therapy session."


class OpenRouterClient:
    """OpenRouter chat-completion client for the journal bot"""

    def __init__(self, config: Config, client: Optional[Any] = None):
        self.config = config
        self.client = client
        if self.client is None and config.openrouter_api_key:
            self.client = OpenAI(
                base_url=config.openrouter_base_url,
                api_key=config.openrouter_api_key,
                timeout=config.ai_timeout,
            )
        self.executor = ThreadPoolExecutor(max_workers=5)

    async def _run_in_executor(self, func, *args):
        """Run AI request in thread pool to avoid blocking"""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self.executor, func, *args)

    def _create_chat_messages(self, user_message: str,
                              conversation_history: List[Message] = None) -> List[Dict[str, str]]:
        """Create messages array for chat completion"""

        messages = [{"role": "system", "content": THERAPY_SYSTEM_PROMPT}]

        # Add recent conversation history if available
        if conversation_history:
            for msg in conversation_history[-self.config.history_window:]:
                messages.append({
                    "role": "user" if msg.role == MessageRole.USER else "assistant",
                    "content": msg.text
                })

        # Add current user message
        messages.append({"role": "user", "content": user_message})

        return messages

    def _complete(self, messages: List[Dict[str, str]], client_id: str = None) -> Dict[str, Any]:
        """Blocking chat completion; never raises"""

        if self.client is None:
            logger.warning("OpenRouter API key not configured, skipping request", client_id)
            return {
                "success": False,
                "error": "API key not found. Please set the OPENROUTER_API_KEY environment variable.",
                "response": None
            }

        try:
            start_time = time.time()
            completion = self.client.chat.completions.create(
                extra_headers={
                    "HTTP-Referer": self.config.site_url,
                    "X-Title": self.config.site_name,
                },
                model=self.config.ai_model,
                messages=messages,
                temperature=self.config.ai_temperature,
                max_tokens=self.config.ai_max_tokens,
            )
            response_time = time.time() - start_time

            if not completion.choices:
                raise ValueError("No response from the model")

            response_text = completion.choices[0].message.content
            if not isinstance(response_text, str):
                raise ValueError("Malformed response from the model")

            usage = getattr(completion, 'usage', None)
            total_tokens = usage.total_tokens if usage else None

            logger.log_ai_request(client_id, self.config.ai_model, total_tokens)
            logger.info(f"AI response generated in {response_time:.2f}s", client_id)

            return {
                "success": True,
                "response": response_text,
                "tokens_used": total_tokens,
                "response_time": response_time,
                "model_used": self.config.ai_model
            }

        except Exception as e:
            logger.error("OpenRouter API error", client_id, e)
            return {
                "success": False,
                "error": str(e),
                "response": None
            }

    async def generate_therapy_response(self, user_message: str, client_id: str = None,
                                        conversation_history: List[Message] = None) -> Dict[str, Any]:
        """Generate a reply to the current entry given the recent history"""
        messages = self._create_chat_messages(user_message, conversation_history)
        return await self._run_in_executor(self._complete, messages, client_id)

    async def generate_greeting(self, client_id: str = None) -> Dict[str, Any]:
        """Ask the model for an opening message"""
        messages = self._create_chat_messages(GREETING_REQUEST)
        return await self._run_in_executor(self._complete, messages, client_id)

    def close(self):
        """Close the client and cleanup resources"""
        self.executor.shutdown(wait=False, cancel_futures=True)
        logger.info("OpenRouter client closed")
