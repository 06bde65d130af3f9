import asyncio
from typing import Dict, List, Optional

from ai_services.crisis_detection import detect_crisis_phrases, get_crisis_response
from ai_services.emotion_tracker import format_mood_summary
from ai_services.profile_updater import ProfileUpdater
from ai_services.resource_selector import ResourceSelector
from ai_services.session_tracker import SessionTracker
from config import Config
from database.models import (
    AnalysisSnapshot, EmotionEntry, JournalReply, Message, MessageRole, TimeRange
)
from database.mongodb import ClientStateStore
from graph.journal_graph import JournalGraph
from utils.logger import logger

TURN_FAILURE_MESSAGE = "I'm having trouble processing that right now. Could you try expressing that in a different way?"


class JournalManager:
    """Conversation bookkeeping for each client.

    A turn loads the client's records, runs the response graph, waits out the
    typing delay and then commits conversation, session state and mood
    history in one shielded store call. Each client has at most one pending
    turn. Cancelling it before the commit discards the result; once the commit
    has started all three records are written together.
    """

    def __init__(self, config: Config, store: ClientStateStore, graph: JournalGraph,
                 tracker: SessionTracker, resource_selector: ResourceSelector,
                 profile_updater: Optional[ProfileUpdater] = None, sleep=asyncio.sleep):
        self.config = config
        self.store = store
        self.graph = graph
        self.tracker = tracker
        self.resource_selector = resource_selector
        self.profile_updater = profile_updater or tracker.profile_updater
        self.sleep = sleep
        self.pending_turns: Dict[str, asyncio.Task] = {}
        self.pending_commits: Dict[str, asyncio.Future] = {}

    def calculate_typing_delay(self, text: str) -> float:
        """Seconds to show the typing indicator, sized to the reply length"""
        word_count = len(text.split())
        reading_time = word_count / self.config.typing_words_per_minute * 60
        return min(max(self.config.typing_delay_min, reading_time), self.config.typing_delay_max)

    def has_pending_turn(self, client_id: str) -> bool:
        task = self.pending_turns.get(client_id)
        return task is not None and not task.done()

    def cancel_pending(self, client_id: str) -> bool:
        """Cancel the client's in-flight turn, if any"""
        task = self.pending_turns.pop(client_id, None)
        if task is None or task.done():
            return False

        task.cancel()
        logger.info("Pending turn cancelled", client_id)
        return True

    async def wait_for_commit(self, client_id: str):
        """Wait until a turn commit already under way has been written"""
        commit = self.pending_commits.get(client_id)
        if commit is not None:
            await asyncio.wait({commit})

    async def cancel_all(self):
        tasks = [task for task in self.pending_turns.values() if not task.done()]
        for task in tasks:
            task.cancel()
        self.pending_turns.clear()
        if tasks:
            await asyncio.wait(tasks)

        commits = [commit for commit in self.pending_commits.values() if not commit.done()]
        if commits:
            await asyncio.wait(commits)

    async def add_user_message(self, client_id: str, text: str) -> Optional[JournalReply]:
        """Run one turn; returns None for blank input or a cancelled turn"""
        if not text or not text.strip():
            return None

        self.cancel_pending(client_id)
        task = asyncio.create_task(self._process_turn(client_id, text))
        self.pending_turns[client_id] = task

        try:
            await asyncio.wait({task})
        finally:
            if self.pending_turns.get(client_id) is task:
                del self.pending_turns[client_id]

        if task.cancelled():
            logger.debug("Turn result discarded", client_id)
            return None

        return task.result()

    async def _process_turn(self, client_id: str, text: str) -> JournalReply:
        conversation = await self.store.load_conversation(client_id)
        session_state = await self.store.load_session_state(client_id)
        emotion_history = await self.store.load_emotion_history(client_id)

        user_message = Message(role=MessageRole.USER, text=text)
        crisis_phrase = detect_crisis_phrases(text, self.tracker.lexicon.crisis_phrases)
        if crisis_phrase:
            logger.warning(f"Crisis phrase detected: '{crisis_phrase}'", client_id)

        try:
            response_text, new_state = await self.graph.respond(text, session_state, conversation, client_id)
        except Exception as e:
            logger.error("Error generating AI response", client_id, e)
            failure_message = Message(role=MessageRole.ASSISTANT, text=TURN_FAILURE_MESSAGE)
            await self._commit(client_id, self.store.save_conversation(
                client_id, conversation + [user_message, failure_message]
            ))
            return JournalReply(
                text=TURN_FAILURE_MESSAGE,
                crisis_phrase=crisis_phrase,
                session_depth=session_state.session_depth
            )

        if crisis_phrase:
            response_text = f"{get_crisis_response(crisis_phrase)}\n\n{response_text}"

        snapshot = None
        if new_state.last_analysis is not None:
            snapshot = AnalysisSnapshot.from_analysis(new_state.last_analysis)
            user_message = user_message.model_copy(update={"analysis": snapshot})

        new_history = list(emotion_history)
        if snapshot and snapshot.emotions:
            new_history.append(EmotionEntry(timestamp=user_message.timestamp, emotions=snapshot.emotions))

        resource = self.resource_selector.select_resource(new_state, new_state.session_depth)

        typing_delay = self.calculate_typing_delay(response_text)
        await self.sleep(typing_delay)

        response_message = Message(role=MessageRole.ASSISTANT, text=response_text)
        await self._commit(client_id, self.store.save_turn(
            client_id, conversation + [user_message, response_message], new_state, new_history
        ))

        return JournalReply(
            text=response_text,
            typing_delay=typing_delay,
            resource=resource,
            crisis_phrase=crisis_phrase,
            analysis=snapshot,
            session_depth=new_state.session_depth
        )

    async def _commit(self, client_id: str, write):
        """Run a store write that cancelling the turn cannot interrupt"""
        commit = asyncio.ensure_future(write)
        self.pending_commits[client_id] = commit
        commit.add_done_callback(lambda done: self._forget_commit(client_id, done))
        await asyncio.shield(commit)

    def _forget_commit(self, client_id: str, commit: asyncio.Future):
        if self.pending_commits.get(client_id) is commit:
            del self.pending_commits[client_id]

    async def ensure_greeting(self, client_id: str) -> Optional[str]:
        """Greet a client whose conversation log is empty"""
        conversation = await self.store.load_conversation(client_id)
        if conversation:
            return None

        greeting = await self.graph.greet(client_id)
        await self.store.save_conversation(client_id, [Message(role=MessageRole.ASSISTANT, text=greeting)])
        return greeting

    async def clear_conversation(self, client_id: str) -> str:
        """Reset conversation and session state, keep mood history, greet again"""
        self.cancel_pending(client_id)
        await self.wait_for_commit(client_id)
        await self.store.clear(client_id)
        greeting = await self.ensure_greeting(client_id)
        return greeting or ""

    async def next_prompt(self, client_id: str) -> str:
        """Journaling question for the current session, logged as an assistant message"""
        session_state = await self.store.load_session_state(client_id)
        question, new_state = self.tracker.next_question(session_state)

        conversation = await self.store.load_conversation(client_id)
        conversation.append(Message(role=MessageRole.ASSISTANT, text=question))
        await self.store.save_conversation(client_id, conversation)
        await self.store.save_session_state(client_id, new_state)
        return question

    async def get_mood_summary(self, client_id: str, time_range: TimeRange = TimeRange.WEEK) -> str:
        history = await self.store.load_emotion_history(client_id)
        return format_mood_summary(history, time_range)

    async def get_emotion_history(self, client_id: str) -> List[EmotionEntry]:
        return await self.store.load_emotion_history(client_id)

    async def get_profile_summary(self, client_id: str) -> str:
        session_state = await self.store.load_session_state(client_id)
        return self.profile_updater.get_profile_summary(session_state.user_profile)
