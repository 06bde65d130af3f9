import asyncio
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Any, List, Optional

from pydantic import TypeAdapter
from pymongo import ASCENDING, MongoClient
from pymongo.errors import ConnectionFailure

from config import Config
from database.models import EmotionEntry, Message, SessionState
from utils.logger import logger

CONVERSATIONS_KEY = 'journal-conversations'
SESSION_STATE_KEY = 'journal-session-state'
EMOTION_DATA_KEY = 'journal-emotion-data'

_messages_adapter = TypeAdapter(List[Message])
_emotions_adapter = TypeAdapter(List[EmotionEntry])


class ClientStateStore:
    """Durable per-client key/value store backed by MongoDB.

    Each record is one document ``{client_id, key, value}`` where ``value``
    holds the record's JSON text. Records are parsed independently, so a
    corrupted record resets to its default without touching the others.
    """

    def __init__(self, config: Config, collection: Optional[Any] = None):
        self.config = config
        self.client = None
        self.db = None
        self.collection = collection
        self.executor = ThreadPoolExecutor(max_workers=10)
        if self.collection is None:
            self.connect()

    def connect(self):
        """Connect to MongoDB"""
        try:
            self.client = MongoClient(self.config.mongodb_uri)
            self.db = self.client[self.config.database_name]
            self.collection = self.db[self.config.client_state_collection]

            # Test connection
            self.client.admin.command('ping')
            logger.info("Successfully connected to MongoDB")

            self._create_indexes()

        except ConnectionFailure as e:
            logger.error("Failed to connect to MongoDB", error=e)
            raise

    def _create_indexes(self):
        """One document per client and record key"""
        try:
            self.collection.create_index([("client_id", ASCENDING), ("key", ASCENDING)], unique=True)
            logger.info("Database indexes created successfully")
        except Exception as e:
            logger.error("Failed to create indexes", error=e)

    async def _run_in_executor(self, func, *args):
        """Run database operation in thread pool"""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self.executor, func, *args)

    # Raw records
    def _read(self, client_id: str, key: str) -> Optional[str]:
        document = self.collection.find_one({"client_id": client_id, "key": key})
        logger.log_storage_operation("READ", key, client_id)
        if not document:
            return None
        return document.get("value")

    def _write(self, client_id: str, key: str, value: str):
        self.collection.update_one(
            {"client_id": client_id, "key": key},
            {"$set": {"value": value, "updated_at": datetime.now()}},
            upsert=True
        )
        logger.log_storage_operation("WRITE", key, client_id)

    def _delete(self, client_id: str, key: str):
        self.collection.delete_one({"client_id": client_id, "key": key})
        logger.log_storage_operation("DELETE", key, client_id)

    def _parse(self, client_id: str, key: str, parse, default):
        """Parse a stored record, resetting it to ``default`` if it is corrupted"""
        raw = self._read(client_id, key)
        if raw is None:
            return default()

        try:
            return parse(raw)
        except (ValueError, TypeError) as e:
            # pydantic's ValidationError is a ValueError
            logger.warning(f"Corrupted record {key}, resetting it: {e}", client_id)
            self._delete(client_id, key)
            return default()

    # Conversation log
    async def load_conversation(self, client_id: str) -> List[Message]:
        return await self._run_in_executor(
            self._parse, client_id, CONVERSATIONS_KEY, _messages_adapter.validate_json, list
        )

    async def save_conversation(self, client_id: str, conversation: List[Message]):
        value = _messages_adapter.dump_json(conversation).decode('utf-8')
        await self._run_in_executor(self._write, client_id, CONVERSATIONS_KEY, value)

    # Session state
    async def load_session_state(self, client_id: str) -> SessionState:
        return await self._run_in_executor(
            self._parse, client_id, SESSION_STATE_KEY, SessionState.model_validate_json, SessionState
        )

    async def save_session_state(self, client_id: str, session_state: SessionState):
        await self._run_in_executor(self._write, client_id, SESSION_STATE_KEY, session_state.model_dump_json())

    # Mood history
    async def load_emotion_history(self, client_id: str) -> List[EmotionEntry]:
        return await self._run_in_executor(
            self._parse, client_id, EMOTION_DATA_KEY, _emotions_adapter.validate_json, list
        )

    async def save_emotion_history(self, client_id: str, history: List[EmotionEntry]):
        value = _emotions_adapter.dump_json(history).decode('utf-8')
        await self._run_in_executor(self._write, client_id, EMOTION_DATA_KEY, value)

    async def save_turn(self, client_id: str, conversation: List[Message],
                        session_state: SessionState, history: List[EmotionEntry]):
        """Write all three records of a finished turn in one executor call"""
        records = [
            (CONVERSATIONS_KEY, _messages_adapter.dump_json(conversation).decode('utf-8')),
            (SESSION_STATE_KEY, session_state.model_dump_json()),
            (EMOTION_DATA_KEY, _emotions_adapter.dump_json(history).decode('utf-8')),
        ]

        def _save():
            for key, value in records:
                self._write(client_id, key, value)

        await self._run_in_executor(_save)

    async def clear(self, client_id: str):
        """Reset conversation and session state, mood history is kept"""
        def _clear():
            self._delete(client_id, CONVERSATIONS_KEY)
            self._delete(client_id, SESSION_STATE_KEY)

        await self._run_in_executor(_clear)
        logger.info("Conversation and session state cleared", client_id)

    def close(self):
        """Close database connection"""
        if self.client:
            self.client.close()
            logger.info("MongoDB connection closed")
        self.executor.shutdown(wait=False)
