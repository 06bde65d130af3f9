import random

import pytest

from ai_services.journal_manager import JournalManager
from ai_services.profile_updater import ProfileUpdater
from ai_services.resource_selector import ResourceSelector
from ai_services.session_tracker import SessionTracker
from ai_services.text_analyzer import TextAnalyzer
from config import Config
from database.mongodb import ClientStateStore
from graph.journal_graph import JournalGraph


class FakeCollection:
    """In-memory stand-in for the pymongo collection used by the store"""

    def __init__(self):
        self.documents = {}

    def create_index(self, keys, unique=False):
        return "client_id_1_key_1"

    def find_one(self, query):
        document = self.documents.get((query["client_id"], query["key"]))
        return dict(document) if document else None

    def update_one(self, query, update, upsert=False):
        key = (query["client_id"], query["key"])
        if key not in self.documents and not upsert:
            return
        document = self.documents.setdefault(key, dict(query))
        document.update(update["$set"])

    def delete_one(self, query):
        self.documents.pop((query["client_id"], query["key"]), None)


class FakeChatClient:
    """Chat client double that records calls instead of touching the network"""

    def __init__(self, response="That sounds hard. What has helped before?", success=True, error=None):
        self.response = response
        self.success = success
        self.error = error
        self.calls = []
        self.greeting_calls = 0

    async def generate_therapy_response(self, user_message, client_id=None, conversation_history=None):
        self.calls.append((user_message, list(conversation_history or [])))
        if self.error:
            raise self.error
        if not self.success:
            return {"success": False, "error": "service unavailable", "response": None}
        return {"success": True, "response": self.response}

    async def generate_greeting(self, client_id=None):
        self.greeting_calls += 1
        if self.error:
            raise self.error
        if not self.success:
            return {"success": False, "error": "service unavailable", "response": None}
        return {"success": True, "response": "Hi, I'm glad you're here."}


async def no_sleep(delay):
    return None


@pytest.fixture
def config():
    return Config(telegram_bot_token="test-token", openrouter_api_key=None, random_seed=7)


@pytest.fixture
def rng():
    return random.Random(7)


@pytest.fixture
def tracker(rng):
    return SessionTracker(analyzer=TextAnalyzer(rng=rng), profile_updater=ProfileUpdater(), rng=rng)


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def store(config, collection):
    store = ClientStateStore(config, collection=collection)
    yield store
    store.close()


@pytest.fixture
def chat_client():
    return FakeChatClient()


@pytest.fixture
def journal_graph(tracker, chat_client):
    return JournalGraph(tracker, chat_client)


@pytest.fixture
def manager(config, store, journal_graph, tracker, rng):
    return JournalManager(
        config,
        store=store,
        graph=journal_graph,
        tracker=tracker,
        resource_selector=ResourceSelector(config, rng),
        sleep=no_sleep
    )


@pytest.fixture
def make_chat_client():
    return FakeChatClient
