import asyncio
from datetime import datetime

from database.models import EmotionEntry, Message, MessageRole, SessionPhase, SessionState
from database.mongodb import CONVERSATIONS_KEY, EMOTION_DATA_KEY, SESSION_STATE_KEY


def test_missing_records_load_as_defaults(store):
    async def scenario():
        return (
            await store.load_conversation("new"),
            await store.load_session_state("new"),
            await store.load_emotion_history("new"),
        )

    conversation, state, history = asyncio.run(scenario())

    assert conversation == []
    assert state == SessionState()
    assert history == []


def test_records_survive_a_reload(store):
    state = SessionState(phase=SessionPhase.CRISIS, session_depth=4, recent_topics=["work"])
    messages = [Message(role=MessageRole.USER, text="hello"), Message(role=MessageRole.ASSISTANT, text="hi")]
    history = [EmotionEntry(timestamp=datetime(2024, 1, 1, 12), emotions={"joy": 0.4})]

    async def scenario():
        await store.save_session_state("c1", state)
        await store.save_conversation("c1", messages)
        await store.save_emotion_history("c1", history)
        return (
            await store.load_session_state("c1"),
            await store.load_conversation("c1"),
            await store.load_emotion_history("c1"),
        )

    loaded_state, loaded_messages, loaded_history = asyncio.run(scenario())

    assert loaded_state == state
    assert loaded_messages == messages
    assert loaded_history == history


def test_corrupted_record_resets_only_itself(store, collection):
    messages = [Message(role=MessageRole.USER, text="still here")]

    async def scenario():
        await store.save_conversation("c1", messages)
        await store.save_emotion_history("c1", [EmotionEntry(emotions={"anger": 0.2})])
        collection.update_one(
            {"client_id": "c1", "key": SESSION_STATE_KEY},
            {"$set": {"value": "{not json"}},
            upsert=True
        )
        return (
            await store.load_session_state("c1"),
            await store.load_conversation("c1"),
            await store.load_emotion_history("c1"),
        )

    state, conversation, history = asyncio.run(scenario())

    assert state == SessionState()
    assert conversation == messages
    assert len(history) == 1
    assert ("c1", SESSION_STATE_KEY) not in collection.documents


def test_invalid_shape_is_treated_as_corruption(store, collection):
    collection.update_one(
        {"client_id": "c1", "key": CONVERSATIONS_KEY},
        {"$set": {"value": '[{"role": "robot", "text": 3}]'}},
        upsert=True
    )

    assert asyncio.run(store.load_conversation("c1")) == []


def test_clear_keeps_mood_history(store, collection):
    async def scenario():
        await store.save_conversation("c1", [Message(role=MessageRole.USER, text="hello")])
        await store.save_session_state("c1", SessionState(session_depth=3))
        await store.save_emotion_history("c1", [EmotionEntry(emotions={"joy": 0.2})])
        await store.clear("c1")

    asyncio.run(scenario())

    assert set(collection.documents) == {("c1", EMOTION_DATA_KEY)}


def test_save_turn_writes_all_three_records(store, collection):
    state = SessionState(session_depth=2)
    messages = [Message(role=MessageRole.USER, text="hello")]
    history = [EmotionEntry(emotions={"sadness": 0.2})]

    async def scenario():
        await store.save_turn("c1", messages, state, history)
        return (
            await store.load_conversation("c1"),
            await store.load_session_state("c1"),
            await store.load_emotion_history("c1"),
        )

    conversation, loaded_state, loaded_history = asyncio.run(scenario())

    assert {key for _, key in collection.documents} == {CONVERSATIONS_KEY, SESSION_STATE_KEY, EMOTION_DATA_KEY}
    assert [message.text for message in conversation] == ["hello"]
    assert loaded_state.session_depth == 2
    assert loaded_history[0].emotions == {"sadness": 0.2}
