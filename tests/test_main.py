import asyncio
from types import SimpleNamespace

import httpx
import pytest

from ai_services.geolocation import GeoLocator
from main import LOCATION_NOTE, JournalBot


class FakeMessage:
    def __init__(self, text=None):
        self.text = text
        self.replies = []

    async def reply_text(self, text):
        self.replies.append(text)


class FakeTelegramBot:
    def __init__(self):
        self.actions = []

    async def send_chat_action(self, chat_id, action):
        self.actions.append((chat_id, action))


async def no_sleep(delay):
    return None


def _update(message):
    return SimpleNamespace(
        effective_user=SimpleNamespace(id=42, first_name="Sam"),
        effective_chat=SimpleNamespace(id=42),
        effective_message=message,
        message=message,
    )


def _context(*args):
    return SimpleNamespace(args=list(args), bot=FakeTelegramBot())


@pytest.fixture
def bot(config, store):
    def handler(request):
        return httpx.Response(200, json={"country": "AU"})

    bot = JournalBot(config, store=store, geolocator=GeoLocator(config, transport=httpx.MockTransport(handler)))
    bot.journal.sleep = no_sleep
    yield bot
    bot.chat_client.close()


def test_update_without_message_is_ignored(bot):
    context = _context()

    asyncio.run(bot.handle_message(_update(None), context))

    assert context.bot.actions == []
    assert asyncio.run(bot.store.load_conversation("42")) == []


def test_message_without_text_is_ignored(bot):
    message = FakeMessage(text=None)

    asyncio.run(bot.handle_message(_update(message), _context()))

    assert message.replies == []


def test_resources_without_code_say_they_follow_server_location(bot):
    message = FakeMessage()

    asyncio.run(bot.resources_command(_update(message), _context()))

    assert len(message.replies) == 1
    assert "Crisis support in Australia" in message.replies[0]
    assert message.replies[0].endswith(LOCATION_NOTE)


def test_resources_with_code_have_no_location_note(bot):
    message = FakeMessage()

    asyncio.run(bot.resources_command(_update(message), _context("GB")))

    assert "Crisis support in United Kingdom" in message.replies[0]
    assert LOCATION_NOTE not in message.replies[0]


def test_crisis_entry_sends_contacts_with_location_note(bot):
    message = FakeMessage("I want to end my life.")

    asyncio.run(bot.handle_message(_update(message), _context()))

    assert len(message.replies) == 2
    assert "Crisis support in Australia" in message.replies[1]
    assert message.replies[1].endswith(LOCATION_NOTE)
