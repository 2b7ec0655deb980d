"""Shared fakes: an in-memory set store, a directory and a transport that records sends."""

import threading

import pytest
from pymongo.errors import ConnectionFailure

from nobot.agenda import Agenda
from nobot.config import BotNames
from nobot.dispatcher import Dispatcher
from nobot.models import Channel, User

ALICE = User(id="U1", name="alice")
ADMIN = User(id="U2", name="root", is_admin=True)
OTHER_BOT = User(id="B1", name="otherbot", is_bot=True)
GENERAL = Channel(id="C1", name="general", members=("U1", "U2", "B1"))


class FakeSetStore:
    """Stands in for MongoSetStore; keeps insertion order and records every call."""

    def __init__(self, data=None, fail=False, gate=None):
        self.data = {key: list(members) for key, members in (data or {}).items()}
        self.fail = fail
        self.gate = gate
        self.calls = []

    def _check(self):
        if self.gate is not None:
            self.gate.wait(timeout=5)
        if self.fail:
            raise ConnectionFailure("store is down")

    def sadd(self, key, member):
        self.calls.append(("sadd", key, member))
        self._check()
        members = self.data.setdefault(key, [])
        if member in members:
            return False
        members.append(member)
        return True

    def srem(self, key, member):
        self.calls.append(("srem", key, member))
        self._check()
        members = self.data.get(key, [])
        if member not in members:
            return False
        members.remove(member)
        return True

    def smembers(self, key):
        self.calls.append(("smembers", key))
        self._check()
        return list(self.data.get(key, []))

    def called(self, name):
        return [call for call in self.calls if call[0] == name]


class FakeDirectory:
    def __init__(self, users=(ALICE, ADMIN, OTHER_BOT), channels=(GENERAL,)):
        self.users = {user.id: user for user in users}
        self.channels = {channel.id: channel for channel in channels}

    async def get_user(self, user_id):
        return self.users.get(user_id)

    async def get_channel(self, channel_id):
        return self.channels.get(channel_id)

    async def open_dm(self, user):
        return f"D-{user.id}"


class FakeTransport:
    def __init__(self):
        self.sent = []

    async def send_message(self, text, channel_id):
        self.sent.append((text, channel_id))
        return "1234.5678"

    @property
    def texts(self):
        return [text for text, _ in self.sent]


@pytest.fixture
def names():
    return BotNames(primary="nobot", aliases=("awesomebot", "bot"))


@pytest.fixture
def store():
    return FakeSetStore()


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def directory():
    return FakeDirectory()


@pytest.fixture
def make_dispatcher(names, directory, transport):
    def _make(store, uptime=lambda: 0.0, rng=None):
        return Dispatcher(
            directory=directory,
            transport=transport,
            agenda=Agenda(store),
            names=names,
            rng=rng,
            uptime=uptime,
        )

    return _make


@pytest.fixture
def gate():
    event = threading.Event()
    yield event
    event.set()
