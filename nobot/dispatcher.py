"""
Message dispatch: one call per inbound message event.

Dispatch resolves the sender and channel, runs the rule table and returns as soon
as every matching action has been started. Replies and agenda commands run as
separate asyncio tasks, so they can finish in any order, including after the
next message has started dispatching. `drain()` waits for whatever is still
in flight.
"""
import asyncio
import random
from dataclasses import dataclass, replace
from typing import Awaitable, Callable

from nobot.agenda import Agenda
from nobot.config import BotNames
from nobot.directory import SlackDirectory
from nobot.logger import logger
from nobot.models import Channel, Message, User
from nobot.responses import process_uptime
from nobot.rules import Flow, Rule, build_rule_table, matching_rules
from nobot.transport import SlackTransport
from nobot.utils import replace_self_mentions


@dataclass
class DispatchContext:
    """What a rule action gets to work with for a single message."""

    dispatcher: "Dispatcher"
    message: Message
    user: User
    channel: Channel
    text: str

    @property
    def agenda(self) -> Agenda:
        return self.dispatcher.agenda

    @property
    def rng(self) -> random.Random:
        return self.dispatcher.rng

    @property
    def user_key(self) -> str:
        # Agendas are keyed by display name; same-named users share one.
        return self.user.name

    def uptime(self) -> float:
        return self.dispatcher.uptime()

    def say(self, text: str) -> None:
        self.dispatcher.send(text, self.channel.id)

    async def say_now(self, text: str) -> None:
        """Post to the channel and wait for it, for replies whose lines must stay in order."""
        await self.dispatcher.transport.send_message(text, self.channel.id)

    def say_direct(self, text: str) -> None:
        self.dispatcher.send_direct(text, self.user)

    def spawn(self, work: Awaitable) -> None:
        self.dispatcher.spawn(work)


class Dispatcher:
    def __init__(
        self,
        directory: SlackDirectory,
        transport: SlackTransport,
        agenda: Agenda,
        names: BotNames,
        rules: tuple[Rule, ...] | None = None,
        rng: random.Random | None = None,
        uptime: Callable[[], float] = process_uptime,
    ):
        self.directory = directory
        self.transport = transport
        self.agenda = agenda
        self.names = names
        self.rules = rules if rules is not None else build_rule_table(names)
        self.rng = rng or random.Random()
        self.uptime = uptime
        self.bot_user_id: str | None = None
        self._pending: set[asyncio.Task] = set()

    async def dispatch(self, message: Message) -> list[Rule]:
        """Handle one message. Returns the rules that fired (for logging and tests)."""
        if message.bot_id or message.subtype == "bot_message":
            return []
        if not message.user_id or not message.channel_id:
            return []

        user = await self.directory.get_user(message.user_id)
        if user is None or user.is_bot:
            return []

        channel = await self.directory.get_channel(message.channel_id)
        if channel is None:
            logger.warning("Dropping message from %s: unknown channel %s", user.name, message.channel_id)
            return []

        if message.is_blank:
            return []

        mentioned = replace_self_mentions(message.text, self.bot_user_id, self.names.primary)
        message = replace(message, text=mentioned)
        text = message.lowered
        ctx = DispatchContext(dispatcher=self, message=message, user=user, channel=channel, text=text)

        fired = []
        for rule in matching_rules(self.rules, text):
            fired.append(rule)
            logger.debug("Rule %s matched message from %s in %s", rule.name, user.name, channel.id)
            if rule.action(ctx) == Flow.STOP:
                break
        return fired

    def send(self, text: str, channel_id: str) -> None:
        self.spawn(self.transport.send_message(text, channel_id))

    def send_direct(self, text: str, user: User) -> None:
        self.spawn(self._send_direct(text, user))

    async def _send_direct(self, text: str, user: User) -> None:
        dm_id = await self.directory.open_dm(user)
        if dm_id is None:
            logger.error("Could not open a direct message with %s", user.name)
            return
        await self.transport.send_message(text, dm_id)

    def spawn(self, work: Awaitable) -> None:
        task = asyncio.create_task(self._guard(work))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _guard(self, work: Awaitable) -> None:
        # Fire-and-forget work has nobody to report to; log and move on.
        try:
            await work
        except Exception:
            logger.exception("Background reply failed")

    async def drain(self) -> None:
        """Wait for all outstanding replies and agenda commands, including ones they start."""
        while self._pending:
            await asyncio.gather(*list(self._pending))
