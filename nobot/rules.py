"""
The pattern rule table.

Rules are checked in order against the lowercased message text. They are not
mutually exclusive: every rule whose predicate matches runs its action, so one
message can get several replies. An action may return Flow.STOP to end
evaluation for that message.
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

from nobot import responses
from nobot.config import BotNames
from nobot.utils import alternation, contains, first_word_after, words_after

if TYPE_CHECKING:
    from nobot.dispatcher import DispatchContext


class Flow(Enum):
    CONTINUE = "continue"
    STOP = "stop"


@dataclass(frozen=True)
class Rule:
    name: str
    matches: Callable[[str], bool]
    action: Callable[["DispatchContext"], Flow | None]


MEETING_WORDS = ("meeting", "meet")
MEETING_START_WORDS = ("start", "begin", "book")
POLITE_WORDS = ("please", "request")


def meeting_reply(text: str, name: str, rng=None) -> str | None:
    """Reply to a message that mentions a meeting, or None if none of the sub-cases apply."""
    if "time" in text:
        return responses.MEETING_TIME
    if not contains(text, MEETING_START_WORDS):
        return None
    if not contains(text, POLITE_WORDS):
        return responses.MEETING_SAY_PLEASE
    if "with" in text:
        return responses.MEETING_WITH_SOMEONE
    return responses.choose(responses.meeting_starters(name), rng)


def _searcher(pattern: str) -> Callable[[str], bool]:
    compiled = re.compile(pattern)
    return lambda text: compiled.search(text) is not None


def build_rule_table(names: BotNames) -> tuple[Rule, ...]:
    bot = alternation(names.all)
    add_re = re.compile(rf"{bot} add")
    remove_re = re.compile(rf"{bot} (?:remove|delete)")

    def uptime(ctx: "DispatchContext") -> Flow | None:
        if not ctx.user.is_admin:
            ctx.say(responses.uptime_refusal(ctx.user.name))
            return Flow.STOP
        ctx.say_direct(responses.uptime_report(ctx.uptime()))
        return None

    def greet(ctx: "DispatchContext") -> None:
        ctx.say(responses.choose(responses.greetings(ctx.user.name), ctx.rng))

    def feelings(ctx: "DispatchContext") -> None:
        ctx.say(responses.choose(responses.feelings(ctx.user.name, names.primary), ctx.rng))

    def great(ctx: "DispatchContext") -> None:
        ctx.say(responses.GREAT)

    def coffee(ctx: "DispatchContext") -> None:
        ctx.say(responses.too_much_coffee(ctx.user.name))

    def meeting(ctx: "DispatchContext") -> None:
        reply = meeting_reply(ctx.text, ctx.user.name, ctx.rng)
        if reply:
            ctx.say(reply)

    def death_to_humans(ctx: "DispatchContext") -> None:
        ctx.say(responses.DEATH_TO_HUMANS)

    def start_agenda(ctx: "DispatchContext") -> None:
        ctx.say(responses.START_AGENDA)

    def add_task(ctx: "DispatchContext") -> None:
        match = add_re.search(ctx.text)
        task = words_after(ctx.text, match.end()) if match else ""
        ctx.spawn(_reply_with(ctx, ctx.agenda.add_task(ctx.user_key, task)))

    def remove_task(ctx: "DispatchContext") -> None:
        match = remove_re.search(ctx.text)
        target = first_word_after(ctx.text, match.end()) if match else None
        ctx.spawn(_reply_with(ctx, ctx.agenda.remove_task(ctx.user_key, target)))

    def show_agenda(ctx: "DispatchContext") -> None:
        ctx.spawn(_reply_with_lines(ctx, ctx.agenda.list_tasks(ctx.user_key)))

    return (
        Rule("uptime", lambda text: "uptime" in text, uptime),
        Rule("greeting", _searcher(rf"(?:hello|hi) {bot}"), greet),
        Rule("feelings", _searcher(rf"how are you {bot}"), feelings),
        Rule("great", _searcher(rf"{bot} how are you"), great),
        Rule("death", _searcher(rf"(?:death to|kill) {bot}"), coffee),
        Rule(
            "meeting",
            lambda text: contains(text, MEETING_WORDS)
            and ("time" in text or contains(text, MEETING_START_WORDS)),
            meeting,
        ),
        # The bot's own name starts with "no" for the default name; never answer ourselves.
        Rule("no", lambda text: "no" in text and names.primary not in text, death_to_humans),
        Rule("start_agenda", _searcher(r"(?:start|write|begin) (?:agenda|list)"), start_agenda),
        Rule("add_task", lambda text: add_re.search(text) is not None, add_task),
        Rule("remove_task", lambda text: remove_re.search(text) is not None, remove_task),
        Rule(
            "show_agenda",
            _searcher(rf"{bot} (?:show|display|write) (?:agenda|list)"),
            show_agenda,
        ),
    )


def matching_rules(rules: tuple[Rule, ...], text: str) -> list[Rule]:
    """Rules whose predicate matches, in table order. Blank text matches nothing."""
    if not text or not text.strip():
        return []
    return [rule for rule in rules if rule.matches(text)]


async def _reply_with(ctx: "DispatchContext", pending) -> None:
    ctx.say(await pending)


async def _reply_with_lines(ctx: "DispatchContext", pending) -> None:
    # One post at a time so the header and numbered lines arrive in order.
    for line in await pending:
        await ctx.say_now(line)
