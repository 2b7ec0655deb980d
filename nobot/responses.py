"""
Canned replies.

Everything the bot says lives here, either as a fixed string or as a small pool
that `choose` picks from uniformly.
"""
import math
import random
import time
from typing import Sequence

from nobot.constants import MEETING_OWNER

PROCESS_STARTED_AT = time.monotonic()

GREAT = "great"
DEATH_TO_HUMANS = "Death to humans!"
MEETING_TIME = "Yaaay! God, already?!"
MEETING_SAY_PLEASE = 'I was wondering...does it hurt you humans if you say "please"?'
MEETING_WITH_SOMEONE = f"Do you have *any idea* how busy {MEETING_OWNER} is?!"
START_AGENDA = 'Ok, starting agenda. To add to it, just say my name "add" task.'

TASK_ADDED = "Yes, oh, mighty master! Task added to the agenda."
TASK_NOT_ADDED = "Sorry, I'm in a meeting now, maybe later. Task cannot be added."
STORE_UNAVAILABLE = "Sorry, I'm in a meeting now, maybe later. My agenda is out of reach."
NO_AGENDA = "Sorry, was I supposed to do that? I have no agenda!"


def choose(pool: Sequence[str], rng: random.Random | None = None) -> str:
    """Uniform pick; every call is independent so repeats are allowed."""
    roll = (rng or random).random()
    return pool[math.floor(roll * len(pool))]


def greetings(name: str) -> list[str]:
    return [
        f"Hello to you too, {name}!",
        f"{name}! Oh, lucky me, I get to help you again!",
        f"Sorry, I'm in a meeting. Oh, it's {name}! You can wait a bit longer.",
    ]


def feelings(name: str, bot_name: str) -> list[str]:
    return [
        f"As happy as a {bot_name} can be! Until you showed up...{name}",
        f"{name}, I would answer that question but I don't want to be rude.",
        "I'm fine, you?",
    ]


def meeting_starters(name: str) -> list[str]:
    return [
        "Oh, that's handy. I am the meeting bot! Who is in the meeting?",
        f"Do you have an agenda to share with everyone, {name}?!",
        "You people are in meetings a lot. Do you do anything else?!",
    ]


def uptime_refusal(name: str) -> str:
    return f"Sorry {name}, that's confidential. Only my girlfriend can ask me that!"


def too_much_coffee(name: str) -> str:
    return f"Wow, {name}, have you had too much coffee again!?!?!"


def forgot_task(name: str) -> str:
    return f'{name}! My name + "add" + task = agenda!'


def invalid_task_number(name: str) -> str:
    return f'{name}! My name + "delete/remove" + task = a happier me!'


def nothing_to_remove(name: str) -> str:
    return f"{name}! Hey, I know I am awesome but remove stuff that does not exist is out of my league!"


def task_removed(name: str) -> str:
    return f"Task deleted. {name}, you really didn't think this through!"


def agenda_header(name: str) -> str:
    return f"{name}'s agenda:"


def agenda_line(position: int, task: str) -> str:
    return f"{position}.{task}"


def process_uptime() -> float:
    """
    Seconds since `nobot.responses` was first imported. app.py imports it before
    anything slow at startup, so this tracks process uptime closely.
    """
    return time.monotonic() - PROCESS_STARTED_AT


def split_uptime(elapsed: float) -> tuple[int, int, int]:
    """
    Break elapsed seconds into (hours, minutes, seconds).

    hours * 3600 + minutes * 60 + seconds == floor(elapsed)
    """
    total = max(0, math.floor(elapsed))
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    return hours, minutes, seconds


def uptime_report(elapsed: float) -> str:
    hours, minutes, seconds = split_uptime(elapsed)
    return f"I have been running for: {hours} hours, {minutes} minutes, {seconds} seconds."
