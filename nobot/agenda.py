"""
Agenda commands: add, remove and list tasks for one user key.

Every function returns the user-facing reply (or replies); nothing here talks to
Slack. Tasks are removed by their position in the listing fetched during the same
command, so a concurrent add/remove on the same key can shift positions between
the fetch and the removal.
"""
import re

from nobot import responses
from nobot.logger import logger
from nobot.store import MongoSetStore, run_store_call


def parse_task_number(token: str | None) -> int | None:
    """1-based task number from user input, or None if it isn't an integer."""
    if not token or not re.fullmatch(r"[+-]?[0-9]+", token.strip()):
        return None
    return int(token)


class Agenda:
    def __init__(self, store: MongoSetStore):
        self.store = store

    async def add_task(self, user_key: str, task: str) -> str:
        task = (task or "").strip()
        if not task:
            return responses.forgot_task(user_key)

        logger.debug("Adding task for %s: %s", user_key, task)
        result = await run_store_call("add_task", self.store.sadd, user_key, task)
        if not result.ok:
            return responses.TASK_NOT_ADDED
        return responses.TASK_ADDED

    async def remove_task(self, user_key: str, target: str | None) -> str:
        task_number = parse_task_number(target)
        if task_number is None:
            return responses.invalid_task_number(user_key)

        listing = await run_store_call("remove_task", self.store.smembers, user_key)
        if not listing.ok:
            return responses.STORE_UNAVAILABLE

        tasks = listing.value or []
        if not tasks:
            return responses.nothing_to_remove(user_key)
        if task_number <= 0 or task_number > len(tasks):
            return responses.invalid_task_number(user_key)

        task = tasks[task_number - 1]
        logger.debug("Removing task %s for %s: %s", task_number, user_key, task)
        removed = await run_store_call("remove_task", self.store.srem, user_key, task)
        if not removed.ok:
            return responses.STORE_UNAVAILABLE
        return responses.task_removed(user_key)

    async def list_tasks(self, user_key: str) -> list[str]:
        listing = await run_store_call("list_tasks", self.store.smembers, user_key)
        tasks = listing.value if listing.ok else None
        if not tasks:
            return [responses.NO_AGENDA]

        lines = [responses.agenda_header(user_key)]
        lines.extend(responses.agenda_line(i, task) for i, task in enumerate(tasks, start=1))
        return lines
