import re
from typing import Iterable


def contains(text: str, keywords: Iterable[str]) -> bool:
    return any(k in text for k in keywords)


def alternation(words: Iterable[str]) -> str:
    """Regex group matching any of `words` literally, longest first."""
    ordered = sorted(set(words), key=len, reverse=True)
    return "(?:" + "|".join(re.escape(w) for w in ordered) + ")"


def replace_self_mentions(text: str, bot_user_id: str | None, bot_name: str) -> str:
    """
    Rewrite Slack mentions of the bot ('<@U123ABC>' or '<@U123ABC|name>') to its plain name,
    so '@nobot add milk' and 'nobot add milk' look the same to the rules.
    """
    if not text or not bot_user_id:
        return text or ""
    return re.sub(rf"<@{re.escape(bot_user_id)}(?:\|[^>]*)?>", bot_name, text)


def _end_of_word(text: str, position: int) -> int:
    while position < len(text) and not text[position].isspace():
        position += 1
    return position


def words_after(text: str, position: int) -> str:
    """
    The words following the word that contains `position`, with runs of whitespace collapsed.
    A keyword matched inside a longer word ("add" in "address") never splits it.
    """
    return " ".join(text[_end_of_word(text, position):].split())


def first_word_after(text: str, position: int) -> str | None:
    words = text[_end_of_word(text, position):].split()
    return words[0] if words else None
