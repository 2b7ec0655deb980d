import re

from nobot.utils import alternation, contains, first_word_after, replace_self_mentions, words_after


def test_contains():
    assert contains("book a meeting", ["start", "book"])
    assert not contains("book a meeting", ["please"])


def test_alternation_escapes_and_prefers_longer_names():
    pattern = re.compile(alternation(["bot", "awesome.bot"]))
    assert pattern.fullmatch("awesome.bot")
    assert not pattern.fullmatch("awesomeXbot")


def test_replace_self_mentions():
    assert replace_self_mentions("<@UBOT> add milk", "UBOT", "nobot") == "nobot add milk"
    assert replace_self_mentions("hi <@UBOT|nobot>", "UBOT", "nobot") == "hi nobot"
    assert replace_self_mentions("hi <@UOTHER>", "UBOT", "nobot") == "hi <@UOTHER>"
    assert replace_self_mentions("hi <@UBOT>", None, "nobot") == "hi <@UBOT>"


def test_words_after():
    text = "nobot add   buy  milk "
    assert words_after(text, len("nobot add")) == "buy milk"
    assert words_after("nobot add", len("nobot add")) == ""


def test_first_word_after():
    assert first_word_after("nobot remove 2 please", len("nobot remove")) == "2"
    assert first_word_after("nobot remove", len("nobot remove")) is None


def test_words_after_skips_rest_of_matched_word():
    assert words_after("nobot address book", len("nobot add")) == "book"
    assert words_after("nobot added milk", len("nobot add")) == "milk"
    assert words_after("nobot addition", len("nobot add")) == ""


def test_first_word_after_skips_rest_of_matched_word():
    assert first_word_after("nobot removed 1", len("nobot remove")) == "1"
