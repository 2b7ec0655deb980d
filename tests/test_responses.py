"""Tests for canned replies, random picks and uptime formatting."""

import math
import re
from unittest.mock import MagicMock

import pytest

from nobot import responses


@pytest.mark.parametrize("elapsed", [0, 0.4, 59.99, 60, 3599.5, 3600, 3723.9, 90061.2])
def test_split_uptime_adds_back_up(elapsed):
    hours, minutes, seconds = responses.split_uptime(elapsed)
    assert hours * 3600 + minutes * 60 + seconds == math.floor(elapsed)
    assert hours >= 0 and 0 <= minutes < 60 and 0 <= seconds < 60


def test_uptime_report_format():
    report = responses.uptime_report(3723.9)
    assert "1 hours, 2 minutes, 3 seconds" in report


def test_uptime_report_past_a_day_keeps_counting_hours():
    report = responses.uptime_report(90061)
    match = re.search(r"(\d+) hours, (\d+) minutes, (\d+) seconds", report)
    assert match.groups() == ("25", "1", "1")


def test_choose_uses_floor_of_uniform_roll():
    pool = ["a", "b", "c"]
    rng = MagicMock()
    rng.random.return_value = 0.0
    assert responses.choose(pool, rng) == "a"
    rng.random.return_value = 0.34
    assert responses.choose(pool, rng) == "b"
    rng.random.return_value = 0.9999
    assert responses.choose(pool, rng) == "c"


def test_choose_without_rng_stays_in_pool():
    pool = responses.greetings("alice")
    for _ in range(20):
        assert responses.choose(pool) in pool


def test_pools_have_three_entries_and_name_the_user():
    assert len(responses.greetings("alice")) == 3
    assert len(responses.feelings("alice", "nobot")) == 3
    assert len(responses.meeting_starters("alice")) == 3
    assert all("alice" in line for line in responses.greetings("alice"))


def test_agenda_line():
    assert responses.agenda_line(2, "buy milk") == "2.buy milk"
