import random

import pytest

from zbplugin import atri
from zbplugin.message import text


@pytest.mark.parametrize("hour,expected", [(0, True), (1, False), (5, False), (6, True), (23, True)])
def test_is_awake(hour, expected):
    assert atri.is_awake(hour) is expected


@pytest.mark.parametrize(
    "hour,pool",
    [
        (3, atri.SLEEP_TALK),
        (7, atri.MORNING_EARLY),
        (12, atri.MORNING_LATE),
        (20, atri.MORNING_EVENING),
    ],
)
def test_morning_greeting_by_hour(hour, pool):
    for seed in range(10):
        assert atri.morning_greeting(hour, random.Random(seed)) in pool


def test_noon_greeting_only_midday():
    assert atri.noon_greeting(10, random.Random(1)) is None
    assert atri.noon_greeting(15, random.Random(1)) is None
    assert atri.noon_greeting(12, random.Random(1)) in atri.NOON


@pytest.mark.parametrize(
    "hour,pool",
    [
        (2, atri.SLEEP_TALK),
        (8, atri.NIGHT_MORNING),
        (13, atri.NOON),
        (16, atri.NIGHT_AFTERNOON),
        (22, atri.NIGHT_EVENING),
    ],
)
def test_night_greeting_by_hour(hour, pool):
    for seed in range(10):
        assert atri.night_greeting(hour, random.Random(seed)) in pool


def test_respond_silent_while_asleep():
    assert atri.respond("萝卜子", 3, True, random.Random(0)) is None


def test_respond_no_match():
    assert atri.respond("随便说点什么", 12, True, random.Random(0)) is None


def test_love_needs_to_me():
    assert atri.respond("喜欢", 12, False, random.Random(0)) is None
    result = atri.respond("喜欢", 12, True, random.Random(0))
    assert len(result) == 1
    assert result[0].type == "image"
    assert result[0].data["file"].rsplit("/", 1)[-1] in atri.LOVE_IMAGES


def test_refusal():
    assert atri.respond("答应我", 12, True, random.Random(0)) == [text("我无法回应你的请求")]


def test_morning_through_respond():
    result = atri.respond("早", 8, False, random.Random(3))
    assert len(result) == 1
    assert result[0].data["text"] in atri.MORNING_EARLY


def test_noon_outside_hours_matches_but_is_silent():
    assert atri.respond("中午好", 9, False, random.Random(0)) == []


def test_praise_keyword():
    result = atri.respond("你真是高性能", 12, True, random.Random(5))
    assert result[0].data["text"] in atri.SUGOI


def test_robot_name_reply_kinds():
    kinds = {atri.respond("萝卜子", 12, False, random.Random(seed))[0].type for seed in range(30)}
    assert kinds == {"text", "record"}