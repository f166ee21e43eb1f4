import random

from zbplugin.choose import choose, split_options


def test_split_options():
    assert split_options("可口可乐还是百事可乐") == ["可口可乐", "百事可乐"]


def test_split_single_option():
    assert split_options("肯德基") == ["肯德基"]


def test_choose_lists_options_and_picks_one():
    reply = choose("肯德基还是麦当劳还是必胜客", "tester", random.Random(0))
    assert reply.startswith("> tester\n你的选项有:\n")
    assert "1, 肯德基\n2, 麦当劳\n3, 必胜客\n" in reply
    picked = reply.rsplit("你最终会选: ", 1)[1]
    assert picked in {"肯德基", "麦当劳", "必胜客"}


def test_choose_single_option_is_forced():
    reply = choose("肯德基", "tester", random.Random(5))
    assert reply.endswith("你最终会选: 肯德基")


def test_choose_is_deterministic_with_seed():
    first = choose("a还是b还是c", "n", random.Random(42))
    second = choose("a还是b还是c", "n", random.Random(42))
    assert first == second