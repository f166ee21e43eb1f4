import pytest

from zbplugin.chouxianghua import Abstractifier


@pytest.fixture
def abstractifier(tmp_path):
    with Abstractifier(tmp_path / "cxh.db") as a:
        conn = a._conn
        with conn:
            conn.executemany(
                "INSERT INTO pinyin (word, pronunciation) VALUES (?, ?)",
                [("你", "ni"), ("好", "hao")],
            )
            conn.executemany(
                "INSERT INTO emoji (pronunciation, emoji) VALUES (?, ?)",
                [("nihao", "👋"), ("ni", "🫵")],
            )
        yield a


def test_lookups(abstractifier):
    assert abstractifier.pinyin("你") == "ni"
    assert abstractifier.pinyin("们") == ""
    assert abstractifier.emoji("nihao") == "👋"
    assert abstractifier.emoji("hao") == ""


def test_pair_replaced(abstractifier):
    assert abstractifier.translate("你好") == "👋"


def test_single_replaced(abstractifier):
    assert abstractifier.translate("好你") == "好🫵"


def test_unknown_text_kept(abstractifier):
    assert abstractifier.translate("abc") == "abc"


def test_empty(abstractifier):
    assert abstractifier.translate("") == ""