import pytest

from zbplugin.antiabuse import BAN_DURATION, AntiAbuseDB, group_table, normalize_message


@pytest.fixture
def db(tmp_path):
    store = AntiAbuseDB(tmp_path / "anti_abuse.db")
    yield store
    store.close()


def test_normalize_message():
    assert normalize_message("a\nb;c\t\rd") == "abcd"


@pytest.mark.parametrize("gid", [0, 1, 35, 36, 123456789, -987654321])
def test_group_table_is_base36(gid):
    assert int(group_table(gid), 36) == gid


def test_group_table_lowercase():
    name = group_table(10**12)
    assert name == name.lower()


def test_word_detection(db):
    db.add_word(42, "badword")
    assert db.is_forbidden(42, "this has badword inside")
    assert not db.is_forbidden(42, "clean message")
    assert not db.is_forbidden(43, "this has badword inside")


def test_delete_without_words(db):
    with pytest.raises(ValueError):
        db.delete_word(7, "anything")


def test_delete_word(db):
    db.add_word(7, "spam")
    db.delete_word(7, "spam")
    assert not db.is_forbidden(7, "spam here")


def test_list_words(db):
    assert db.list_words(5) == "[]"
    db.add_word(5, "hello")
    db.add_word(5, "world")
    assert db.list_words(5) == "[hello | world]"


def test_adding_twice_keeps_one(db):
    db.add_word(5, "hello")
    db.add_word(5, "hello")
    assert db.list_words(5) == "[hello]"


def test_ban_expiry(db):
    assert db.expire_bans(0) == []
    db.record_ban(1001, 1000)
    assert db.expire_bans(1000) == []
    assert db.expire_bans(1000 + BAN_DURATION) == [1001]
    assert db.expire_bans(1000 + BAN_DURATION) == []