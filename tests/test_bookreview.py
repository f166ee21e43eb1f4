import sqlite3

import pytest

from zbplugin.bookreview import BookReviews

REVIEWS = ["三体 很好看", "诡秘之主 值得一读"]


@pytest.fixture
def reviews(tmp_path):
    path = tmp_path / "bookreview.db"
    with BookReviews(path):
        pass
    conn = sqlite3.connect(path)
    with conn:
        conn.executemany("INSERT INTO bookreview (bookreview) VALUES (?)", [(r,) for r in REVIEWS])
    conn.close()
    with BookReviews(path) as br:
        yield br


def test_by_keyword_finds_review(reviews):
    assert reviews.by_keyword("诡秘") == REVIEWS[1]


def test_by_keyword_missing_is_empty(reviews):
    assert reviews.by_keyword("nothing") == ""


def test_by_keyword_rejects_symbols(reviews):
    with pytest.raises(ValueError):
        reviews.by_keyword("a_b")


def test_by_keyword_rejects_too_long(reviews):
    with pytest.raises(ValueError):
        reviews.by_keyword("a" * 26)


def test_random_is_one_of_them(reviews):
    assert reviews.random() in REVIEWS
    assert reviews.count() == 2


def test_random_on_empty(tmp_path):
    with BookReviews(tmp_path / "empty.db") as br:
        assert br.random() == ""