import pytest
import requests

from zbplugin.cangtoushi import PoemClient, extract_csrf, extract_poem

LOGIN_PAGE = '<html><body><form><input name="_csrf" value="token"/></form></body></html>'
RESULT_PAGE = (
    '<html><body><div class="card"><div class="card">\n 春 眠 不 觉 晓\n花落知多少'
    "</div></div></body></html>"
)


class _Response:
    def __init__(self, text):
        self.text = text

    def raise_for_status(self):
        return None


class _Session:
    def __init__(self):
        self.cookies = requests.cookies.RequestsCookieJar()
        self.posts = []

    def get(self, url, headers=None):
        return _Response(LOGIN_PAGE)

    def post(self, url, data=None, headers=None):
        self.posts.append(data)
        return _Response(RESULT_PAGE)


def test_extract_csrf():
    assert extract_csrf(LOGIN_PAGE) == "token"


def test_extract_csrf_missing():
    with pytest.raises(ValueError):
        extract_csrf("<html><body></body></html>")


def test_extract_poem():
    assert extract_poem(RESULT_PAGE) == "春眠不觉晓\n花落知多少"


def test_extract_poem_missing():
    with pytest.raises(ValueError):
        extract_poem("<html><body><div class='card'>x</div></body></html>")


def test_acrostic_sends_head_position():
    session = _Session()
    poem = PoemClient(session).acrostic("春夏秋")
    assert poem == extract_poem(RESULT_PAGE)
    assert session.posts[0]["_csrf"] == "token"
    assert session.posts[0]["position"] == "0"
    assert session.posts[0]["zishu"] == "7"


def test_telestich_sends_tail_position():
    session = _Session()
    PoemClient(session).telestich("春夏秋")
    assert session.posts[0]["position"] == "2"
    assert session.posts[0]["kw"] == "春夏秋"


def test_rejects_bad_keyword():
    with pytest.raises(ValueError):
        PoemClient(_Session()).acrostic("ab")