"""Turn bilibili dynamics, articles, live rooms and videos into message chains."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from zbplugin import message as msg

TURL = "https://t.bilibili.com/"
CVURL = "https://www.bilibili.com/read/cv"
LURL = "https://live.bilibili.com/"
VURL = "https://www.bilibili.com/video/"
ARTICLE_LINK = "https://www.bilibili.com/read/cv"
AUDIO_LINK = "https://www.bilibili.com/audio/au"

MSG_TYPE: dict[int, str] = {
    1: "转发了动态",
    2: "有图营业",
    4: "无图营业",
    8: "投稿了视频",
    16: "投稿了短视频",
    64: "投稿了文章",
    256: "投稿了音频",
    2048: "发布了简报",
    4200: "发布了直播",
    4308: "发布了直播",
}

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def _get(obj: Any, path: str, default: Any = None) -> Any:
    for key in path.split("."):
        if not isinstance(obj, dict):
            return default
        obj = obj.get(key)
        if obj is None:
            return default
    return obj


def _str(obj: Any, path: str) -> str:
    return str(_get(obj, path, ""))


def _int(obj: Any, path: str) -> int:
    return int(_get(obj, path, 0) or 0)


def _load(value: Any) -> dict[str, Any]:
    """A card given either as a dict or as its JSON text."""
    if isinstance(value, dict):
        return value
    data = json.loads(value)
    if not isinstance(data, dict):
        raise ValueError("card must be a JSON object")
    return data


def _time(ts: int) -> str:
    return datetime.fromtimestamp(int(ts)).strftime(_TIME_FORMAT)


def _human_num(n: int) -> str:
    n = int(n)
    if abs(n) < 10000:
        return str(n)
    return f"{n / 10000:.1f}万"


def _dynamic_link(dynamic: dict[str, Any]) -> list[msg.Segment]:
    dynamic_id = _str(dynamic, "desc.dynamic_id_str")
    if dynamic_id:
        return [msg.text("动态链接: ", TURL, dynamic_id)]
    return []


def _render(
    dynamic: dict[str, Any], card: dict[str, Any], ctype: int, vote: dict[str, Any]
) -> list[msg.Segment]:
    label = MSG_TYPE.get(ctype, "")
    segs: list[msg.Segment] = []
    if ctype == 1:
        segs.append(
            msg.text(_str(card, "user.uname"), label, "\n",
                     _str(card, "item.content"), "\n", "转发的内容: \n")
        )
        origin = _load(_get(card, "origin", ""))
        segs.extend(card_to_message(dynamic, origin, _int(card, "item.orig_type")))
    elif ctype == 2:
        segs.append(
            msg.text(_str(card, "user.name"), "在", _time(_int(card, "item.upload_time")),
                     label, "\n", _str(card, "item.description"))
        )
        segs.extend(msg.image(_str(p, "img_src")) for p in _get(card, "item.pictures", []))
    elif ctype == 4:
        segs.append(
            msg.text(_str(card, "user.uname"), "在", _time(_int(card, "item.timestamp")),
                     label, "\n", _str(card, "item.content"), "\n")
        )
        if _str(dynamic, "extension.vote"):
            segs.append(
                msg.text("【投票】", _str(vote, "desc"), "\n",
                         "截止日期: ", _time(_int(vote, "endtime")), "\n",
                         "参与人数: ", _human_num(_int(vote, "join_num")), "\n",
                         "投票选项( 最多选择", _int(vote, "choice_cnt"), "项 )\n")
            )
            for option in _get(vote, "options", []):
                segs.append(msg.text("- ", _int(option, "idx"), ". ", _str(option, "desc"), "\n"))
                img_url = _str(option, "img_url")
                if img_url:
                    segs.append(msg.image(img_url))
    elif ctype == 8:
        segs.append(
            msg.text(_str(card, "owner.name"), "在", _time(_int(card, "pubdate")), label, "\n",
                     _str(card, "title"))
        )
        segs.append(msg.image(_str(card, "pic")))
        segs.append(
            msg.text(_str(card, "desc"), "\n", _str(card, "share_subtitle"), "\n",
                     "视频链接: ", _str(card, "short_link"), "\n")
        )
    elif ctype == 16:
        segs.append(
            msg.text(_str(card, "user.name"), "在", _time(_int(card, "item.upload_time")),
                     label, "\n", _str(card, "item.description"))
        )
        segs.append(msg.image(_str(card, "item.cover.default")))
    elif ctype == 64:
        segs.append(
            msg.text(_str(card, "author.name"), "在", _time(_int(card, "publish_time")), label,
                     "\n", _str(card, "title"), "\n", _str(card, "summary"))
        )
        segs.extend(msg.image(str(u)) for u in _get(card, "image_urls", []))
        if _int(card, "id"):
            segs.append(msg.text("文章链接: " + ARTICLE_LINK, _int(card, "id"), "\n"))
    elif ctype == 256:
        segs.append(
            msg.text(_str(card, "upper"), "在", _time(_int(card, "ctime")), label, "\n",
                     _str(card, "title"))
        )
        segs.append(msg.image(_str(card, "cover")))
        segs.append(msg.text(_str(card, "intro"), "\n"))
        if _int(card, "id"):
            segs.append(msg.text("音频链接: " + AUDIO_LINK, _int(card, "id"), "\n"))
    elif ctype == 2048:
        segs.append(
            msg.text(_str(card, "user.uname"), label, "\n",
                     _str(card, "vest.content"), "\n",
                     _str(card, "sketch.title"), "\n",
                     _str(card, "sketch.desc_text"), "\n")
        )
        segs.append(msg.image(_str(card, "sketch.cover_url")))
        segs.append(msg.text("分享链接: ", _str(card, "sketch.target_url"), "\n"))
    elif ctype == 4308:
        uname = _str(dynamic, "desc.user_profile.info.uname")
        if uname:
            segs.append(msg.text(uname, label, "\n"))
        info = _get(card, "live_play_info", {})
        segs.append(msg.image(_str(info, "cover")))
        segs.append(
            msg.text("\n", _str(info, "title"), "\n", "房间号: ", _int(info, "room_id"), "\n",
                     "分区: ", _str(info, "parent_area_name"))
        )
        if _str(info, "parent_area_name") != _str(info, "area_name"):
            segs.append(msg.text("-", _str(info, "area_name")))
        if _int(info, "live_status") == 0:
            segs.append(msg.text("未开播 \n"))
        else:
            watched = _get(info, "watched_show", "")
            if isinstance(watched, dict):
                watched = watched.get("text_large", "")
            segs.append(msg.text("直播中 ", watched, "\n"))
        segs.append(msg.text("直播链接: ", _str(info, "link")))
    else:
        segs.append(
            msg.text("动态id: ", _str(dynamic, "desc.dynamic_id_str"), "未知动态类型: ", ctype, "\n")
        )
    return segs


def dynamic_to_message(dynamic: dict[str, Any]) -> list[msg.Segment]:
    """The chain for a dynamic; raises ValueError if its card is not valid JSON."""
    card = _load(_get(dynamic, "card", ""))
    vote: dict[str, Any] = {}
    vote_raw = _str(dynamic, "extension.vote")
    if vote_raw:
        vote = _load(vote_raw)
    segs = _render(dynamic, card, _int(dynamic, "desc.type"), vote)
    return segs + _dynamic_link(dynamic)


def card_to_message(
    dynamic: dict[str, Any], card: dict[str, Any], card_type: int
) -> list[msg.Segment]:
    """The chain for a card of ``card_type`` that belongs to ``dynamic``."""
    segs = _render(dynamic, _load(card), int(card_type), {})
    return segs + _dynamic_link(dynamic)


def article_to_message(card: dict[str, Any], article_id: str) -> list[msg.Segment]:
    """The chain for an article."""
    segs = [msg.image(str(u)) for u in _get(card, "origin_image_urls", [])]
    segs.append(
        msg.text("\n", _str(card, "title"), "\n", "UP主: ", _str(card, "author_name"), "\n",
                 "阅读: ", _human_num(_int(card, "stats.view")),
                 " 评论: ", _human_num(_int(card, "stats.reply")), "\n",
                 CVURL, article_id)
    )
    return segs


def live_room_to_message(card: dict[str, Any]) -> list[msg.Segment]:
    """The chain for a live room."""
    room = _get(card, "room_info", {})
    short_id = _int(room, "short_id")
    segs = [msg.image(_str(room, "keyframe"))]
    segs.append(
        msg.text("\n", _str(room, "title"), "\n",
                 "主播: ", _str(card, "anchor_info.base_info.uname"), "\n",
                 "房间号: ", _int(room, "room_id"), "\n")
    )
    if short_id:
        segs.append(msg.text("短号: ", short_id, "\n"))
    segs.append(msg.text("分区: ", _str(room, "parent_area_name")))
    if _str(room, "parent_area_name") != _str(room, "area_name"):
        segs.append(msg.text("-", _str(room, "area_name")))
    if _int(room, "live_status") == 0:
        segs.append(msg.text("未开播 \n"))
    else:
        segs.append(msg.text("直播中 ", _human_num(_int(room, "online")), "人气\n"))
    room_link = short_id if short_id else _int(room, "room_id")
    segs.append(msg.text("直播间链接: ", LURL, room_link))
    return segs


def video_to_message(card: dict[str, Any], fans: int) -> list[msg.Segment]:
    """The chain for a video; ``fans`` is the uploader's follower count."""
    segs = [msg.text("标题: ", _str(card, "title"), "\n")]
    if _int(card, "rights.is_cooperation") == 1:
        for member in _get(card, "staff", []):
            segs.append(
                msg.text(_str(member, "title"), ": ", _str(member, "name"),
                         " 粉丝: ", _human_num(_int(member, "follower")), "\n")
            )
    else:
        segs.append(msg.text("UP主: ", _str(card, "owner.name"), " 粉丝: ", _human_num(fans), "\n"))
    segs.append(
        msg.text("播放: ", _human_num(_int(card, "stat.view")),
                 " 弹幕: ", _human_num(_int(card, "stat.danmaku")))
    )
    segs.append(msg.image(_str(card, "pic")))
    segs.append(
        msg.text("\n点赞: ", _human_num(_int(card, "stat.like")),
                 " 投币: ", _human_num(_int(card, "stat.coin")), "\n",
                 "收藏: ", _human_num(_int(card, "stat.favorite")),
                 " 分享: ", _human_num(_int(card, "stat.share")), "\n",
                 VURL, _str(card, "bvid"))
    )
    return segs