"""Content-audit settings per group and the handling of audit verdicts."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from zbplugin import message as msg

TYPE_COUNT = 8
TYPE_TEXT: tuple[str, ...] = (
    "默认违禁词库",
    "违禁违规",
    "文本色情",
    "敏感信息",
    "恶意推广",
    "低俗辱骂",
    "恶意推广-联系方式",
    "恶意推广-软文推广",
)

NON_COMPLIANT = 2

ENABLE = "开启"
DISABLE = "关闭"
NEGATE = "不"

TOGGLE_FEATURES: dict[str, str] = {
    "内容审核": "enable",
    "撤回提示": "dm_remind",
    "撤回禁言": "dm_ban",
    "禁言累加": "ban_time_add_enable",
    "详细提示": "more_remind",
    "文本检测": "text_audit",
    "图像检测": "image_audit",
}

TIME_KINDS: dict[str, str] = {
    "最大": "max_ban_time_add_range",
    "每次": "ban_time_add_time",
    "撤回": "ban_time",
}

_MAX_MINUTES = 99999


def enable_label(flag: bool) -> str:
    """The label shown for an on/off setting."""
    return ENABLE if flag else DISABLE


@dataclass
class Hit:
    """Details of one rule the audited content matched."""

    dataset_name: str = ""
    words: list[str] = field(default_factory=list)
    probability: float = 0.0

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Hit:
        return cls(
            dataset_name=str(raw.get("datasetName", "")),
            words=[str(w) for w in raw.get("words") or []],
            probability=float(raw.get("probability", 0.0) or 0.0),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"datasetName": self.dataset_name, "words": list(self.words)}
        if self.probability:
            out["probability"] = self.probability
        return out


@dataclass
class AuditData:
    """One finding of an audit."""

    type: int = 0
    sub_type: int = 0
    conclusion: str = ""
    conclusion_type: int = 0
    msg: str = ""
    hits: list[Hit] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> AuditData:
        return cls(
            type=int(raw.get("type", 0)),
            sub_type=int(raw.get("subType", 0)),
            conclusion=str(raw.get("conclusion", "")),
            conclusion_type=int(raw.get("conclusionType", 0)),
            msg=str(raw.get("msg", "")),
            hits=[Hit.from_dict(h) for h in raw.get("hits") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "subType": self.sub_type,
            "conclusion": self.conclusion,
            "conclusionType": self.conclusion_type,
            "msg": self.msg,
            "hits": [h.to_dict() for h in self.hits],
        }


@dataclass
class AuditResult:
    """The answer of the audit service."""

    log_id: int = 0
    conclusion: str = ""
    conclusion_type: int = 0
    data: list[AuditData] = field(default_factory=list)
    error_code: int = 0
    error_msg: str = ""

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> AuditResult:
        return cls(
            log_id=int(raw.get("log_id", 0)),
            conclusion=str(raw.get("conclusion", "")),
            conclusion_type=int(raw.get("conclusionType", 0)),
            data=[AuditData.from_dict(d) for d in raw.get("data") or []],
            error_code=int(raw.get("error_code", 0)),
            error_msg=str(raw.get("error_msg", "")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "log_id": self.log_id,
            "conclusion": self.conclusion,
            "conclusionType": self.conclusion_type,
            "data": [d.to_dict() for d in self.data],
            "error_code": self.error_code,
            "error_msg": self.error_msg,
        }


def parse_result(text: str) -> AuditResult:
    """Decode the service's JSON answer; raises ValueError on malformed input."""
    raw = json.loads(text)
    if not isinstance(raw, dict):
        raise ValueError("audit result must be a JSON object")
    return AuditResult.from_dict(raw)


@dataclass
class AuditHistory:
    """How often a user was punished, and why."""

    count: int = 0
    results: list[AuditResult] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> AuditHistory:
        return cls(
            count=int(raw.get("key2", 0)),
            results=[AuditResult.from_dict(r) for r in raw.get("reslist") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        return {"key2": self.count, "reslist": [r.to_dict() for r in self.results]}


def _whitelist(raw: Any) -> list[bool]:
    values = [bool(v) for v in (raw or [])][:TYPE_COUNT]
    return values + [False] * (TYPE_COUNT - len(values))


@dataclass
class GroupSettings:
    """The audit settings of one group."""

    enable: bool = False
    text_audit: bool = True
    image_audit: bool = True
    dm_remind: bool = False
    more_remind: bool = False
    dm_ban: bool = False
    ban_time_add_enable: bool = False
    ban_time: int = 1
    max_ban_time_add_range: int = 60
    ban_time_add_time: int = 1
    white_list_type: list[bool] = field(default_factory=lambda: [False] * TYPE_COUNT)
    audit_history: dict[int, AuditHistory] = field(default_factory=dict)

    def get_user(self, user_id: int) -> AuditHistory:
        """The user's history, created empty if there is none yet."""
        history = self.audit_history.get(user_id)
        if history is None:
            history = self.audit_history[user_id] = AuditHistory()
        return history

    def ignores(self, sub_type: int) -> bool:
        """Whether findings of ``sub_type`` are exempt in this group."""
        return 0 <= sub_type < TYPE_COUNT and self.white_list_type[sub_type]

    def ban_seconds(self, count: int) -> int:
        """The ban length for a user punished ``count`` times."""
        if self.ban_time_add_enable:
            return count * self.ban_time_add_time * 60
        return self.ban_time * 60

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> GroupSettings:
        return cls(
            enable=bool(raw.get("Enable", False)),
            text_audit=bool(raw.get("TextAudit", False)),
            image_audit=bool(raw.get("ImageAudit", False)),
            dm_remind=bool(raw.get("DMRemind", False)),
            more_remind=bool(raw.get("MoreRemind", False)),
            dm_ban=bool(raw.get("DMBAN", False)),
            ban_time_add_enable=bool(raw.get("BANTimeAddEnable", False)),
            ban_time=int(raw.get("BANTime", 0)),
            max_ban_time_add_range=int(raw.get("MaxBANTimeAddRange", 0)),
            ban_time_add_time=int(raw.get("BANTimeAddTime", 0)),
            white_list_type=_whitelist(raw.get("WhiteListType")),
            audit_history={
                int(uid): AuditHistory.from_dict(h)
                for uid, h in (raw.get("AuditHistory") or {}).items()
            },
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "Enable": self.enable,
            "TextAudit": self.text_audit,
            "ImageAudit": self.image_audit,
            "DMRemind": self.dm_remind,
            "MoreRemind": self.more_remind,
            "DMBAN": self.dm_ban,
            "BANTimeAddEnable": self.ban_time_add_enable,
            "BANTime": self.ban_time,
            "MaxBANTimeAddRange": self.max_ban_time_add_range,
            "BANTimeAddTime": self.ban_time_add_time,
            "WhiteListType": list(self.white_list_type),
            "AuditHistory": {str(uid): h.to_dict() for uid, h in self.audit_history.items()},
        }


@dataclass
class AuditConfig:
    """Service keys and the settings of every group."""

    key1: str = ""
    key2: str = ""
    groups: dict[int, GroupSettings] = field(default_factory=dict)

    def group(self, group_id: int) -> GroupSettings:
        """The group's settings, created with defaults if missing."""
        settings = self.groups.get(group_id)
        if settings is None:
            settings = self.groups[group_id] = GroupSettings()
        return settings

    def to_dict(self) -> dict[str, Any]:
        return {
            "key1": self.key1,
            "key2": self.key2,
            "groups": {str(gid): g.to_dict() for gid, g in self.groups.items()},
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> AuditConfig:
        return cls(
            key1=str(raw.get("key1", "")),
            key2=str(raw.get("key2", "")),
            groups={
                int(gid): GroupSettings.from_dict(g)
                for gid, g in (raw.get("groups") or {}).items()
            },
        )

    def save(self, path: str | Path) -> None:
        """Write the configuration as JSON."""
        Path(path).write_text(
            json.dumps(self.to_dict(), ensure_ascii=False) + "\n", encoding="utf-8"
        )


def load_config(path: str | Path) -> AuditConfig:
    """Read the configuration; an empty one when the file does not exist."""
    p = Path(path)
    if not p.exists():
        return AuditConfig()
    with p.open(encoding="utf-8") as fh:
        return AuditConfig.from_dict(json.load(fh))


def type_report(group: GroupSettings) -> str:
    """The finding types the group checks for."""
    lines = [
        f"\n{i}.{TYPE_TEXT[i]}" for i, ignored in enumerate(group.white_list_type) if not ignored
    ]
    return "本群检测类型:" + ("".join(lines) if lines else "无")


def settings_report(group: GroupSettings) -> str:
    """A summary of every setting of the group."""
    return (
        "本群配置:\n"
        f"内容审核:{enable_label(group.enable)}\n"
        f"-文本:{enable_label(group.text_audit)}\n"
        f"-图像:{enable_label(group.image_audit)}\n"
        f"撤回提示:{enable_label(group.dm_remind)}\n"
        f"-详细提示:{enable_label(group.more_remind)}\n"
        f"撤回禁言:{enable_label(group.dm_ban)}\n"
        f"-禁言累加:{enable_label(group.ban_time_add_enable)}\n"
        f"-撤回禁言时间:{group.ban_time}分钟\n"
        f"-每次累加时间:{group.ban_time_add_time}分钟\n"
        f"-最大禁言时间:{group.max_ban_time_add_range}分钟"
    )


def apply_toggle(group: GroupSettings, action: str, feature: str) -> str:
    """Switch ``feature`` on (开启) or off (关闭); return the reply."""
    if action not in (ENABLE, DISABLE):
        raise ValueError(f"unknown action: {action}")
    attr = TOGGLE_FEATURES.get(feature)
    if attr is None:
        raise ValueError(f"unknown feature: {feature}")
    setattr(group, attr, action == ENABLE)
    return f"本群{feature}已{action}"


def apply_type(group: GroupSettings, negate: bool, index: int) -> str:
    """Exempt (``negate``) or check a finding type; return the reply."""
    if not 0 <= index < TYPE_COUNT:
        raise ValueError(f"type must be between 0 and {TYPE_COUNT - 1}")
    group.white_list_type[index] = bool(negate)
    return f"本群将{NEGATE if negate else ''}检测{TYPE_TEXT[index]}类型内容"


def apply_time(group: GroupSettings, kind: str, minutes: int) -> str:
    """Set one of the ban durations (最大, 每次, 撤回) in minutes; return the reply."""
    attr = TIME_KINDS.get(kind)
    if attr is None:
        raise ValueError(f"unknown time setting: {kind}")
    value = int(minutes)
    if not 0 <= value <= _MAX_MINUTES:
        raise ValueError("time out of range")
    setattr(group, attr, value)
    return f"本群{kind}禁言累加时间已设置为{value}"


def build_response(result: AuditResult, group: GroupSettings) -> list[msg.Segment]:
    """The reply describing an audit result, detailed if the group asks for it."""
    segments = [msg.text(result.conclusion, "\n")]
    if not group.more_remind:
        return segments
    for i, datum in enumerate(result.data):
        segments.append(msg.text("[", i, "]:", datum.msg, "\n"))
        if not datum.hits:
            return segments
        for hit in datum.hits:
            segments.append(msg.text("("))
            last = len(hit.words) - 1
            for position, word in enumerate(hit.words):
                segments.append(msg.text(word, ",") if position != last else msg.text(word))
            segments.append(msg.text(")"))
    return segments


@dataclass
class Verdict:
    """What to do with a message found non-compliant."""

    delete: bool = True
    ban_seconds: int = 0
    notice: list[msg.Segment] | None = None


def check_violation(
    config: AuditConfig, group_id: int, user_id: int, result: AuditResult
) -> Verdict | None:
    """Decide on a message's audit result; None when nothing is to be done.

    The user's history in ``config`` is updated; saving it is up to the caller.
    """
    if result.conclusion_type != NON_COMPLIANT:
        return None
    group = config.group(group_id)
    if result.data and group.ignores(result.data[0].sub_type):
        return None
    response = build_response(result, group)
    verdict = Verdict(delete=True)
    if group.dm_ban:
        user = group.get_user(user_id)
        user.count += 1
        user.results.append(result)
        verdict.ban_seconds = group.ban_seconds(user.count)
    if group.dm_remind:
        response.append(msg.at(user_id))
        verdict.notice = response
    return verdict