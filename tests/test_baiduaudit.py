import json

import pytest

from zbplugin import baiduaudit as ba
from zbplugin import message as msg


def _result(conclusion_type=2, sub_type=1, words=("a", "b")):
    return ba.parse_result(
        json.dumps(
            {
                "log_id": 7,
                "conclusion": "不合规",
                "conclusionType": conclusion_type,
                "data": [
                    {
                        "type": 12,
                        "subType": sub_type,
                        "conclusion": "不合规",
                        "conclusionType": conclusion_type,
                        "msg": "存在低俗辱骂不合规",
                        "hits": [{"datasetName": "set", "words": list(words)}],
                    }
                ],
            },
            ensure_ascii=False,
        )
    )


def test_enable_label():
    assert ba.enable_label(True) == "开启"
    assert ba.enable_label(False) == "关闭"


def test_parse_result_fields():
    result = _result()
    assert result.log_id == 7
    assert result.conclusion == "不合规"
    assert result.data[0].sub_type == 1
    assert result.data[0].hits[0].words == ["a", "b"]


def test_parse_result_rejects_garbage():
    with pytest.raises(ValueError):
        ba.parse_result("not json")


def test_group_defaults():
    config = ba.AuditConfig()
    group = config.group(100)
    assert group.text_audit and group.image_audit
    assert not group.enable
    assert (group.ban_time, group.max_ban_time_add_range, group.ban_time_add_time) == (1, 60, 1)
    assert config.group(100) is group


def test_type_report_default_lists_all_types():
    report = ba.type_report(ba.GroupSettings())
    assert report.startswith("本群检测类型:\n0.默认违禁词库")
    assert report.count("\n") == ba.TYPE_COUNT


def test_type_report_all_exempt():
    group = ba.GroupSettings()
    for i in range(ba.TYPE_COUNT):
        ba.apply_type(group, True, i)
    assert ba.type_report(group) == "本群检测类型:无"


def test_apply_type_message_and_effect():
    group = ba.GroupSettings()
    reply = ba.apply_type(group, True, 5)
    assert reply == "本群将不检测低俗辱骂类型内容"
    assert group.ignores(5)
    assert "5.低俗辱骂" not in ba.type_report(group)
    ba.apply_type(group, False, 5)
    assert not group.ignores(5)


def test_apply_type_rejects_bad_index():
    with pytest.raises(ValueError):
        ba.apply_type(ba.GroupSettings(), True, 8)


def test_apply_toggle():
    group = ba.GroupSettings()
    assert ba.apply_toggle(group, "开启", "内容审核") == "本群内容审核已开启"
    assert group.enable
    ba.apply_toggle(group, "关闭", "文本检测")
    assert not group.text_audit
    assert "内容审核:开启" in ba.settings_report(group)
    with pytest.raises(ValueError):
        ba.apply_toggle(group, "开启", "nothing")


def test_apply_time():
    group = ba.GroupSettings()
    ba.apply_time(group, "最大", 120)
    ba.apply_time(group, "每次", 3)
    ba.apply_time(group, "撤回", 9)
    assert (group.max_ban_time_add_range, group.ban_time_add_time, group.ban_time) == (120, 3, 9)
    with pytest.raises(ValueError):
        ba.apply_time(group, "other", 1)


def test_build_response_brief():
    segments = ba.build_response(_result(), ba.GroupSettings())
    assert segments == [msg.text("不合规", "\n")]


def test_build_response_detailed():
    group = ba.GroupSettings(more_remind=True)
    text = msg.plain_text(ba.build_response(_result(), group))
    assert text == "不合规\n[0]:存在低俗辱骂不合规\n(a,b)"


def test_check_violation_compliant_is_none():
    assert ba.check_violation(ba.AuditConfig(), 1, 2, _result(conclusion_type=1)) is None


def test_check_violation_exempt_type():
    config = ba.AuditConfig()
    ba.apply_type(config.group(1), True, 1)
    assert ba.check_violation(config, 1, 2, _result(sub_type=1)) is None


def test_check_violation_escalating_ban():
    config = ba.AuditConfig()
    group = config.group(1)
    group.dm_ban = True
    group.ban_time_add_enable = True
    group.ban_time_add_time = 2
    first = ba.check_violation(config, 1, 42, _result())
    second = ba.check_violation(config, 1, 42, _result())
    assert first.delete
    assert second.ban_seconds == 2 * first.ban_seconds
    assert group.get_user(42).count == 2
    assert len(group.get_user(42).results) == 2


def test_check_violation_remind_mentions_user():
    config = ba.AuditConfig()
    config.group(1).dm_remind = True
    verdict = ba.check_violation(config, 1, 42, _result())
    assert verdict.notice[-1] == msg.at(42)
    assert verdict.ban_seconds == 0


def test_ban_seconds_fixed():
    group = ba.GroupSettings(ban_time=5)
    assert group.ban_seconds(3) == group.ban_seconds(1) == 5 * 60


def test_config_round_trip(tmp_path):
    config = ba.AuditConfig(key1="placeholder", key2="secret")
    group = config.group(-9)
    ba.apply_toggle(group, "开启", "撤回禁言")
    group.get_user(7).results.append(_result())
    group.get_user(7).count = 1
    path = tmp_path / "config.json"
    config.save(path)
    loaded = ba.load_config(path)
    assert loaded == config


def test_load_missing_config(tmp_path):
    config = ba.load_config(tmp_path / "absent.json")
    assert config.groups == {}
    assert config.key1 == ""