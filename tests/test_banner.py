import ast
import subprocess
from datetime import datetime
from unittest import mock

import pytest

from zbplugin import banner


def _assignments(source):
    tree = ast.parse(source)
    values = {}
    for node in tree.body:
        if isinstance(node, ast.Assign):
            values[node.targets[0].id] = ast.literal_eval(node.value)
    return values


def test_make_banner_contains_version_and_time():
    text = banner.make_banner("v9.9.9", "sometime")
    lines = text.split("\n")
    assert lines[1] == "* Version v9.9.9 - sometime"


def test_default_banner_uses_version():
    text = banner.make_banner()
    assert text == banner.BANNER
    assert text.split("\n")[1] == f"* Version {banner.VERSION} - {banner.BUILT}"


def test_latest_tag_takes_last_line():
    assert banner.latest_tag("v1.0.0\nv1.1.0\nv1.2.0\n") == "v1.2.0"


@pytest.mark.parametrize("output", ["", "v1.0.0"])
def test_latest_tag_without_tags(output):
    with pytest.raises(ValueError):
        banner.latest_tag(output)


def test_render_module_round_trip():
    now = datetime(2023, 1, 13, 0, 49, 39)
    values = _assignments(banner.render_module("v1.6.1", now))
    assert values["VERSION"] == "v1.6.1"
    assert values["BUILT"] == "2023-01-13 00:49:39 +0800 CST"


def test_generate_writes_module(tmp_path):
    done = subprocess.CompletedProcess(args=[], returncode=0, stdout="v0.1\nv0.2\n")
    target = tmp_path / "build_info.py"
    with mock.patch("zbplugin.banner.subprocess.run", return_value=done) as run:
        version = banner.generate(target, datetime(2022, 5, 1, 12, 0, 0))
    assert version == "v0.2"
    assert run.call_args[0][0] == ["git", "tag", "--sort=committerdate"]
    values = _assignments(target.read_text(encoding="utf-8"))
    assert values["VERSION"] == "v0.2"
    assert values["BUILT"] == "2022-05-01 12:00:00 +0800 CST"