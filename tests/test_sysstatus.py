from types import SimpleNamespace
from unittest import mock

import pytest

from zbplugin.sysstatus import (
    cpu_percent,
    decode_limit,
    disk_report,
    encode_limit,
    mem_percent,
    parse_limit,
    status_report,
)


@pytest.mark.parametrize("interval,burst", [(1, 1), (60, 5), (65535, 65535), (120, 0)])
def test_limit_round_trip(interval, burst):
    assert decode_limit(encode_limit(interval, burst)) == (interval, burst)


def test_decode_zero():
    assert decode_limit(0) == (0, 0)


def test_parse_limit_minutes():
    assert parse_limit("2", "分钟", "5") == (120, 5)


def test_parse_limit_seconds():
    assert parse_limit("30", "秒", "3") == (30, 3)


@pytest.mark.parametrize("number,unit,burst", [("0", "秒", "1"), ("1093", "分钟", "1"), ("65536", "秒", "1")])
def test_parse_limit_bad_interval(number, unit, burst):
    with pytest.raises(ValueError, match="interval"):
        parse_limit(number, unit, burst)


@pytest.mark.parametrize("burst", ["0", "65536"])
def test_parse_limit_bad_burst(burst):
    with pytest.raises(ValueError, match="burst"):
        parse_limit("10", "秒", burst)


def test_cpu_percent_error():
    with mock.patch("psutil.cpu_percent", side_effect=OSError("no")):
        assert cpu_percent() == -1


def test_mem_percent_value():
    with mock.patch("psutil.virtual_memory", return_value=SimpleNamespace(percent=40.0)):
        assert mem_percent() == 40


def test_disk_report_format():
    parts = [
        SimpleNamespace(mountpoint="/"),
        SimpleNamespace(mountpoint="/boot"),
        SimpleNamespace(mountpoint="/x"),
    ]
    usages = {
        "/": SimpleNamespace(total=2048 * 1024 * 1024, percent=25.0),
        "/boot": SimpleNamespace(total=1024 * 1024, percent=0.2),
    }

    def usage(mp):
        if mp in usages:
            return usages[mp]
        raise OSError("denied")

    with mock.patch("psutil.disk_partitions", return_value=parts), \
            mock.patch("psutil.disk_usage", side_effect=usage):
        assert disk_report() == "\n  - /(2048M) 25%\n  - denied"


def test_status_report():
    with mock.patch("psutil.cpu_percent", return_value=12.0), \
            mock.patch("psutil.virtual_memory", return_value=SimpleNamespace(percent=40.0)), \
            mock.patch("psutil.disk_partitions", return_value=[]):
        assert status_report() == "* CPU占用: 12%\n* RAM占用: 40%\n* 硬盘使用: "