import pytest

from zbplugin.bilibili_store import Push, PushStore, Vup, VupStore


@pytest.fixture
def store(tmp_path):
    with PushStore(tmp_path / "push.db") as s:
        yield s


@pytest.fixture
def vups(tmp_path):
    with VupStore(tmp_path / "vup.db") as s:
        yield s


def test_subscribe_enables_both(store):
    store.subscribe(10, 100)
    assert store.live_uids() == [10]
    assert store.dynamic_uids() == [10]
    assert store.groups_for_live(10) == [100]
    assert store.groups_for_dynamic(10) == [100]


def test_unsubscribe_live_keeps_dynamic(store):
    store.subscribe(10, 100)
    store.unsubscribe_live(10, 100)
    assert store.live_uids() == []
    assert store.dynamic_uids() == [10]
    pushes = store.pushes_for_group(100)
    assert [(p.bilibili_uid, p.live_disable, p.dynamic_disable) for p in pushes] == [(10, 1, 0)]


def test_unsubscribe_dynamic_keeps_live(store):
    store.subscribe(10, 100)
    store.unsubscribe_dynamic(10, 100)
    assert store.groups_for_dynamic(10) == []
    assert store.groups_for_live(10) == [100]


def test_full_unsubscribe_hides_push(store):
    store.subscribe(10, 100)
    store.unsubscribe(10, 100)
    assert store.pushes_for_group(100) == []
    assert store.live_uids() == []


def test_new_partial_unsubscribe_creates_row(store):
    store.unsubscribe_live(7, -5)
    assert store.pushes_for_group(-5)[0].dynamic_disable == 0
    assert store.dynamic_uids() == [7]


def test_resubscribe_does_not_duplicate(store):
    store.subscribe(10, 100)
    store.unsubscribe(10, 100)
    store.subscribe(10, 100)
    assert len(store.pushes_for_group(100)) == 1


def test_uids_distinct_in_order(store):
    store.subscribe(3, 1)
    store.subscribe(2, 1)
    store.subscribe(3, 2)
    assert store.live_uids() == [3, 2]
    assert store.groups_for_live(3) == [1, 2]


def test_push_record_fields(store):
    store.subscribe(10, 100)
    push = store.pushes_for_group(100)[0]
    assert isinstance(push, Push)
    assert (push.bilibili_uid, push.group_id) == (10, 100)


def test_up_names_keep_first(store):
    store.add_up(10, "first")
    store.add_up(10, "second")
    store.add_up(11, "other")
    assert store.up_names() == {10: "first", 11: "other"}


def test_vup_insert_and_filter(vups):
    vups.insert(1, "a", 100)
    vups.insert(2, "b", 200)
    vups.insert(1, "changed", 999)
    assert vups.filter([1, 3]) == [Vup(1, "a", 100)]
    assert vups.filter([]) == []


def test_vup_update_from(vups):
    count = vups.update_from([{"mid": 5, "uname": "x", "roomid": 50}, {"mid": 6, "uname": "y", "roomid": 60}])
    assert count == 2
    assert [v.mid for v in vups.filter([5, 6])] == [5, 6]