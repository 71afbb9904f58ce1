import random

import pytest

from deskshell.focus import FocusStack
from tests.conftest import make_window


def z_values(stack):
    return {w.id: w.z_index for w in stack.ordered()}


def assert_permutation(stack):
    assert sorted(w.z_index for w in stack.ordered()) == list(range(len(stack)))


def test_initialize_assigns_mount_order(stack):
    assert z_values(stack) == {"a": 0, "b": 1, "c": 2}
    assert stack.topmost().id == "c"


def test_promote_bottom_window(stack):
    assert stack.promote("a")
    assert z_values(stack) == {"a": 2, "b": 0, "c": 1}


def test_promote_middle_window(stack):
    stack.promote("b")
    assert z_values(stack) == {"a": 0, "b": 2, "c": 1}


def test_promote_topmost_changes_nothing(stack):
    before = z_values(stack)
    stack.promote("c")
    assert z_values(stack) == before


def test_promote_unknown_is_noop(stack):
    before = z_values(stack)
    assert not stack.promote("nope")
    assert z_values(stack) == before


def test_promote_single_window():
    stack = FocusStack([make_window("solo")])
    stack.promote("solo")
    assert stack.get("solo").z_index == 0


def test_mount_goes_on_top(stack):
    stack.mount(make_window("d"))
    assert stack.topmost().id == "d"
    assert_permutation(stack)


def test_mount_duplicate_raises(stack):
    with pytest.raises(ValueError):
        stack.mount(make_window("a"))


def test_unmount_closes_gap(stack):
    removed = stack.unmount("a")
    assert removed.id == "a"
    assert "a" not in stack
    assert z_values(stack) == {"b": 0, "c": 1}


def test_unmount_unknown_returns_none(stack):
    assert stack.unmount("zzz") is None
    assert len(stack) == 3


def test_initialize_replaces_registry(stack):
    stack.initialize([make_window("x"), make_window("y")])
    assert z_values(stack) == {"x": 0, "y": 1}


def test_random_sequences_keep_permutation():
    rng = random.Random(7)
    stack = FocusStack()
    next_id = 0
    for _ in range(300):
        op = rng.choice(["mount", "unmount", "promote", "promote"])
        ids = [w.id for w in stack.ordered()]
        if op == "mount" or not ids:
            stack.mount(make_window(f"w{next_id}"))
            next_id += 1
        elif op == "unmount":
            stack.unmount(rng.choice(ids))
        else:
            target = rng.choice(ids)
            stack.promote(target)
            assert stack.topmost().id == target
        assert_permutation(stack)


def test_promote_preserves_relative_order_below():
    stack = FocusStack([make_window(i) for i in "abcde"])
    stack.promote("c")
    assert [w.id for w in stack.ordered()] == ["a", "b", "d", "e", "c"]
