import pytest

from deskshell.handles import (BODY, CONTROL, DESKTOP, RESIZE_KINDS, TITLEBAR, WINDOW, Element,
                               HandleKind, handle_kind, is_drag_handle, is_focusable)


@pytest.mark.parametrize("kind", list(HandleKind))
def test_every_handle_tag_is_draggable_and_focusable(kind):
    element = Element(kind.tag, "w1")
    assert handle_kind(element) is kind
    assert is_drag_handle(element)
    assert is_focusable(element)


def test_titlebar_is_the_move_handle():
    assert handle_kind(Element(TITLEBAR, "w1")) is HandleKind.MOVE
    assert not HandleKind.MOVE.is_resize
    assert len(RESIZE_KINDS) == 8


def test_body_is_focusable_but_not_draggable():
    body = Element(BODY, "w1")
    assert is_focusable(body)
    assert not is_drag_handle(body)
    assert handle_kind(body) is None


@pytest.mark.parametrize("tag", [WINDOW, CONTROL, DESKTOP, "wallpaper", ""])
def test_untagged_elements_are_neither(tag):
    element = Element(tag, "w1")
    assert not is_drag_handle(element)
    assert not is_focusable(element)


def test_absent_element():
    assert handle_kind(None) is None
    assert not is_drag_handle(None)
    assert not is_focusable(None)


def test_classification_is_stable():
    element = Element(HandleKind.RESIZE_SW.tag, "w1")
    first = (handle_kind(element), is_focusable(element))
    assert (handle_kind(element), is_focusable(element)) == first
