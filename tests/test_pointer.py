from deskshell.pointer import (MOUSE_DOWN, MOUSE_MOVE, TOUCH_END, TOUCH_MOVE, TOUCH_START,
                               PointerEvent, event_position)


def test_mouse_position():
    assert event_position(PointerEvent(MOUSE_DOWN, client_x=12, client_y=34)) == (12, 34)


def test_touch_uses_first_point():
    event = PointerEvent(TOUCH_MOVE, touches=((5, 6), (100, 200)))
    assert event.is_touch
    assert event_position(event) == (5, 6)


def test_touch_without_points():
    assert event_position(PointerEvent(TOUCH_END)) is None
    assert event_position(PointerEvent(TOUCH_START, touches=())) is None


def test_prevent_default():
    event = PointerEvent(MOUSE_MOVE)
    assert not event.default_prevented
    event.prevent_default()
    assert event.default_prevented
