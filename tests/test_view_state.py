from __future__ import annotations

import itertools
import random

import pytest

from rtt.buffer import Buffer, Motion, Position, ViewState


def make_view(x: int = 0, y: int = 0) -> ViewState:
    return ViewState(cursor=Position(x, y))


def test_right_at_line_end_wraps_to_next_line() -> None:
    buffer = Buffer(["abc", "de"])
    view = make_view(3, 0)

    assert view.move(Motion.RIGHT, buffer, height=10) == Position(0, 1)


def test_left_at_line_start_wraps_to_previous_line_end() -> None:
    buffer = Buffer(["abc", "de"])
    view = make_view(0, 1)

    assert view.move(Motion.LEFT, buffer, height=10) == Position(3, 0)


def test_left_at_origin_stays_put() -> None:
    view = make_view()

    assert view.move(Motion.LEFT, Buffer(["abc"]), height=10) == Position(0, 0)


def test_right_on_last_line_end_moves_past_document() -> None:
    buffer = Buffer(["ab"])
    view = make_view(2, 0)

    assert view.move(Motion.RIGHT, buffer, height=10) == Position(0, 1)
    assert view.move(Motion.RIGHT, buffer, height=10) == Position(0, 1)


def test_vertical_moves_clamp_column_to_shorter_line() -> None:
    buffer = Buffer(["long line", "ab", "another long"])
    view = make_view(8, 0)

    assert view.move(Motion.DOWN, buffer, height=10) == Position(2, 1)
    assert view.move(Motion.DOWN, buffer, height=10) == Position(2, 2)
    assert view.move(Motion.DOWN, buffer, height=10) == Position(0, 3)
    assert view.move(Motion.DOWN, buffer, height=10) == Position(0, 3)
    assert view.move(Motion.UP, buffer, height=10) == Position(0, 2)


def test_page_moves_use_viewport_height() -> None:
    buffer = Buffer([str(n) for n in range(30)])
    view = make_view(0, 12)

    assert view.move(Motion.PAGE_UP, buffer, height=5) == Position(0, 7)
    assert view.move(Motion.PAGE_UP, buffer, height=10) == Position(0, 0)
    assert view.move(Motion.PAGE_DOWN, buffer, height=25) == Position(0, 25)
    assert view.move(Motion.PAGE_DOWN, buffer, height=25) == Position(0, 30)


def test_home_and_end() -> None:
    buffer = Buffer(["hello"])
    view = make_view(2, 0)

    assert view.move(Motion.END, buffer, height=5) == Position(5, 0)
    assert view.move(Motion.HOME, buffer, height=5) == Position(0, 0)


def test_scroll_moves_only_as_far_as_needed() -> None:
    view = make_view(0, 10)

    assert view.scroll(width=20, height=4) == Position(0, 7)
    view.cursor = Position(0, 8)
    assert view.scroll(width=20, height=4) == Position(0, 7)
    view.cursor = Position(0, 2)
    assert view.scroll(width=20, height=4) == Position(0, 2)


def test_scroll_horizontally() -> None:
    view = make_view(25, 0)

    assert view.scroll(width=10, height=5) == Position(16, 0)
    view.cursor = Position(3, 0)
    assert view.scroll(width=10, height=5) == Position(3, 0)


@pytest.mark.parametrize("seed", range(5))
def test_cursor_stays_visible_after_any_navigation(seed: int) -> None:
    rng = random.Random(seed)
    buffer = Buffer(["x" * rng.randint(0, 40) for _ in range(50)])
    view = ViewState()
    width, height = 12, 7
    motions = list(Motion)

    for motion in itertools.islice(iter(lambda: rng.choice(motions), None), 300):
        view.move(motion, buffer, height=height)
        view.scroll(width=width, height=height)
        x, y = view.cursor
        assert view.offset.y <= y < view.offset.y + height
        assert view.offset.x <= x < view.offset.x + width
        line = buffer.line_at(y)
        assert x <= (len(line) if line is not None else 0)


def test_scroll_with_buffer_counts_rendered_columns() -> None:
    buffer = Buffer(["\tab"])
    view = make_view(1, 0)

    assert view.scroll(width=5, height=5, buffer=buffer) == Position(4, 0)
    view.cursor = Position(0, 0)
    assert view.scroll(width=5, height=5, buffer=buffer) == Position(0, 0)
