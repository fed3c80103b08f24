"""Tests for the editable character buffer."""

import pytest

from maskedprompt.cursor import StringCursor


def test_new_cursor_is_placed_after_text() -> None:
    cursor = StringCursor("abc")

    assert str(cursor) == "abc"
    assert len(cursor) == 3
    assert cursor.position == 3


def test_insert_in_the_middle() -> None:
    cursor = StringCursor("ac")
    cursor.move_left()
    cursor.insert("b")

    assert str(cursor) == "abc"
    assert cursor.position == 2


def test_insert_rejects_multiple_characters() -> None:
    with pytest.raises(ValueError):
        StringCursor().insert("ab")


def test_delete_left_and_right() -> None:
    cursor = StringCursor("abcd")
    cursor.move_left()
    cursor.move_left()

    cursor.delete_left()
    assert str(cursor) == "acd"
    assert cursor.position == 1

    cursor.delete_right()
    assert str(cursor) == "ad"
    assert cursor.position == 1


def test_deletes_at_the_edges_do_nothing() -> None:
    cursor = StringCursor("ab")
    cursor.delete_right()
    assert str(cursor) == "ab"

    cursor.move_home()
    cursor.delete_left()
    assert str(cursor) == "ab"
    assert cursor.position == 0


def test_movement_is_clamped() -> None:
    cursor = StringCursor("ab")
    cursor.move_right()
    assert cursor.position == 2

    cursor.move_home()
    cursor.move_left()
    assert cursor.position == 0

    cursor.move_end()
    assert cursor.position == 2


def test_clear() -> None:
    cursor = StringCursor("secret")
    cursor.clear()

    assert str(cursor) == ""
    assert cursor.position == 0


def test_copy_is_independent() -> None:
    cursor = StringCursor("abc")
    cursor.move_left()

    duplicate = cursor.copy()
    duplicate[0] = "x"
    duplicate.move_home()

    assert str(cursor) == "abc"
    assert cursor.position == 2
    assert str(duplicate) == "xbc"
    assert duplicate.position == 0


def test_setitem_overwrites_in_place() -> None:
    cursor = StringCursor("abc")
    for index in range(len(cursor)):
        cursor[index] = "*"

    assert str(cursor) == "***"
    assert cursor.position == 3
    assert list(cursor) == ["*", "*", "*"]

    with pytest.raises(ValueError):
        cursor[0] = "**"


@pytest.mark.parametrize(
    "text, moves_left, expected",
    [
        ("", 0, ("", " ", "")),
        ("abc", 0, ("abc", " ", "")),
        ("abc", 1, ("ab", "c", "")),
        ("abc", 3, ("", "a", "bc")),
    ],
)
def test_split_around_cursor(text: str, moves_left: int, expected: tuple) -> None:
    cursor = StringCursor(text)
    for _ in range(moves_left):
        cursor.move_left()

    assert cursor.split() == expected
