"""
module maskedprompt.cursor.stringcursor

Contains the definition of the StringCursor class, an editable sequence of
characters paired with an insertion point
"""

from typing import Iterator, List, Tuple


class StringCursor:
    """
    class StringCursor

    An editable sequence of characters paired with an insertion point. The
    position is always in the range [0, len(chars)] where len(chars) means the
    cursor sits after the last character.
    """

    __chars: List[str]
    __position: int

    def __init__(self: "StringCursor", text: str = "") -> None:
        self.__chars = list(text)
        self.__position = len(self.__chars)

    def __getitem__(self: "StringCursor", index: int) -> str:
        return self.__chars[index]

    def __iter__(self: "StringCursor") -> Iterator[str]:
        return iter(self.__chars)

    def __len__(self: "StringCursor") -> int:
        return len(self.__chars)

    def __repr__(self: "StringCursor") -> str:
        return f"{type(self).__name__}({str(self)!r}, position={self.__position})"

    def __setitem__(self: "StringCursor", index: int, char: str) -> None:
        if len(char) != 1:
            raise ValueError(f"Expected a single character but got {char!r}")

        self.__chars[index] = char

    def __str__(self: "StringCursor") -> str:
        return "".join(self.__chars)

    def clear(self: "StringCursor") -> None:
        """
        Removes all characters from this cursor and resets the position

        Args:
            None

        Returns:
            Nothing

        Raises:
            Nothing
        """

        self.__chars.clear()
        self.__position = 0

    def copy(self: "StringCursor") -> "StringCursor":
        """
        Returns an independent copy of this cursor with the same characters
        and position

        Args:
            None

        Returns:
            StringCursor: The copied cursor

        Raises:
            Nothing
        """

        duplicate: StringCursor = StringCursor(str(self))
        duplicate.__position = self.__position

        return duplicate

    def delete_left(self: "StringCursor") -> None:
        """
        Removes the character before the cursor (i.e., backspace). Does nothing
        when the cursor is at the beginning

        Args:
            None

        Returns:
            Nothing

        Raises:
            Nothing
        """

        if self.__position == 0:
            return

        self.__position -= 1
        del self.__chars[self.__position]

    def delete_right(self: "StringCursor") -> None:
        """
        Removes the character under the cursor (i.e., delete). Does nothing
        when the cursor is at the end

        Args:
            None

        Returns:
            Nothing

        Raises:
            Nothing
        """

        if self.__position < len(self.__chars):
            del self.__chars[self.__position]

    def insert(self: "StringCursor", char: str) -> None:
        """
        Inserts a character at the cursor and advances the cursor past it

        Args:
            char (str): The character to insert

        Returns:
            Nothing

        Raises:
            ValueError: If char is not exactly one character
        """

        if len(char) != 1:
            raise ValueError(f"Expected a single character but got {char!r}")

        self.__chars.insert(self.__position, char)
        self.__position += 1

    def move_end(self: "StringCursor") -> None:
        self.__position = len(self.__chars)

    def move_home(self: "StringCursor") -> None:
        self.__position = 0

    def move_left(self: "StringCursor") -> None:
        self.__position = max(0, self.__position - 1)

    def move_right(self: "StringCursor") -> None:
        self.__position = min(len(self.__chars), self.__position + 1)

    @property
    def position(self: "StringCursor") -> int:
        """
        Returns the current insertion point of this cursor

        Args:
            None

        Returns:
            int: The index of the character under the cursor

        Raises:
            Nothing
        """

        return self.__position

    def split(self: "StringCursor") -> Tuple[str, str, str]:
        """
        Splits the contents of this cursor around the insertion point for
        rendering

        Args:
            None

        Returns:
            Tuple[str, str, str]: The text before the cursor, the character
                under the cursor (a single space if the cursor is at the end)
                and the text after it

        Raises:
            Nothing
        """

        left: str = "".join(self.__chars[: self.__position])
        if self.__position >= len(self.__chars):
            return left, " ", ""

        return (
            left,
            self.__chars[self.__position],
            "".join(self.__chars[self.__position + 1 :]),
        )
