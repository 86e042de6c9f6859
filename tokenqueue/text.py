"""A mutable text buffer that tracks a capacity alongside its contents."""

from __future__ import annotations

import string
from typing import TextIO, Union

_WHITESPACE = " \t\n"
_DIGITS = frozenset(string.digits)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

TextLike = Union[str, "MutableString"]


def _plain(value: TextLike) -> str:
    """Return the text of ``value``, cut at the first NUL character."""
    return str(value).split("\0", 1)[0]


class MutableString:
    """Editable text with a capacity that counts room for a terminator.

    An empty buffer has capacity 0; a buffer built from non-empty text has
    capacity ``len(text) + 1``. Indexing is valid anywhere below the capacity.
    """

    __slots__ = ("_text", "_capacity")

    def __init__(self, value: TextLike = "") -> None:
        if isinstance(value, MutableString):
            self._text = value._text
            self._capacity = value._capacity
        else:
            self._text = _plain(value)
            self._capacity = len(self._text) + 1 if self._text else 0

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"MutableString({self._text!r}, capacity={self._capacity})"

    def __len__(self) -> int:
        return len(self._text)

    def _is_valid_index(self, index: int) -> bool:
        return 0 <= index < self._capacity

    def _clear(self) -> None:
        self._text = ""
        self._capacity = 0

    def __getitem__(self, index: int) -> str:
        if not self._is_valid_index(index):
            raise IndexError(f"index {index} out of range")
        return self._text[index] if index < len(self._text) else "\0"

    def __setitem__(self, index: int, char: str) -> None:
        if len(char) != 1:
            raise ValueError("exactly one character is required")
        if not self._is_valid_index(index):
            raise IndexError(f"index {index} out of range")
        if char == "\0":
            self._text = self._text[:index]
            return
        if index >= len(self._text):
            raise IndexError(f"index {index} is past the end of the text")
        self._text = self._text[:index] + char + self._text[index + 1:]

    def __iadd__(self, other: TextLike) -> MutableString:
        addition = _plain(other)
        if addition:
            self.resize(len(self._text) + len(addition) + 1)
            self._text += addition
        return self

    def __add__(self, other: TextLike) -> MutableString:
        return MutableString(self._text + _plain(other))

    def size(self) -> int:
        """Return the capacity, including room for the terminator."""
        return self._capacity

    def is_empty(self) -> bool:
        return not self._text

    def read_line(self, stream: TextIO) -> None:
        """Replace the contents with one line read from ``stream``."""
        line = stream.readline()
        if line.endswith("\n"):
            line = line[:-1]
        line = _plain(line)
        capacity = max(self._capacity, 1)
        while capacity <= len(line):
            capacity *= 2
        self._text = line
        self._capacity = capacity

    def resize(self, new_size: int) -> None:
        """Set the capacity, truncating the text to fit; non-positive clears."""
        if new_size <= 0:
            self._clear()
            return
        self._text = self._text[:new_size - 1]
        self._capacity = new_size

    def shrink(self) -> None:
        self.resize(len(self._text) + 1)

    def compare(self, other: TextLike) -> int:
        """Return -1, 0 or 1 as this text sorts before, equal to or after ``other``."""
        a, b = self._text, _plain(other)
        return (a > b) - (a < b)

    def find(self, sub: TextLike, start: int = 0) -> int:
        """Return the first position of ``sub`` at or after ``start``, or -1."""
        needle = _plain(sub)
        if not needle:
            return -1
        return self._text.find(needle, max(start, 0))

    def reverse(self) -> None:
        self._text = self._text[::-1]

    def make_upper(self) -> None:
        self._text = self._text.translate(_TO_UPPER)

    def make_lower(self) -> None:
        self._text = self._text.translate(_TO_LOWER)

    def insert(self, index: int, sub: TextLike) -> None:
        """Insert ``sub`` before ``index``; invalid positions leave the text alone."""
        addition = _plain(sub)
        if not addition or not self._is_valid_index(index) or index > len(self._text):
            return
        self._text = self._text[:index] + addition + self._text[index:]
        self._capacity = len(self._text) + 1

    def remove(self, index: int, count: int = 1) -> None:
        """Delete ``count`` characters starting at ``index``."""
        if not self._is_valid_index(index) or not self._text or count <= 0:
            return
        self._text = self._text[:index] + self._text[index + count:]
        self._capacity = len(self._text) + 1

    def replace(self, old: TextLike, new: TextLike) -> int:
        """Replace every occurrence of ``old`` with ``new``; return how many."""
        if not self._text:
            return 0
        target = _plain(old)
        if not target:
            return 0
        replaced = self._text.count(target)
        self._text = self._text.replace(target, _plain(new))
        self._capacity = len(self._text) + 1
        return replaced

    def trim_left(self) -> None:
        if not self._text:
            return
        stripped = self._text.lstrip(_WHITESPACE)
        self._capacity -= len(self._text) - len(stripped)
        self._text = stripped

    def trim_right(self) -> None:
        self._text = self._text.rstrip(_WHITESPACE)

    def trim(self) -> None:
        if self._text:
            self.trim_left()
            self.trim_right()

    def left(self, count: int) -> MutableString:
        """Take the first ``count`` characters out of this buffer and return them."""
        if count <= 0 or not self._text:
            self._clear()
            return MutableString()
        if count >= self._capacity:
            head = MutableString(self)
            self._clear()
            return head
        head = MutableString(self._text[:count])
        head._capacity = count + 1
        self._text = self._text[count:]
        return head

    def right(self, count: int) -> MutableString:
        """Move the whole text out when ``count`` exceeds its length.

        When ``count`` does not exceed the length nothing moves and an empty
        buffer is returned.
        """
        if self._capacity and count > len(self._text):
            tail = MutableString(self._text)
            tail._capacity = count + 1
            self._text = ""
            return tail
        return MutableString()

    def set_number(self, num: int) -> None:
        """Write ``num`` with a sign column: '-' for negatives, ' ' for positives."""
        num = int(num)
        if num == 0:
            self._text = "0"
            self._capacity = 2
            return
        digits = str(abs(num))
        self._text = ("-" if num < 0 else " ") + digits
        self._capacity = len(digits) + 2

    def to_int(self) -> int:
        """Collect the digits before the first '.', ignoring anything else."""
        whole = self._text.split(".", 1)[0]
        digits = "".join(c for c in whole if c in _DIGITS)
        return int(digits) if digits else 0

    def to_float(self) -> float:
        """Combine the integer digits with the digits directly after the '.'."""
        if not self._text:
            return 0.0
        fraction = 0.0
        if "." in self._text:
            after = self._text.split(".", 1)[1]
            digits = []
            for c in after:
                if c not in _DIGITS:
                    break
                digits.append(c)
            if digits:
                fraction = float("0." + "".join(digits))
        return self.to_int() + fraction