"""String helpers with the bounded and NUL-aware semantics of classic C routines.

Positions are returned as indices into the string instead of pointers, and
``None`` stands for "not found". The NUL character ``"\\0"`` stands for the
terminator, so searching for it finds the position just past the text.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _single(char: str) -> str:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def _non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def strchr(text: str, char: str) -> int | None:
    """Index of the first occurrence of char in text.

    Searching for the NUL character gives ``len(text)``.
    """
    if _single(char) == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> int | None:
    """Index of the last occurrence of char in text.

    Searching for the NUL character gives ``len(text)``.
    """
    if _single(char) == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters, stopping at the end of either string.

    Returns the difference of the first differing character codes, with the
    end of a string counting as code 0, or 0 when the compared parts match.
    """
    _non_negative(n, "n")
    for index in range(n):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Index of needle in haystack, which must lie wholly within the first n characters.

    An empty needle is found at index 0.
    """
    _non_negative(n, "n")
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def substr(text: str, start: int, length: int) -> str:
    """At most length characters of text from start; empty when start is past the end."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """The concatenation of first and second."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Remove every character of charset from both ends of text."""
    if not charset:
        return text
    return text.lstrip(charset).rstrip(charset)


def count_words(text: str, sep: str) -> int:
    """Number of non-empty pieces of text between separators."""
    return len(split(text, sep))


def split(text: str, sep: str) -> list[str]:
    """Split text on sep, dropping empty pieces."""
    return [piece for piece in text.split(_single(sep)) if piece]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for each character of text."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> MutableSequence[str]:
    """Apply func(index, char) to each character of chars in place.

    When func returns a character it replaces the current one; a ``None``
    result leaves the character as it is. The same sequence is returned.
    """
    for index, char in enumerate(chars):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement
    return chars


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the copied text, cut to ``size - 1`` characters, and the full
    length of src, which exceeds the copy's length when truncation happened.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters including the terminator.

    Returns the resulting text and the length it would have had untruncated.
    When size does not exceed the length of dst, dst is left unchanged and
    ``size + len(src)`` is reported.
    """
    _non_negative(size, "size")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)