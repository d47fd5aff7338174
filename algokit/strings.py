"""String searching and transformation routines."""

from __future__ import annotations

OPERATORS = frozenset("+-*/^")


def lps_array(pattern: str) -> list[int]:
    """For each prefix, the length of its longest proper prefix that is also a suffix."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def kmp_search(text: str, pattern: str) -> list[int]:
    """Return every start index of ``pattern`` in ``text``, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = lps_array(pattern)
    positions = []
    i = j = 0
    while i < len(text):
        if text[i] == pattern[j]:
            i += 1
            j += 1
            if j == len(pattern):
                positions.append(i - j)
                j = lps[j - 1]
        elif j:
            j = lps[j - 1]
        else:
            i += 1
    return positions


def length_of_longest_substring(text: str) -> int:
    """Length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    best = 0
    start = 0
    for index, char in enumerate(text):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def length_of_last_word(text: str) -> int:
    """Length of the last space-separated word, ignoring trailing spaces."""
    stripped = text.rstrip(" ")
    return len(stripped) - (stripped.rfind(" ") + 1)


def find_substring(text: str, substring: str) -> int | None:
    """1-based position of the first occurrence of ``substring``, or None."""
    index = text.find(substring)
    return None if index < 0 else index + 1


def postfix_to_infix(expression: str) -> str:
    """Convert a postfix expression of single-character operands to infix.

    Operands are ASCII letters and digits; operators are ``+ - * / ^``.
    Any other character is ignored.
    """
    stack: list[str] = []
    for char in expression:
        if char.isascii() and char.isalnum():
            stack.append(char)
        elif char in OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {char!r} lacks two operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(f"({left}{char}{right})")
    if not stack:
        raise ValueError("expression has no operands")
    return stack[-1]