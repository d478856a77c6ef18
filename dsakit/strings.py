"""String checks: palindromes, reversal and bracket balance."""

from __future__ import annotations

__all__ = ["is_balanced", "is_palindrome", "reverse"]

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def is_palindrome(text: str) -> bool:
    """True if ``text`` reads the same backwards, ignoring letter case."""
    return all(a.upper() == b.upper() for a, b in zip(text, reversed(text)))


def reverse(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def is_balanced(expression: str) -> bool:
    """True if every (), [] and {} in ``expression`` is properly matched."""
    stack: list[str] = []
    for char in expression:
        if char in _OPENERS:
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack.pop() != _PAIRS[char]:
                return False
    return not stack