"""Dotted version ordering used for version-currency checks.

Versions are split into numeric and textual parts on ``.``, ``-``, ``_``,
``+`` and on every digit/letter boundary, so ``9.2.0-rc1`` becomes
``["9", "2", "0", "rc", "1"]``. Numeric parts compare numerically.
Textual parts are ranked by their prefix::

    (unknown) < dev < alpha = a < beta = b < RC = rc < (number) < pl = p

When one version runs out of parts, the next part of the longer one
decides: a number makes the longer version newer, a word is ranked
against a number (``9.2.0-beta < 9.2.0 < 9.2.0-pl1``).
"""

from __future__ import annotations

import re


_PART = re.compile(r"\d+|[^\d.\-_+]+")

# Prefix match, first hit wins, so "beta" is checked before "b".
_SPECIAL_FORMS = (
    ("dev", 0),
    ("alpha", 1),
    ("a", 1),
    ("beta", 2),
    ("b", 2),
    ("RC", 3),
    ("rc", 3),
    ("#", 4),
    ("pl", 5),
    ("p", 5),
)
_NUMBER_RANK = 4
_UNKNOWN_RANK = -1


def split_version(version: str) -> list[str]:
    """Split a version string into its comparable parts.

    Example:
        >>> split_version("9.2.0-rc1")
        ['9', '2', '0', 'rc', '1']
    """
    return _PART.findall(version.strip())


def _rank(part: str) -> int:
    if part.isdigit():
        return _NUMBER_RANK
    for form, rank in _SPECIAL_FORMS:
        if part.startswith(form):
            return rank
    return _UNKNOWN_RANK


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _compare_parts(left: str, right: str) -> int:
    if left.isdigit() and right.isdigit():
        return _sign(int(left) - int(right))
    return _sign(_rank(left) - _rank(right))


def compare_versions(left: str, right: str) -> int:
    """Compare two version strings.

    Args:
        left: First version.
        right: Second version.

    Returns:
        -1 if ``left`` is older, 0 if equal, 1 if ``left`` is newer.
    """
    left_parts = split_version(left)
    right_parts = split_version(right)

    if not left_parts or not right_parts:
        return _sign(len(left_parts) - len(right_parts))

    for left_part, right_part in zip(left_parts, right_parts, strict=False):
        result = _compare_parts(left_part, right_part)
        if result:
            return result

    if len(left_parts) > len(right_parts):
        extra = left_parts[len(right_parts)]
        return 1 if extra.isdigit() else _sign(_rank(extra) - _NUMBER_RANK)
    if len(right_parts) > len(left_parts):
        extra = right_parts[len(left_parts)]
        return -1 if extra.isdigit() else _sign(_NUMBER_RANK - _rank(extra))
    return 0


def is_at_least(current: str, latest: str) -> bool:
    """Return True if ``current`` is the same as or newer than ``latest``.

    Example:
        >>> is_at_least("9.3.0", "9.2.0")
        True
        >>> is_at_least("9.1.9", "9.2.0")
        False
    """
    return compare_versions(current, latest) >= 0
