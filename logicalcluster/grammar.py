"""Logical cluster grammar (v0.1).

A logical cluster identifier is a colon separated list of segments, like a
filesystem path with `:` instead of `/`:

  root
  root:org:team

Two views share this grammar:
- Name: a single segment, letter first, at most NAME_SEGMENT_MAX chars.
- Path: any number of segments, digits allowed first, no length limit
  (the server decides about segment length), or exactly the wildcard `*`.

All predicates here are pure and never raise on malformed input.
"""

from __future__ import annotations

SEPARATOR = ":"
WILDCARD_TOKEN = "*"

NAME_SEGMENT_MAX = 32

_LOWER = frozenset("abcdefghijklmnopqrstuvwxyz")
_DIGITS = frozenset("0123456789")
_SEGMENT_CHARS = _LOWER | _DIGITS | {"-"}


def segment_valid(segment: str, *, allow_leading_digit: bool, max_length: int | None = None) -> bool:
    if not segment:
        return False
    if max_length is not None and len(segment) > max_length:
        return False

    first, last = segment[0], segment[-1]
    if first == "-" or last == "-":
        return False
    if first not in _LOWER and not (allow_leading_digit and first in _DIGITS):
        return False

    for ch in segment:
        if ch not in _SEGMENT_CHARS:
            return False
    return True


def name_segment_valid(segment: str) -> bool:
    return segment_valid(segment, allow_leading_digit=False, max_length=NAME_SEGMENT_MAX)


def path_segment_valid(segment: str) -> bool:
    return segment_valid(segment, allow_leading_digit=True)


def valid_name(value: str) -> bool:
    """Strict check: one segment, letter first, never the wildcard."""
    if not value or value == WILDCARD_TOKEN:
        return False
    if SEPARATOR in value:
        return False
    return name_segment_valid(value)


def valid_path(value: str) -> bool:
    if value == WILDCARD_TOKEN:
        return True
    if not value:
        return False
    # split() keeps empty parts, so "a:", ":a" and "a::b" are rejected here
    return all(path_segment_valid(s) for s in value.split(SEPARATOR))


def name_segments_valid(value: str) -> bool:
    """True if every segment of `value` satisfies the Name segment rule."""
    if not value:
        return False
    return all(name_segment_valid(s) for s in value.split(SEPARATOR))


def split_value(value: str) -> tuple[str, str]:
    i = value.rfind(SEPARATOR)
    if i < 0:
        return "", value
    return value[:i], value[i + 1 :]


def join_value(parent: str, name: str) -> str:
    if parent == "":
        return name
    return parent + SEPARATOR + name


def request_path(value: str) -> str:
    # /clusters/<value>; colons are kept as-is
    if value == "":
        return "/clusters"
    return "/clusters/" + value


def has_prefix_value(value: str, prefix: str) -> bool:
    """Prefix check that ends on a separator.

    The prefix must be followed by `:` or the end of `value`, unless the
    prefix itself ends in `:`. So "foo:bar" has prefixes "", "foo", "foo:"
    and "foo:bar", while "foooo:bar" does not have prefix "foo".
    """
    if not value.startswith(prefix):
        return False
    if prefix == "" or prefix.endswith(SEPARATOR) or len(value) == len(prefix):
        return True
    return value[len(prefix)] == SEPARATOR
