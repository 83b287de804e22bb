"""Logical cluster Path (v0.1).

A Path is the permissive form of a logical cluster identifier: any number of
colon separated segments, or the wildcard `*` meaning "all logical clusters".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .grammar import (
    WILDCARD_TOKEN,
    has_prefix_value,
    join_value,
    name_segments_valid,
    request_path,
    split_value,
    valid_path,
)
from .name import Name


@dataclass(frozen=True)
class Path:
    value: str = ""

    def __str__(self) -> str:
        return self.value

    def is_empty(self) -> bool:
        return self.value == ""

    def is_valid(self) -> bool:
        return valid_path(self.value)

    def is_wildcard(self) -> bool:
        return self.value == WILDCARD_TOKEN

    def split(self) -> tuple[Path, str]:
        parent, base = split_value(self.value)
        return Path(parent), base

    def parent(self) -> tuple[Path, bool]:
        parent, _ = self.split()
        return parent, parent.value != ""

    def base(self) -> str:
        _, base = self.split()
        return base

    def join(self, name: str) -> Path:
        return Path(join_value(self.value, name))

    def name(self) -> tuple[Name, bool]:
        """Return the Name view of this path.

        Only paths whose every segment satisfies the Name segment rule
        (letter first, bounded length) have one; the wildcard never does.
        """
        if self.is_wildcard() or not name_segments_valid(self.value):
            return Name(), False
        return Name(self.value), True

    def has_prefix(self, other: Path) -> bool:
        """Tests whether this path begins with `other`.

        "foo:bar" has prefix "foo" and "foo:", "foooo:bar" does not have
        prefix "foo". A prefix ending in `:` is accepted as-is, so callers
        needing strict ancestry should compare parents instead.
        """
        return has_prefix_value(self.value, other.value)

    def request_path(self) -> str:
        return request_path(self.value)


WILDCARD: Final[Path] = Path(WILDCARD_TOKEN)
