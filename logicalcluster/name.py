"""Logical cluster Name (v0.1).

A Name identifies one logical cluster. It is used as
1. (part of) a storage key prefix for objects in that cluster,
2. (part of) an HTTP path serving a cluster-like API (`/clusters/<name>`),
3. an annotation value on objects returned from cross-cluster list/watches.

Construction never validates; call `is_valid()` before trusting a value for
addressing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .grammar import has_prefix_value, join_value, request_path, split_value, valid_name

if TYPE_CHECKING:
    from .path import Path


@dataclass(frozen=True)
class Name:
    value: str = ""

    def __str__(self) -> str:
        return self.value

    def is_empty(self) -> bool:
        return self.value == ""

    def is_valid(self) -> bool:
        return valid_name(self.value)

    def split(self) -> tuple[Name, str]:
        """Split immediately following the final colon.

        Without a colon the parent is the empty Name and the base is the whole value.
        """
        parent, base = split_value(self.value)
        return Name(parent), base

    def parent(self) -> tuple[Name, bool]:
        parent, _ = self.split()
        return parent, parent.value != ""

    def base(self) -> str:
        _, base = self.split()
        return base

    def join(self, name: str) -> Name:
        return Name(join_value(self.value, name))

    def has_prefix(self, other: Name) -> bool:
        return has_prefix_value(self.value, other.value)

    def request_path(self) -> str:
        return request_path(self.value)

    def to_path(self) -> Path:
        from .path import Path

        return Path(self.value)
