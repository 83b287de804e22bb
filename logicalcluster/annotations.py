"""Logical cluster annotation on arbitrary records.

Records only need a string-keyed annotation map (get/set), the same shape as
object metadata annotations, so this module carries no object-model
dependency.

Notes:
- `from_object` cannot tell "not set" from "set to empty"; use `has_cluster`
  when that difference matters.
- Nothing here locks. Concurrent writers to one record must serialize.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .name import Name
from .path import Path

ANNOTATION_KEY = "tenancy.kcp.dev/cluster"


class ClusterObject(Protocol):
    def get_annotations(self) -> dict[str, str] | None: ...

    def set_annotations(self, annotations: dict[str, str]) -> None: ...


@dataclass
class AnnotatedRecord:
    """Minimal record carrying an annotation map."""

    annotations: dict[str, str] | None = None

    def get_annotations(self) -> dict[str, str] | None:
        return self.annotations

    def set_annotations(self, annotations: dict[str, str]) -> None:
        self.annotations = annotations


def from_object(obj: ClusterObject) -> Name:
    """Return the logical cluster name annotated on obj, empty if absent."""
    annotations = obj.get_annotations() or {}
    return Name(annotations.get(ANNOTATION_KEY, ""))


def has_cluster(obj: ClusterObject) -> bool:
    annotations = obj.get_annotations() or {}
    return ANNOTATION_KEY in annotations


def set_on(obj: ClusterObject, name: Name | Path) -> None:
    annotations = obj.get_annotations()
    if annotations is None:
        annotations = {}
    annotations[ANNOTATION_KEY] = str(name)
    obj.set_annotations(annotations)
