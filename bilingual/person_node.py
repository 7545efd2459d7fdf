# -*- coding: utf-8 -*-
# person_node.py
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, List, Optional, Tuple

from bilingual.errors import MalformedNodeError

# attribute -> JSON key, in the order keys are written back out
FIELD_KEYS: List[Tuple[str, str]] = [
    ("name", "name"),
    ("name_en", "nameEn"),
    ("name_te", "nameTe"),
    ("age", "age"),
    ("klass", "class"),
    ("birth", "birth"),
    ("death", "death"),
    ("spouse", "spouse"),
    ("spouse_en", "spouseEn"),
    ("spouse_te", "spouseTe"),
    ("detail", "detail"),
    ("detail_en", "detailEn"),
    ("detail_te", "detailTe"),
    ("id", "id"),
    ("parent_id", "parentId"),
]
CHILD_KEYS: List[Tuple[str, str]] = [
    ("children", "children"),
    ("hidden_children", "_children"),
]
_KNOWN_KEYS = {k for _, k in FIELD_KEYS} | {k for _, k in CHILD_KEYS}


@dataclass
class PersonNode:
    """One person in a genealogy tree. ``None`` means the field is absent."""
    name: Optional[str] = None
    name_en: Optional[str] = None
    name_te: Optional[str] = None
    age: Any = None
    klass: Any = None
    birth: Any = None
    death: Any = None
    spouse: Any = None
    spouse_en: Any = None
    spouse_te: Any = None
    detail: Any = None
    detail_en: Any = None
    detail_te: Any = None
    id: Optional[str] = None
    parent_id: Optional[str] = None
    # unrecognised keys from the source JSON, kept verbatim
    extra: Dict[str, Any] = field(default_factory=dict)
    children: Optional[List["PersonNode"]] = None
    hidden_children: Optional[List["PersonNode"]] = None

    @classmethod
    def from_dict(cls, obj: Any, path: str = "root") -> "PersonNode":
        if not isinstance(obj, dict):
            raise MalformedNodeError(path, f"expected an object, got {type(obj).__name__}")
        values: Dict[str, Any] = {attr: obj.get(key) for attr, key in FIELD_KEYS}
        for attr, key in CHILD_KEYS:
            raw = obj.get(key)
            if raw is None:
                continue
            if not isinstance(raw, list):
                raise MalformedNodeError(f"{path}.{key}", f"expected a list, got {type(raw).__name__}")
            values[attr] = [cls.from_dict(c, f"{path}.{key}[{i}]") for i, c in enumerate(raw)]
        values["extra"] = {k: v for k, v in obj.items() if k not in _KNOWN_KEYS}
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for attr, key in FIELD_KEYS:
            value = getattr(self, attr)
            if value is not None:
                out[key] = value
        out.update(self.extra)
        for attr, key in CHILD_KEYS:
            kids = getattr(self, attr)
            if kids is not None:
                out[key] = [c.to_dict() for c in kids]
        return out

    def without_children(self) -> "PersonNode":
        return replace(self, extra=dict(self.extra), children=None, hidden_children=None)

    def child_lists(self) -> Iterator[Tuple[str, List["PersonNode"]]]:
        """(json key, list) for ``children`` then ``_children``, skipping absent ones."""
        for attr, key in CHILD_KEYS:
            kids = getattr(self, attr)
            if kids is not None:
                yield key, kids


def has_value(value: Any) -> bool:
    """Presence test used for first-non-empty-wins merging: None and "" are empty."""
    return value is not None and value != ""


def first_present(*values: Any) -> Any:
    for v in values:
        if has_value(v):
            return v
    return None


# ----------------------------- Traversal -----------------------------

def walk(root: PersonNode) -> Iterator[Tuple[PersonNode, Tuple[PersonNode, ...]]]:
    """Pre-order walk yielding ``(node, ancestors)``; ``children`` before ``_children``.

    Lazy, so a consumer can stop early without visiting the rest of the tree.
    """
    stack: List[Tuple[PersonNode, Tuple[PersonNode, ...]]] = [(root, ())]
    while stack:
        node, ancestors = stack.pop()
        yield node, ancestors
        below = ancestors + (node,)
        pending = [c for _, kids in node.child_lists() for c in kids]
        stack.extend((c, below) for c in reversed(pending))


def count_nodes(root: PersonNode) -> int:
    return sum(1 for _ in walk(root))


def shape_differences(a: Optional[PersonNode], b: Optional[PersonNode], path: str = "root") -> List[str]:
    """Describe every position where the two trees' child collections differ in length."""
    if a is None or b is None:
        if a is b:
            return []
        return [f"{path}: present only in {'English' if a is not None else 'Telugu'} tree"]
    diffs: List[str] = []
    for attr, key in CHILD_KEYS:
        left = getattr(a, attr) or []
        right = getattr(b, attr) or []
        if len(left) != len(right):
            diffs.append(f"{path}.{key}: {len(left)} != {len(right)}")
        for i in range(min(len(left), len(right))):
            diffs.extend(shape_differences(left[i], right[i], f"{path}.{key}[{i}]"))
    return diffs
