# -*- coding: utf-8 -*-
"""
Merge an English genealogy tree and its Telugu counterpart into one bilingual tree.

Children are paired by position: the i-th English child goes with the i-th
Telugu child whatever their names are, so the two sources must share the
same shape. ``strict=True`` checks that before merging.
"""
import copy
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from bilingual.errors import ConfigError, MalformedNodeError, StructureMismatchError
from bilingual.person_node import PersonNode, first_present, has_value, shape_differences

logger = logging.getLogger(__name__)


class MergePolicy(str, Enum):
    # name/spouse/detail take the Telugu value, English kept only as nameEn
    TELUGU_PRIMARY = "telugu-primary"
    # English record is the base, Telugu adds nameTe/spouseTe/detailTe
    ENGLISH_PRIMARY = "english-primary"

    @classmethod
    def parse(cls, value: Any) -> "MergePolicy":
        if isinstance(value, cls):
            return value
        key = str(value or "").strip().lower().replace("_", "-")
        for policy in cls:
            if policy.value == key:
                return policy
        choices = ", ".join(p.value for p in cls)
        raise ConfigError(f"unknown merge policy {value!r} (expected one of: {choices})")


@dataclass
class MergeReport:
    root: Optional[PersonNode]
    pairs: int = 0
    degraded: int = 0

    def to_dict(self) -> Optional[Dict[str, Any]]:
        return self.root.to_dict() if self.root is not None else None


# ----------------------------- Field reconciliation -----------------------------

def _combine_telugu_primary(en: PersonNode, te: PersonNode) -> PersonNode:
    return PersonNode(
        name=first_present(te.name, en.name),
        name_en=en.name,
        name_te=te.name,
        age=first_present(en.age, te.age),
        klass=first_present(en.klass, te.klass),
        birth=first_present(en.birth, te.birth),
        death=first_present(en.death, te.death),
        spouse=first_present(te.spouse, en.spouse),
        detail=first_present(te.detail, en.detail),
    )


def _combine_english_primary(en: PersonNode, te: PersonNode) -> PersonNode:
    merged = en.without_children()
    merged.name = en.name if en.name is not None else ""
    if merged.name_en is None:
        merged.name_en = en.name or ""
    if merged.name_te is None:
        merged.name_te = te.name or ""

    if has_value(te.spouse):
        merged.spouse_te = te.spouse
        if not has_value(merged.spouse_en) and has_value(en.spouse):
            merged.spouse_en = en.spouse
    if has_value(te.detail):
        merged.detail_te = te.detail
        if not has_value(merged.detail_en) and has_value(en.detail):
            merged.detail_en = en.detail
    return merged


_COMBINERS = {
    MergePolicy.TELUGU_PRIMARY: _combine_telugu_primary,
    MergePolicy.ENGLISH_PRIMARY: _combine_english_primary,
}


# ----------------------------- Traversal -----------------------------

def _visible_or_hidden(node: Optional[PersonNode]) -> List[PersonNode]:
    if node is None:
        return []
    if node.children:
        return node.children
    return node.hidden_children or []


def _merge_lists(en_kids: List[PersonNode], te_kids: List[PersonNode], policy: MergePolicy,
                 report: MergeReport, path: str) -> Optional[List[PersonNode]]:
    out = []
    for i in range(max(len(en_kids), len(te_kids))):
        en_child = en_kids[i] if i < len(en_kids) else None
        te_child = te_kids[i] if i < len(te_kids) else None
        merged = _merge_node(en_child, te_child, policy, report, f"{path}[{i}]")
        if merged is not None:
            out.append(merged)
    return out or None


def _merge_node(en: Optional[PersonNode], te: Optional[PersonNode], policy: MergePolicy,
                report: MergeReport, path: str) -> Optional[PersonNode]:
    if en is None and te is None:
        return None
    for side, node in (("English", en), ("Telugu", te)):
        if node is not None and not isinstance(node, PersonNode):
            raise MalformedNodeError(path, f"{side} node is {type(node).__name__}, not a PersonNode")
    if en is None or te is None:
        report.degraded += 1
        logger.warning("translation missing for this subtree at %s (only %s present)",
                       path, "English" if en is not None else "Telugu")
        return copy.deepcopy(en if en is not None else te)

    report.pairs += 1
    # combiner output still shares list and extra values with the inputs
    merged = copy.deepcopy(_COMBINERS[policy](en, te))

    if en.children is not None or te.children is not None:
        merged.children = _merge_lists(_visible_or_hidden(en), _visible_or_hidden(te),
                                       policy, report, f"{path}.children")
    if en.hidden_children is not None or te.hidden_children is not None:
        merged.hidden_children = _merge_lists(en.hidden_children or [], te.hidden_children or [],
                                              policy, report, f"{path}._children")
    return merged


# ----------------------------- Public API -----------------------------

def merge(english: Optional[PersonNode], telugu: Optional[PersonNode],
          policy: MergePolicy = MergePolicy.TELUGU_PRIMARY, strict: bool = False) -> Optional[PersonNode]:
    """Merge two parallel trees into a fresh bilingual tree (inputs are left untouched).

    One side missing returns a copy of the other side; both missing returns None.
    """
    return merge_report(english, telugu, policy, strict).root


def merge_report(english: Optional[PersonNode], telugu: Optional[PersonNode],
                 policy: MergePolicy = MergePolicy.TELUGU_PRIMARY, strict: bool = False) -> MergeReport:
    policy = MergePolicy.parse(policy)
    if strict:
        diffs = shape_differences(english, telugu)
        if diffs:
            raise StructureMismatchError(diffs)
    report = MergeReport(root=None)
    report.root = _merge_node(english, telugu, policy, report, "root")
    logger.debug("merged %d node pairs (%d one-sided subtrees) with %s policy",
                 report.pairs, report.degraded, policy.value)
    return report


def merge_trees(english_doc: Any, telugu_doc: Any,
                policy: MergePolicy = MergePolicy.TELUGU_PRIMARY, strict: bool = False) -> MergeReport:
    """Same as :func:`merge_report` but takes the parsed JSON documents directly."""
    english = PersonNode.from_dict(english_doc, "english") if english_doc is not None else None
    telugu = PersonNode.from_dict(telugu_doc, "telugu") if telugu_doc is not None else None
    return merge_report(english, telugu, policy, strict)
