# -*- coding: utf-8 -*-
# identifiers.py
import logging
from dataclasses import replace
from typing import Optional, Tuple

from bilingual.person_node import PersonNode

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "person"


def _annotate(node: PersonNode, parent_id: Optional[str], next_n: int, prefix: str) -> Tuple[PersonNode, int]:
    node_id = f"{prefix}_{next_n}"
    next_n += 1
    out = replace(node, extra=dict(node.extra), id=node_id, parent_id=parent_id)
    if node.children is not None:
        kids = []
        for child in node.children:
            annotated, next_n = _annotate(child, node_id, next_n, prefix)
            kids.append(annotated)
        out.children = kids
    if node.hidden_children is not None:
        kids = []
        for child in node.hidden_children:
            annotated, next_n = _annotate(child, node_id, next_n, prefix)
            kids.append(annotated)
        out.hidden_children = kids
    return out, next_n


def annotate(tree: PersonNode, prefix: str = DEFAULT_PREFIX) -> PersonNode:
    """Return a copy of ``tree`` with ``id``/``parentId`` set in pre-order.

    Ids run ``person_1, person_2, ...`` starting at the root; ``children`` are
    numbered before ``_children``. Any ids already present are overwritten, so
    run this once and persist the result.
    """
    annotated, next_n = _annotate(tree, None, 1, prefix)
    logger.info("assigned %d ids", next_n - 1)
    return annotated
