# -*- coding: utf-8 -*-
"""
Case-insensitive name search over a bilingual genealogy tree.

A plain pre-order scan with no index; fine for trees of a few hundred people.
Larger datasets would need a prebuilt name index.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from bilingual.person_node import PersonNode, first_present, walk

logger = logging.getLogger(__name__)

LANGUAGES = ("en", "te")


@dataclass
class SearchResult:
    name: str
    name_en: Optional[str] = None
    name_te: Optional[str] = None
    spouse: Any = None
    detail: Any = None
    birth: Any = None
    id: Optional[str] = None
    path: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "nameEn": self.name_en,
            "nameTe": self.name_te,
            "spouse": self.spouse,
            "detail": self.detail,
            "birth": self.birth,
            "id": self.id,
            "path": list(self.path),
        }


def display_name(node: PersonNode, language: str = "en") -> str:
    if language == "te" and node.name_te:
        return node.name_te
    return first_present(node.name_en, node.name) or ""


def display_field(node: PersonNode, base: str, language: str) -> Any:
    plain = getattr(node, base)
    if language == "te":
        return first_present(getattr(node, f"{base}_te"), getattr(node, f"{base}_en"), plain)
    return first_present(getattr(node, f"{base}_en"), plain)


def matches(node: PersonNode, needle: str) -> bool:
    """``needle`` must already be lower-cased."""
    for value in (node.name, node.name_en, node.name_te):
        if value and needle in str(value).lower():
            return True
    return False


def to_result(node: PersonNode, ancestors, language: str = "en") -> SearchResult:
    return SearchResult(
        name=display_name(node, language),
        name_en=node.name_en,
        name_te=node.name_te,
        spouse=display_field(node, "spouse", language),
        detail=display_field(node, "detail", language),
        birth=node.birth,
        id=node.id,
        path=[display_name(a, language) for a in ancestors] + [display_name(node, language)],
    )


def search(tree: Optional[PersonNode], query: str, display_language: str = "en",
           max_results: Optional[int] = 0) -> List[SearchResult]:
    """Find people whose ``name``, ``nameEn`` or ``nameTe`` contains ``query``.

    ``max_results`` of 0/None means no cap; otherwise the walk stops as soon as
    that many matches are collected. The query is matched as typed; a query of
    only whitespace matches nothing.
    """
    needle = (query or "").lower()
    if tree is None or not needle.strip():
        return []
    limit = max_results or 0
    results: List[SearchResult] = []
    for node, ancestors in walk(tree):
        if not matches(node, needle):
            continue
        results.append(to_result(node, ancestors, display_language))
        if limit and len(results) >= limit:
            break
    logger.debug("search %r (%s): %d result(s)", query, display_language, len(results))
    return results
