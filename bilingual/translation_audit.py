# -*- coding: utf-8 -*-
# translation_audit.py
import logging
from collections import Counter
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from bilingual.book_details import EVENT_FIELDS, book_label, existing_telugu_name

logger = logging.getLogger(__name__)

BOOK_TELUGU_MISSING = "book_telugu_missing"
MAIN_EVENTS_MISSING = "mainEvents_missing"
MAIN_PERSONS_TE_MISSING = "mainPersonsTe_missing"
RECORD_MALFORMED = "record_malformed"


@dataclass
class TranslationIssue:
    book: str
    kind: str
    index: Optional[int] = None  # event index within mainEvents
    title: Optional[str] = None


@dataclass
class AuditReport:
    books_scanned: int = 0
    issues: List[TranslationIssue] = field(default_factory=list)

    def counts(self) -> Dict[str, int]:
        return dict(Counter(i.kind for i in self.issues))

    def of_kind(self, kind: str) -> List[TranslationIssue]:
        return [i for i in self.issues if i.kind == kind]

    def to_records(self) -> List[Dict[str, Any]]:
        return [asdict(i) for i in self.issues]

    @property
    def clean(self) -> bool:
        return not self.issues


def _event_issues(book: str, index: int, event: Dict[str, Any]) -> List[TranslationIssue]:
    out = []
    title = event.get("title")
    for base in EVENT_FIELDS:
        key = f"{base}Te"
        telugu = event.get(key)
        if not telugu:
            out.append(TranslationIssue(book, f"{key}_missing", index, title))
        elif str(telugu).strip() == str(event.get(base) or "").strip():
            out.append(TranslationIssue(book, f"{key}_same_as_{base}", index, title))
    return out


def audit_translations(books: Sequence[Any]) -> AuditReport:
    """List every untranslated spot in the book-details collection. Read-only."""
    report = AuditReport(books_scanned=len(books))
    for i, book in enumerate(books):
        if not isinstance(book, dict):
            report.issues.append(TranslationIssue(f"index:{i}", RECORD_MALFORMED))
            continue
        label = book_label(book, i)

        if not existing_telugu_name(book):
            report.issues.append(TranslationIssue(label, BOOK_TELUGU_MISSING))

        events = book.get("mainEvents")
        if isinstance(events, list):
            for ei, ev in enumerate(events):
                if isinstance(ev, dict):
                    report.issues.extend(_event_issues(label, ei, ev))
                else:
                    report.issues.append(TranslationIssue(label, RECORD_MALFORMED, ei))
        else:
            report.issues.append(TranslationIssue(label, MAIN_EVENTS_MISSING))

        persons_te = book.get("mainPersonsTe")
        if not isinstance(persons_te, list) or not persons_te:
            report.issues.append(TranslationIssue(label, MAIN_PERSONS_TE_MISSING))

    logger.info("audited %d books: %d issue(s)", report.books_scanned, len(report.issues))
    return report
