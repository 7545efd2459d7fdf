# -*- coding: utf-8 -*-
"""
Book-details collection: Telugu placeholder backfill and canonical ordering.

A placeholder is the English text copied into the ``*Te`` field. It is not a
translation; the audit finds placeholders by comparing the two fields.
"""
import copy
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

logger = logging.getLogger(__name__)

EVENT_FIELDS = ("title", "reference", "text")

TELUGU_BOOK_NAMES: Dict[str, str] = {
    "Genesis": "ఆదికాండము",
    "Exodus": "నిర్గమకాండము",
    "Leviticus": "లేవీయకాండము",
    "Numbers": "సంఖ్యాకాండము",
    "Deuteronomy": "ద్వితీయోపదేశకాండమ",
    "Joshua": "యెహొషువ",
    "Judges": "న్యాయాధిపతులు",
    "Ruth": "రూతు",
    "1 Samuel": "సమూయేలు మొదటి గ్రంథము",
    "2 Samuel": "సమూయేలు రెండవ గ్రంథము",
    "1 Kings": "రాజులు మొదటి గ్రంథము",
    "2 Kings": "రాజులు రెండవ గ్రంథము",
    "1 Chronicles": "దినవృత్తాంతములు మొదటి గ్రంథము",
    "2 Chronicles": "దినవృత్తాంతములు రెండవ గ్రంథము",
    "Ezra": "ఎజ్రా",
    "Nehemiah": "నెహెమ్యా",
    "Esther": "ఎస్తేరు",
    "Job": "యోబు గ్రంథము",
    "Psalms": "కీర్తనల గ్రంథము",
    "Proverbs": "సామెతలు",
    "Ecclesiastes": "ప్రసంగి",
    "Song of Songs": "పరమగీతము",
    "Song of Solomon": "పరమగీతము",
    "Isaiah": "యెషయా గ్రంథము",
    "Jeremiah": "యిర్మీయా",
    "Lamentations": "విలాపవాక్యములు",
    "Ezekiel": "యెహెజ్కేలు",
    "Daniel": "దానియేలు",
    "Hosea": "హొషేయ",
    "Joel": "యోవేలు",
    "Amos": "ఆమోసు",
    "Obadiah": "ఓబద్యా",
    "Jonah": "యోనా",
    "Micah": "మీకా",
    "Nahum": "నహూము",
    "Habakkuk": "హబక్కూకు",
    "Zephaniah": "జెఫన్యా",
    "Haggai": "హగ్గయి",
    "Zechariah": "జెకర్యా",
    "Malachi": "మలాకీ",
    "Matthew": "మత్తయి సువార్త",
    "Mark": "మార్కు సువార్త",
    "Luke": "లూకా సువార్త",
    "John": "యోహాను సువార్త",
    "Acts": "అపొస్తలుల కార్యములు",
    "Romans": "రోమీయులకు",
    "1 Corinthians": "1 కొరింథీయులకు",
    "2 Corinthians": "2 కొరింథీయులకు",
    "Galatians": "గలతీయులకు",
    "Ephesians": "ఎఫెసీయులకు",
    "Philippians": "ఫిలిప్పీయులకు",
    "Colossians": "కొలొస్సయులకు",
    "1 Thessalonians": "1 థెస్సలొనీకయులకు",
    "2 Thessalonians": "2 థెస్సలొనీకయులకు",
    "1 Timothy": "1 తిమోతికి",
    "2 Timothy": "2 తిమోతికి",
    "Titus": "తీతుకు",
    "Philemon": "ఫిలేమోనుకు",
    "Hebrews": "హెబ్రీయులకు",
    "James": "యాకోబు",
    "1 Peter": "1 పేతురు",
    "2 Peter": "2 పేతురు",
    "1 John": "1 యోహాను",
    "2 John": "2 యోహాను",
    "3 John": "3 యోహాను",
    "Jude": "యూదా",
    "Revelation": "ప్రకటన గ్రంథము",
}

OLD_TESTAMENT = [
    "Genesis", "Exodus", "Leviticus", "Numbers", "Deuteronomy", "Joshua", "Judges", "Ruth",
    "1 Samuel", "2 Samuel", "1 Kings", "2 Kings", "1 Chronicles", "2 Chronicles", "Ezra", "Nehemiah", "Esther",
    "Job", "Psalms", "Proverbs", "Ecclesiastes", "Song of Solomon", "Isaiah", "Jeremiah", "Lamentations",
    "Ezekiel", "Daniel", "Hosea", "Joel", "Amos", "Obadiah", "Jonah", "Micah", "Nahum", "Habakkuk",
    "Zephaniah", "Haggai", "Zechariah", "Malachi",
]
NEW_TESTAMENT = [
    "Matthew", "Mark", "Luke", "John", "Acts", "Romans", "1 Corinthians", "2 Corinthians", "Galatians",
    "Ephesians", "Philippians", "Colossians", "1 Thessalonians", "2 Thessalonians", "1 Timothy", "2 Timothy",
    "Titus", "Philemon", "Hebrews", "James", "1 Peter", "2 Peter", "1 John", "2 John", "3 John", "Jude",
    "Revelation",
]
CANONICAL_ORDER = OLD_TESTAMENT + NEW_TESTAMENT

# both spellings sort into the same slot
_ORDER_ALIASES = {"Song of Songs": "Song of Solomon"}

_REFERENCE_SPLIT = re.compile(r"^(.*?)(\s+\d)")


def book_label(book: Dict[str, Any], index: int) -> str:
    return book.get("book") or book.get("name") or f"index:{index}"


def existing_telugu_name(book: Dict[str, Any]) -> Optional[str]:
    return book.get("bookTelugu") or book.get("nameTelugu") or None


def telugu_book_name(book: Dict[str, Any], names: Optional[Dict[str, str]] = None) -> Optional[str]:
    """Telugu name carried by the record itself, else the built-in lookup; None if unknown."""
    own = existing_telugu_name(book)
    if own:
        return own
    lookup = TELUGU_BOOK_NAMES if names is None else names
    return lookup.get(book.get("book") or "")


def localize_reference(reference: str, telugu_name: Optional[str]) -> str:
    """``"Genesis 1:1-5"`` -> ``"ఆదికాండము 1:1-5"``; unchanged without a Telugu name."""
    if not reference or not telugu_name:
        return reference
    m = _REFERENCE_SPLIT.match(reference)
    if m:
        return telugu_name + reference[len(m.group(1)):]
    return f"{telugu_name} {reference}"


# ----------------------------- Backfill -----------------------------

@dataclass
class BackfillResult:
    books: List[Dict[str, Any]]
    event_fields_filled: int = 0
    persons_filled: int = 0
    book_names_filled: int = 0
    skipped: List[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.event_fields_filled or self.persons_filled or self.book_names_filled)


def _backfill_event(event: Dict[str, Any], telugu_name: Optional[str], localize_references: bool) -> int:
    filled = 0
    for base in EVENT_FIELDS:
        key = f"{base}Te"
        if event.get(key):
            continue
        english = event.get(base) or ""
        if base == "reference" and localize_references:
            english = localize_reference(english, telugu_name)
        event[key] = english
        filled += 1
    return filled


def backfill_translations(books: Sequence[Any], localize_references: bool = False,
                          names: Optional[Dict[str, str]] = None) -> BackfillResult:
    """Return a copy of ``books`` with every missing Telugu field given a placeholder.

    Fills ``titleTe``/``referenceTe``/``textTe`` on each event, ``mainPersonsTe``
    and, where a name is known, ``bookTelugu``. The input is not modified.
    """
    result = BackfillResult(books=copy.deepcopy(list(books)))
    for i, book in enumerate(result.books):
        if not isinstance(book, dict):
            logger.warning("skipping book record %d: expected an object, got %s", i, type(book).__name__)
            result.skipped.append(f"index:{i}")
            continue

        telugu_name = telugu_book_name(book, names)
        if not book.get("bookTelugu") and telugu_name:
            book["bookTelugu"] = telugu_name
            result.book_names_filled += 1

        events = book.get("mainEvents")
        if isinstance(events, list):
            for ev in events:
                if isinstance(ev, dict):
                    result.event_fields_filled += _backfill_event(ev, telugu_name, localize_references)
        elif events is not None:
            logger.warning("%s: mainEvents is %s, not a list; left as is", book_label(book, i), type(events).__name__)

        persons = book.get("mainPersons")
        if book.get("mainPersonsTe") is None and isinstance(persons, list):
            book["mainPersonsTe"] = list(persons)
            result.persons_filled += len(book["mainPersonsTe"])

    logger.info("backfill: %d event fields, %d persons, %d book names",
                result.event_fields_filled, result.persons_filled, result.book_names_filled)
    return result


# ----------------------------- Ordering -----------------------------

def reorder_books(books: Sequence[Any], order: Sequence[str] = CANONICAL_ORDER) -> List[Dict[str, Any]]:
    """Sort book records into canonical order.

    A book listed twice keeps its last record. Books outside ``order`` follow in
    the order they first appear. Records without a ``book`` name are dropped.
    """
    latest: Dict[str, Dict[str, Any]] = {}
    first_seen: List[str] = []
    dropped = 0
    for book in books:
        name = book.get("book") if isinstance(book, dict) else None
        if not name:
            dropped += 1
            continue
        key = _ORDER_ALIASES.get(name, name) if name not in order else name
        if key not in latest:
            first_seen.append(key)
        latest[key] = book
    if dropped:
        logger.warning("reorder: dropped %d record(s) without a book name", dropped)

    ordered = [latest[name] for name in order if name in latest]
    placed = set(order)
    ordered.extend(latest[name] for name in first_seen if name not in placed)
    return ordered
