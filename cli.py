# -*- coding: utf-8 -*-
"""
Command line for preparing and checking the bilingual data files.

    bible-data merge --policy english-primary
    bible-data annotate
    bible-data search david --lang te --max 5
    bible-data backfill --localize-references
    bible-data audit
    bible-data reorder
"""
import argparse
import logging
import sys
from typing import List, Optional

from bilingual.book_details import backfill_translations, reorder_books
from bilingual.errors import BibleDataError
from bilingual.identifiers import DEFAULT_PREFIX, annotate
from bilingual.merge import MergePolicy, merge_trees
from bilingual.person_node import PersonNode, count_nodes
from bilingual.search import LANGUAGES, search
from bilingual.translation_audit import audit_translations
from utils import settings
from utils.json_store import dumps, load_json, save_json

logger = logging.getLogger("bible_data")


# ----------------------------- Commands -----------------------------

def cmd_merge(args) -> int:
    english = load_json(args.english, expect=dict)
    telugu = load_json(args.telugu, expect=dict)
    report = merge_trees(english, telugu, MergePolicy.parse(args.policy), strict=args.strict)
    save_json(args.output, report.to_dict(), backup=args.backup)
    logger.info("merged %d node pairs, %d one-sided subtree(s) -> %s",
                report.pairs, report.degraded, args.output)
    return 0


def cmd_annotate(args) -> int:
    tree = PersonNode.from_dict(load_json(args.input, expect=dict))
    annotated = annotate(tree, prefix=args.prefix)
    output = args.output or args.input
    # rewriting in place always keeps a copy of the previous file
    backup = args.backup if output == args.input else None
    save_json(output, annotated.to_dict(), backup=backup)
    logger.info("annotated %d people -> %s", count_nodes(annotated), output)
    return 0


def cmd_search(args) -> int:
    tree = PersonNode.from_dict(load_json(args.input, expect=dict))
    limit = args.max if args.max is not None else settings.search_max_results()
    results = search(tree, args.query, args.lang, limit)
    if args.json:
        sys.stdout.write(dumps([r.to_dict() for r in results]))
        return 0
    if not results:
        print(f"No matches for {args.query!r}")
    for r in results:
        print(f"{r.name}  (en: {r.name_en or '-'}, te: {r.name_te or '-'})")
        print(f"    path: {' > '.join(r.path)}")
        if r.spouse:
            print(f"    spouse: {r.spouse}")
        if r.detail:
            print(f"    detail: {r.detail[:100]}")
    return 0


def cmd_backfill(args) -> int:
    books = load_json(args.input, expect=list)
    result = backfill_translations(books, localize_references=args.localize_references)
    logger.info("filled %d event field(s), %d person name(s), %d book name(s)",
                result.event_fields_filled, result.persons_filled, result.book_names_filled)
    if args.dry_run:
        logger.info("dry run: %s left unchanged", args.input)
    elif result.changed:
        save_json(args.input, result.books, backup=args.backup)
    else:
        logger.info("nothing to fill in %s", args.input)
    return 0


def cmd_audit(args) -> int:
    books = load_json(args.input, expect=list)
    report = audit_translations(books)
    if args.json:
        sys.stdout.write(dumps({"booksScanned": report.books_scanned,
                                "counts": report.counts(),
                                "issues": report.to_records()}))
        return 0
    print(f"Scan results for {args.input}")
    print(f"Total books scanned: {report.books_scanned}")
    for kind, n in sorted(report.counts().items()):
        print(f"  {kind}: {n}")
    shown = report.issues[:args.limit] if args.limit else report.issues
    for issue in shown:
        where = f"[{issue.index}]" if issue.index is not None else ""
        title = f"  ({issue.title})" if issue.title else ""
        print(f"  {issue.book}{where}: {issue.kind}{title}")
    if len(shown) < len(report.issues):
        print(f"  ... {len(report.issues) - len(shown)} more")
    return 0


def cmd_reorder(args) -> int:
    books = load_json(args.input, expect=list)
    ordered = reorder_books(books)
    save_json(args.input, ordered, backup=args.backup)
    logger.info("reordered book-details written. Total books: %d", len(ordered))
    return 0


# ----------------------------- Parser -----------------------------

def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or more, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bible-data", description=__doc__.strip().splitlines()[0])
    parser.add_argument("--log-level", default=settings.LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--backup", default=settings.BACKUP_STYLE, choices=["bak", "backup", "timestamp"],
                        help="how the previous file is kept before an in-place rewrite")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("merge", help="merge the English and Telugu genealogy trees")
    p.add_argument("--english", default=settings.GENEALOGY_EN_PATH)
    p.add_argument("--telugu", default=settings.GENEALOGY_TE_PATH)
    p.add_argument("--output", default=settings.GENEALOGY_BILINGUAL_PATH)
    p.add_argument("--policy", default=settings.MERGE_POLICY, choices=[m.value for m in MergePolicy])
    p.add_argument("--strict", action="store_true", help="refuse to merge trees of different shape")
    p.set_defaults(func=cmd_merge)

    p = sub.add_parser("annotate", help="assign person_N ids and parentId references")
    p.add_argument("--input", default=settings.GENEALOGY_BILINGUAL_PATH)
    p.add_argument("--output", default=None, help="defaults to rewriting --input")
    p.add_argument("--prefix", default=DEFAULT_PREFIX)
    p.set_defaults(func=cmd_annotate)

    p = sub.add_parser("search", help="search the bilingual tree by name")
    p.add_argument("query")
    p.add_argument("--input", default=settings.GENEALOGY_BILINGUAL_PATH)
    p.add_argument("--lang", default=settings.DISPLAY_LANGUAGE, choices=list(LANGUAGES))
    p.add_argument("--max", type=_non_negative, default=None, help="0 means no limit")
    p.add_argument("--json", action="store_true")
    p.set_defaults(func=cmd_search)

    p = sub.add_parser("backfill", help="add Telugu placeholders to book details")
    p.add_argument("--input", default=settings.BOOK_DETAILS_PATH)
    p.add_argument("--localize-references", action="store_true",
                   help="put the Telugu book name into placeholder references")
    p.add_argument("--dry-run", action="store_true")
    p.set_defaults(func=cmd_backfill)

    p = sub.add_parser("audit", help="report missing or placeholder Telugu text")
    p.add_argument("--input", default=settings.BOOK_DETAILS_PATH)
    p.add_argument("--limit", type=_non_negative, default=40, help="issues to list, 0 for all")
    p.add_argument("--json", action="store_true")
    p.set_defaults(func=cmd_audit)

    p = sub.add_parser("reorder", help="sort book details into canonical order")
    p.add_argument("--input", default=settings.BOOK_DETAILS_PATH)
    p.set_defaults(func=cmd_reorder)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level, logging.INFO),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        return args.func(args)
    except BibleDataError as e:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
