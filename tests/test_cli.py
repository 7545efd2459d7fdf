import json

import pytest

import cli


def _write(path, data):
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return str(path)


def _read(path):
    return json.loads(path.read_text(encoding="utf-8"))


def test_merge_writes_bilingual_tree(tmp_path, english_doc, telugu_doc):
    en = _write(tmp_path / "en.json", english_doc)
    te = _write(tmp_path / "te.json", telugu_doc)
    out = tmp_path / "bilingual.json"
    assert cli.main(["merge", "--english", en, "--telugu", te, "--output", str(out)]) == 0
    merged = _read(out)
    assert merged["name"] == "ఆదాము"
    assert merged["nameEn"] == "Adam"
    assert [c["nameEn"] for c in merged["children"]] == ["Cain", "Seth"]


def test_merge_english_primary_policy(tmp_path, english_doc, telugu_doc):
    en = _write(tmp_path / "en.json", english_doc)
    te = _write(tmp_path / "te.json", telugu_doc)
    out = tmp_path / "bilingual.json"
    assert cli.main(["merge", "--english", en, "--telugu", te, "--output", str(out),
                     "--policy", "english-primary"]) == 0
    assert _read(out)["spouseTe"] == "హవ్వ"


def test_strict_merge_fails_on_shape_mismatch(tmp_path, english_doc, telugu_doc, capsys):
    telugu_doc["children"].pop()
    en = _write(tmp_path / "en.json", english_doc)
    te = _write(tmp_path / "te.json", telugu_doc)
    out = tmp_path / "bilingual.json"
    assert cli.main(["merge", "--english", en, "--telugu", te, "--output", str(out), "--strict"]) == 1
    assert "root.children: 2 != 1" in capsys.readouterr().err
    assert not out.exists()


def test_bad_input_names_the_file(tmp_path, capsys):
    broken = tmp_path / "broken.json"
    broken.write_text("{", encoding="utf-8")
    assert cli.main(["audit", "--input", str(broken)]) == 1
    err = capsys.readouterr().err
    assert "error: " in err
    assert "broken.json" in err


def test_annotate_in_place_keeps_backup(tmp_path, bilingual_doc):
    path = tmp_path / "bilingual.json"
    _write(path, bilingual_doc)
    assert cli.main(["--backup", "bak", "annotate", "--input", str(path)]) == 0
    annotated = _read(path)
    assert annotated["id"] == "person_1"
    assert annotated["children"][0]["parentId"] == "person_1"
    assert _read(tmp_path / "bilingual.json.bak") == bilingual_doc


def test_search_json_output(tmp_path, bilingual_doc, capsys):
    path = _write(tmp_path / "bilingual.json", bilingual_doc)
    assert cli.main(["search", "david", "--input", path, "--lang", "te", "--max", "1", "--json"]) == 0
    results = json.loads(capsys.readouterr().out)
    assert len(results) == 1
    assert results[0]["name"] == "దావీదు"
    assert results[0]["path"] == ["ఆదాము", "యెష్షయి", "దావీదు"]


def test_search_without_matches(tmp_path, bilingual_doc, capsys):
    path = _write(tmp_path / "bilingual.json", bilingual_doc)
    assert cli.main(["search", "Goliath", "--input", path]) == 0
    assert "No matches for 'Goliath'" in capsys.readouterr().out


def test_search_rejects_negative_max(tmp_path):
    with pytest.raises(SystemExit):
        cli.main(["search", "david", "--max", "-1"])


def test_backfill_then_audit(tmp_path, books, capsys):
    path = tmp_path / "book-details.json"
    _write(path, books)
    assert cli.main(["--backup", "bak", "backfill", "--input", str(path), "--localize-references"]) == 0
    filled = _read(path)
    assert filled[0]["mainEvents"][0]["referenceTe"] == "నిర్గమకాండము 14:21"
    assert _read(tmp_path / "book-details.json.bak") == books

    capsys.readouterr()
    assert cli.main(["audit", "--input", str(path), "--json"]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["booksScanned"] == 2
    assert report["counts"]["titleTe_same_as_title"] == 2


def test_backfill_dry_run_leaves_file(tmp_path, books):
    path = tmp_path / "book-details.json"
    _write(path, books)
    assert cli.main(["backfill", "--input", str(path), "--dry-run"]) == 0
    assert _read(path) == books
    assert not (tmp_path / "book-details.json.bak").exists()


def test_audit_text_report(tmp_path, books, capsys):
    path = _write(tmp_path / "book-details.json", books)
    assert cli.main(["audit", "--input", path, "--limit", "2"]) == 0
    out = capsys.readouterr().out
    assert "Total books scanned: 2" in out
    assert "book_telugu_missing: 1" in out
    assert "... 4 more" in out


def test_reorder(tmp_path, books):
    path = tmp_path / "book-details.json"
    _write(path, books)
    assert cli.main(["--backup", "timestamp", "reorder", "--input", str(path)]) == 0
    assert [b["book"] for b in _read(path)] == ["Genesis", "Exodus"]
    assert len(list(tmp_path.glob("book-details.json.bak.*"))) == 1
