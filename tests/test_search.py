import pytest

import bilingual.search as search_module
from bilingual.identifiers import annotate
from bilingual.person_node import PersonNode
from bilingual.search import display_name, search


def test_search_english_query_in_english(bilingual_tree):
    results = search(bilingual_tree, "david", "en")
    assert [r.name for r in results] == ["David", "Davidson"]
    david = results[0]
    assert david.name_en == "David"
    assert david.name_te == "దావీదు"
    assert david.spouse == "Bathsheba"
    assert david.detail == "king of Israel"
    assert david.path == ["Adam", "Jesse", "David"]


def test_search_telugu_query_in_telugu(bilingual_tree):
    results = search(bilingual_tree, "దావీదు", "te")
    assert len(results) == 1
    assert results[0].name == "దావీదు"
    assert results[0].spouse == "బత్షెబ"
    assert results[0].detail == "ఇశ్రాయేలు రాజు"
    assert results[0].path == ["ఆదాము", "యెష్షయి", "దావీదు"]


def test_search_english_query_shown_in_telugu(bilingual_tree):
    results = search(bilingual_tree, "DAVID", "te")
    # no nameTe on the collapsed Davidson record, so the English name is shown
    assert [r.name for r in results] == ["దావీదు", "Davidson"]


@pytest.mark.parametrize("query", ["Sol", "sOLOMON", "omo", "సొలొ"])
def test_search_any_case_substring(bilingual_tree, query):
    assert [r.name_en for r in search(bilingual_tree, query)] == ["Solomon"]


def test_search_matches_plain_name_field():
    tree = PersonNode.from_dict({"name": "Adam", "children": [{"name": "Seth"}]})
    results = search(tree, "seth")
    assert [r.name for r in results] == ["Seth"]
    assert results[0].name_en is None


def test_no_match_is_empty(bilingual_tree):
    assert search(bilingual_tree, "Goliath") == []


@pytest.mark.parametrize("query", ["", "   ", None])
def test_blank_query_matches_nothing(bilingual_tree, query):
    assert search(bilingual_tree, query) == []


def test_max_results_caps_and_stops_early(bilingual_tree):
    assert len(search(bilingual_tree, "a")) == 3
    capped = search(bilingual_tree, "a", max_results=2)
    assert [r.name_en for r in capped] == ["Adam", "David"]
    assert len(search(bilingual_tree, "a", max_results=0)) == 3
    assert len(search(bilingual_tree, "a", max_results=None)) == 3


def test_results_carry_ids_of_annotated_tree(bilingual_tree):
    results = search(annotate(bilingual_tree), "solomon")
    assert results[0].id == "person_4"
    assert results[0].to_dict()["id"] == "person_4"


def test_display_name_fallbacks():
    assert display_name(PersonNode(name="ఆదాము", name_en="Adam", name_te="ఆదాము"), "te") == "ఆదాము"
    assert display_name(PersonNode(name="ఆదాము", name_en="Adam"), "en") == "Adam"
    assert display_name(PersonNode(name="Adam"), "te") == "Adam"
    assert display_name(PersonNode()) == ""


def test_walk_stops_once_cap_is_reached(monkeypatch, bilingual_tree):
    visited = []
    real_walk = search_module.walk

    def spy(tree):
        for node, ancestors in real_walk(tree):
            visited.append(node.name_en)
            yield node, ancestors

    monkeypatch.setattr(search_module, "walk", spy)
    search(bilingual_tree, "a", max_results=1)
    assert visited == ["Adam"]


def test_telugu_display_falls_back_to_english_suffixed_fields():
    tree = PersonNode.from_dict({"name": "Boaz", "nameEn": "Boaz", "spouseEn": "Ruth",
                                 "detailEn": "kinsman of Elimelech", "spouse": "?", "birth": "c. 1150 BC"})
    result = search(tree, "boaz", "te")[0]
    assert result.spouse == "Ruth"
    assert result.detail == "kinsman of Elimelech"
    assert result.birth == "c. 1150 BC"
    assert result.to_dict()["birth"] == "c. 1150 BC"


def test_query_is_matched_as_typed(bilingual_tree):
    assert search(bilingual_tree, " david") == []
    assert [r.name_en for r in search(bilingual_tree, "vid")] == ["David", "Davidson"]
