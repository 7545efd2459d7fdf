import pytest

from bilingual.errors import MalformedNodeError
from bilingual.person_node import PersonNode, count_nodes, first_present, shape_differences, walk


def test_dict_roundtrip_keeps_unknown_keys_and_children():
    doc = {"name": "Noah", "class": "patriarch", "color": "#fff",
           "_children": [{"name": "Shem"}, {"name": "Ham"}]}
    node = PersonNode.from_dict(doc)
    assert node.klass == "patriarch"
    assert node.extra == {"color": "#fff"}
    assert node.children is None
    assert [c.name for c in node.hidden_children] == ["Shem", "Ham"]
    assert node.to_dict() == doc


def test_to_dict_writes_children_last():
    node = PersonNode.from_dict({"children": [{"name": "Seth"}], "name": "Adam", "nameTe": "ఆదాము"})
    assert list(node.to_dict()) == ["name", "nameTe", "children"]


@pytest.mark.parametrize("doc, path", [
    ("Adam", "root"),
    ({"name": "Adam", "children": {"name": "Seth"}}, "root.children"),
    ({"name": "Adam", "children": [{"name": "Seth", "_children": ["Enosh"]}]}, "root.children[0]._children[0]"),
])
def test_malformed_input_names_the_path(doc, path):
    with pytest.raises(MalformedNodeError) as exc:
        PersonNode.from_dict(doc)
    assert exc.value.path == path


def test_walk_is_preorder_children_before_hidden(bilingual_tree):
    order = [n.name_en for n, _ in walk(bilingual_tree)]
    assert order == ["Adam", "Jesse", "David", "Solomon", "Davidson"]
    depth = {n.name_en: len(a) for n, a in walk(bilingual_tree)}
    assert depth["David"] == 2
    assert count_nodes(bilingual_tree) == 5


def test_first_present_skips_blank_values():
    assert first_present(None, "", "Eve") == "Eve"
    assert first_present(0, "x") == 0
    assert first_present(None, "") is None


def test_shape_differences(english_tree, telugu_tree):
    assert shape_differences(english_tree, telugu_tree) == []

    telugu_tree.children[1].children.append(PersonNode(name="extra"))
    telugu_tree.hidden_children = [PersonNode(name="hidden")]
    assert shape_differences(english_tree, telugu_tree) == [
        "root.children[1].children: 1 != 2",
        "root._children: 0 != 1",
    ]
