import copy

import pytest

from bilingual.person_node import PersonNode

ENGLISH_TREE = {
    "name": "Adam",
    "spouse": "Eve",
    "detail": "first man",
    "age": 930,
    "children": [
        {"name": "Cain", "detail": "tiller of the ground"},
        {"name": "Seth", "age": 912, "children": [{"name": "Enosh"}]},
    ],
}

TELUGU_TREE = {
    "name": "ఆదాము",
    "spouse": "హవ్వ",
    "detail": "మొదటి మనిషి",
    "children": [
        {"name": "కయీను"},
        {"name": "షేతు", "children": [{"name": "ఎనోషు"}]},
    ],
}

BILINGUAL_TREE = {
    "name": "ఆదాము",
    "nameEn": "Adam",
    "nameTe": "ఆదాము",
    "spouseEn": "Eve",
    "spouseTe": "హవ్వ",
    "spouse": "Eve",
    "children": [
        {
            "name": "యెష్షయి",
            "nameEn": "Jesse",
            "nameTe": "యెష్షయి",
            "children": [
                {
                    "name": "దావీదు",
                    "nameEn": "David",
                    "nameTe": "దావీదు",
                    "spouse": "Bathsheba",
                    "spouseTe": "బత్షెబ",
                    "detail": "king of Israel",
                    "detailTe": "ఇశ్రాయేలు రాజు",
                },
            ],
        },
        {"name": "సొలొమోను", "nameEn": "Solomon", "nameTe": "సొలొమోను"},
    ],
    "_children": [
        {"name": "Davidson", "nameEn": "Davidson"},
    ],
}

BOOKS = [
    {
        "book": "Exodus",
        "mainEvents": [
            {"title": "Red Sea", "reference": "Exodus 14:21", "text": "The waters were divided."},
        ],
        "mainPersons": ["Moses", "Aaron"],
    },
    {
        "book": "Genesis",
        "bookTelugu": "ఆదికాండము",
        "mainEvents": [
            {
                "title": "Flood",
                "titleTe": "Flood",
                "reference": "Genesis 7",
                "referenceTe": "ఆదికాండము 7",
                "text": "Noah builds the ark.",
                "textTe": "నోవహు ఓడను కట్టెను.",
            },
        ],
        "mainPersons": ["Noah"],
        "mainPersonsTe": ["నోవహు"],
    },
]


@pytest.fixture
def english_doc():
    return copy.deepcopy(ENGLISH_TREE)


@pytest.fixture
def telugu_doc():
    return copy.deepcopy(TELUGU_TREE)


@pytest.fixture
def english_tree(english_doc):
    return PersonNode.from_dict(english_doc)


@pytest.fixture
def telugu_tree(telugu_doc):
    return PersonNode.from_dict(telugu_doc)


@pytest.fixture
def bilingual_doc():
    return copy.deepcopy(BILINGUAL_TREE)


@pytest.fixture
def bilingual_tree(bilingual_doc):
    return PersonNode.from_dict(bilingual_doc)


@pytest.fixture
def books():
    return copy.deepcopy(BOOKS)
