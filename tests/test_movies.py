import json

import pytest

from codedrills.movies import Movie, marshal, titles


@pytest.fixture
def movies():
    return [
        Movie("Casablanca", 1942, False, ["Humphrey Bogart", "Ingrid Bergman"]),
        Movie("Cool Hand Luke", 1967, True, ["Paul Newman"]),
        Movie("Bullitt", 1968, True, ["Steve McQueen", "Jacqueline Bisset"]),
    ]


def test_compact_marshal_matches_documented_output(movies):
    expected = (
        '[{"Title":"Casablanca","released":1942,'
        '"Actors":["Humphrey Bogart","Ingrid Bergman"]},'
        '{"Title":"Cool Hand Luke","released":1967,"color":true,'
        '"Actors":["Paul Newman"]},'
        '{"Title":"Bullitt","released":1968,"color":true,'
        '"Actors":["Steve McQueen","Jacqueline Bisset"]}]'
    )
    assert marshal(movies) == expected


def test_to_dict_omits_false_color(movies):
    data = movies[0].to_dict()
    assert "color" not in data
    assert data["released"] == 1942
    assert movies[1].to_dict()["color"] is True


def test_indented_output_decodes_to_same_value(movies):
    compact = marshal(movies)
    indented = marshal(movies, "\t\t")
    assert json.loads(indented) == json.loads(compact)
    assert "\n" in indented
    for line in indented.splitlines()[1:-1]:
        leading = len(line) - len(line.lstrip("\t"))
        assert leading % 2 == 0 and leading > 0


def test_titles_of_marshalled_movies(movies):
    assert titles(marshal(movies, "\t\t")) == ["Casablanca", "Cool Hand Luke", "Bullitt"]


def test_titles_matches_key_case_insensitively():
    assert titles('[{"title": "x"}, {"TITLE": "y"}, {}]') == ["x", "y", ""]


def test_titles_accepts_bytes_and_null():
    assert titles(b'[{"Title": "z"}]') == ["z"]
    assert titles("null") == []


def test_titles_rejects_non_array():
    with pytest.raises(ValueError):
        titles('{"Title": "x"}')


def test_titles_rejects_non_string_title():
    with pytest.raises(ValueError):
        titles('[{"Title": 5}]')


def test_html_characters_are_escaped():
    text = marshal([Movie("<a>&", 1)])
    assert "<" not in text and ">" not in text and "&" not in text
    assert "\\u003c" in text
    assert titles(text) == ["<a>&"]


def test_empty_list():
    assert json.loads(marshal([])) == []