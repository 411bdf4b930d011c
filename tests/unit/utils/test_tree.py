import pytest

from openapi_minifier.utils.tree import count_nested_key, deep_clone, is_array, is_container, is_object


@pytest.mark.parametrize(
    "value,expected",
    [
        ({}, True),
        ({"a": 1}, True),
        ([], False),
        ("text", False),
        (None, False),
        (3, False),
    ],
)
def test_is_object(value, expected):
    assert is_object(value) is expected


def test_is_array_and_container():
    assert is_array([1, 2])
    assert not is_array({"a": 1})
    assert is_container([])
    assert is_container({})
    assert not is_container("x")


def test_deep_clone_does_not_share_nested_values():
    original = {"a": {"b": [1, {"c": 2}]}}
    cloned = deep_clone(original)

    cloned["a"]["b"][1]["c"] = 3

    assert cloned == {"a": {"b": [1, {"c": 3}]}}
    assert original == {"a": {"b": [1, {"c": 2}]}}


def test_count_nested_key_counts_every_level():
    document = {
        "description": "root",
        "paths": {"/a": {"get": {"description": "op"}}},
        "list": [{"description": "in list"}, {"other": {"description": "deep"}}],
    }

    assert count_nested_key(document, "description") == 4


def test_count_nested_key_on_scalars_and_missing_keys():
    assert count_nested_key("description", "description") == 0
    assert count_nested_key({"a": 1}, "description") == 0
    assert count_nested_key([], "description") == 0
