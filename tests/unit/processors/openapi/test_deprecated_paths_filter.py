from openapi_minifier.processors.openapi import DeprecatedPathsFilter


def _spec(paths):
    return {"openapi": "3.0.0", "info": {"title": "T", "version": "1"}, "paths": paths}


def test_path_item_deprecated_flag_removes_path(make_operation):
    spec = _spec({"/old": {"deprecated": True, "get": make_operation()}, "/new": {"get": make_operation()}})

    removed = DeprecatedPathsFilter().remove_deprecated(spec)

    assert removed == 1
    assert list(spec["paths"]) == ["/new"]


def test_path_with_all_operations_deprecated_is_removed(make_operation):
    spec = _spec(
        {
            "/old": {
                "parameters": [{"name": "id", "in": "path"}],
                "get": make_operation(deprecated=True),
                "delete": make_operation(deprecated=True),
            }
        }
    )

    removed = DeprecatedPathsFilter().remove_deprecated(spec)

    assert removed == 1
    assert spec["paths"] == {}


def test_mixed_path_keeps_live_operations(make_operation):
    spec = _spec({"/pets": {"get": make_operation(), "post": make_operation(deprecated=True)}})

    removed = DeprecatedPathsFilter().remove_deprecated(spec)

    assert removed == 0
    assert list(spec["paths"]["/pets"]) == ["get"]


def test_deprecated_false_is_kept(make_operation):
    operation = make_operation()
    operation["deprecated"] = False
    spec = _spec({"/pets": {"get": operation}})

    assert DeprecatedPathsFilter().remove_deprecated(spec) == 0
    assert "/pets" in spec["paths"]


def test_path_without_operations_is_kept():
    spec = _spec({"/pets": {"parameters": [{"name": "id", "in": "query"}]}})

    assert DeprecatedPathsFilter().remove_deprecated(spec) == 0
    assert "/pets" in spec["paths"]
