from openapi_minifier.processors.openapi import ReferenceResolver


def _spec(paths, schemas=None, **extra):
    spec = {"openapi": "3.0.0", "info": {"title": "T", "version": "1"}, "paths": paths}
    if schemas is not None:
        spec["components"] = {"schemas": schemas}
    spec.update(extra)
    return spec


def _ref(name):
    return {"$ref": f"#/components/schemas/{name}"}


def test_collect_refs_finds_nested_refs():
    node = {"a": [{"$ref": "#/components/schemas/A"}, {"b": {"$ref": "#/components/responses/R"}}]}

    assert ReferenceResolver().collect_refs(node) == {"#/components/schemas/A", "#/components/responses/R"}


def test_collect_component_refs_ignores_other_pointer_styles():
    node = [
        _ref("A"),
        {"$ref": "#/components/parameters/Limit"},
        {"$ref": "other.yaml#/components/schemas/B"},
        {"$ref": "#/definitions/C"},
        {"$ref": 42},
    ]

    assert ReferenceResolver().collect_component_refs(node) == {("schemas", "A"), ("parameters", "Limit")}


def test_transitive_references_are_reachable():
    spec = _spec(
        {"/a": {"get": {"responses": {"200": {"description": "ok", "content": {"application/json": {"schema": _ref("A")}}}}}}},
        {
            "A": {"type": "object", "properties": {"b": _ref("B")}},
            "B": {"type": "array", "items": _ref("C")},
            "C": {"type": "string"},
            "D": {"type": "string"},
        },
    )

    assert ReferenceResolver().find_reachable_schemas(spec) == {"A", "B", "C"}


def test_cycles_terminate():
    spec = _spec(
        {"/a": {"get": {"parameters": [{"name": "x", "in": "query", "schema": _ref("Node")}]}}},
        {
            "Node": {"type": "object", "properties": {"children": {"type": "array", "items": _ref("Node")}, "peer": _ref("Peer")}},
            "Peer": {"type": "object", "properties": {"node": _ref("Node")}},
        },
    )

    assert ReferenceResolver().find_reachable_schemas(spec) == {"Node", "Peer"}


def test_dangling_reference_contributes_nothing():
    spec = _spec({"/a": {"get": {"parameters": [{"schema": _ref("Missing")}]}}}, {"A": {"type": "string"}})

    assert ReferenceResolver().find_reachable_schemas(spec) == set()


def test_webhooks_and_callbacks_are_live_sections():
    spec = _spec(
        {},
        {"Hook": {"type": "object"}, "Callback": {"type": "object"}, "Other": {"type": "object"}},
        webhooks={"newPet": {"post": {"requestBody": {"content": {"application/json": {"schema": _ref("Hook")}}}}}},
        callbacks={"onEvent": {"schema": _ref("Callback")}},
    )

    assert ReferenceResolver().find_reachable_schemas(spec) == {"Hook", "Callback"}


def test_references_from_other_component_tables_are_reachable():
    spec = _spec(
        {"/a": {"get": {"responses": {"404": {"$ref": "#/components/responses/NotFoundError"}}}}},
        {"Error": {"type": "object", "properties": {"message": {"type": "string"}}}},
    )
    spec["components"]["responses"] = {
        "NotFoundError": {"description": "Not Found", "content": {"application/json": {"schema": _ref("Error")}}}
    }

    assert ReferenceResolver().find_reachable_schemas(spec) == {"Error"}


def test_references_inside_schemas_table_are_not_roots():
    spec = _spec({}, {"A": _ref("B"), "B": {"type": "string"}})

    assert ReferenceResolver().find_reachable_schemas(spec) == set()


def test_missing_schemas_table_is_a_no_op():
    assert ReferenceResolver().find_reachable_schemas(_spec({"/a": {"get": {"schema": _ref("A")}}})) == set()


def test_schemas_used_only_by_unreferenced_component_tables_are_unreachable():
    spec = _spec(
        {"/a": {"get": {"parameters": [{"$ref": "#/components/parameters/Limit"}]}}},
        {"Page": {"type": "integer"}, "Orphan": {"type": "object"}, "Body": {"type": "string"}},
    )
    spec["components"]["parameters"] = {
        "Limit": {"name": "limit", "in": "query", "schema": _ref("Page")},
        "Unused": {"name": "unused", "in": "query", "schema": _ref("Orphan")},
    }
    spec["components"]["requestBodies"] = {"Upload": {"content": {"text/plain": {"schema": _ref("Body")}}}}

    assert ReferenceResolver().find_reachable_schemas(spec) == {"Page"}


def test_component_entries_referencing_each_other_are_followed():
    spec = _spec(
        {"/a": {"get": {"responses": {"200": {"$ref": "#/components/responses/Ok"}}}}},
        {"Payload": {"type": "object"}},
    )
    spec["components"]["responses"] = {
        "Ok": {"description": "ok", "headers": {"X-Rate": {"$ref": "#/components/headers/Rate"}}}
    }
    spec["components"]["headers"] = {"Rate": {"schema": _ref("Payload")}}

    assert ReferenceResolver().find_reachable_schemas(spec) == {"Payload"}
