import copy

import pytest


BASE_SPEC = {
    "openapi": "3.0.3",
    "info": {
        "title": "Pet Store",
        "version": "1.0.0",
        "description": "A **sample** pet store.",
        "contact": {"name": "API Team", "email": "api@example.com", "x-slack": "#api"},
        "license": {"name": "MIT", "url": "https://opensource.org/licenses/MIT", "identifier": "MIT"},
        "x-logo": {"url": "https://example.com/logo.png"},
    },
    "servers": [{"url": "https://api.example.com", "description": "Production server"}],
    "tags": [{"name": "pets", "description": "Everything about pets"}],
    "paths": {
        "/pets": {
            "get": {
                "summary": "List pets",
                "description": "Returns all pets.",
                "tags": ["pets"],
                "parameters": [
                    {
                        "name": "limit",
                        "in": "query",
                        "description": "Page size",
                        "example": 10,
                        "schema": {"type": "integer", "format": "int32", "maximum": 100},
                    }
                ],
                "responses": {
                    "200": {
                        "description": "A list of pets",
                        "content": {
                            "application/json": {
                                "schema": {"type": "array", "items": {"$ref": "#/components/schemas/Pet"}},
                                "example": [{"id": 1, "name": "Rex"}],
                            }
                        },
                    }
                },
            }
        }
    },
    "components": {
        "schemas": {
            "Pet": {
                "type": "object",
                "title": "Pet",
                "description": "A pet",
                "properties": {
                    "id": {"type": "integer", "format": "int64", "readOnly": True},
                    "name": {"type": "string", "minLength": 1, "description": "Pet name"},
                    "owner": {"$ref": "#/components/schemas/Owner"},
                },
            },
            "Owner": {
                "type": "object",
                "properties": {"email": {"type": "string", "format": "email", "pattern": "^.+@.+$"}},
            },
            "Unused": {"type": "object", "properties": {"flag": {"type": "boolean"}}},
        }
    },
}


@pytest.fixture
def sample_spec():
    return copy.deepcopy(BASE_SPEC)


@pytest.fixture
def make_operation():
    def _make_operation(status_code="200", response=None, deprecated=False):
        operation = {"responses": {status_code: response or {"description": "OK"}}}
        if deprecated:
            operation["deprecated"] = True
        return operation

    return _make_operation
