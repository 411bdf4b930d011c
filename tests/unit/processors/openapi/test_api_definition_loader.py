from unittest.mock import MagicMock, patch

import pytest
import requests

from openapi_minifier.processors.openapi import APIDefinitionLoader
from openapi_minifier.utils.exceptions import LoadError


def test_load_from_file(tmp_path):
    spec_file = tmp_path / "spec.yaml"
    spec_file.write_text("openapi: 3.0.0\n", encoding="utf-8")

    assert APIDefinitionLoader().load(str(spec_file)) == "openapi: 3.0.0\n"


def test_load_missing_file_raises_load_error(tmp_path):
    with pytest.raises(LoadError, match="Error loading API definition"):
        APIDefinitionLoader().load(str(tmp_path / "missing.json"))


@patch("openapi_minifier.processors.openapi.api_definition_loader.requests.get")
def test_load_from_url(mock_get):
    mock_get.return_value = MagicMock(status_code=200, text='{"openapi": "3.0.0"}')

    content = APIDefinitionLoader().load("https://example.com/openapi.json")

    assert content == '{"openapi": "3.0.0"}'
    mock_get.assert_called_once_with("https://example.com/openapi.json", timeout=APIDefinitionLoader.REQUEST_TIMEOUT)


@patch("openapi_minifier.processors.openapi.api_definition_loader.requests.get")
def test_load_from_url_with_error_status(mock_get):
    mock_get.return_value = MagicMock(status_code=404, text="not found")

    with pytest.raises(LoadError, match="HTTP 404"):
        APIDefinitionLoader().load("https://example.com/openapi.json")


@patch("openapi_minifier.processors.openapi.api_definition_loader.requests.get")
def test_load_from_url_with_connection_error(mock_get):
    mock_get.side_effect = requests.ConnectionError("connection refused")

    with pytest.raises(LoadError, match="connection refused"):
        APIDefinitionLoader().load("https://example.com/openapi.json")
