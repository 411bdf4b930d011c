import json
from unittest.mock import MagicMock

import pytest
import yaml

from openapi_minifier.configuration.config import Config
from openapi_minifier.configuration.data_formats import DocumentFormat
from openapi_minifier.configuration.options import MinificationOptions
from openapi_minifier.processors import OpenAPIProcessor
from openapi_minifier.processors.openapi import OpenAPIMinifier
from openapi_minifier.services.file_service import FileService
from openapi_minifier.utils.exceptions import ValidationError, WriteError


def _processor(config, validator=None):
    return OpenAPIProcessor(config=config, file_service=FileService(), minifier=OpenAPIMinifier(), validator=validator)


def test_process_writes_default_output_next_to_input(tmp_path, sample_spec):
    source = tmp_path / "petstore.json"
    source.write_text(json.dumps(sample_spec, indent=2), encoding="utf-8")
    config = Config(api_definition=str(source), options=MinificationOptions.for_preset("max"))

    result = _processor(config).process()

    target = tmp_path / "petstore.minified.json"
    assert target.read_text(encoding="utf-8") == result.minified_content
    assert json.loads(result.minified_content)["info"]["title"] == "Pet Store"
    assert result.stats.reduction_percentage > 0


def test_process_converts_to_requested_format(tmp_path, sample_spec):
    source = tmp_path / "petstore.yml"
    source.write_text(yaml.safe_dump(sample_spec), encoding="utf-8")
    target = tmp_path / "out" / "petstore.json"
    config = Config(
        api_definition=str(source),
        output_path=str(target),
        output_format=DocumentFormat.JSON,
        options=MinificationOptions.for_preset("min"),
    )

    _processor(config).process()

    assert json.loads(target.read_text(encoding="utf-8"))["components"]["schemas"]["Unused"]


def test_process_validates_before_minifying(tmp_path, sample_spec):
    source = tmp_path / "petstore.json"
    source.write_text(json.dumps(sample_spec), encoding="utf-8")
    validator = MagicMock()
    validator.validate.side_effect = ValidationError("bad document")
    config = Config(api_definition=str(source), options=MinificationOptions.for_preset("max", validate=True))

    with pytest.raises(ValidationError):
        _processor(config, validator=validator).process()

    validator.validate.assert_called_once_with(sample_spec)
    assert not (tmp_path / "petstore.minified.json").exists()


def test_process_skips_validation_by_default(tmp_path, sample_spec):
    source = tmp_path / "petstore.json"
    source.write_text(json.dumps(sample_spec), encoding="utf-8")
    validator = MagicMock()

    _processor(Config(api_definition=str(source)), validator=validator).process()

    validator.validate.assert_not_called()


def test_process_wraps_write_failures(tmp_path, sample_spec):
    source = tmp_path / "petstore.json"
    source.write_text(json.dumps(sample_spec), encoding="utf-8")
    blocker = tmp_path / "blocker"
    blocker.write_text("not a folder", encoding="utf-8")
    config = Config(api_definition=str(source), output_path=str(blocker / "out.json"))

    with pytest.raises(WriteError, match="Error writing minified specification"):
        _processor(config).process()
