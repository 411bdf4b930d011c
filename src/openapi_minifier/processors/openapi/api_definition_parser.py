import json
from typing import Any, Dict

import yaml

from ...configuration.data_formats import DocumentFormat
from ...utils.exceptions import ParseError, SerializationError

REQUIRED_ROOT_FIELDS = ("openapi", "info", "paths")
TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class JSONCompatibleLoader(yaml.SafeLoader):
    """Safe loader that leaves date-like scalars as plain strings."""


JSONCompatibleLoader.yaml_implicit_resolvers = {
    first_char: [(tag, regexp) for tag, regexp in resolvers if tag != TIMESTAMP_TAG]
    for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class NoAliasDumper(yaml.SafeDumper):
    def ignore_aliases(self, data):
        return True


def is_missing(value: Any) -> bool:
    return value is None or value == ""


def parse_openapi(content: str, document_format: DocumentFormat) -> Dict[str, Any]:
    """
    Parses raw JSON or YAML text into an OpenAPI document tree.

    Args:
        content: Raw document text
        document_format: Format the text is written in

    Returns:
        Dict[str, Any]: The parsed document

    Raises:
        ParseError: If the text is malformed, is not a mapping, or lacks openapi/info/paths
    """
    try:
        if document_format == DocumentFormat.YAML:
            spec = yaml.load(content, Loader=JSONCompatibleLoader)
        else:
            spec = json.loads(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ParseError(str(e)) from e

    if not isinstance(spec, dict):
        raise ParseError("Invalid OpenAPI specification: not an object")

    for field in REQUIRED_ROOT_FIELDS:
        if is_missing(spec.get(field)):
            raise ParseError(f'Missing "{field}" field')

    return spec


def serialize_openapi(spec: Dict[str, Any], document_format: DocumentFormat) -> str:
    """Serializes the document; JSON output is compact, YAML output is block style without aliases."""
    try:
        if document_format == DocumentFormat.YAML:
            return yaml.dump(
                spec,
                Dumper=NoAliasDumper,
                indent=2,
                width=float("inf"),
                sort_keys=False,
                allow_unicode=True,
                default_flow_style=False,
            )
        return json.dumps(spec, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError, RecursionError, yaml.YAMLError) as e:
        raise SerializationError(str(e) or e.__class__.__name__) from e
