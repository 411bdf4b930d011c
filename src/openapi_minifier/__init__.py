from .configuration import Config, DescriptionMode, DocumentFormat, MinificationOptions, Preset
from .models import MinificationStats, MinifyResult, RemovedElements
from .processors.openapi import OpenAPIMinifier, parse_openapi, serialize_openapi
from .utils.exceptions import (
    LoadError,
    OpenAPIMinifierError,
    ParseError,
    SerializationError,
    ValidationError,
    WriteError,
)


def minify_openapi(
    content: str,
    input_format: DocumentFormat,
    options: MinificationOptions | None = None,
    output_format: DocumentFormat | None = None,
) -> MinifyResult:
    """Minifies raw OpenAPI text with the default pass pipeline."""
    return OpenAPIMinifier().minify(content, input_format, options or MinificationOptions(), output_format)


__all__ = [
    "Config",
    "DescriptionMode",
    "DocumentFormat",
    "LoadError",
    "MinificationOptions",
    "MinificationStats",
    "MinifyResult",
    "OpenAPIMinifier",
    "OpenAPIMinifierError",
    "ParseError",
    "Preset",
    "RemovedElements",
    "SerializationError",
    "ValidationError",
    "WriteError",
    "minify_openapi",
    "parse_openapi",
    "serialize_openapi",
]
