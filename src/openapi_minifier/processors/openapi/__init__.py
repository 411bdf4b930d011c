from .api_components_filter import APIComponentsFilter
from .api_definition_loader import APIDefinitionLoader
from .api_definition_parser import parse_openapi, serialize_openapi
from .api_definition_validator import APIDefinitionValidator
from .deprecated_paths_filter import DeprecatedPathsFilter
from .field_reducer import FieldReducer
from .openapi_minifier import OpenAPIMinifier
from .reference_resolver import ReferenceResolver
from .text_normalizer import normalize_description

__all__ = [
    "APIComponentsFilter",
    "APIDefinitionLoader",
    "APIDefinitionValidator",
    "DeprecatedPathsFilter",
    "FieldReducer",
    "OpenAPIMinifier",
    "ReferenceResolver",
    "normalize_description",
    "parse_openapi",
    "serialize_openapi",
]
