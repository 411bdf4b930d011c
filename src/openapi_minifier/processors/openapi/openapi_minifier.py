from typing import Any, Dict, Optional

from .api_components_filter import APIComponentsFilter
from .api_definition_parser import REQUIRED_ROOT_FIELDS, is_missing, parse_openapi, serialize_openapi
from .components_extraction_strategies import CommonResponseExtractor, CommonSchemaExtractor
from .deprecated_paths_filter import DeprecatedPathsFilter
from .field_reducer import FieldReducer
from ...configuration.data_formats import DocumentFormat
from ...configuration.options import MinificationOptions
from ...models import MinificationStats, MinifyResult, RemovedElements
from ...utils.logger import Logger
from ...utils.tree import count_nested_key, deep_clone, is_object

COUNTED_KEYS = {
    "examples": "examples",
    "descriptions": "description",
    "summaries": "summary",
    "tags": "tags",
}


class OpenAPIMinifier:
    """Runs the minification passes over one document, in a fixed order."""

    def __init__(
        self,
        deprecated_paths_filter: Optional[DeprecatedPathsFilter] = None,
        response_extractor: Optional[CommonResponseExtractor] = None,
        schema_extractor: Optional[CommonSchemaExtractor] = None,
        field_reducer: Optional[FieldReducer] = None,
        components_filter: Optional[APIComponentsFilter] = None,
    ):
        self.deprecated_paths_filter = deprecated_paths_filter or DeprecatedPathsFilter()
        self.response_extractor = response_extractor or CommonResponseExtractor()
        self.schema_extractor = schema_extractor or CommonSchemaExtractor()
        self.field_reducer = field_reducer or FieldReducer()
        self.components_filter = components_filter or APIComponentsFilter()
        self.logger = Logger.get_logger(__name__)

    def minify(
        self,
        content: str,
        input_format: DocumentFormat,
        options: MinificationOptions,
        output_format: Optional[DocumentFormat] = None,
    ) -> MinifyResult:
        """
        Minifies raw OpenAPI text.

        Args:
            content: Raw JSON or YAML text
            input_format: Format of ``content``
            options: Minification options
            output_format: Format of the result, defaults to ``input_format``

        Returns:
            MinifyResult: Serialized minified document and statistics

        Raises:
            ParseError: If the input cannot be parsed
            SerializationError: If the result cannot be serialized
        """
        original_spec = parse_openapi(content, input_format)
        spec = deep_clone(original_spec)
        removed = RemovedElements()
        self.minify_document(spec, original_spec, options, removed)

        minified_content = serialize_openapi(spec, output_format or input_format)

        original_size = len(content.encode("utf-8"))
        minified_size = len(minified_content.encode("utf-8"))
        stats = MinificationStats(
            original_size=original_size,
            minified_size=minified_size,
            reduction_percentage=MinificationStats.compute_reduction(original_size, minified_size),
            removed_elements=removed,
        )
        return MinifyResult(minified_content=minified_content, stats=stats)

    def minify_document(
        self,
        spec: Dict[str, Any],
        original_spec: Dict[str, Any],
        options: MinificationOptions,
        removed: RemovedElements,
    ) -> Dict[str, Any]:
        """Applies every pass to ``spec`` in place, filling ``removed`` with the counts."""
        original_counts = self._count_elements(original_spec)

        if options.remove_deprecated:
            removed.deprecated_paths = self.deprecated_paths_filter.remove_deprecated(spec)
        if options.extract_common_responses:
            removed.extracted_responses = self.response_extractor.extract(spec)
        if options.extract_common_schemas:
            removed.extracted_schemas = self.schema_extractor.extract(spec)

        self.field_reducer.reduce(spec, options)

        if options.is_aggressive() or removed.deprecated_paths > 0:
            removed.unused_schemas = self.components_filter.remove_unused_schemas(spec)

        self._restore_root_fields(spec, original_spec)

        final_counts = self._count_elements(spec)
        for field in COUNTED_KEYS:
            setattr(removed, field, max(0, original_counts[field] - final_counts[field]))

        return spec

    @staticmethod
    def _count_elements(spec: Dict[str, Any]) -> Dict[str, int]:
        return {field: count_nested_key(spec, key) for field, key in COUNTED_KEYS.items()}

    def _restore_root_fields(self, spec: Dict[str, Any], original_spec: Dict[str, Any]) -> None:
        # An empty ``paths`` is a legitimate result (every path deprecated) and must not bring them back
        for field in REQUIRED_ROOT_FIELDS:
            value = spec.get(field)
            emptied_info = field == "info" and is_object(value) and not value and original_spec.get(field)
            if is_missing(value) or emptied_info:
                self.logger.warning(f"⚠️ Restoring root field '{field}' from the original document")
                spec[field] = deep_clone(original_spec[field])
