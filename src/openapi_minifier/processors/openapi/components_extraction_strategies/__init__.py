from .base_component_extractor import BaseComponentExtractor, EXTRACTION_THRESHOLD
from .common_response_extractor import CommonResponseExtractor
from .common_schema_extractor import CommonSchemaExtractor

__all__ = [
    "BaseComponentExtractor",
    "CommonResponseExtractor",
    "CommonSchemaExtractor",
    "EXTRACTION_THRESHOLD",
]
