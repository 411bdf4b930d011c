from typing import Any, Dict, Optional, Tuple

from .base_component_extractor import BaseComponentExtractor

MIN_SCHEMA_SIZE = 50
STRUCTURAL_KEYWORDS = ("properties", "enum", "items", "oneOf", "anyOf", "allOf")

# First rule whose property names are all present wins
SCHEMA_NAME_RULES = (
    (("message",), "ErrorMessage"),
    (("error",), "ErrorResponse"),
    (("errors",), "ErrorList"),
    (("items", "total"), "PaginatedList"),
    (("data", "total"), "PaginatedList"),
    (("id", "name"), "NamedResource"),
    (("id",), "Resource"),
)


class CommonSchemaExtractor(BaseComponentExtractor):
    """Moves inline schemas repeated across the document into ``components.schemas``."""

    component_type = "schemas"
    stripped_fields = frozenset(["examples", "example", "default", "description", "title"])
    fallback_names = ("CommonSchema", "SharedSchema", "ReusableSchema")

    def is_candidate(self, key: str, value: Dict[str, Any], parent_path: Tuple[str, ...]) -> bool:
        if key != "schema":
            return False
        if not any(keyword in value for keyword in STRUCTURAL_KEYWORDS):
            return False
        return len(self.canonical_key(value)) >= MIN_SCHEMA_SIZE

    def suggest_name(self, value: Dict[str, Any]) -> Optional[str]:
        properties = value.get("properties")
        if isinstance(properties, dict):
            for required_names, name in SCHEMA_NAME_RULES:
                if all(property_name in properties for property_name in required_names):
                    return name

        if value.get("type") == "array" and "items" in value:
            return "ItemList"
        if "enum" in value:
            return "EnumValues"
        return None
