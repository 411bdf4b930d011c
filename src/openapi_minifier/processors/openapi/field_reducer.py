from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .api_definition_parser import REQUIRED_ROOT_FIELDS
from .text_normalizer import normalize_description
from ...configuration.options import DescriptionMode, MinificationOptions, Preset
from ...utils.logger import Logger
from ...utils.tree import is_array, is_container, is_object

MINIMAL_RESPONSE_DESCRIPTIONS = {
    "200": "Success",
    "201": "Created",
    "204": "No Content",
    "400": "Bad Request",
    "401": "Unauthorized",
    "403": "Forbidden",
    "404": "Not Found",
    "412": "Precondition Failed",
    "429": "Too Many Requests",
    "500": "Internal Server Error",
    "503": "Service Unavailable",
    "504": "Gateway Timeout",
}

MAX_SCHEMA_KEYWORDS = frozenset(
    [
        "format",
        "pattern",
        "minLength",
        "maxLength",
        "minimum",
        "maximum",
        "multipleOf",
        "exclusiveMinimum",
        "exclusiveMaximum",
        "minItems",
        "maxItems",
        "uniqueItems",
        "minProperties",
        "maxProperties",
        "title",
        "default",
        "readOnly",
        "writeOnly",
        "deprecated",
        "nullable",
    ]
)

BALANCED_SCHEMA_KEYWORDS = frozenset(
    ["format", "title", "default", "readOnly", "writeOnly", "deprecated", "nullable"]
)

SCHEMA_SEGMENTS = frozenset(["schemas", "properties", "schema"])
SCHEMA_DESCRIPTION_SEGMENTS = frozenset(["schemas", "properties"])
# Keys directly inside these maps are names chosen by the API author, not keywords
NAME_MAP_SEGMENTS = frozenset(["schemas", "properties"])

INFO_ESSENTIAL_FIELDS = ("title", "version")
CONTACT_FIELDS = ("name", "url", "email")
LICENSE_FIELDS = ("name", "url")
EXAMPLE_FIELDS = ("examples", "example")


def get_minimal_response_description(status_code: Any) -> str:
    return MINIMAL_RESPONSE_DESCRIPTIONS.get(str(status_code), "Response")


@dataclass(frozen=True)
class NodeContext:
    """Where a key sits in the document, derived once per step of the traversal."""

    path: Tuple[str, ...] = ()
    in_schema: bool = False
    in_schema_docs: bool = False
    in_responses: bool = False
    in_tags: bool = False

    def descend(self, segment: Any) -> "NodeContext":
        segment = str(segment)
        return NodeContext(
            path=self.path + (segment,),
            in_schema=self.in_schema or segment in SCHEMA_SEGMENTS,
            in_schema_docs=self.in_schema_docs or segment in SCHEMA_DESCRIPTION_SEGMENTS,
            in_responses=self.in_responses or segment == "responses",
            in_tags=self.in_tags or segment == "tags",
        )

    @property
    def parent(self) -> Optional[str]:
        return self.path[-2] if len(self.path) > 1 else None

    @property
    def is_top_level(self) -> bool:
        return len(self.path) == 1

    @property
    def is_name_in_map(self) -> bool:
        return self.parent in NAME_MAP_SEGMENTS

    @property
    def requires_description(self) -> bool:
        return self.in_responses or self.in_tags


class FieldReducer:
    """Strips or rewrites fields of an OpenAPI document in a single depth-first pass."""

    def __init__(self):
        self.logger = Logger.get_logger(__name__)

    def reduce(self, spec: Dict[str, Any], options: MinificationOptions) -> None:
        """
        Applies the field reduction rules to ``spec`` in place.

        ``openapi``, ``info`` and ``paths`` are cleaned internally but never removed.
        """
        self.logger.debug(
            f"Reducing fields (preset: {options.preset}, descriptions: {options.keep_descriptions.value})"
        )
        root = NodeContext()
        for key in list(spec.keys()):
            context = root.descend(key)
            if key not in REQUIRED_ROOT_FIELDS:
                self._process_field(spec, key, options, context)
                continue

            if key == "info" and is_object(spec[key]):
                spec[key] = self._clean_info(spec[key], options)
            if is_container(spec[key]):
                self._reduce_node(spec[key], options, context)

    def _reduce_node(self, node: Any, options: MinificationOptions, context: NodeContext) -> None:
        if is_object(node):
            # Keys are snapshotted because rules delete and replace entries
            for key in list(node.keys()):
                self._process_field(node, key, options, context.descend(key))
        elif is_array(node):
            for index, item in enumerate(node):
                if is_container(item):
                    self._reduce_node(item, options, context.descend(index))

    def _process_field(
        self, obj: Dict[str, Any], key: str, options: MinificationOptions, context: NodeContext
    ) -> None:
        value = obj[key]

        if key == "examples" and not options.keep_examples and not context.is_name_in_map:
            del obj[key]
            return

        if key == "description" and isinstance(value, str):
            if self._should_remove_description(options, context):
                del obj[key]
                return
            value = obj[key] = normalize_description(value)

        if key == "summary" and isinstance(value, str) and not options.keep_summaries:
            del obj[key]
            return

        if key == "tags" and is_array(value) and context.is_top_level and not options.keep_tags:
            value = obj[key] = [{"name": tag["name"]} if is_object(tag) and "name" in tag else tag for tag in value]

        if key == "servers" and is_array(value):
            value = obj[key] = [self._clean_server(server, options) for server in value]

        if key == "responses" and is_object(value) and not context.is_name_in_map:
            self._clean_responses(value, options)

        if key == "parameters" and is_array(value) and not options.keep_examples:
            value = obj[key] = [self._without_examples(parameter) for parameter in value]

        if context.in_schema and self._is_removable_schema_keyword(key, value, options, context):
            del obj[key]
            return

        if is_container(value):
            self._reduce_node(value, options, context)

    @staticmethod
    def _should_remove_description(options: MinificationOptions, context: NodeContext) -> bool:
        if options.keep_descriptions == DescriptionMode.ALL or context.requires_description:
            return False
        if options.keep_descriptions == DescriptionMode.SCHEMA_ONLY:
            return not context.in_schema_docs
        return True

    @staticmethod
    def _is_removable_schema_keyword(
        key: str, value: Any, options: MinificationOptions, context: NodeContext
    ) -> bool:
        if context.is_name_in_map:
            return False
        if options.preset == Preset.MAX:
            if key in MAX_SCHEMA_KEYWORDS:
                return True
            return key == "additionalProperties" and value is not True
        if options.preset == Preset.BALANCED:
            return key in BALANCED_SCHEMA_KEYWORDS
        return False

    @staticmethod
    def _clean_info(info: Dict[str, Any], options: MinificationOptions) -> Dict[str, Any]:
        cleaned = {field: info[field] for field in INFO_ESSENTIAL_FIELDS if field in info}

        if "description" in info and options.keep_descriptions == DescriptionMode.ALL:
            description = info["description"]
            cleaned["description"] = (
                normalize_description(description) if isinstance(description, str) else description
            )
        if is_object(info.get("contact")):
            cleaned["contact"] = {field: info["contact"][field] for field in CONTACT_FIELDS if field in info["contact"]}
        if is_object(info.get("license")):
            cleaned["license"] = {field: info["license"][field] for field in LICENSE_FIELDS if field in info["license"]}
        if "termsOfService" in info:
            cleaned["termsOfService"] = info["termsOfService"]

        return cleaned

    @staticmethod
    def _clean_server(server: Any, options: MinificationOptions) -> Any:
        if not is_object(server) or "description" not in server:
            return server

        cleaned = dict(server)
        if options.keep_descriptions != DescriptionMode.ALL:
            del cleaned["description"]
        elif isinstance(cleaned["description"], str):
            cleaned["description"] = normalize_description(cleaned["description"])
        return cleaned

    @staticmethod
    def _clean_responses(responses: Dict[str, Any], options: MinificationOptions) -> None:
        for status_code in list(responses.keys()):
            response = responses[status_code]
            if not is_object(response) or "$ref" in response:
                continue

            cleaned = dict(response)
            description = cleaned.get("description")
            if options.keep_descriptions == DescriptionMode.NONE or not isinstance(description, str):
                cleaned["description"] = get_minimal_response_description(status_code)
            else:
                cleaned["description"] = normalize_description(description) or get_minimal_response_description(
                    status_code
                )

            if not options.keep_examples and is_object(cleaned.get("content")):
                for media_type in cleaned["content"].values():
                    if is_object(media_type):
                        for field in EXAMPLE_FIELDS:
                            media_type.pop(field, None)

            responses[status_code] = cleaned

    @staticmethod
    def _without_examples(parameter: Any) -> Any:
        if not is_object(parameter):
            return parameter
        return {key: value for key, value in parameter.items() if key not in EXAMPLE_FIELDS}
