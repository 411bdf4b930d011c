from enum import Enum
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field


class Preset(str, Enum):
    MAX = "max"
    BALANCED = "balanced"
    MIN = "min"

    def is_aggressive(self) -> bool:
        return self in [Preset.MAX, Preset.BALANCED]


class DescriptionMode(str, Enum):
    ALL = "all"
    SCHEMA_ONLY = "schema-only"
    NONE = "none"


PRESET_DEFAULTS: Dict[Preset, Dict[str, Any]] = {
    Preset.MAX: {
        "keep_examples": False,
        "keep_descriptions": DescriptionMode.NONE,
        "keep_summaries": False,
        "keep_tags": False,
        "remove_deprecated": True,
        "extract_common_responses": True,
        "extract_common_schemas": True,
    },
    Preset.BALANCED: {
        "keep_examples": False,
        "keep_descriptions": DescriptionMode.SCHEMA_ONLY,
        "keep_summaries": False,
        "keep_tags": False,
        "remove_deprecated": False,
        "extract_common_responses": True,
        "extract_common_schemas": False,
    },
    Preset.MIN: {
        "keep_examples": True,
        "keep_descriptions": DescriptionMode.ALL,
        "keep_summaries": True,
        "keep_tags": True,
        "remove_deprecated": False,
        "extract_common_responses": False,
        "extract_common_schemas": False,
    },
}


class MinificationOptions(BaseModel):
    """Switches consumed by the minification passes.

    Field defaults match the ``balanced`` preset. Each field also accepts its
    camelCase name, which is how options files spell them.
    """

    model_config = ConfigDict(populate_by_name=True)

    keep_examples: bool = Field(default=False, alias="keepExamples")
    keep_descriptions: DescriptionMode = Field(default=DescriptionMode.SCHEMA_ONLY, alias="keepDescriptions")
    keep_summaries: bool = Field(default=False, alias="keepSummaries")
    keep_tags: bool = Field(default=False, alias="keepTags")
    remove_deprecated: bool = Field(default=False, alias="removeDeprecated")
    extract_common_responses: bool = Field(default=True, alias="extractCommonResponses")
    extract_common_schemas: bool = Field(default=False, alias="extractCommonSchemas")
    preset: Optional[Preset] = Preset.BALANCED
    validate_spec: bool = Field(default=False, alias="validate")

    @classmethod
    def for_preset(cls, preset: Preset | str | None = None, **overrides: Any) -> "MinificationOptions":
        """
        Builds options from a preset's defaults.

        Args:
            preset: Preset name or enum, ``balanced`` when omitted.
            **overrides: Explicit option values (snake_case or camelCase); ``None`` values are ignored.

        Returns:
            MinificationOptions: The resolved options.
        """
        preset = Preset(preset) if preset is not None else Preset.BALANCED
        values = dict(PRESET_DEFAULTS[preset])
        values.update({key: value for key, value in cls.to_field_names(overrides).items() if value is not None})
        values["preset"] = preset
        return cls(**values)

    @classmethod
    def from_file(cls, file_path: str, preset: Preset | str | None = None, **overrides: Any) -> "MinificationOptions":
        """Reads options from a JSON or YAML file, then applies ``overrides`` on top."""
        with open(file_path, "r", encoding="utf-8") as file:
            data = yaml.safe_load(file) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Options file {file_path} must contain a mapping")

        data = cls.to_field_names(data)
        file_preset = data.pop("preset", None)
        data.update({key: value for key, value in cls.to_field_names(overrides).items() if value is not None})
        return cls.for_preset(preset or file_preset, **data)

    @classmethod
    def to_field_names(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        aliases = {field.alias: name for name, field in cls.model_fields.items() if field.alias}
        return {aliases.get(key, key): value for key, value in data.items()}

    def is_aggressive(self) -> bool:
        return self.preset is not None and self.preset.is_aggressive()
