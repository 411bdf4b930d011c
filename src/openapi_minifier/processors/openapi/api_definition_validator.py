from typing import Any, Dict

from openapi_spec_validator import validate

from ...utils.exceptions import ValidationError
from ...utils.logger import Logger


class APIDefinitionValidator:
    """Pre-flight conformance check of an input document against the OpenAPI 3.x meta-schema."""

    def __init__(self):
        self.logger = Logger.get_logger(__name__)

    def validate(self, spec: Dict[str, Any]) -> None:
        version = spec.get("openapi")
        if not isinstance(version, str) or not version.startswith("3."):
            raise ValidationError(f"Unsupported OpenAPI version: {version}. Only OpenAPI v3.x is supported.")

        try:
            validate(spec)
        except Exception as e:
            self.logger.debug(f"Validation error details: {e!r}")
            raise ValidationError(str(e).split("\n")[0]) from e
