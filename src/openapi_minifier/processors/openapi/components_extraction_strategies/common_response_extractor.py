import re
from typing import Any, Dict, Optional, Tuple

from .base_component_extractor import BaseComponentExtractor

STATUS_CODE_PATTERN = re.compile(r"^\d{3}$")

RESPONSE_NAME_KEYWORDS = (
    ("not found", "NotFoundError"),
    ("unauthorized", "UnauthorizedError"),
    ("unauthenticated", "UnauthorizedError"),
    ("forbidden", "ForbiddenError"),
    ("bad request", "BadRequestError"),
    ("conflict", "ConflictError"),
    ("too many requests", "TooManyRequestsError"),
    ("rate limit", "TooManyRequestsError"),
    ("unprocessable", "ValidationError"),
    ("validation", "ValidationError"),
    ("precondition failed", "PreconditionFailedError"),
    ("internal server error", "InternalServerError"),
    ("service unavailable", "ServiceUnavailableError"),
    ("gateway timeout", "GatewayTimeoutError"),
    ("no content", "NoContentResponse"),
    ("created", "CreatedResponse"),
    ("accepted", "AcceptedResponse"),
    ("success", "SuccessResponse"),
    ("successful", "SuccessResponse"),
)


class CommonResponseExtractor(BaseComponentExtractor):
    """Moves inline response objects repeated across operations into ``components.responses``."""

    component_type = "responses"
    stripped_fields = frozenset(["examples", "example"])
    fallback_names = ("CommonResponse", "SharedResponse", "StandardResponse", "ReusableResponse")

    def is_candidate(self, key: str, value: Dict[str, Any], parent_path: Tuple[str, ...]) -> bool:
        return bool(parent_path) and parent_path[-1] == "responses" and STATUS_CODE_PATTERN.match(key) is not None

    def suggest_name(self, value: Dict[str, Any]) -> Optional[str]:
        description = value.get("description")
        if not isinstance(description, str):
            return None

        text = description.strip().lower()
        for keyword, name in RESPONSE_NAME_KEYWORDS:
            if self.matches_keyword(text, keyword):
                return name
        return None
