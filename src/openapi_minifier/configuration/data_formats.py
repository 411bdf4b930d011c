import os
import re
from enum import Enum
from urllib.parse import urlparse


class DocumentFormat(Enum):
    JSON = "json"
    YAML = "yaml"

    @property
    def extension(self) -> str:
        return f".{self.value}"


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def get_format_for_path(source: str) -> DocumentFormat:
    """
    Detects the document format from a file path or URL extension.

    Args:
        source: Local path or URL of the API definition

    Returns:
        DocumentFormat.YAML for .yaml/.yml files, DocumentFormat.JSON otherwise
    """
    path = urlparse(source).path if is_url(source) else source
    match os.path.splitext(path)[1].lower():
        case ".yaml" | ".yml":
            return DocumentFormat.YAML
        case _:
            return DocumentFormat.JSON


def get_default_output_path(source: str, output_format: DocumentFormat) -> str:
    """Builds ``<name>.minified.<ext>`` next to the input, or in the working directory for URLs."""
    if is_url(source):
        source = urlparse(source).path.rstrip("/").split("/")[-1] or "openapi"
    base_name = re.sub(r"\.(json|yaml|yml)$", "", source, flags=re.IGNORECASE)
    return f"{base_name}.minified{output_format.extension}"
