from dataclasses import dataclass, field
from typing import Optional

from .data_formats import DocumentFormat, get_default_output_path, get_format_for_path
from .options import MinificationOptions


@dataclass
class Config:
    """Settings for one minification run."""

    api_definition: str = ""
    output_path: Optional[str] = None
    output_format: Optional[DocumentFormat] = None
    debug: bool = False
    log_file: Optional[str] = None
    options: MinificationOptions = field(default_factory=MinificationOptions)

    @property
    def input_format(self) -> DocumentFormat:
        return get_format_for_path(self.api_definition)

    def resolve_output_format(self) -> DocumentFormat:
        return self.output_format or self.input_format

    def resolve_output_path(self) -> str:
        return self.output_path or get_default_output_path(self.api_definition, self.resolve_output_format())
