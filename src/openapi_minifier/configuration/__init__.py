from .config import Config
from .data_formats import DocumentFormat
from .options import DescriptionMode, MinificationOptions, Preset

__all__ = [
    "Config",
    "DescriptionMode",
    "DocumentFormat",
    "MinificationOptions",
    "Preset",
]
