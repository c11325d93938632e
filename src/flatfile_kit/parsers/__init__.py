from .base import LineParser
from .fixed_width import FixedWidthParser, extract_field, parse_fixed_width
from .models import ParsedRecord, ParseResult

__all__ = [
    "FixedWidthParser",
    "LineParser",
    "ParseResult",
    "ParsedRecord",
    "extract_field",
    "parse_fixed_width",
]
