# Config
from .config import ParserConfig

# Errors
from .errors import (
    FieldDefinitionError,
    FlatFileError,
    IncompleteFieldError,
    InvalidImportFormatError,
    InvalidRangeError,
    MalformedJsonError,
    MappingImportError,
    OverlapError,
)

# Fields
from .fields import (
    DEFAULT_MAPPING_FILENAME,
    Field,
    FieldRegistry,
    decode_fields,
    dump_fields,
    encode_fields,
    load_fields,
)

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    FixedWidthParser,
    LineParser,
    ParsedRecord,
    ParseResult,
    extract_field,
    parse_fixed_width,
)

# Session
from .session import ParserSession

__all__ = [
    # Config
    "ParserConfig",
    # Errors
    "FieldDefinitionError",
    "FlatFileError",
    "IncompleteFieldError",
    "InvalidImportFormatError",
    "InvalidRangeError",
    "MalformedJsonError",
    "MappingImportError",
    "OverlapError",
    # Fields
    "DEFAULT_MAPPING_FILENAME",
    "Field",
    "FieldRegistry",
    "decode_fields",
    "dump_fields",
    "encode_fields",
    "load_fields",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "FixedWidthParser",
    "LineParser",
    "ParsedRecord",
    "ParseResult",
    "extract_field",
    "parse_fixed_width",
    # Session
    "ParserSession",
]
