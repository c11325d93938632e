from .field import Field
from .field_registry import FieldRegistry
from .mapping import (
    DEFAULT_MAPPING_FILENAME,
    decode_fields,
    dump_fields,
    encode_fields,
    load_fields,
    validate_fields,
)

__all__ = [
    "DEFAULT_MAPPING_FILENAME",
    "Field",
    "FieldRegistry",
    "decode_fields",
    "dump_fields",
    "encode_fields",
    "load_fields",
    "validate_fields",
]
