# fields/mapping.py

"""JSON codec for field mapping files.

A mapping file is a UTF-8 JSON array of ``{"name", "start", "end"}``
objects. Decoding is split in two steps so callers can tell a payload that
is not JSON at all from one that is JSON of the wrong shape.
"""

import json
import logging
from collections.abc import Iterable
from typing import Any, BinaryIO, TextIO

from pydantic import TypeAdapter, ValidationError

from flatfile_kit.errors import InvalidImportFormatError, MalformedJsonError

from .field import Field

logger = logging.getLogger(__name__)

DEFAULT_MAPPING_FILENAME = "field-mappings.json"

_FIELD_LIST = TypeAdapter(list[Field])


def encode_fields(fields: Iterable[Field], indent: int = 2) -> str:
    return json.dumps([field.model_dump() for field in fields], indent=indent)


def decode_fields(payload: str | bytes) -> list[Field]:
    """Decode and validate a mapping payload.

    Raises:
        MalformedJsonError: payload is not valid JSON (or not UTF-8).
        InvalidImportFormatError: JSON is not a list of valid field objects.
    """
    if isinstance(payload, str):
        payload = payload.removeprefix("\ufeff")

    try:
        data = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning("Mapping payload is not valid JSON: %s", exc)
        raise MalformedJsonError() from exc

    return validate_fields(data)


def validate_fields(data: Any) -> list[Field]:
    """Validate already-decoded data against the mapping shape."""
    try:
        return _FIELD_LIST.validate_python(data)
    except ValidationError as exc:
        logger.warning(
            "Mapping payload has invalid format (%d errors)", exc.error_count()
        )
        raise InvalidImportFormatError(
            details=exc.errors(include_url=False)
        ) from exc


def load_fields(source: TextIO | BinaryIO) -> list[Field]:
    return decode_fields(source.read())


def dump_fields(fields: Iterable[Field], sink: TextIO, indent: int = 2) -> None:
    sink.write(encode_fields(fields, indent=indent))
