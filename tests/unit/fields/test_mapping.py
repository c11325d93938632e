import io
import json

import pytest

from flatfile_kit.errors import InvalidImportFormatError, MalformedJsonError
from flatfile_kit.fields.field import Field
from flatfile_kit.fields.mapping import (
    DEFAULT_MAPPING_FILENAME,
    decode_fields,
    dump_fields,
    encode_fields,
    load_fields,
)


@pytest.fixture
def fields() -> list[Field]:
    return [Field(name="id", start=1, end=3), Field(name="name", start=4, end=10)]


class TestEncodeFields:
    def test_encodes_ordered_list_of_objects(self, fields: list[Field]) -> None:
        payload = encode_fields(fields)

        assert json.loads(payload) == [
            {"name": "id", "start": 1, "end": 3},
            {"name": "name", "start": 4, "end": 10},
        ]

    def test_output_is_pretty_printed(self, fields: list[Field]) -> None:
        payload = encode_fields(fields)

        assert payload.startswith("[\n  {\n")
        assert '    "name": "id",' in payload

    def test_empty_list(self) -> None:
        assert encode_fields([]) == "[]"

    def test_default_filename(self) -> None:
        assert DEFAULT_MAPPING_FILENAME == "field-mappings.json"


class TestDecodeFields:
    def test_decodes_valid_payload(self, fields: list[Field]) -> None:
        assert decode_fields(encode_fields(fields)) == fields

    def test_decodes_bytes(self) -> None:
        payload = b'[{"name": "\xc3\xa9t\xc3\xa9", "start": 1, "end": 4}]'

        assert decode_fields(payload) == [Field(name="été", start=1, end=4)]

    def test_malformed_json_raises(self) -> None:
        with pytest.raises(MalformedJsonError, match="Error parsing JSON file"):
            decode_fields("[{not json")

    def test_invalid_utf8_bytes_raise_malformed(self) -> None:
        with pytest.raises(MalformedJsonError):
            decode_fields(b'["\xff"]')

    def test_non_numeric_start_raises_invalid_format(self) -> None:
        with pytest.raises(InvalidImportFormatError, match="Invalid field mapping format"):
            decode_fields('[{"name":"x","start":"oops","end":5}]')

    @pytest.mark.parametrize(
        "payload",
        [
            '{"name": "x", "start": 1, "end": 5}',
            '[{"name": "x", "start": 1}]',
            '[{"name": "", "start": 1, "end": 5}]',
            '[{"name": 7, "start": 1, "end": 5}]',
            '[{"name": "x", "start": 1, "end": null}]',
            '[{"name": "x", "start": 1, "end": 5, "type": "AN"}]',
            '"fields"',
        ],
    )
    def test_wrong_shapes_raise_invalid_format(self, payload: str) -> None:
        with pytest.raises(InvalidImportFormatError):
            decode_fields(payload)

    def test_invalid_format_carries_details(self) -> None:
        with pytest.raises(InvalidImportFormatError) as exc_info:
            decode_fields('[{"name":"x","start":"oops","end":5}]')

        assert exc_info.value.details
        assert exc_info.value.details[0]["loc"] == (0, "start")


class TestFileObjects:
    def test_dump_then_load(self, fields: list[Field]) -> None:
        buffer = io.StringIO()

        dump_fields(fields, buffer)
        buffer.seek(0)

        assert load_fields(buffer) == fields

    def test_load_from_binary_stream(self) -> None:
        source = io.BytesIO(b'[{"name": "id", "start": 1, "end": 3}]')

        assert load_fields(source) == [Field(name="id", start=1, end=3)]


class TestByteOrderMark:
    def test_decodes_text_with_bom(self) -> None:
        payload = "\ufeff" + '[{"name": "id", "start": 1, "end": 3}]'

        assert decode_fields(payload) == [Field(name="id", start=1, end=3)]

    def test_decodes_bytes_with_bom(self) -> None:
        payload = '\ufeff[{"name": "id", "start": 1, "end": 3}]'.encode("utf-8")

        assert decode_fields(payload) == [Field(name="id", start=1, end=3)]
