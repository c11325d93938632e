import pytest

from flatfile_kit.parsers.models import ParsedRecord, ParseResult


class TestParsedRecord:
    def test_mapping_access(self) -> None:
        record = ParsedRecord(line_number=1, values={"id": "AB"})

        assert record["id"] == "AB"
        assert record.get("missing") is None
        assert record.get("missing", "") == ""

    def test_to_dict_returns_copy(self) -> None:
        record = ParsedRecord(line_number=1, values={"id": "AB"})

        data = record.to_dict()
        data["id"] = "changed"

        assert record["id"] == "AB"

    def test_record_is_frozen(self) -> None:
        record = ParsedRecord(line_number=1, values={})

        with pytest.raises(AttributeError):
            record.line_number = 2  # type: ignore


class TestParseResult:
    def test_default_is_empty(self) -> None:
        result = ParseResult()

        assert len(result) == 0
        assert result.to_dicts() == []

    def test_iterates_records_in_order(self) -> None:
        records = [
            ParsedRecord(line_number=1, values={"id": "a"}),
            ParsedRecord(line_number=3, values={"id": "b"}),
        ]

        result = ParseResult(records=records, total_lines=3, skipped_lines=1)

        assert [r["id"] for r in result] == ["a", "b"]
        assert result.to_dicts() == [{"id": "a"}, {"id": "b"}]
