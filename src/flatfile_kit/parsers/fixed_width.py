# parsers/fixed_width.py

import logging
from collections.abc import Sequence
from time import monotonic

from flatfile_kit.fields.field import Field
from flatfile_kit.observability import names
from flatfile_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import LineParser
from .models import ParsedRecord, ParseResult

logger = logging.getLogger(__name__)


def extract_field(line: str, field: Field) -> str:
    """Slice one field out of a line and trim it.

    Offsets are 1-based and inclusive. Lines shorter than the field give a
    partial or empty value rather than an error.
    """
    start = max(field.start - 1, 0)
    end = max(field.end, 0)
    return line[start:end].strip()


class FixedWidthParser(LineParser):
    """
    Deterministic fixed-width line parser.
    - Splits on line feeds only
    - Skips blank lines
    - Emits one record per kept line, keyed by field name in field order
    """

    def __init__(self, metrics_hook: MetricsHook = NoOpMetricsHook()) -> None:
        self.metrics_hook = metrics_hook

    def parse(self, content: str, fields: Sequence[Field]) -> ParseResult:
        if not fields:
            return ParseResult()

        started = monotonic()
        records: list[ParsedRecord] = []
        skipped = 0

        lines = content.split("\n") if content else []
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                skipped += 1
                continue

            values = {field.name: extract_field(line, field) for field in fields}
            records.append(ParsedRecord(line_number=line_number, values=values))

        elapsed_ms = 1000 * (monotonic() - started)
        self.metrics_hook.record_latency(names.PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.PARSE_RECORDS_CREATED, len(records))
        self.metrics_hook.increment(names.PARSE_LINES_SKIPPED, skipped)

        logger.debug(
            "Parsed %d records from %d lines (%d blank)",
            len(records),
            len(lines),
            skipped,
        )
        return ParseResult(records=records, total_lines=len(lines), skipped_lines=skipped)


def parse_fixed_width(
    content: str,
    fields: Sequence[Field],
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ParseResult:
    return FixedWidthParser(metrics_hook=metrics_hook).parse(content, fields)
