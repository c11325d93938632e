"""Single owning state container for an interactive parsing session.

A presentation layer drives a `ParserSession` with user actions (add or
remove a field, import a mapping, paste or upload content). Every action is
applied atomically and followed by an explicit reparse. Rejected actions
leave the previous fields and records in place and set `error`.
"""

import logging
from typing import Any

from .config import ParserConfig
from .errors import FlatFileError
from .fields.field import Field
from .fields.field_registry import FieldRegistry
from .observability.base import MetricsHook, NoOpMetricsHook
from .parsers.fixed_width import FixedWidthParser
from .parsers.models import ParseResult

logger = logging.getLogger(__name__)

_BOM = "\ufeff"


class ParserSession:
    def __init__(
        self,
        config: ParserConfig = ParserConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config
        self.registry = FieldRegistry(config=config, metrics_hook=metrics_hook)
        self.parser = FixedWidthParser(metrics_hook=metrics_hook)
        self._content = ""
        self._result = ParseResult()
        self._error: str | None = None

    @property
    def fields(self) -> tuple[Field, ...]:
        return self.registry.fields

    @property
    def has_fields(self) -> bool:
        return len(self.registry) > 0

    @property
    def content(self) -> str:
        return self._content

    @property
    def result(self) -> ParseResult:
        return self._result

    @property
    def records(self) -> list[dict[str, str]]:
        return self._result.to_dicts()

    @property
    def error(self) -> str | None:
        return self._error

    def add_field(self, name: str, start: int | str, end: int | str) -> bool:
        try:
            self.registry.add(name, start, end)
        except FlatFileError as exc:
            self._fail(exc)
            return False

        self._error = None
        self.reparse()
        return True

    def remove_field(self, index: int) -> None:
        self.registry.remove(index)
        self.reparse()

    def import_mapping(self, payload: str | bytes) -> bool:
        try:
            self.registry.import_json(payload)
        except FlatFileError as exc:
            self._fail(exc)
            return False

        self._error = None
        self.reparse()
        return True

    def export_mapping(self) -> str:
        return self.registry.export_json()

    def set_content(self, text: str) -> ParseResult:
        """Replace the content with pasted text and reparse."""
        self._content = text
        return self.reparse()

    def load_content(self, data: str | bytes) -> ParseResult:
        """Replace the content with the contents of an uploaded file."""
        if isinstance(data, bytes):
            data = data.decode(self.config.encoding, errors="replace")
        # Drop a byte-order mark so offsets on the first line are not shifted
        data = data.removeprefix(_BOM)
        logger.info("Loaded content: %d characters", len(data))
        return self.set_content(data)

    def reparse(self) -> ParseResult:
        self._result = self.parser.parse(self._content, self.registry.fields)
        return self._result

    def clear_error(self) -> None:
        self._error = None

    def _fail(self, exc: FlatFileError) -> None:
        # Last error wins; state is left as it was before the action
        logger.debug("Session action rejected: %s", exc)
        self._error = str(exc)

    def snapshot(self) -> dict[str, Any]:
        return {
            "fields": self.registry.export_all(),
            "records": self.records,
            "error": self._error,
        }
