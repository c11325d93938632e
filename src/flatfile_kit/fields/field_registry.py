import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from flatfile_kit.config import ParserConfig
from flatfile_kit.errors import (
    IncompleteFieldError,
    InvalidImportFormatError,
    InvalidRangeError,
    MalformedJsonError,
    OverlapError,
)
from flatfile_kit.observability import names
from flatfile_kit.observability.base import MetricsHook, NoOpMetricsHook

from .field import Field
from .mapping import decode_fields, encode_fields, validate_fields

logger = logging.getLogger(__name__)

_OVERLAP_MODES = ("directional", "symmetric")


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _to_position(value: int | str, label: str) -> int:
    if isinstance(value, bool):
        raise InvalidRangeError(f"{label} position must be a whole number")
    if isinstance(value, int):
        return value
    text = str(value).strip()
    # ASCII digits only: int() would also take "1_0", "+3" and non-Latin digits
    if not (text.isascii() and text.isdigit()):
        raise InvalidRangeError(f"{label} position must be a whole number")
    return int(text)


class FieldRegistry:
    """Ordered collection of fixed-width field definitions.

    The registry holds an immutable snapshot of its fields; every mutation
    swaps in a new tuple, so a snapshot handed out earlier never changes.
    Insertion order is the column order of parsed records.
    """

    def __init__(
        self,
        fields: Iterable[Field | Mapping[str, Any]] = (),
        config: ParserConfig = ParserConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        if config.overlap_mode not in _OVERLAP_MODES:
            raise ValueError(f"Unknown overlap mode: {config.overlap_mode}")

        self.config = config
        self.metrics_hook = metrics_hook
        self._fields: tuple[Field, ...] = tuple(validate_fields(list(fields)))

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[Field]:
        return iter(self._fields)

    @property
    def fields(self) -> tuple[Field, ...]:
        return self._fields

    def add(self, name: str, start: int | str, end: int | str) -> Field:
        """Validate a user-entered field and append it.

        Raises:
            IncompleteFieldError: name, start or end is empty.
            InvalidRangeError: start/end are not whole numbers, start < 1,
                or start >= end.
            OverlapError: the range conflicts with a registered field.
        """
        try:
            candidate = self._build_candidate(name, start, end)
            self._check_overlap(candidate)
        except IncompleteFieldError:
            self._reject("incomplete", name)
            raise
        except InvalidRangeError:
            self._reject("invalid_range", name)
            raise
        except OverlapError:
            self._reject("overlap", name)
            raise

        if any(f.name == candidate.name for f in self._fields):
            logger.warning(
                "Field name '%s' already registered; later values win", name
            )

        self._fields = (*self._fields, candidate)
        logger.debug(
            "Added field: %s [%d, %d]", candidate.name, candidate.start, candidate.end
        )
        self.metrics_hook.increment(names.FIELDS_ADDED_TOTAL)
        self.metrics_hook.record_gauge(names.REGISTRY_FIELD_COUNT, len(self._fields))
        return candidate

    def remove(self, index: int) -> None:
        # Out-of-range (including negative) indexes are ignored
        if not 0 <= index < len(self._fields):
            logger.debug("Ignoring removal of missing field index %d", index)
            return

        removed = self._fields[index]
        self._fields = tuple(f for i, f in enumerate(self._fields) if i != index)
        logger.debug("Removed field: %s", removed.name)
        self.metrics_hook.record_gauge(names.REGISTRY_FIELD_COUNT, len(self._fields))

    def clear(self) -> None:
        self._fields = ()

    def replace_all(self, fields: Iterable[Field | Mapping[str, Any]]) -> None:
        """Swap in an imported field set.

        Shape is validated for every element before anything is applied.
        Range and overlap rules are not re-checked.

        Raises:
            InvalidImportFormatError: any element is not a valid field.
        """
        data = fields if isinstance(fields, list) else list(fields)
        self._apply(validate_fields(data))

    def import_json(self, payload: str | bytes) -> None:
        """Replace all fields from a JSON mapping payload.

        Raises:
            MalformedJsonError: payload is not valid JSON.
            InvalidImportFormatError: payload is JSON of the wrong shape.
        """
        try:
            fields = decode_fields(payload)
        except MalformedJsonError:
            self.metrics_hook.increment(
                names.MAPPING_IMPORT_ERRORS_TOTAL, labels={"reason": "malformed_json"}
            )
            raise
        except InvalidImportFormatError:
            self.metrics_hook.increment(
                names.MAPPING_IMPORT_ERRORS_TOTAL, labels={"reason": "invalid_format"}
            )
            raise

        self._apply(fields)
        self.metrics_hook.increment(names.MAPPING_IMPORTS_TOTAL)

    def export_all(self) -> list[dict[str, Any]]:
        return [field.model_dump() for field in self._fields]

    def export_json(self) -> str:
        return encode_fields(self._fields, indent=self.config.mapping_indent)

    def overlapping(self, candidate: Field) -> Field | None:
        """Return the first registered field the candidate conflicts with."""
        for existing in self._fields:
            if self.config.overlap_mode == "symmetric":
                if candidate.start <= existing.end and candidate.end >= existing.start:
                    return existing
            elif existing.contains(candidate.start) or existing.contains(candidate.end):
                return existing
        return None

    def _apply(self, fields: list[Field]) -> None:
        self._fields = tuple(fields)
        logger.info("Replaced field registry with %d fields", len(self._fields))
        self.metrics_hook.record_gauge(names.REGISTRY_FIELD_COUNT, len(self._fields))

    def _build_candidate(self, name: str, start: int | str, end: int | str) -> Field:
        if _is_missing(name) or _is_missing(start) or _is_missing(end):
            raise IncompleteFieldError("Name, start and end are required")
        if not isinstance(name, str):
            raise IncompleteFieldError("Field name must be text")

        start_pos = _to_position(start, "Start")
        end_pos = _to_position(end, "End")

        if start_pos < 1:
            raise InvalidRangeError("Start position must be at least 1")
        if start_pos >= end_pos:
            raise InvalidRangeError("Start position must be less than end position")

        return Field(name=name, start=start_pos, end=end_pos)

    def _check_overlap(self, candidate: Field) -> None:
        existing = self.overlapping(candidate)
        if existing is not None:
            raise OverlapError(candidate, existing)

    def _reject(self, reason: str, name: Any) -> None:
        logger.warning("Rejected field '%s': %s", name, reason)
        self.metrics_hook.increment(
            names.FIELDS_REJECTED_TOTAL, labels={"reason": reason}
        )

    def list(self) -> list[Field]:
        # return a copy so callers cannot mutate the snapshot
        return list(self._fields)
