import logging
from typing import Protocol


class MetricsHook(Protocol):
    """Sink for parser, field registry and mapping import metrics.

    The parser reports PARSE_DURATION with the PARSE_RECORDS_CREATED and
    PARSE_LINES_SKIPPED counters. The registry reports FIELDS_ADDED_TOTAL,
    FIELDS_REJECTED_TOTAL (labelled by reason), MAPPING_IMPORTS_TOTAL,
    MAPPING_IMPORT_ERRORS_TOTAL and the REGISTRY_FIELD_COUNT gauge. All names
    live in `flatfile_kit.observability.names`.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        pass


class LoggingMetricsHook:
    """Writes every measurement to a logger at DEBUG level.

    Handy during development when no metrics backend is wired up.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("flatfile_kit.metrics")

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self._logger.debug("latency %s=%.3fms labels=%s", name, value_ms, labels or {})

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self._logger.debug("counter %s+=%d labels=%s", name, value, labels or {})

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self._logger.debug("gauge %s=%s labels=%s", name, value, labels or {})
