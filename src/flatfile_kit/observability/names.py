# src/flatfile_kit/observability/names.py

"""Standard metric names for flatfile-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
Units are handled by the metrics backend (e.g., converted to seconds in Prometheus).
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Duration
PARSE_DURATION = "parse_duration"

# Counters
PARSE_RECORDS_CREATED = "parse_records_created"
PARSE_LINES_SKIPPED = "parse_lines_skipped"


# ============================================================================
# Field Registry Metrics
# ============================================================================

# Counters
FIELDS_ADDED_TOTAL = "fields_added_total"
# Labelled with reason: incomplete, invalid_range, overlap
FIELDS_REJECTED_TOTAL = "fields_rejected_total"


# ============================================================================
# Mapping Import Metrics
# ============================================================================

# Counters
MAPPING_IMPORTS_TOTAL = "mapping_imports_total"
# Labelled with reason: malformed_json, invalid_format
MAPPING_IMPORT_ERRORS_TOTAL = "mapping_import_errors_total"

# Gauges
REGISTRY_FIELD_COUNT = "registry_field_count"
