"""flatfile-kit exception hierarchy."""

from typing import Any


class FlatFileError(Exception):
    """Base exception for all flatfile-kit errors."""


class FieldDefinitionError(FlatFileError, ValueError):
    """A field definition was rejected by the registry."""


class IncompleteFieldError(FieldDefinitionError):
    """Name, start or end was not supplied."""


class InvalidRangeError(FieldDefinitionError):
    """Start/end are not whole numbers or do not form a valid range."""


class OverlapError(FieldDefinitionError):
    """The candidate range conflicts with a field already registered."""

    def __init__(self, candidate: Any, existing: Any) -> None:
        self.candidate = candidate
        self.existing = existing
        super().__init__("Field positions overlap with existing fields")


class MappingImportError(FlatFileError, ValueError):
    """A field mapping payload could not be imported."""


class InvalidImportFormatError(MappingImportError):
    """Decoded JSON is not a list of {name, start, end} objects."""

    def __init__(
        self,
        message: str = "Invalid field mapping format",
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.details = details or []
        super().__init__(message)


class MalformedJsonError(MappingImportError):
    """Mapping payload is not valid JSON."""

    def __init__(self, message: str = "Error parsing JSON file") -> None:
        super().__init__(message)
