# parsers/models.py

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ParsedRecord:
    line_number: int
    values: dict[str, str]

    def __getitem__(self, name: str) -> str:
        return self.values[name]

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.values.get(name, default)

    def to_dict(self) -> dict[str, str]:
        return dict(self.values)


@dataclass(frozen=True)
class ParseResult:
    records: list[ParsedRecord] = field(default_factory=list)
    total_lines: int = 0
    skipped_lines: int = 0

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[ParsedRecord]:
        return iter(self.records)

    def to_dicts(self) -> list[dict[str, str]]:
        return [record.to_dict() for record in self.records]
