# parsers/base.py

from abc import ABC, abstractmethod
from collections.abc import Sequence

from flatfile_kit.fields.field import Field

from .models import ParseResult


class LineParser(ABC):
    @abstractmethod
    def parse(self, content: str, fields: Sequence[Field]) -> ParseResult:
        """
        Slice line-delimited content into one record per non-blank line.

        Requirements:
        - Deterministic output for same input
        - Records keep input line order
        - Never raises on short lines
        """
        raise NotImplementedError
