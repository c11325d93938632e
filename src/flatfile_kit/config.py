# src/flatfile_kit/config.py

from dataclasses import dataclass
from typing import Literal

OverlapMode = Literal["directional", "symmetric"]


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for field registries and parser sessions.

    Immutable. Explicit. No magic defaults from environment.

    overlap_mode:
        "directional" rejects a new field only when one of its own endpoints
        falls inside an existing field. A new field that fully contains an
        existing one is accepted.
        "symmetric" rejects any new field sharing a position with an
        existing one.
    """

    overlap_mode: OverlapMode = "directional"
    mapping_indent: int = 2
    encoding: str = "utf-8"
