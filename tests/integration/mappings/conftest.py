from pathlib import Path

import pytest

from flatfile_kit.fields.mapping import DEFAULT_MAPPING_FILENAME

MAPPING = """[
  {"name": "account", "start": 1, "end": 8},
  {"name": "holder", "start": 9, "end": 28},
  {"name": "balance", "start": 29, "end": 38},
  {"name": "currency", "start": 39, "end": 41}
]
"""


def _row(account: str, holder: str, balance: str, currency: str) -> str:
    return f"{account:<8}{holder:<20}{balance:>10}{currency:<3}"


@pytest.fixture(scope="module")
def data_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Write a mapping file and a matching fixed-width data file once per module."""
    dir_path: Path = tmp_path_factory.mktemp("flatfiles")

    (dir_path / DEFAULT_MAPPING_FILENAME).write_text(MAPPING, encoding="utf-8")

    rows = [
        _row("10000001", "Ada Lovelace", "1250.00", "GBP"),
        "",
        _row("10000002", "Jürgen Müller", "-13.50", "EUR"),
        "   ",
        _row("10000003", "Grace Hopper", "0.99", "USD"),
    ]
    (dir_path / "accounts.txt").write_bytes("\r\n".join(rows).encode("utf-8"))

    (dir_path / "broken.json").write_text('[{"name": "x", "start": 1', encoding="utf-8")

    return dir_path
