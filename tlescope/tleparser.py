"""Reading of three-line TLE (two-line element set) files."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

__all__ = ["TLEEntry", "parse_tle_file"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TLEEntry:
    """One satellite: its name line followed by the two element lines."""

    name: str
    line1: str
    line2: str


def parse_tle_file(filename: str | os.PathLike[str]) -> list[TLEEntry]:
    """Parse a file of name/line1/line2 triples into a list of entries.

    Blank name lines are skipped. If the file ends in the middle of an
    entry, a warning is logged and the entries read so far are returned.

    Raises FileNotFoundError if the file does not exist.
    """
    entries: list[TLEEntry] = []
    with Path(filename).open(encoding="utf-8", errors="replace") as stream:
        lines = (line.rstrip("\n") for line in stream)
        for name in lines:
            if not name:
                continue
            line1 = next(lines, None)
            line2 = next(lines, None) if line1 is not None else None
            if line1 is None or line2 is None:
                logger.warning("Incomplete TLE entry for satellite: %s", name)
                break
            entries.append(TLEEntry(name, line1, line2))
    return entries