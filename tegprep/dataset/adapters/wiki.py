"""
Wikipedia hyperlink adapter
---
Input: a KONECT-style growth network (e.g. http://konect.cc/networks/wikipedia-growth), one link per line
`source target date weight` separated by whitespace; lines starting with `%` are comments.
Links are directed and appear in the snapshot given by the third field (the date), with `-` removed from dates.
"""

from typing import Iterable, Iterator

from .adapter import Pair, RawAdapter, Record, is_ascii_int
from ..TEG.errors import FormatError, ParseError


NUM_FIELDS = 4


class WikiAdapter(RawAdapter):
    def get_records(self, path: str) -> Iterator[Record]:
        with open(path, "r", encoding="utf-8") as f:
            for line_no, line in enumerate(f, start=1):
                if line.startswith("%") or not line.strip():
                    continue

                parts = line.split()
                if len(parts) != NUM_FIELDS:
                    raise FormatError(f"Line {line_no}: number of elements is {len(parts)}, expected {NUM_FIELDS}: `{line.strip()}`.")

                timestamp = parts[2].replace("-", "")
                if not is_ascii_int(timestamp):
                    raise ParseError(f"Line {line_no}: date format error: `{parts[2]}`.")

                yield timestamp, [parts[0], parts[1]]

    def get_pairs(self, records: Iterable[Record]) -> Iterator[Pair]:
        for key, (source, target) in records:
            yield source, target, key
