"""
IMDB cast adapter
---
Input: `IMDB-Movie-Data.csv`, a quoted CSV with a header and 12 columns per row.
Each film is a record whose snapshot is its `Year` and whose participants are the comma-separated `Actors`.
"""

import csv
from typing import Iterator

from .adapter import CoOccurrenceAdapter, Record
from ..TEG.errors import FormatError


NUM_COLUMNS = 12
ACTORS_COLUMN = 5
YEAR_COLUMN = 6


class ImdbAdapter(CoOccurrenceAdapter):
    def get_records(self, path: str) -> Iterator[Record]:
        with open(path, "r", encoding="utf-8", newline="") as f:
            reader = csv.reader(f)
            header = next(reader, None)
            if header is None:
                return

            for row in reader:
                if len(row) == 0:
                    continue
                if len(row) != NUM_COLUMNS:
                    raise FormatError(f"Line {reader.line_num}: number of elements is {len(row)}, expected {NUM_COLUMNS}.")

                actors = [a.strip() for a in row[ACTORS_COLUMN].split(",")]
                actors = [a for a in actors if a]
                year = row[YEAR_COLUMN].strip()
                if len(actors) == 0 or not year:
                    continue

                yield year, actors
