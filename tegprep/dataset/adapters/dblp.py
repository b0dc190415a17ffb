"""
DBLP co-authorship adapter
---
Input: a DBLP XML release (https://dblp.org/xml/release/), e.g. `dblp-2018-01-01.xml`, with `dblp.dtd` next to it.
Every publication is a record whose snapshot is its `<year>` and whose participants are its authors and editors.
Names that belong to a disambiguation profile (a `homepages/` entry with `<note type="disambiguation">`) stand for
several people at once, so they are left out of every record.
"""

import os
from typing import Iterator, Optional, Set, Tuple

from lxml import etree

from .adapter import CoOccurrenceAdapter, Record
from ..TEG.errors import FormatError


PUBLICATION_TAGS = (
    "article",
    "inproceedings",
    "proceedings",
    "book",
    "incollection",
    "phdthesis",
    "mastersthesis",
    "www",
)
PARTICIPANT_TAGS = ("author", "editor")
HOMEPAGE_KEY_PREFIX = "homepages/"


def _is_homepage(elem) -> bool:
    return elem.tag == "www" and elem.get("key", "").startswith(HOMEPAGE_KEY_PREFIX)


def _participants(elem):
    names = [(p.text or "").strip() for p in elem if p.tag in PARTICIPANT_TAGS]
    return [n for n in names if n]


def _release(elem) -> None:
    """ Frees memory of the already visited part of the tree. """
    elem.clear()
    while elem.getprevious() is not None:
        del elem.getparent()[0]


class DblpAdapter(CoOccurrenceAdapter):
    def __init__(self, show_progress: bool = True):
        super(DblpAdapter, self).__init__(show_progress)
        self.disambiguation_names: Set[str] = set()

    @staticmethod
    def _iterparse(path: str, tag):
        # The release uses DTD entities for non-ASCII names, so the DTD has to be loaded when it's available.
        load_dtd = os.path.exists(os.path.join(os.path.dirname(os.path.abspath(path)), "dblp.dtd"))
        return etree.iterparse(path, events=("end",), tag=tag, load_dtd=load_dtd, resolve_entities=load_dtd, huge_tree=True)

    def analyze_authors(self, path: str) -> Tuple[int, Set[str]]:
        """ First pass over the release: counts person profiles and collects the names of disambiguation profiles. """
        num_persons = 0
        names: Set[str] = set()
        try:
            for _, elem in self._iterparse(path, "www"):
                if _is_homepage(elem):
                    num_persons += 1
                    if any(n.get("type") == "disambiguation" for n in elem.iterfind("note")):
                        names.update(_participants(elem))
                _release(elem)
        except etree.XMLSyntaxError as e:
            raise FormatError(f"Cannot parse DBLP XML `{path}`: {e}") from e

        print(f"INFO: Total number of authors is {num_persons}, disambiguation count is {len(names)}.", flush=True)
        return num_persons, names

    def get_records(self, path: str) -> Iterator[Record]:
        _, self.disambiguation_names = self.analyze_authors(path)
        num_publications = 0
        num_skipped = 0

        try:
            for record in self._iter_publications(self._iterparse(path, PUBLICATION_TAGS)):
                if record is None:
                    num_skipped += 1
                    continue
                num_publications += 1
                yield record
        except etree.XMLSyntaxError as e:
            raise FormatError(f"Cannot parse DBLP XML `{path}`: {e}") from e

        print(f"INFO: Number of publications is {num_publications}; {num_skipped} entries skipped.", flush=True)

    def _iter_publications(self, context) -> Iterator[Optional[Record]]:
        """ Yields one record per publication element, or None for entries that do not form a record. """
        for _, elem in context:
            # `www` entries with a `homepages/` key are person pages, not publications.
            is_homepage = _is_homepage(elem)
            year = (elem.findtext("year") or "").strip()
            names = [n for n in _participants(elem) if n not in self.disambiguation_names]
            _release(elem)

            if is_homepage or not year or len(names) == 0:
                yield None
            else:
                yield year, names
