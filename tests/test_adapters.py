"""Raw-format adapter tests."""
import os

import networkx as nx
import numpy as np
import pytest

from tegprep.dataset.TEG import FormatError, InsertedDeletionsPreprocessor, ParseError
from tegprep.dataset.adapters import DblpAdapter, ImdbAdapter, RawAdapter, WikiAdapter, nx_undirected_graph_to_pairs
from tegprep.dataset.adapters.adapter import snapshot_sort_key
from tegprep.dataset.adapters.run import find_adapter_class, main

from conftest import read_rows


IMDB_HEADER = "Rank,Title,Genre,Description,Director,Actors,Year,Runtime (Minutes),Rating,Votes,Revenue (Millions),Metascore"

DBLP_XML = """<?xml version="1.0" encoding="UTF-8"?>
<dblp>
<article key="journals/x/1"><author>Alice</author><author>Bob</author><title>A</title><year>2001</year></article>
<inproceedings key="conf/y/2"><author>Bob</author><author>Carol</author><year>2000</year></inproceedings>
<article key="journals/x/3"><author>Alice</author><author>Bob</author><year>2000</year></article>
<proceedings key="conf/y/4"><editor>Dave</editor><title>No year</title></proceedings>
<www key="homepages/a/Alice"><author>Alice</author><title>Home Page</title></www>
<article key="journals/x/5"><author>Erin</author><year>2002</year></article>
</dblp>
"""


def _names(adapter, rows):
    names = {i: n for n, i in adapter.vertex_ids.items()}
    keys = {i: k for k, i in adapter.snapshot_ids.items()}
    return {(names[s], names[d], keys[t]) for s, d, t in rows}


def test_undirected_graph_to_pairs():
    G = nx.Graph()
    G.add_edges_from([("a", "b"), ("b", "c")])
    assert sorted(nx_undirected_graph_to_pairs(G)) == [("a", "b"), ("b", "a"), ("b", "c"), ("c", "b")]
    assert nx_undirected_graph_to_pairs(nx.empty_graph(3)) == []


def test_normalize_gives_dense_ids():
    adapter = WikiAdapter(show_progress=False)
    pairs = [("x", "y", "20"), ("y", "z", "3"), ("x", "y", "20"), ("z", "x", "100")]
    src, dst, t = adapter.normalize(pairs)

    assert src.size == 3
    assert adapter.snapshot_ids == {"3": 0, "20": 1, "100": 2}
    assert set(adapter.vertex_ids.values()) == {0, 1, 2}
    assert np.all(t[:-1] <= t[1:])


def test_simplify_keeps_first_appearance():
    src = np.array([0, 1, 0, 1, 2])
    dst = np.array([1, 0, 1, 2, 0])
    t = np.array([0, 0, 2, 3, 3])
    s_src, s_dst, s_t = RawAdapter.simplify(src, dst, t)

    assert list(zip(s_src.tolist(), s_dst.tolist(), s_t.tolist())) == [(0, 1, 0), (1, 0, 0), (1, 2, 1), (2, 0, 1)]


def test_imdb_co_occurrence(tmp_path):
    path = tmp_path / "IMDB-Movie-Data.csv"
    path.write_text("\n".join([
        IMDB_HEADER,
        '1,Film A,"Action,Drama","A ""quoted"" plot",Someone,"Ann, Ben, Cid",2014,121,8.1,757074,333.13,76',
        '2,Film B,Drama,Plot,Someone,"Ben, Dee",2015,90,7.0,1000,,60',
        '3,Solo,Drama,Plot,Someone,Eve,2015,90,7.0,1000,1.0,60',
    ]) + "\n", encoding="utf-8")

    adapter = ImdbAdapter(show_progress=False)
    written = adapter.create_data(str(path))
    out = str(path) + ".teg"

    assert written == {out: 8}
    assert _names(adapter, read_rows(out)) == {
        ("Ann", "Ben", "2014"), ("Ben", "Ann", "2014"),
        ("Ann", "Cid", "2014"), ("Cid", "Ann", "2014"),
        ("Ben", "Cid", "2014"), ("Cid", "Ben", "2014"),
        ("Ben", "Dee", "2015"), ("Dee", "Ben", "2015"),
    }


def test_imdb_wrong_column_count(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text(IMDB_HEADER + "\n1,Film,Drama\n", encoding="utf-8")
    with pytest.raises(FormatError, match="expected 12"):
        ImdbAdapter(show_progress=False).create_data(str(path))
    assert not os.path.exists(str(path) + ".teg")


def test_wiki_links(tmp_path):
    path = tmp_path / "wikipedia-growth.txt"
    path.write_text("% sym unweighted\n% 3 3 3\nA B 2001-02-03 1\nB C 2001-02-01 1\nC A 2001-02-03 1\n", encoding="utf-8")

    adapter = WikiAdapter(show_progress=False)
    adapter.create_data(str(path))

    assert _names(adapter, read_rows(str(path) + ".teg")) == {
        ("A", "B", "20010203"), ("B", "C", "20010201"), ("C", "A", "20010203"),
    }
    assert adapter.snapshot_ids == {"20010201": 0, "20010203": 1}


def test_wiki_bad_lines(tmp_path):
    path = tmp_path / "wiki.txt"
    path.write_text("A B 1\n", encoding="utf-8")
    with pytest.raises(FormatError):
        WikiAdapter(show_progress=False).create_data(str(path))

    path.write_text("A B yesterday 1\n", encoding="utf-8")
    with pytest.raises(ParseError, match="yesterday"):
        WikiAdapter(show_progress=False).create_data(str(path))

    path.write_text("A B \u00b2 1\n", encoding="utf-8")
    with pytest.raises(ParseError, match="date format error"):
        WikiAdapter(show_progress=False).create_data(str(path))


def test_dblp_publications(tmp_path):
    path = tmp_path / "dblp.xml"
    path.write_text(DBLP_XML, encoding="utf-8")

    adapter = DblpAdapter(show_progress=False)
    adapter.create_data(str(path))

    # Homepages, records without a year and single-author papers produce no links.
    assert _names(adapter, read_rows(str(path) + ".teg")) == {
        ("Alice", "Bob", "2000"), ("Bob", "Alice", "2000"),
        ("Bob", "Carol", "2000"), ("Carol", "Bob", "2000"),
        ("Alice", "Bob", "2001"), ("Bob", "Alice", "2001"),
    }


def test_dblp_malformed_xml(tmp_path):
    path = tmp_path / "dblp.xml"
    path.write_text("<dblp><article><author>A</author>", encoding="utf-8")
    with pytest.raises(FormatError):
        DblpAdapter(show_progress=False).create_data(str(path))


def test_simplified_output_feeds_deletion_pipeline(tmp_path):
    path = tmp_path / "dblp.xml"
    path.write_text(DBLP_XML, encoding="utf-8")

    written = DblpAdapter(show_progress=False).create_data(str(path), simplify=True)
    sim = str(path) + ".teg.sim"
    assert written[sim] == 4

    result = InsertedDeletionsPreprocessor(show_progress=False).process(sim)
    assert result.num_edges == 4
    assert result.num_snapshots == 1
    for _, _, start, end in read_rows(result.output_path):
        assert start <= end < result.num_snapshots


def test_find_adapter_class():
    assert find_adapter_class("tegprep.dataset.adapters.wiki") is WikiAdapter
    assert find_adapter_class("tegprep.dataset.adapters.dblp") is DblpAdapter


def test_cli(tmp_path):
    path = tmp_path / "wiki.txt"
    path.write_text("A B 5 1\nB A 6 1\nA B 7 1\n", encoding="utf-8")

    assert main(["wiki", str(path), "--simplify", "--no-progress"]) == 0
    assert len(read_rows(str(path) + ".teg")) == 3
    assert len(read_rows(str(path) + ".teg.sim")) == 2


def test_cli_errors(tmp_path, capsys):
    assert main(["csv", "x"]) == 2

    path = tmp_path / "wiki.txt"
    path.write_text("A B\n", encoding="utf-8")
    assert main(["wiki", str(path), "--no-progress"]) == 1
    assert "ERROR: FormatError" in capsys.readouterr().out


def test_snapshot_sort_key_only_treats_ascii_digits_as_numbers():
    keys = sorted(["10", "²", "9", "١"], key=snapshot_sort_key)
    assert keys[:2] == ["9", "10"]
    assert set(keys[2:]) == {"²", "١"}


DBLP_DISAMBIGUATION_XML = """<?xml version="1.0" encoding="UTF-8"?>
<dblp>
<www key="homepages/w/Wei"><author>Wei Wang</author><title>Home Page</title><note type="disambiguation">Disambiguation Page</note></www>
<www key="homepages/a/Alice"><author>Alice</author><title>Home Page</title></www>
<article key="journals/x/1"><author>Alice</author><author>Wei Wang</author><author>Bob</author><year>2001</year></article>
<article key="journals/x/2"><author>Wei Wang</author><author>Carol</author><year>2002</year></article>
</dblp>
"""


def test_dblp_skips_disambiguation_names(tmp_path, capsys):
    path = tmp_path / "dblp.xml"
    path.write_text(DBLP_DISAMBIGUATION_XML, encoding="utf-8")

    adapter = DblpAdapter(show_progress=False)
    adapter.create_data(str(path))

    assert adapter.disambiguation_names == {"Wei Wang"}
    assert "Total number of authors is 2, disambiguation count is 1." in capsys.readouterr().out
    # The second article is left with a single author and links nobody.
    assert _names(adapter, read_rows(str(path) + ".teg")) == {
        ("Alice", "Bob", "2001"), ("Bob", "Alice", "2001"),
    }
    assert "Wei Wang" not in adapter.vertex_ids
