"""Unit tests for relink.api.link (LinkGraph, check_integrity, IntegrityReport)."""

import pytest

from relink.api.link import check_integrity, extract_references
from relink.api.scan import scan_tree
from tests.unit.conftest import build_graph, write_tree

pytestmark = pytest.mark.link


def test_clean_corpus(corpus):
    report = check_integrity(build_graph(corpus))
    assert report.is_clean
    assert report.broken_count == 0
    assert report.documents_checked == 3
    # README: guide, api, logo; guide: home, api, readme, ref; index: guide
    assert report.ok_count == 8
    assert report.external_count == 1
    assert report.references_checked == 9


def test_code_block_example_produces_no_reference(corpus):
    snapshot = scan_tree(corpus)
    refs = list(extract_references(snapshot.documents["docs/api/index.md"]))
    assert [ref.raw_target for ref in refs] == ["../guide.md"]


def test_references_are_restartable(corpus):
    snapshot = scan_tree(corpus)
    refs = extract_references(snapshot.documents["README.md"])
    assert list(refs) == list(refs)


def test_broken_references_are_all_listed(repo):
    write_tree(
        repo,
        {
            "a.md": "[x](missing.md)\n[y](old/missing.md)\n",
            "b/c.md": "[z](../nope/)\n",
        },
    )
    report = check_integrity(build_graph(repo))
    assert not report.is_clean
    assert [(rr.reference.path, rr.reference.line_number, rr.reference.raw_target) for rr in report.broken] == [
        ("a.md", 1, "missing.md"),
        ("a.md", 2, "old/missing.md"),
        ("b/c.md", 1, "../nope/"),
    ]
    entry = report.to_dict()["broken"][1]
    assert entry == {
        "path": "a.md",
        "line": 2,
        "column": 5,
        "target": "old/missing.md",
        "resolved": "old/missing.md",
        "reason": "",
    }


def test_malformed_is_warning_not_broken(repo):
    write_tree(repo, {"a.md": "[x]()\n[y](foo:bar)\n"})
    report = check_integrity(build_graph(repo))
    assert report.is_clean
    assert len(report.malformed) == 2
    warnings = report.warnings()
    assert warnings[0] == "a.md:1:5: malformed reference '' (empty target)"
    assert "unknown scheme" in warnings[1]


def test_link_above_root_is_broken(repo):
    write_tree(repo, {"index.md": "[x](../../nowhere.md)\n", "docs/a.md": "[up](../../a.md)\n"})
    report = check_integrity(build_graph(repo))
    assert not report.is_clean
    assert report.malformed == []
    entries = report.to_dict()["broken"]
    assert [(e["path"], e["resolved"], e["reason"]) for e in entries] == [
        ("docs/a.md", "../a.md", "outside repository root"),
        ("index.md", "../../nowhere.md", "outside repository root"),
    ]


def test_directory_and_asset_targets_are_ok(repo):
    write_tree(repo, {"a.md": "[d](docs/) ![i](img/x.png)\n", "docs/b.md": "", "img/x.png": b"\x00"})
    report = check_integrity(build_graph(repo))
    assert report.ok_count == 2


def test_encoding_failure_is_reported_as_warning(repo):
    write_tree(repo, {"a.md": "[b](b.md)", "b.md": b"\xff"})
    report = check_integrity(build_graph(repo))
    assert report.is_clean
    assert report.warnings() == [str(report.failures[0])]


def test_graph_iterates_in_document_order(corpus):
    graph = build_graph(corpus)
    assert [rr.reference.raw_target for rr in graph.references_from("docs/api/index.md")] == ["../guide.md"]
    assert len(graph) == 9
    assert [rr.reference.path for rr in graph][:4] == ["README.md"] * 4
