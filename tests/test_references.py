import pytest

from standoff.annotations import Attribute, NotFoundError
from standoff.document import ReferenceGraph


def test_graph_edges(document):
    graph = ReferenceGraph(document).graph
    assert sorted(role for _, _, role in graph.out_edges("E1", data="role")) == ["Theme", "Theme2", "trigger"]
    assert graph.nodes["T1"]["record"] == document.get_entity("T1")
    assert ("*", 9) in graph


def test_dependents(document):
    references = ReferenceGraph(document)
    assert references.dependents("T1") == ["E2", "A2", "#1"]
    assert references.dependents("T2") == ["E1", "R1", ("*", 9)]
    assert references.dependents("E2") == ["A1"]
    assert references.dependents("T42") == []


def test_no_dangling(document):
    assert ReferenceGraph(document).dangling() == []


def test_dangling(document):
    document.add_annotation(Attribute("A3", "Negation", "E7"))
    references = ReferenceGraph(document)
    assert references.dangling() == [("A3", "E7", "ref")]
    with pytest.raises(NotFoundError, match="E7"):
        references.validate()
