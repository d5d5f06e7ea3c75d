import io

import pytest

from standoff.annotations import DuplicateIdError, Entity, Event, GrammarError
from standoff.io import AnnotationsReader, read_document


def test_scenario(scenario_lines):
    document = AnnotationsReader(scenario_lines)()
    assert len(document.get_entities()) == 2
    event = document.get_event("E1")
    assert event.trigger == "T1"
    assert event.arguments == {"Theme": "T2"}


def test_doc_id_and_text_pass_through(scenario_lines):
    text = "TP53 ...  BRCA1"
    document = AnnotationsReader(scenario_lines, doc_id="PMID-1", text=text)()
    assert document.doc_id == "PMID-1"
    assert document.text is text


def test_blank_lines_are_skipped():
    lines = io.StringIO("\nT1\tProtein 0 4\tTP53\n\n   \nE1\tGene_expression:T1\n\n")
    document = AnnotationsReader(lines)()
    assert document.get_annotations() == [
        Entity("T1", "Protein", [(0, 4)], "TP53"),
        Event("E1", "Gene_expression", "T1", {}),
    ]


def test_unrecognized_line():
    lines = ["T1\tProtein 0 4\tTP53", "X1\tfoo"]
    with pytest.raises(GrammarError) as excinfo:
        AnnotationsReader(lines)()
    assert excinfo.value.line == "X1\tfoo"
    assert excinfo.value.line_num == 2
    assert "line 2" in str(excinfo.value)


def test_malformed_line_reports_line_number():
    lines = ["T1\tProtein 0 4\tTP53", "", "T2\tProtein zero 4\tTP53"]
    with pytest.raises(GrammarError) as excinfo:
        AnnotationsReader(lines)()
    assert excinfo.value.line_num == 3


def test_duplicate_id_reports_line_number():
    lines = ["T1\tProtein 0 4\tTP53", "T1\tProtein 5 9\tBRCA"]
    with pytest.raises(DuplicateIdError) as excinfo:
        AnnotationsReader(lines)()
    assert excinfo.value.id == "T1"
    assert excinfo.value.line_num == 2


def test_no_cross_reference_validation():
    document = AnnotationsReader(["E1\tBinding:T9 Theme:T8"])()
    assert document.get_event("E1").trigger == "T9"


def test_read_document(ann_path, txt_path):
    document = read_document(ann_path, txt_path=txt_path)
    assert document.doc_id == "sample"
    entity = document.get_entity("T3")
    assert document.text[entity.begin:entity.end] == entity.text


def test_read_document_without_text(ann_path):
    document = read_document(ann_path, doc_id="doc")
    assert document.doc_id == "doc"
    assert document.text is None
    assert len(document) == 13
