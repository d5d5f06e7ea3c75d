import io

from standoff.annotations import Attribute, Entity, EquivalenceGroup
from standoff.document import Document
from standoff.io import AnnotationsReader, AnnotationsWriter, read_document


def test_writer_inverts_reader(ann_path, document):
    with open(ann_path, "r", encoding="utf-8") as in_f:
        expected = in_f.read()
    assert AnnotationsWriter(document).dumps() == expected


def test_write_to_file_object(document):
    out_f = io.StringIO()
    AnnotationsWriter(document).write(out_f)
    out_f.seek(0)
    assert AnnotationsReader(out_f, doc_id=document.doc_id, text=document.text)() == document


def test_write_to_path(tmp_path, document):
    path = tmp_path / "out.ann"
    AnnotationsWriter(document).write(str(path))
    reread = read_document(str(path), doc_id=document.doc_id)
    assert reread.get_annotations() == document.get_annotations()


def test_flag_attribute_and_equivalence():
    document = Document()
    document.add_annotation(Entity("T1", "Protein", [(0, 2), (3, 5)], "ab cd"))
    document.add_annotation(Attribute("A1", "Negation", "T1"))
    document.add_annotation(EquivalenceGroup("Equiv", ["T1", "T2"]))
    assert AnnotationsWriter(document)() == [
        "T1\tProtein 0 2;3 5\tab cd",
        "A1\tNegation T1",
        "*\tEquiv T1 T2",
    ]


def test_empty_document():
    assert AnnotationsWriter(Document()).dumps() == ""
