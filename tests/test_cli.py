import shutil

from standoff.cli import main
from standoff.io import read_document


def test_renumber_to_directory(tmp_path, ann_path, txt_path):
    shutil.copy(ann_path, tmp_path / "sample.ann")
    shutil.copy(txt_path, tmp_path / "sample.txt")
    out_dir = tmp_path / "out"
    assert main([str(tmp_path / "sample.ann"), "-o", str(out_dir), "--validate"]) == 0
    document = read_document(str(out_dir / "sample.ann"), txt_path=txt_path)
    assert document.get_entity("T0").text == "TP53"
    assert document.get_attributes("T3")[0].value == "High"


def test_keep_attributes(tmp_path, ann_path, capsys):
    assert main([ann_path, "--keep-attributes"]) == 0
    out = capsys.readouterr().out
    assert "A2\tConfidence T1 High\n" in out
    assert out.startswith("T0\tProtein 0 4\tTP53\n")


def test_grammar_error_exit_status(tmp_path):
    path = tmp_path / "broken.ann"
    path.write_text("T1\tProtein 0 4\tTP53\nX1\tfoo\n", encoding="utf-8")
    assert main([str(path)]) == 1


def test_dangling_reference_exit_status(tmp_path):
    path = tmp_path / "dangling.ann"
    path.write_text("T1\tProtein 0 4\tTP53\n#1\tAnnotatorNotes T2\tmissing\n", encoding="utf-8")
    assert main([str(path), "--validate"]) == 1
