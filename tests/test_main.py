import pytest

from main import main


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "page.kh"
    path.write_text("doctype html\nhtml\n  body\n    p Hello", encoding="utf-8")
    return path


@pytest.mark.ci
def test_main_writes_html_to_stdout(source, capsys):
    assert main([str(source)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("<!DOCTYPE html>\n<html>\n  <body>\n    <p>\n      Hello\n")


@pytest.mark.ci
def test_main_writes_output_file(source, tmp_path):
    output = tmp_path / "page.html"
    assert main([str(source), "-o", str(output), "--output-indent", "4"]) == 0
    assert output.read_text(encoding="utf-8").splitlines()[2] == "    <body>"


@pytest.mark.ci
def test_main_prints_tree(source, capsys):
    assert main([str(source), "--tree"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [" <!DOCTYPE html>", " <html>", "   <body>", "     <p>"]


@pytest.mark.ci
def test_main_reports_syntax_errors(tmp_path, capsys):
    path = tmp_path / "broken.kh"
    path.write_text("div\n  p(class=oops)", encoding="utf-8")
    assert main([str(path)]) == 1
    err = capsys.readouterr().err
    assert err == "error: line 2: value of attribute 'class' must be quoted: 'p(class=oops)'\n"


@pytest.mark.ci
def test_main_strict_mode(tmp_path, capsys):
    path = tmp_path / "deep.kh"
    path.write_text("div\n      p", encoding="utf-8")
    assert main([str(path)]) == 0
    capsys.readouterr()
    assert main([str(path), "--strict"]) == 1


@pytest.mark.ci
def test_main_reports_missing_source(tmp_path, capsys):
    assert main([str(tmp_path / "missing.kh")]) == 1
    assert capsys.readouterr().err.startswith("error: ")


@pytest.mark.ci
def test_main_reports_undecodable_source(tmp_path, capsys):
    path = tmp_path / "latin1.kh"
    path.write_bytes(b"p caf\xe9")
    assert main([str(path)]) == 1
    assert "can't decode byte 0xe9" in capsys.readouterr().err
