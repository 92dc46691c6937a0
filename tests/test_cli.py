"""Tests for the command-line interface."""

import json

import pytest

from codetally.cli import main

SOURCE = """\
class Greeter {
    String greet(String name) {
        return "Hello, " + name;
    }
}
"""


@pytest.fixture
def java_file(tmp_path):
    pytest.importorskip("tree_sitter_java")
    path = tmp_path / "Greeter.java"
    path.write_text(SOURCE, encoding="utf-8")
    return path


class TestMain:
    def test_writes_html_next_to_source(self, java_file, capsys):
        main([str(java_file)])
        out_path = java_file.with_name("Greeter-metrics.html")
        assert out_path.exists()
        assert "Greeter.greet" in out_path.read_text(encoding="utf-8")
        assert str(out_path) in capsys.readouterr().out

    def test_json_output(self, java_file, tmp_path):
        out = tmp_path / "out.json"
        main([str(java_file), "--format", "json", "-o", str(out)])
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["total_methods"] == 1
        assert data["methods"][0]["loc"] == 3

    def test_decorations(self, java_file, capsys):
        main([str(java_file), "--decorations", "--method-loc-threshold", "2"])
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            f"1:{len('class Greeter {')}  class_good  1 method",
            f"2:{len('    String greet(String name) {')}  method_warning  3 LOC",
        ]

    def test_syntax_error_exits(self, tmp_path, caplog):
        pytest.importorskip("tree_sitter_java")
        broken = tmp_path / "Broken.java"
        broken.write_text("class Broken {\n    void m( {\n}\n", encoding="utf-8")
        with pytest.raises(SystemExit) as excinfo:
            main([str(broken)])
        assert excinfo.value.code == 1
        assert "Analysis failed" in caplog.text

    def test_missing_file_exits(self, tmp_path):
        with pytest.raises(SystemExit):
            main([str(tmp_path / "Nope.java")])

    def test_rejects_non_positive_threshold(self, tmp_path):
        with pytest.raises(SystemExit):
            main([str(tmp_path / "A.java"), "--method-loc-threshold", "0"])


CST_SOURCE = "class Greeter {\n    void greet() {\n        hello();\n    }\n}\n"


def _cst():
    def loc(fragment, end=None):
        start = CST_SOURCE.index(fragment)
        stop = CST_SOURCE.index(end, start) + len(end) - 1 if end else start + len(fragment) - 1
        return {"startOffset": start, "endOffset": stop}

    def token(fragment):
        return dict(loc(fragment), image=fragment, tokenType={"name": "Identifier"})

    method = {
        "name": "methodDeclaration",
        "location": loc("void greet", "}"),
        "children": {
            "Identifier": [token("greet")],
            "block": [{"name": "block", "location": loc("{\n        hello", "}"), "children": {}}],
        },
    }
    return {
        "name": "compilationUnit",
        "location": loc("class", "\n}"),
        "children": {
            "classDeclaration": [
                {
                    "name": "classDeclaration",
                    "location": loc("class", "\n}"),
                    "children": {
                        "Identifier": [token("Greeter")],
                        "methodDeclaration": [method],
                    },
                }
            ]
        },
    }


class TestCstInput:
    @pytest.fixture
    def files(self, tmp_path):
        source = tmp_path / "Greeter.java"
        source.write_text(CST_SOURCE, encoding="utf-8")
        cst = tmp_path / "Greeter.cst.json"
        cst.write_text(json.dumps(_cst()), encoding="utf-8")
        return source, cst

    def test_report_from_cst(self, files, tmp_path):
        source, cst = files
        out = tmp_path / "out.json"
        main([str(source), "--cst", str(cst), "--format", "json", "-o", str(out)])
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["classes"][0]["name"] == "Greeter"
        assert data["methods"] == [
            {"name": "Greeter.greet", "loc": 3, "start_line": 2, "end_line": 4}
        ]

    def test_decorations_from_cst(self, files, capsys):
        source, cst = files
        main([str(source), "--cst", str(cst), "--decorations"])
        assert capsys.readouterr().out.splitlines() == [
            f"1:{len('class Greeter {')}  class_good  1 method",
            f"2:{len('    void greet() {')}  method_good  3 LOC",
        ]

    def test_unreadable_cst_exits(self, files, caplog):
        source, cst = files
        cst.write_text("{not json", encoding="utf-8")
        with pytest.raises(SystemExit) as excinfo:
            main([str(source), "--cst", str(cst)])
        assert excinfo.value.code == 1
        assert "Analysis failed" in caplog.text
