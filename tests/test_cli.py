"""
Tests for the jsmodwrap CLI.
"""

import json

from jsmodwrap.cli.main import main


class TestWrapCommand:

    def test_text_output(self, graph_file, capsys):
        rc = main(["wrap", str(graph_file), "--project-root", "/root", "--log-level", "silent"])
        out = capsys.readouterr().out
        assert rc == 0
        assert "// /root/src/foo.js" in out
        assert "__d(function(g,r,i,a,m,e,d){r(d[0])},0,[1])" in out
        assert "logo.png" not in out

    def test_json_output_dev(self, graph_file, capsys):
        rc = main([
            "wrap", str(graph_file),
            "--dev", "--project-root", "/root",
            "--format", "json", "--log-level", "silent",
        ])
        records = json.loads(capsys.readouterr().out)
        assert rc == 0
        assert [r["id"] for r in records] == [2, 0, 1]
        assert records[1]["code"].endswith(',0,[1],"src/foo.js")')

    def test_config_file(self, graph_file, tmp_path, capsys):
        config = tmp_path / "wrap.yaml"
        config.write_text("dev: true\nprojectRoot: /root/src\n")
        rc = main(["wrap", str(graph_file), "--config", str(config), "--log-level", "silent"])
        assert rc == 0
        assert ',0,[1],"foo.js")' in capsys.readouterr().out

    def test_output_file(self, graph_file, tmp_path):
        target = tmp_path / "out.js"
        rc = main(["wrap", str(graph_file), "-o", str(target), "--log-level", "silent"])
        assert rc == 0
        assert "__d(" in target.read_text()

    def test_malformed_graph_fails(self, tmp_path, capsys):
        graph = tmp_path / "graph.yaml"
        graph.write_text(
            "modules:\n"
            "  - path: /root/a.js\n"
            "    output:\n"
            "      - {type: js/module, data: {code: '__d(f)', lineCount: .nan}}\n"
        )
        rc = main(["wrap", str(graph), "--log-level", "silent"])
        assert rc == 1
        assert "/root/a.js" in capsys.readouterr().err


    def test_module_without_call_fails(self, tmp_path, capsys):
        graph = tmp_path / "graph.yaml"
        graph.write_text(
            "modules:\n"
            "  - path: /root/a.js\n"
            "    output:\n"
            "      - {type: js/module, data: {lineCount: 0}}\n"
        )
        rc = main(["wrap", str(graph), "--log-level", "silent"])
        assert rc == 1
        assert "no registration call" in capsys.readouterr().err

    def test_missing_graph_file(self, tmp_path, capsys):
        rc = main(["wrap", str(tmp_path / "missing.yaml"), "--log-level", "silent"])
        assert rc == 1
        assert "Graph file not found" in capsys.readouterr().err

    def test_invalid_graph_document(self, tmp_path, capsys):
        graph = tmp_path / "graph.yaml"
        graph.write_text("modules:\n  - output: []\n")
        rc = main(["wrap", str(graph), "--log-level", "silent"])
        assert rc == 1
        assert "error:" in capsys.readouterr().err


class TestCheckCommand:

    def test_all_ok(self, graph_file, capsys):
        rc = main(["check", str(graph_file), "--log-level", "silent"])
        out = capsys.readouterr().out
        assert rc == 0
        assert "3 module(s) OK, 0 quarantined, 1 without JS output" in out

    def test_reports_quarantine(self, tmp_path, capsys):
        graph = tmp_path / "graph.yaml"
        graph.write_text(
            "modules:\n"
            "  - path: /root/a.js\n"
            "    output:\n"
            "      - {type: js/module, data: {code: '__d(f)', lineCount: 1}}\n"
            "      - {type: js/script, data: {code: 'x()', lineCount: 1}}\n"
        )
        rc = main(["check", str(graph), "--log-level", "silent"])
        out = capsys.readouterr().out
        assert rc == 1
        assert "/root/a.js: Expected exactly 1 JS output, found 2" in out

    def test_unparseable_graph(self, tmp_path, capsys):
        graph = tmp_path / "graph.yaml"
        graph.write_text("modules: [unclosed\n")
        rc = main(["check", str(graph), "--log-level", "silent"])
        assert rc == 1
        assert "not valid YAML/JSON" in capsys.readouterr().err

def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out
