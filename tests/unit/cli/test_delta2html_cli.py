#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the delta2html command line interface."""

import io
import json

import pytest

from delta2html.cli import EXIT_ERROR, EXIT_SUCCESS, EXIT_USAGE_ERROR, create_parser, main

CODE_DELTA = {
    "ops": [
        {"insert": "a = 1"},
        {"insert": "\n", "attributes": {"code-block": True}},
        {"insert": "b = 2"},
        {"insert": "\n", "attributes": {"code-block": True}},
    ]
}


@pytest.fixture
def delta_file(tmp_path, sample_delta):
    path = tmp_path / "doc.json"
    path.write_text(json.dumps(sample_delta), encoding="utf-8")
    return path


@pytest.fixture
def code_file(tmp_path):
    path = tmp_path / "code.json"
    path.write_text(json.dumps(CODE_DELTA), encoding="utf-8")
    return path


@pytest.mark.unit
@pytest.mark.cli
class TestCreateParser:
    """Test the generated argument parser."""

    def test_option_flags_are_generated(self):
        """Dataclass fields become flags named after the field."""
        parser = create_parser()
        args = parser.parse_args(["x.json", "--no-multi-line-code-block", "--inline-styles", "--class-prefix", "ed"])

        assert args.grouping__multi_line_code_block is False
        assert args.html__inline_styles is True
        assert args.html__class_prefix == "ed"

    def test_unset_flags_are_absent(self):
        """Flags that are not given do not appear in the namespace."""
        args = create_parser().parse_args(["x.json"])
        assert not hasattr(args, "grouping__multi_line_code_block")
        assert not hasattr(args, "html__inline_styles")

    def test_callback_fields_have_no_flags(self):
        """Python-only options are not exposed."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["x.json", "--custom-tag", "b"])

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "delta2html" in capsys.readouterr().out


@pytest.mark.unit
@pytest.mark.cli
class TestMainOutput:
    """Test the output formats of main()."""

    def test_html_to_stdout(self, delta_file, capsys):
        """HTML is written to stdout followed by a newline."""
        assert main([str(delta_file), "--no-config"]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert out.startswith("<h1>Title</h1><p>Hello <strong>world</strong></p>")
        assert out.endswith("\n")

    def test_html_to_file(self, delta_file, tmp_path):
        target = tmp_path / "doc.html"
        assert main([str(delta_file), "--no-config", "--out", str(target)]) == EXIT_SUCCESS
        assert '<pre data-language="python">x = 1\ny = 2</pre>' in target.read_text(encoding="utf-8")

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO('[{"insert": "hi\\n"}]'))
        assert main(["-", "--no-config"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "<p>hi</p>\n"

    def test_json_format(self, delta_file, capsys):
        assert main([str(delta_file), "--no-config", "--format", "json"]) == EXIT_SUCCESS

        tree = json.loads(capsys.readouterr().out)
        assert [group["type"] for group in tree] == ["block", "inline-group", "list", "table", "video", "block"]
        assert tree[2]["items"][0]["inner_list"]["type"] == "list"

    def test_tree_format(self, delta_file, capsys):
        assert main([str(delta_file), "--no-config", "--format", "tree"]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert "doc.json" in out
        assert "table-row" in out
        assert "list-item" in out

    def test_tree_format_to_file(self, delta_file, tmp_path):
        target = tmp_path / "tree.txt"
        assert main([str(delta_file), "--no-config", "--format", "tree", "-o", str(target)]) == EXIT_SUCCESS
        assert "inline-group" in target.read_text(encoding="utf-8")


@pytest.mark.unit
@pytest.mark.cli
class TestMainOptions:
    """Test option flags and config files."""

    def test_merge_toggle(self, code_file, capsys):
        assert main([str(code_file), "--no-config"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "<pre>a = 1\nb = 2</pre>\n"

        assert main([str(code_file), "--no-config", "--no-multi-line-code-block"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "<pre>a = 1</pre><pre>b = 2</pre>\n"

    def test_config_file(self, code_file, tmp_path, capsys):
        config = tmp_path / "cfg.toml"
        config.write_text("[grouping]\nmulti_line_code_block = false\n")

        assert main([str(code_file), "--config", str(config)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "<pre>a = 1</pre><pre>b = 2</pre>\n"

    def test_flags_override_config(self, tmp_path, capsys):
        delta = tmp_path / "align.json"
        delta.write_text('[{"insert": "x"}, {"insert": "\\n", "attributes": {"align": "center"}}]')
        config = tmp_path / "cfg.yaml"
        config.write_text("html:\n  class_prefix: cfg\n")

        assert main([str(delta), "--config", str(config)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == '<p class="cfg-align-center">x</p>\n'

        assert main([str(delta), "--config", str(config), "--class-prefix", "cli"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == '<p class="cli-align-center">x</p>\n'

    def test_discovered_config(self, code_file, tmp_path, monkeypatch, capsys):
        (tmp_path / ".delta2html.json").write_text('{"grouping": {"multi_line_code_block": false}}')
        monkeypatch.chdir(tmp_path)

        assert main([str(code_file)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "<pre>a = 1</pre><pre>b = 2</pre>\n"


@pytest.mark.unit
@pytest.mark.cli
class TestMainErrors:
    """Test exit codes of failing runs."""

    def test_invalid_json(self, tmp_path, capsys):
        bad = tmp_path / "bad.json"
        bad.write_text("{oops")

        assert main([str(bad), "--no-config"]) == EXIT_ERROR
        assert "Invalid delta JSON" in capsys.readouterr().err

    def test_not_a_delta(self, tmp_path, capsys):
        bad = tmp_path / "bad.json"
        bad.write_text('{"ops": 3}')

        assert main([str(bad), "--no-config"]) == EXIT_ERROR
        assert "ops" in capsys.readouterr().err

    def test_missing_input(self, tmp_path):
        assert main([str(tmp_path / "missing.json"), "--no-config"]) == EXIT_ERROR

    def test_missing_config(self, delta_file, tmp_path, capsys):
        assert main([str(delta_file), "--config", str(tmp_path / "nope.toml")]) == EXIT_ERROR
        assert "does not exist" in capsys.readouterr().err

    def test_invalid_option_value(self, delta_file, capsys):
        assert main([str(delta_file), "--no-config", "--paragraph-tag", "p x"]) == EXIT_USAGE_ERROR
        assert "paragraph_tag" in capsys.readouterr().err

    def test_log_file(self, delta_file, tmp_path):
        log_file = tmp_path / "run.log"
        assert main([str(delta_file), "--no-config", "--log-level", "DEBUG", "--log-file", str(log_file)]) == 0
        assert "Grouped" in log_file.read_text(encoding="utf-8")
