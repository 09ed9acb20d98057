#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for delta2html CLI configuration discovery and loading."""

from pathlib import Path
from unittest.mock import patch

import pytest

from delta2html.cli.config import discover_config_file, find_config_in_parents, load_config_file, merge_configs
from delta2html.exceptions import ConfigError
from delta2html.options import ConverterOptions


@pytest.mark.unit
@pytest.mark.cli
class TestConfigDiscovery:
    """Test configuration file discovery."""

    def test_discover_in_cwd(self, tmp_path):
        """A dedicated config file in the working directory is found."""
        config_file = tmp_path / ".delta2html.toml"
        config_file.write_text("inline_styles = true\n")

        with patch("pathlib.Path.cwd", return_value=tmp_path):
            discovered = discover_config_file()

        assert discovered is not None
        assert discovered.resolve() == config_file.resolve()

    def test_discover_in_parent(self, tmp_path):
        """Discovery walks up from a nested directory."""
        config_file = tmp_path / ".delta2html.yaml"
        config_file.write_text("inline_styles: true\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_in_parents(nested) == config_file.resolve()

    def test_pyproject_with_section(self, tmp_path):
        """A pyproject.toml counts only when it has a [tool.delta2html] table."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "x"\n')
        nested = tmp_path / "docs"
        nested.mkdir()
        assert find_config_in_parents(nested) != pyproject.resolve()

        pyproject.write_text('[project]\nname = "x"\n\n[tool.delta2html]\nclass_prefix = "ed"\n')
        assert find_config_in_parents(nested) == pyproject.resolve()

    def test_dedicated_file_wins_over_pyproject(self, tmp_path):
        """Dedicated config files are checked before pyproject.toml."""
        (tmp_path / "pyproject.toml").write_text("[tool.delta2html]\ninline_styles = true\n")
        dedicated = tmp_path / ".delta2html.json"
        dedicated.write_text("{}")

        assert find_config_in_parents(tmp_path) == dedicated.resolve()

    def test_discover_in_home(self, tmp_path):
        """The home directory is the last place searched."""
        work = tmp_path / "work"
        home = tmp_path / "home"
        work.mkdir()
        home.mkdir()
        config_file = home / ".delta2html.json"
        config_file.write_text('{"inline_styles": true}')

        with (
            patch("delta2html.cli.config.find_config_in_parents", return_value=None),
            patch("pathlib.Path.home", return_value=home),
        ):
            assert discover_config_file(work) == config_file


@pytest.mark.unit
@pytest.mark.cli
class TestConfigLoading:
    """Test loading each supported format."""

    def test_load_toml(self, tmp_path):
        config_file = tmp_path / "settings.toml"
        config_file.write_text("inline_styles = true\n\n[grouping]\nmulti_line_code_block = false\n")

        config = load_config_file(config_file)

        assert config == {"inline_styles": True, "grouping": {"multi_line_code_block": False}}

    def test_load_yaml(self, tmp_path):
        config_file = tmp_path / "settings.yml"
        config_file.write_text("html:\n  class_prefix: ed\n")
        assert load_config_file(str(config_file)) == {"html": {"class_prefix": "ed"}}

    def test_load_empty_yaml(self, tmp_path):
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("")
        assert load_config_file(config_file) == {}

    def test_load_json(self, tmp_path):
        config_file = tmp_path / "settings.json"
        config_file.write_text('{"link_target": "_self"}')
        assert load_config_file(config_file) == {"link_target": "_self"}

    def test_load_pyproject_section(self, tmp_path):
        config_file = tmp_path / "pyproject.toml"
        config_file.write_text('[tool.delta2html]\nparagraph_tag = "div"\n')
        assert load_config_file(config_file) == {"paragraph_tag": "div"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            load_config_file(tmp_path / "nope.toml")
        assert exc_info.value.config_path is not None

    def test_unsupported_extension(self, tmp_path):
        config_file = tmp_path / "settings.ini"
        config_file.write_text("[x]\n")
        with pytest.raises(ConfigError, match="Unsupported config file format"):
            load_config_file(config_file)

    @pytest.mark.parametrize(
        "filename,content",
        [
            ("bad.toml", "inline_styles = = true"),
            ("bad.json", "{not json"),
            ("bad.yaml", "a: [1, 2"),
            ("list.json", "[1, 2]"),
            ("list.yaml", "- 1\n- 2\n"),
        ],
    )
    def test_invalid_content(self, tmp_path, filename, content):
        config_file = tmp_path / filename
        config_file.write_text(content)
        with pytest.raises(ConfigError):
            load_config_file(config_file)

    def test_pyproject_section_must_be_table(self, tmp_path):
        config_file = tmp_path / "pyproject.toml"
        config_file.write_text('[tool]\ndelta2html = "yes"\n')
        with pytest.raises(ConfigError, match="must be a table"):
            load_config_file(config_file)


@pytest.mark.unit
@pytest.mark.cli
class TestMergeConfigs:
    """Test config merging and conversion to options."""

    def test_nested_merge(self):
        base = {"html": {"class_prefix": "ql", "inline_styles": False}, "other": 1}
        override = {"html": {"inline_styles": True}}
        assert merge_configs(base, override) == {"html": {"class_prefix": "ql", "inline_styles": True}, "other": 1}

    def test_inputs_are_not_modified(self):
        base = {"html": {"a": 1}}
        merge_configs(base, {"html": {"a": 2}})
        assert base == {"html": {"a": 1}}

    def test_options_from_config(self):
        options = ConverterOptions.from_config(
            {"inline-styles": True, "grouping": {"multi_line_header": False}, "html": {"class_prefix": "ed"}}
        )
        assert options.html.inline_styles is True
        assert options.html.class_prefix == "ed"
        assert options.grouping.multi_line_header is False
        assert options.grouping.multi_line_code_block is True

    def test_unknown_keys_are_ignored(self):
        options = ConverterOptions.from_config({"no_such_option": 1})
        assert options == ConverterOptions()

    @pytest.mark.parametrize("section", ["grouping", "html"])
    @pytest.mark.parametrize("value", [True, "yes", [1, 2]])
    def test_non_table_section_raises_config_error(self, section, value):
        with pytest.raises(ConfigError, match=rf"\[{section}\] section must be a table"):
            ConverterOptions.from_config({section: value})


def test_discovered_config_path_type(tmp_path):
    (tmp_path / ".delta2html.toml").write_text("")
    assert isinstance(find_config_in_parents(tmp_path), Path)
