"""
Tests for configuration, loading helpers and log comparison

Run with: pytest tests/test_support.py -v
"""

import collections

import pytest

from xdt_core.config.settings import (
    ValidatorConfig,
    get_default_config,
    load_config,
    save_config,
)
from xdt_core.transform.base import EngineConfigurationError, load_engine_factory
from xdt_core.validation.base import TransformValidationResult
from xdt_core.validation.compare import compare_log_lines
from xdt_core.xml.utils import file_basename, load_document, read_transform_text


class TestConfig:
    """Tests for configuration loading and saving."""

    def test_defaults(self):
        """Warnings are errors and whitespace is preserved by default."""
        config = get_default_config()
        assert config.treat_warnings_as_errors is True
        assert config.preserve_whitespace is True
        assert config.logger.include_stack_trace is False
        assert config.logger.indent_unit == "  "
        assert config.engine.engine == ""

    def test_yaml_round_trip(self, tmp_path):
        """A saved YAML config loads back with the same values."""
        config = ValidatorConfig()
        config.engine.engine = "mypkg.engine:XdtEngine"
        config.treat_warnings_as_errors = False
        config.logger.include_stack_trace = True

        path = tmp_path / "nested" / "validator.yaml"
        save_config(config, path)
        loaded = load_config(path)

        assert loaded.to_dict() == config.to_dict()

    def test_partial_json(self, write_file):
        """Keys missing from the file keep their defaults."""
        path = write_file("validator.json", '{"engine": {"engine": "a.b:C"}, "log_level": "DEBUG"}')
        config = load_config(path)

        assert config.engine.engine == "a.b:C"
        assert config.log_level == "DEBUG"
        assert config.treat_warnings_as_errors is True

    @pytest.mark.parametrize("name,contents", [
        ("validator.json", "null"),
        ("validator.yaml", ""),
    ])
    def test_empty_document_gives_defaults(self, write_file, name, contents):
        """A config file holding no mapping loads as the defaults."""
        config = load_config(write_file(name, contents))
        assert config.to_dict() == get_default_config().to_dict()

    def test_missing_file(self, tmp_path):
        """Loading a missing config raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_unsupported_format(self, write_file, tmp_path):
        """Only JSON and YAML are supported."""
        with pytest.raises(ValueError):
            load_config(write_file("validator.ini", "[x]"))
        with pytest.raises(ValueError):
            save_config(ValidatorConfig(), tmp_path / "validator.ini")


class TestEngineLoading:
    """Tests for load_engine_factory."""

    def test_resolves_attribute(self):
        """A valid 'module:Name' path returns the named callable."""
        assert load_engine_factory("collections:OrderedDict") is collections.OrderedDict

    @pytest.mark.parametrize("path", [
        "",
        "no_colon_here",
        "collections:",
        ":OrderedDict",
        "no_such_module_xyz:Engine",
        "collections:NoSuchThing",
        "os:sep",
    ])
    def test_bad_paths(self, path):
        """Empty, malformed, unresolvable or non-callable paths are rejected."""
        with pytest.raises(EngineConfigurationError):
            load_engine_factory(path)


class TestXmlUtils:
    """Tests for document loading helpers."""

    def test_whitespace_preserved(self, source_file):
        """Whitespace-only text is kept when preserving whitespace."""
        tree = load_document(source_file)
        assert tree.getroot().text == "\n  "

    def test_whitespace_dropped(self, source_file):
        """Blank text can be discarded on request."""
        tree = load_document(source_file, preserve_whitespace=False)
        assert tree.getroot().text is None

    def test_missing_document(self, tmp_path):
        """Missing documents and transforms raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_document(tmp_path / "missing.config")
        with pytest.raises(FileNotFoundError):
            read_transform_text(tmp_path / "missing.config")

    @pytest.mark.parametrize("path,expected", [
        ("/a/b/web.config", "web.config"),
        ("C:\\a\\web.config", "web.config"),
        ("web.config", "web.config"),
        (None, ""),
        ("", ""),
    ])
    def test_file_basename(self, path, expected):
        """Paths are reduced to their last segment."""
        assert file_basename(path) == expected


class TestCompareLogLines:
    """Tests for baseline log comparison."""

    def test_matching_logs(self):
        """Identical logs produce no mismatches regardless of line endings."""
        assert compare_log_lines("a\r\nb\r\n", "a\nb\n") == []

    def test_extra_result_lines_ignored(self):
        """Result lines beyond the baseline are not reported."""
        assert compare_log_lines("a", "a\nb\nc") == []

    def test_mismatch_and_missing(self):
        """Differing and missing lines are reported with their index."""
        mismatches = compare_log_lines("a\nb\nc", "a\nX")

        assert [(m.line, m.expected, m.actual) for m in mismatches] == [(1, "b", "X"), (2, "c", None)]
        assert "line 1 at baseline is not matched" in str(mismatches[0])
        assert "missing" in str(mismatches[1])


class TestValidationResult:
    """Tests for TransformValidationResult."""

    def test_failed_summary(self):
        """A failed result lists its errors and warnings."""
        result = TransformValidationResult(
            passed=False,
            source="web.config",
            transformation="web.Release.config",
            error_log="e1\ne2\n",
            warning_log="w1\n",
        )
        summary = result.summary()

        assert summary.startswith("Transformation FAILED")
        assert "2 error(s), 1 warning(s)" in summary
        assert "  e2" in summary
        assert result.warning_lines() == ["w1"]
