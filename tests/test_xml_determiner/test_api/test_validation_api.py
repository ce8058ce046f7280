"""Tests for the validation API."""

import logging

import pytest

from xml_determiner.api import XMLDeterminer, validate_file, validate_string
from xml_determiner.shared import ValidationResult, ValidatorConfig

DOCUMENT = '<?xml version="1.0"?><note><to>Tove</to><body>salary &lt; 1000</body></note>'


class TestValidateString:
    """Test string validation."""

    def test_valid_document(self):
        """Test a valid document."""
        result = validate_string(DOCUMENT)
        assert isinstance(result, ValidationResult)
        assert result.valid is True
        assert result.error is None

    def test_invalid_document(self):
        """Test an invalid document."""
        result = validate_string("<message>salary < 1000</message>")
        assert result.valid is False
        assert result.error is None

    def test_input_trimmed_by_default(self):
        """Test surrounding whitespace is stripped before scanning."""
        assert validate_string("  <a></a>\n").valid is True

    def test_strict_config_keeps_whitespace(self):
        """Test the strict preset scans the input as given."""
        assert validate_string("  <a></a>\n", ValidatorConfig.strict()).valid is False

    def test_empty_input(self):
        """Test blank input is invalid."""
        assert validate_string("").valid is False
        assert validate_string("   ").valid is False

    def test_trim_uses_unicode_white_space(self):
        """Test trimming strips White_Space but not U+001C..U+001F."""
        assert validate_string("\u3000<a></a>\xa0\x85").valid is True
        assert validate_string("\x1c<a></a>").valid is False
        assert validate_string("<a></a>\x1f").valid is False

    def test_start_and_finish_logged(self, caplog):
        """Test a validation logs when it starts and when it finishes."""
        with caplog.at_level(logging.INFO, logger="xml_determiner.api.validator"):
            validate_string("<a></a>")

        messages = [r.getMessage() for r in caplog.records]
        assert messages == ["Validation started", "Validation finished"]
        assert caplog.records[1].valid is True

    def test_metrics_recorded(self):
        """Test timing figures are filled in."""
        result = validate_string("  <a></a>  ")
        assert result.metrics.characters_processed == 7
        assert result.metrics.processing_time_ms >= 0.0

    def test_metrics_disabled(self):
        """Test metrics stay empty when disabled."""
        result = validate_string("<a></a>", ValidatorConfig(enable_metrics=False))
        assert result.metrics.characters_processed == 0
        assert result.metrics.processing_time_ms == 0.0

    def test_size_limit(self):
        """Test oversized input is rejected without scanning."""
        config = ValidatorConfig(max_input_size_bytes=5)
        result = validate_string("<a></a>", config)
        assert result.valid is False
        assert "exceeds limit" in result.error


class TestValidateFile:
    """Test file validation."""

    def test_valid_file(self, tmp_path):
        """Test a valid document stored in a file."""
        path = tmp_path / "note.xml"
        path.write_text(DOCUMENT + "\n", encoding="utf-8")

        result = validate_file(path)
        assert result.valid is True
        assert result.source == str(path)

    def test_invalid_file(self, tmp_path):
        """Test an invalid document stored in a file."""
        path = tmp_path / "bad.xml"
        path.write_text("<a><b></a></b>", encoding="utf-8")
        assert validate_file(str(path)).valid is False

    def test_missing_file(self, tmp_path):
        """Test a missing file produces an invalid result with an error."""
        result = validate_file(tmp_path / "missing.xml")
        assert result.valid is False
        assert result.error

    def test_read_failure_logged(self, tmp_path, caplog):
        """Test an unreadable file is logged as an error."""
        path = tmp_path / "missing.xml"
        with caplog.at_level(logging.ERROR, logger="xml_determiner.api.validator"):
            validate_file(path)

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.getMessage() == "Failed to read file"
        assert record.file == str(path)
        assert not record.exc_info

    def test_undecodable_file(self, tmp_path):
        """Test a file that does not decode with the configured encoding."""
        path = tmp_path / "binary.xml"
        path.write_bytes(b"<a>\xff\xfe</a>")

        result = validate_file(path)
        assert result.valid is False
        assert result.error

    def test_encoding_option(self, tmp_path):
        """Test files are decoded with the configured encoding."""
        path = tmp_path / "latin.xml"
        path.write_bytes("<a>caf\xe9</a>".encode("latin-1"))

        assert validate_file(path, ValidatorConfig(encoding="latin-1")).valid is True


class TestXMLDeterminer:
    """Test the reusable determiner."""

    def test_default_config(self):
        """Test a determiner without configuration uses the defaults."""
        determiner = XMLDeterminer()
        assert determiner.config == ValidatorConfig()

    def test_validate_with_source(self):
        """Test the source label is kept on the result."""
        result = XMLDeterminer().validate("<a></a>", source="inline")
        assert result.source == "inline"
        assert result.verdict == "Valid"

    def test_validate_many(self, tmp_path):
        """Test several files are validated in order."""
        good = tmp_path / "good.xml"
        bad = tmp_path / "bad.xml"
        good.write_text("<a></a>", encoding="utf-8")
        bad.write_text("<a>", encoding="utf-8")

        results = XMLDeterminer().validate_many([good, bad, tmp_path / "none.xml"])
        assert [r.valid for r in results] == [True, False, False]
        assert [r.source for r in results] == [str(good), str(bad), str(tmp_path / "none.xml")]

    @pytest.mark.parametrize("text, expected", [
        ("<Design><Code>hello world</Code></Design>", True),
        ("<Design><Code>hello world</Code></Design><People>", False),
        ("<People><Design><Code>hello world</People></Code></Design>", False),
    ])
    def test_verdicts_match_predicate(self, text, expected):
        """Test the wrapper reports the predicate's verdict."""
        assert XMLDeterminer().validate(text).valid is expected
