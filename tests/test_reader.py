"""Tests for the SPLICE file reader."""

import pytest

from splicekit import SpliceReader
from splicekit.utils.validation import InvalidHeaderError, TruncatedDataError


class TestSpliceReader:
    """Test cases for reading SPLICE files from disk."""

    def test_read_file(self, pattern_1_file, pattern_1_text):
        """Test reading a file into a Pattern."""
        pattern = SpliceReader.read(pattern_1_file)

        assert pattern.version == "0.808-alpha"
        assert pattern.track_count == 6
        assert pattern.render() == pattern_1_text

    def test_read_str_path(self, pattern_1_file):
        """Test string paths are accepted."""
        assert SpliceReader.read(str(pattern_1_file)).track_count == 6

    def test_missing_file(self, tmp_path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            SpliceReader.read(tmp_path / "missing.splice")

    def test_error_carries_path(self, tmp_path):
        """Test decode errors name the file."""
        path = tmp_path / "bad.splice"
        path.write_bytes(b"NOT A SPLICE FILE")

        with pytest.raises(InvalidHeaderError) as exc_info:
            SpliceReader.read(path)

        assert exc_info.value.source == str(path)
        assert "bad.splice" in str(exc_info.value)

    def test_truncated_file(self, tmp_path, pattern_1_data):
        """Test a cut file raises TruncatedDataError."""
        path = tmp_path / "cut.splice"
        path.write_bytes(pattern_1_data[:100])

        with pytest.raises(TruncatedDataError):
            SpliceReader.read(path)

    def test_raw_data_kept(self, pattern_1_file, pattern_1_data):
        """Test the reader keeps the last parsed bytes."""
        reader = SpliceReader()
        reader.parse_file(pattern_1_file)

        assert reader.raw_data == pattern_1_data

    def test_can_read_check(self, pattern_1_file, tmp_path):
        """Test file format detection."""
        assert SpliceReader.can_read(pattern_1_file) is True

        other = tmp_path / "other.bin"
        other.write_bytes(b"RIFF....WAVE")
        assert SpliceReader.can_read(other) is False
        assert SpliceReader.can_read(tmp_path / "missing.splice") is False
        assert SpliceReader.can_read(tmp_path) is False

    def test_get_file_info(self, pattern_1_file, pattern_1_data):
        """Test getting file info without full parse."""
        info = SpliceReader.get_file_info(pattern_1_file)

        assert info["valid"] is True
        assert info["size"] == len(pattern_1_data)
        assert info["payload_size"] == 197
        assert info["trailing_bytes"] == 0
        assert info["truncated"] is False

    def test_get_file_info_trailing(self, tmp_path, splice_builder):
        """Test trailing bytes are counted."""
        path = tmp_path / "padded.splice"
        path.write_bytes(splice_builder(trailing=bytes(12)))

        info = SpliceReader.get_file_info(path)

        assert info["payload_size"] == 36
        assert info["trailing_bytes"] == 12

    def test_get_file_info_invalid(self, tmp_path):
        """Test info on a non-SPLICE file."""
        path = tmp_path / "junk.splice"
        path.write_bytes(b"junk")

        info = SpliceReader.get_file_info(path)

        assert info["valid"] is False
        assert "payload_size" not in info
