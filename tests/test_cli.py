"""
Tests for the result class and the command-line interface.

Run tests with: pytest tests/test_cli.py -v
"""

import io
import json

import pytest

from kugiri import SegmentationResult, __version__
from kugiri.cli import main


# =============================================================================
# Test SegmentationResult
# =============================================================================

class TestSegmentationResult:
    """Test the structured segmentation result."""

    def test_spans(self):
        """Test that spans are contiguous character offsets."""
        result = SegmentationResult(text="今日はいい", tokens=["今日", "は", "いい"])
        assert result.spans == [(0, 2), (2, 3), (3, 5)]

    def test_empty(self):
        """Test a result without tokens."""
        result = SegmentationResult(text="")
        assert result.tokens == []
        assert result.spans == []
        assert len(result) == 0
        assert str(result) == ""

    def test_str_and_join(self):
        """Test the joined forms."""
        result = SegmentationResult(text="私の名前", tokens=["私", "の", "名前"])
        assert str(result) == "私 の 名前"
        assert result.join("/") == "私/の/名前"
        assert list(result) == ["私", "の", "名前"]

    def test_to_dict_is_json_serializable(self):
        """Test that to_dict survives a JSON round trip."""
        result = SegmentationResult(text="私の名前", tokens=["私", "の", "名前"])
        data = json.loads(json.dumps(result.to_dict()))
        assert data == {
            "text": "私の名前",
            "tokens": ["私", "の", "名前"],
            "spans": [[0, 1], [1, 2], [2, 4]],
        }


# =============================================================================
# Test Command Line
# =============================================================================

class TestCli:
    """Test the kugiri command."""

    def test_prints_tokens(self, capsys, sample_japanese_text):
        """Test the default space-separated output."""
        assert main([sample_japanese_text]) == 0
        assert capsys.readouterr().out == "私 の 名前 は 中野 です\n"

    def test_custom_separator(self, capsys, sample_japanese_text):
        """Test the --separator option."""
        assert main(["--separator", "|", sample_japanese_text]) == 0
        assert capsys.readouterr().out == "私|の|名前|は|中野|です\n"

    def test_json_output(self, capsys):
        """Test the --json option."""
        assert main(["--json", "私の名前"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["tokens"] == ["私", "の", "名前"]
        assert data["spans"] == [[0, 1], [1, 2], [2, 4]]

    def test_empty_text_prints_empty_line(self, capsys):
        """Test that an empty argument is valid input."""
        assert main([""]) == 0
        assert capsys.readouterr().out == "\n"

    def test_missing_text_is_reported(self, capsys):
        """Test that a missing argument fails with a usage message."""
        assert main([]) == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "usage:" in captured.err
        assert "no text to segment" in captured.err

    def test_reads_stdin(self, capsys, monkeypatch):
        """Test that '-' segments each line of standard input."""
        monkeypatch.setattr("sys.stdin", io.StringIO("私の名前\n今日は\n"))
        assert main(["-"]) == 0
        assert capsys.readouterr().out == "私 の 名前\n今日 は\n"

    def test_version(self, capsys):
        """Test the --version option."""
        with pytest.raises(SystemExit) as excinfo:
            main(["--version"])
        assert excinfo.value.code == 0
        assert __version__ in capsys.readouterr().out
