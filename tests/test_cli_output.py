"""Tests for CLI output formatting utilities."""

from __future__ import annotations

from image_charts.cli import output


def test_success_with_prefix(capsys) -> None:
    output.success("Chart written to chart.png")
    captured = capsys.readouterr()
    assert "✅ Chart written to chart.png" in captured.out


def test_success_without_prefix(capsys) -> None:
    output.success("Test message", prefix=False)
    captured = capsys.readouterr()
    assert "✅" not in captured.out
    assert "Test message" in captured.out


def test_error_writes_to_stderr(capsys) -> None:
    output.error("Error message")
    captured = capsys.readouterr()
    assert "❌ Error message" in captured.err
    assert captured.out == ""


def test_error_to_stdout(capsys) -> None:
    output.error("Error message", err=False)
    captured = capsys.readouterr()
    assert "❌ Error message" in captured.out


def test_warning_writes_to_stderr(capsys) -> None:
    output.warning("Careful")
    captured = capsys.readouterr()
    assert "⚠️" in captured.err
    assert "Careful" in captured.err


def test_plain_is_pipe_friendly(capsys) -> None:
    output.plain("https://image-charts.com:443/chart?cht=p")
    captured = capsys.readouterr()
    assert captured.out == "https://image-charts.com:443/chart?cht=p\n"

