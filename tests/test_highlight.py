import pytest

from stacktrail.highlight import HighlightError, highlight
from tests.fixtures import *


def test_highlight_adds_colors_without_changing_text():
    source = "def f(x):\n    return x + 1"

    result = highlight(source, "python", "terminal256", "monokai")

    assert result != source
    assert strip_ansi(result) == source


def test_highlight_keeps_line_count():
    source = "\na = 1\n\nb = 2\n"

    result = highlight(source, "python", "terminal256", "monokai")

    assert len(result.split("\n")) == len(source.split("\n"))
    assert strip_ansi(result) == source


def test_highlight_unknown_language_fails():
    with pytest.raises(HighlightError):
        highlight("a = 1", "no-such-language", "terminal256", "monokai")


def test_highlight_unknown_theme_fails():
    with pytest.raises(HighlightError):
        highlight("a = 1", "python", "terminal256", "no-such-theme")


def test_highlight_unknown_output_format_fails():
    with pytest.raises(HighlightError) as info:
        highlight("a = 1", "python", "no-such-format", "monokai")

    assert info.value.__cause__ is not None
