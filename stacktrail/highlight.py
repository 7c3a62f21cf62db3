import pygments
from pygments.formatters import get_formatter_by_name
from pygments.lexers import get_lexer_by_name


class HighlightError(Exception):
    pass


def highlight(source: str, language: str, output_format: str, theme: str) -> str:
    """
    Colorize `source` with Pygments. The result has exactly as many lines as
    the input: leading and trailing blank lines are kept, and the newline the
    formatter appends is removed again.
    """
    try:
        lexer = get_lexer_by_name(language, stripnl=False, ensurenl=False)
        formatter = get_formatter_by_name(output_format, style=theme)
        highlighted = pygments.highlight(source, lexer, formatter)
    except Exception as e:
        raise HighlightError(
            f"failed to highlight as '{language}' ({output_format}, {theme}): {e}"
        ) from e

    if highlighted.endswith("\n") and not source.endswith("\n"):
        highlighted = highlighted[:-1]

    return highlighted
