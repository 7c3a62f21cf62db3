import io
import os
from typing import Callable, List, Optional, Set, TextIO

from stacktrail import settings as settings_module
from stacktrail.error import Traceable, safe_str, unwrap
from stacktrail.frames import Frame
from stacktrail.highlight import HighlightError, highlight
from stacktrail.logging import fmt, logger
from stacktrail.settings import Settings
from stacktrail.source import ContextReadError, read_context

Highlighter = Callable[[str, str, str, str], str]

NO_SOURCE = "Could not read source file"


class Renderer:
    """
    Writes an error report: the message of every error in the chain, and for
    traced errors each captured frame with the surrounding source lines.

    `chain_aware` renders the causes of the head error under "Caused by:"
    separators; without it only the head error is shown. `show_caret`
    underlines the failing line of each frame.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        highlighter: Optional[Highlighter] = None,
    ) -> None:
        self._settings = settings or settings_module.current()
        self._highlighter = highlighter or highlight

    def render(self, head: Optional[BaseException], sink: TextIO):
        cursor = head
        first = True
        seen: Set[int] = set()

        while cursor is not None and id(cursor) not in seen:
            seen.add(id(cursor))

            if not first:
                sink.write(f"\n{fmt.italic('Caused by: ')}")

            if isinstance(cursor, Traceable):
                sink.write(f"{fmt.failure(cursor.own_message())}\n")
                for frame in cursor.frames():
                    self._render_frame(frame, sink)
            else:
                sink.write(f"{fmt.failure(_describe(cursor))}\n")

            if not self._settings.chain_aware():
                break

            cursor = unwrap(cursor)
            first = False

    def format(self, head: Optional[BaseException]) -> str:
        buffer = io.StringIO()
        self.render(head, buffer)
        return buffer.getvalue()

    def _render_frame(self, frame: Frame, sink: TextIO):
        location = fmt.location(f"{os.path.basename(frame.file)}:{frame.line}")
        sink.write(f"  at {fmt.function(frame.function)} ({location})\n")

        try:
            lines, start = read_context(
                frame.file, frame.line, self._settings.context_radius()
            )
        except ContextReadError as e:
            self._debug(str(e))
            sink.write(f"    {fmt.muted(NO_SOURCE)}\n")
            return

        highlighted = self._highlight(lines)

        width = len(str(start + len(lines) - 1))
        error_index = frame.line - start

        for i, line in enumerate(lines):
            number = start + i
            gutter = f"  {number:>{width}} | "
            if i == error_index:
                gutter = fmt.emphasized(gutter)
            else:
                gutter = fmt.muted(gutter)

            text = highlighted[i] if i < len(highlighted) else line
            sink.write(f"{gutter}{text}\n")

            if i == error_index and self._settings.show_caret():
                blank = fmt.muted(f"  {' ' * width} | ")
                sink.write(f"{blank}{fmt.caret('^' * len(line))}\n")

    def _highlight(self, lines: List[str]) -> List[str]:
        block = "\n".join(lines)
        try:
            block = self._highlighter(
                block,
                self._settings.language(),
                self._settings.output_format(),
                self._settings.theme(),
            )
        except HighlightError as e:
            self._debug(str(e))

        return block.split("\n")

    def _debug(self, msg: str):
        if self._settings.debug():
            logger.debug(msg)


def _describe(error: BaseException) -> str:
    message = safe_str(error)
    if message == "":
        return type(error).__name__
    return f"{type(error).__name__}: {message}"
