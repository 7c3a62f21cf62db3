import sys
from types import FrameType
from typing import Iterator, NamedTuple, Optional, Protocol, Tuple

UNKNOWN_FUNCTION = "<unknown>"

# Frames whose module-qualified symbol starts with one of these belong to the
# interpreter's own start-up machinery. Capture stops at the first one.
RUNTIME_PREFIXES = (
    "runpy.",
    "threading.",
    "importlib.",
    "_frozen_importlib.",
    "_frozen_importlib_external.",
)


class Frame(NamedTuple):
    file: str
    line: int
    function: str


class StackWalker(Protocol):
    def walk(self, depth: int) -> Iterator[Tuple[str, int, Optional[str]]]:
        """
        Yield `(file, line, symbol)` for every frame starting `depth` levels
        above the caller of `walk`, innermost first. `symbol` is the
        module-qualified function name, or `None` if it cannot be resolved.
        """
        ...


class InterpreterStackWalker:
    def walk(self, depth: int) -> Iterator[Tuple[str, int, Optional[str]]]:
        try:
            frame: Optional[FrameType] = sys._getframe(depth + 1)
        except ValueError:
            return

        while frame is not None:
            code = frame.f_code
            line = frame.f_lineno or code.co_firstlineno
            yield (code.co_filename, line, _symbol(frame))
            frame = frame.f_back


def _symbol(frame: FrameType) -> Optional[str]:
    code = frame.f_code
    name = getattr(code, "co_qualname", code.co_name)
    if not name:
        return None

    module = frame.f_globals.get("__name__")
    if module:
        return f"{module}.{name}"

    return name


_default_walker = InterpreterStackWalker()


def capture(skip: int = 0, walker: Optional[StackWalker] = None) -> Tuple[Frame, ...]:
    """
    Capture the call stack of the current thread. With `skip` set to 0 the
    first frame is the direct caller of `capture`; every increment skips one
    more level outward. Stops at the first interpreter-internal frame.
    """
    if walker is None:
        walker = _default_walker

    frames = []
    # One extra level to step over `capture` itself.
    for file, line, symbol in walker.walk(skip + 1):
        if symbol is None:
            function = UNKNOWN_FUNCTION
        elif symbol.startswith(RUNTIME_PREFIXES):
            break
        else:
            function = symbol.rsplit(".", 1)[-1]

        frames.append(Frame(file, line, function))

    return tuple(frames)
