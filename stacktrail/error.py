import sys
from typing import Any, Optional, Protocol, Tuple, TextIO, runtime_checkable

from stacktrail.frames import Frame, capture


@runtime_checkable
class Traceable(Protocol):
    """
    Errors that carry their own captured frames. Anything else is rendered as a
    foreign error: message only, no source context.
    """

    def own_message(self) -> str:
        ...

    def frames(self) -> Tuple[Frame, ...]:
        ...

    def unwrap(self) -> Optional[BaseException]:
        ...


class TracedError(Exception):
    def __init__(
        self, message: str, cause: Optional[BaseException] = None, skip: int = 0
    ) -> None:
        self._message = message
        self._frames = capture(skip + 1)
        self._cause = cause
        if cause is not None:
            self.__cause__ = cause
            self.__suppress_context__ = True
        super().__init__(message)

    def __str__(self) -> str:
        return self.message()

    def message(self) -> str:
        """
        Single-line summary of this error and everything it wraps, joined by
        `": "`.
        """
        if self._cause is not None:
            return f"{self._message}: {safe_str(self._cause)}"
        return self._message

    def own_message(self) -> str:
        return self._message

    def frames(self) -> Tuple[Frame, ...]:
        return self._frames

    def unwrap(self) -> Optional[BaseException]:
        return self._cause

    def print(self):
        self.render_to(sys.stderr)

    def render_to(self, sink: TextIO):
        from stacktrail.render import Renderer

        Renderer().render(self, sink)


def new(message: str) -> TracedError:
    return TracedError(message, skip=1)


def new_formatted(fmt: str, *args: Any, **kwargs: Any) -> TracedError:
    return TracedError(fmt.format(*args, **kwargs), skip=1)


def wrap(cause: Optional[BaseException], message: str) -> Optional[TracedError]:
    """
    Annotate `cause` with a new message and the current stack. Returns `None`
    without capturing anything if there is nothing to wrap.
    """
    if cause is None:
        return None
    return TracedError(message, cause, skip=1)


def wrap_formatted(
    cause: Optional[BaseException], fmt: str, *args: Any, **kwargs: Any
) -> Optional[TracedError]:
    if cause is None:
        return None
    return TracedError(fmt.format(*args, **kwargs), cause, skip=1)


def safe_str(error: BaseException) -> str:
    """
    `str(error)`, or a placeholder if the error cannot describe itself.
    """
    try:
        return str(error)
    except Exception:
        return f"<{type(error).__name__} str() failed>"


def unwrap(error: BaseException) -> Optional[BaseException]:
    """
    Return the error that `error` wraps. Traced errors only follow their
    explicit cause; other exceptions follow Python's implicit chaining as well,
    unless it was suppressed with `raise ... from`.
    """
    if isinstance(error, Traceable):
        return error.unwrap()

    if error.__cause__ is not None:
        return error.__cause__
    if not error.__suppress_context__:
        return error.__context__

    return None
