import sys

from stacktrail import render

from .fmt import *


def error(msg, exception: BaseException):
    print(f"{BG_RED}[×]{BG_RESET} {msg}", file=sys.stderr)
    render.Renderer().render(exception, sys.stderr)


def debug(msg):
    print(f"[{FG_BRIGHT_BLACK}.{FG_RESET}] {muted(msg)}", file=sys.stderr)
