from typing import List, Tuple


class ContextReadError(Exception):
    def __init__(self, path: str, reason: str) -> None:
        self._path = path
        super().__init__(f"could not read context from '{path}': {reason}")

    def path(self) -> str:
        return self._path


def read_context(path: str, center_line: int, radius: int) -> Tuple[List[str], int]:
    """
    Read the lines surrounding `center_line`, at most `radius` lines on either
    side. Returns the lines (without line terminators) together with the
    1-based number of the first returned line. The file is scanned
    sequentially and closed again before returning.
    """
    start = max(1, center_line - radius)
    end = center_line + radius

    lines: List[str] = []
    try:
        with open(path, "r", encoding="utf-8-sig", errors="replace") as file:
            for number, line in enumerate(file, 1):
                if number > end:
                    break
                if number >= start:
                    lines.append(line.rstrip("\r\n"))
    except OSError as e:
        raise ContextReadError(path, e.strerror or str(e)) from e

    if len(lines) == 0:
        raise ContextReadError(path, f"no lines found in range {start}-{end}")

    return lines, start
