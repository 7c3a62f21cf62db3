import re
from pathlib import Path
from typing import Iterator

import pytest

from stacktrail import settings as settings_module
from stacktrail.settings import SettingsBuilder

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE.sub("", text)


@pytest.fixture(scope="function")
def settings() -> Iterator[SettingsBuilder]:
    builder = settings_module.setup().reset()
    yield builder
    builder.reset()


@pytest.fixture(scope="function")
def twenty_lines(tmp_path: Path) -> str:
    path = tmp_path / "twenty.py"
    path.write_text("".join(f"line_{n} = {n}\n" for n in range(1, 21)), encoding="utf-8")
    return str(path)
