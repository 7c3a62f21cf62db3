from stacktrail.error import (
    Traceable,
    TracedError,
    new,
    new_formatted,
    unwrap,
    wrap,
    wrap_formatted,
)
from stacktrail.frames import Frame, capture
from stacktrail.highlight import HighlightError
from stacktrail.render import Renderer
from stacktrail.settings import Settings, setup
from stacktrail.source import ContextReadError

__all__ = [
    "ContextReadError",
    "Frame",
    "HighlightError",
    "Renderer",
    "Settings",
    "Traceable",
    "TracedError",
    "capture",
    "new",
    "new_formatted",
    "setup",
    "unwrap",
    "wrap",
    "wrap_formatted",
]
