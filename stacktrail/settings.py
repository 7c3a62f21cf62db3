from typing import Any, Dict

DEFAULTS: Dict[str, Any] = {
    "language": "python",
    "output_format": "terminal256",
    "theme": "monokai",
    "context_radius": 1,
    "chain_aware": True,
    "show_caret": False,
    "debug": False,
}


class Settings:
    """
    Snapshot of the rendering options. A renderer takes one of these when it is
    constructed and keeps it for its lifetime.
    """

    def __init__(
        self,
        language: str,
        output_format: str,
        theme: str,
        context_radius: int,
        chain_aware: bool,
        show_caret: bool,
        debug: bool,
    ) -> None:
        self._language = language
        self._output_format = output_format
        self._theme = theme
        self._context_radius = context_radius
        self._chain_aware = chain_aware
        self._show_caret = show_caret
        self._debug = debug

    def language(self) -> str:
        return self._language

    def output_format(self) -> str:
        return self._output_format

    def theme(self) -> str:
        return self._theme

    def context_radius(self) -> int:
        return self._context_radius

    def chain_aware(self) -> bool:
        return self._chain_aware

    def show_caret(self) -> bool:
        return self._show_caret

    def debug(self) -> bool:
        return self._debug


class SettingsBuilder:
    def __init__(self) -> None:
        self._values = dict(DEFAULTS)

    def use_language(self, language: str) -> "SettingsBuilder":
        self._values["language"] = language
        return self

    def use_output_format(self, output_format: str) -> "SettingsBuilder":
        self._values["output_format"] = output_format
        return self

    def use_theme(self, theme: str) -> "SettingsBuilder":
        self._values["theme"] = theme
        return self

    def use_context_radius(self, radius: int) -> "SettingsBuilder":
        if radius < 0:
            raise ValueError(f"Context radius must not be negative, got {radius}")
        self._values["context_radius"] = radius
        return self

    def chain_aware(self, enabled: bool = True) -> "SettingsBuilder":
        self._values["chain_aware"] = enabled
        return self

    def show_caret(self, enabled: bool = True) -> "SettingsBuilder":
        self._values["show_caret"] = enabled
        return self

    def debug(self, enabled: bool = True) -> "SettingsBuilder":
        self._values["debug"] = enabled
        return self

    def reset(self) -> "SettingsBuilder":
        self._values = dict(DEFAULTS)
        return self

    def _build(self) -> Settings:
        return Settings(**self._values)


_settings_builder = SettingsBuilder()


def setup() -> SettingsBuilder:
    return _settings_builder


def current() -> Settings:
    return _settings_builder._build()
