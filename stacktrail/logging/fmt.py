from .ansi import *


def failure(content: str) -> str:
    return f"{FG_RED}{content}{FG_RESET}"


def function(content: str) -> str:
    return f"{FG_YELLOW}{content}{FG_RESET}"


def location(content: str) -> str:
    return f"{FG_BRIGHT_BLACK}{content}{FG_RESET}"


def muted(content: str) -> str:
    return f"{FG_BRIGHT_BLACK}{content}{FG_RESET}"


def emphasized(content: str) -> str:
    return f"{FG_BRIGHT_BLACK_BOLD}{content}{RESET}"


def italic(content: str) -> str:
    return f"{ITALIC}{content}{RESET}"


def caret(content: str) -> str:
    return f"{FG_RED}{content}{FG_RESET}"
