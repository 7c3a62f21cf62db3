ESC = "\033["

RESET = f"{ESC}0m"
FG_RESET = f"{ESC}39m"
BG_RESET = f"{ESC}49m"

FG_RED = f"{ESC}31m"
FG_YELLOW = f"{ESC}33m"
FG_BRIGHT_BLACK = f"{ESC}90m"
FG_BRIGHT_BLACK_BOLD = f"{ESC}1;90m"

BG_RED = f"{ESC}41m"

ITALIC = f"{ESC}3m"
