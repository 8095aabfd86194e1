"""ANSI escape sequences written to the terminal."""

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
RESET = "\033[0m"
GREEN = "\033[32m"
ORANGE = "\033[38;2;255;100;0m"
