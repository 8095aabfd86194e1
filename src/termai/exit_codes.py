"""Exit-code constants used by the CLI layer."""

SUCCESS = 0
GENERAL_ERROR = 1
EMPTY_PROMPT = 64
CLIPBOARD_ERROR = 65
KEYBOARD_INTERRUPT = 130
