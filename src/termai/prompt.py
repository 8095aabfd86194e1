"""Prompt construction for termai."""

from collections.abc import Callable

from termai.exceptions import ClipboardReadError, EmptyPrompt

CLIPBOARD_TEMPLATE = "---\nLAST command output:\n{content}\n---\n{prompt}"


def build_system_prompt(
    template: str, platform_name: str, user: str, shell: str, code_color: str
) -> str:
    """Fill the ``$platform``, ``$user``, ``$shell`` and ``$code`` placeholders."""
    return (
        template.replace("$platform", platform_name)
        .replace("$user", user)
        .replace("$shell", shell)
        .replace("$code", code_color)
    )


def build_user_prompt(
    raw_prompt: str,
    include_clipboard: bool,
    clipboard_fetch: Callable[[], str | None],
) -> str:
    """Return the prompt, prefixed with clipboard content when requested."""
    if not raw_prompt:
        raise EmptyPrompt()
    if not include_clipboard:
        return raw_prompt

    try:
        content = clipboard_fetch()
    except Exception as e:
        raise ClipboardReadError(f"Failed to read clipboard content: {e}") from e
    if not content:
        return raw_prompt
    return CLIPBOARD_TEMPLATE.format(content=content, prompt=raw_prompt)
