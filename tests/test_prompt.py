"""Unit tests for termai.prompt."""

from unittest.mock import MagicMock

import pytest

from termai.exceptions import ClipboardReadError, EmptyPrompt
from termai.prompt import build_system_prompt, build_user_prompt


class TestBuildSystemPrompt:
    def test_replaces_all_placeholders(self):
        template = "os=$platform user=$user shell=$shell code=$code."
        result = build_system_prompt(template, "linux", "alice", "/bin/zsh", "<c>")
        assert result == "os=linux user=alice shell=/bin/zsh code=<c>."

    def test_replaces_repeated_placeholders(self):
        assert build_system_prompt("$user/$user", "linux", "bob", "sh", "") == "bob/bob"

    def test_leaves_other_text_verbatim(self):
        template = "cost is $5 and $HOME stays"
        assert build_system_prompt(template, "linux", "u", "s", "c") == template


class TestBuildUserPrompt:
    def test_empty_prompt_raises_before_clipboard_fetch(self):
        fetch = MagicMock(return_value="clip")

        with pytest.raises(EmptyPrompt) as exc_info:
            build_user_prompt("", True, fetch)

        assert exc_info.value.exit_code == 64
        fetch.assert_not_called()

    def test_flag_off_skips_clipboard(self):
        fetch = MagicMock(return_value="clip")

        assert build_user_prompt("list files", False, fetch) == "list files"
        fetch.assert_not_called()

    def test_clipboard_content_is_wrapped_before_prompt(self):
        result = build_user_prompt("why did this fail?", True, lambda: "permission denied")

        assert result == "---\nLAST command output:\npermission denied\n---\nwhy did this fail?"

    @pytest.mark.parametrize("content", [None, ""])
    def test_empty_clipboard_leaves_prompt_unchanged(self, content):
        assert build_user_prompt("hello", True, lambda: content) == "hello"

    def test_fetch_failure_becomes_clipboard_error(self):
        fetch = MagicMock(side_effect=FileNotFoundError("pbpaste"))

        with pytest.raises(ClipboardReadError) as exc_info:
            build_user_prompt("hello", True, fetch)

        assert exc_info.value.exit_code == 65
        assert "pbpaste" in str(exc_info.value)
