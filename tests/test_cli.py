"""
Tests for the interactive CLI.

Tests cover:
- "exit" (any case) ends the loop with Goodbye!
- Each line is enhanced and printed
- Empty lines pass through to the enhancer
- EOF ends the loop cleanly
- main() banner and --serve wiring
"""

import pytest
from unittest.mock import MagicMock, patch

from prompt_enhancer.agents.enhancer import enhance_prompt
from prompt_enhancer.cli import INPUT_PROMPT, main, prompt_loop


def scripted_input(lines):
    """Build a read_line callable that replays lines, then raises EOFError."""
    remaining = list(lines)
    prompts = []

    def read_line(prompt):
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    read_line.prompts = prompts
    return read_line


class TestPromptLoop:
    """Tests for prompt_loop"""

    @pytest.mark.parametrize("command", ["exit", "EXIT", "Exit"])
    def test_exit_says_goodbye(self, command):
        output = []

        code = prompt_loop(read_line=scripted_input([command]), write=output.append)

        assert code == 0
        assert output == ["Goodbye!"]

    def test_exit_with_spaces_is_a_prompt(self):
        output = []

        prompt_loop(read_line=scripted_input([" exit ", "exit"]), write=output.append)

        assert output[0] == "\n" + enhance_prompt(" exit ")
        assert output[-1] == "Goodbye!"

    def test_enhances_each_line(self, website_prompt, backend_prompt):
        output = []
        read_line = scripted_input([website_prompt, backend_prompt, "exit"])

        prompt_loop(read_line=read_line, write=output.append)

        assert output == [
            "\n" + enhance_prompt(website_prompt),
            "\n" + enhance_prompt(backend_prompt),
            "Goodbye!",
        ]
        assert read_line.prompts == [INPUT_PROMPT] * 3

    def test_empty_line_is_not_rejected(self):
        output = []

        prompt_loop(read_line=scripted_input(["", "exit"]), write=output.append)

        assert output[0].startswith('\nEnhanced version of request: ""')

    def test_eof_ends_loop(self):
        output = []

        code = prompt_loop(read_line=scripted_input([]), write=output.append)

        assert code == 0
        assert output == ["Goodbye!"]


class TestMain:
    """Tests for main"""

    def test_banner_and_goodbye(self, capsys, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda prompt="": "exit")

        code = main([])

        out = capsys.readouterr().out
        assert code == 0
        assert "AI Prompt Enhancer - CLI Mode" in out
        assert 'Type your prompt or "exit" to quit' in out
        assert "Server is also running" not in out
        assert out.rstrip().endswith("Goodbye!")

    @patch("prompt_enhancer.cli.configure_logging")
    @patch("prompt_enhancer.cli.start_in_background")
    def test_serve_starts_server(self, mock_start, mock_configure, capsys, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda prompt="": "exit")
        mock_start.return_value.is_alive.return_value = True

        main(["--serve", "--port", "8123"])

        mock_start.assert_called_once_with(port=8123)
        assert "Server is also running on http://localhost:8123" in capsys.readouterr().out

    @patch("prompt_enhancer.cli.configure_logging")
    @patch("prompt_enhancer.cli.start_in_background")
    def test_serve_failure_is_not_announced(self, mock_start, mock_configure, capsys, monkeypatch):
        """A server thread that died on startup (e.g. port in use) is reported, not advertised."""
        monkeypatch.setattr("builtins.input", lambda prompt="": "exit")
        mock_start.return_value.is_alive.return_value = False

        code = main(["--serve", "--port", "38125"])

        out = capsys.readouterr().out
        assert code == 0
        assert "Server is also running" not in out
        assert "Server could not be started on port 38125" in out
        assert out.rstrip().endswith("Goodbye!")

    @patch("prompt_enhancer.cli.configure_logging")
    @patch("prompt_enhancer.cli.start_in_background")
    def test_port_zero_is_passed_through(self, mock_start, mock_configure, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda prompt="": "exit")

        main(["--serve", "--port", "0"])

        mock_start.assert_called_once_with(port=0)

    @patch("prompt_enhancer.cli.configure_logging")
    @patch("prompt_enhancer.cli.start_in_background")
    def test_serve_quiets_logging_before_starting(self, mock_start, mock_configure, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda prompt="": "exit")
        calls = []
        mock_configure.side_effect = lambda level: calls.append(("configure", level))
        mock_start.side_effect = lambda port: calls.append(("start", port)) or MagicMock()

        main(["--serve", "--port", "8123"])

        assert calls == [("configure", "WARNING"), ("start", 8123)]

    @patch("prompt_enhancer.cli.configure_logging")
    @patch("prompt_enhancer.cli.start_in_background")
    def test_without_serve_nothing_is_started(self, mock_start, mock_configure, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda prompt="": "exit")

        main([])

        mock_start.assert_not_called()
        mock_configure.assert_not_called()
