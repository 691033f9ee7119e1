"""
Tests for terminal output and the terminal prompter.

Shows sample output for each scenario. Run with:
    pytest tests/test_display.py -v
    pytest tests/test_display.py -v -s   # see actual terminal output
"""

import pytest

from pfcli.cli.commands import display_config
from pfcli.cli.prompter import ScriptedPrompter, TerminalPrompter
from pfcli.errors import PromptAborted
from pfcli.output import Spinner, colorize_status, print_box


@pytest.fixture
def feed_input(monkeypatch):
    """Script builtins.input; an exception instance in the list is raised."""
    def _feed(*answers):
        queue = list(answers)

        def _input(prompt=""):
            print(prompt, end="")
            answer = queue.pop(0)
            if isinstance(answer, BaseException):
                raise answer
            return answer

        monkeypatch.setattr("builtins.input", _input)
    return _feed


# ---------------------------------------------------------------------------
# Spinner
# ---------------------------------------------------------------------------

class TestSpinner:
    """Without a TTY the spinner only prints its final line."""

    def test_succeed_prints_final_line(self, capsys, strip_ansi):
        Spinner("Working...").start().succeed("Done")
        assert strip_ansi(capsys.readouterr().out).strip().endswith("Done")

    def test_fail_uses_current_text(self, capsys, strip_ansi):
        spinner = Spinner("Fetching").start()
        spinner.text = "Parsing"
        spinner.fail()
        assert "Parsing" in strip_ansi(capsys.readouterr().out)

    def test_context_manager_is_silent(self, capsys):
        with Spinner("quiet"):
            pass
        assert capsys.readouterr().out == ""


class TestPrintBox:

    def test_frames_every_line(self, capsys, strip_ansi):
        print_box("class User(BaseModel):\n    id: int")
        lines = strip_ansi(capsys.readouterr().out).splitlines()

        assert len(lines) == 4
        assert "class User(BaseModel):" in lines[1]
        assert len({len(line) for line in lines}) == 1


class TestOutputExports:

    def test_exported_names_exist(self):
        import pfcli.output as output
        missing = [name for name in output.__all__ if not hasattr(output, name)]
        assert missing == []

    def test_only_used_helpers_exported(self):
        import pfcli.output as output
        for name in ("note", "highlight", "print_success", "print_warning", "print_info"):
            assert not hasattr(output, name)


class TestColorizeStatus:

    def test_unknown_label_unchanged(self):
        assert colorize_status("Changed") == "Changed"

    def test_known_label_keeps_text(self, strip_ansi):
        assert strip_ansi(colorize_status("Modified")) == "Modified"


# ---------------------------------------------------------------------------
# TerminalPrompter
# ---------------------------------------------------------------------------

class TestTerminalPrompter:

    def test_text_reasks_until_valid(self, feed_input, capsys, strip_ansi):
        feed_input("bad", "Good")
        answer = TerminalPrompter().text(
            "Name:", validate=lambda s: None if s[0].isupper() else "Must be capitalized",
        )

        assert answer == "Good"
        assert "Must be capitalized" in strip_ansi(capsys.readouterr().out)

    def test_text_default_on_enter(self, feed_input):
        feed_input("")
        assert TerminalPrompter().text("Name:", default="ApiTypes") == "ApiTypes"

    def test_confirm(self, feed_input):
        feed_input("maybe", "y")
        assert TerminalPrompter().confirm("Open?") is True

    def test_confirm_default(self, feed_input):
        feed_input("")
        assert TerminalPrompter().confirm("Open?", default=True) is True

    def test_select_by_number(self, feed_input, capsys, strip_ansi):
        feed_input("9", "2")
        choice = TerminalPrompter().select("Stage:", [("All", "all"), ("Tracked", "updated")])

        assert choice == "updated"
        out = strip_ansi(capsys.readouterr().out)
        assert "[1] All" in out
        assert "Enter a number from 1 to 2" in out

    def test_checkbox_numbers_and_all(self, feed_input):
        choices = [("a.py", "a.py"), ("b.py", "b.py"), ("c.py", "c.py")]
        feed_input("3, 1")
        assert TerminalPrompter().checkbox("Files:", choices) == ["a.py", "c.py"]
        feed_input("a")
        assert TerminalPrompter().checkbox("Files:", choices) == ["a.py", "b.py", "c.py"]

    def test_checkbox_validation(self, feed_input, capsys, strip_ansi):
        feed_input("", "2")
        picked = TerminalPrompter().checkbox(
            "Files:", [("a.py", "a.py"), ("b.py", "b.py")],
            validate=lambda p: None if p else "Select at least one file",
        )
        assert picked == ["b.py"]
        assert "Select at least one file" in strip_ansi(capsys.readouterr().out)

    @pytest.mark.parametrize("exc", [KeyboardInterrupt(), EOFError()])
    def test_interrupt_aborts(self, feed_input, exc):
        feed_input(exc)
        with pytest.raises(PromptAborted):
            TerminalPrompter().text("URL:")


class TestScriptedPrompter:

    def test_runs_out_of_answers(self):
        with pytest.raises(LookupError, match="URL:"):
            ScriptedPrompter([]).text("URL:")

    def test_select_rejects_unknown_value(self):
        with pytest.raises(LookupError):
            ScriptedPrompter(["nope"]).select("Pick:", [("One", 1)])


# ---------------------------------------------------------------------------
# Config display
# ---------------------------------------------------------------------------

class TestDisplayConfig:

    def test_shows_settings_and_key_state(self, make_ctx, capsys, strip_ansi):
        ctx = make_ctx(environ={"OPENAI_API_KEY": "bogus", "PF_MODEL": "gpt-4o"})
        assert display_config(ctx) == 0

        out = strip_ansi(capsys.readouterr().out)
        assert "defaults (no .pfclirc found)" in out
        assert "PF_MODEL=gpt-4o" in out
        assert "missing or invalid" in out
        assert "OPENAI_API_KEY / REACT_APP_OPENAI_API_KEY" in out
