"""Shared fixtures: a scripted command runner, a fake LLM and a context factory."""

import re

import pytest

from pfcli.cli.prompter import ScriptedPrompter
from pfcli.config import Config
from pfcli.context import ExecutionContext
from pfcli.git.runner import CommandResult, CommandRunner
from pfcli.llm import LLMClient, LLMResponse
from pfcli.output import Spinner

ANSI_RE = re.compile(r'\033\[[0-9;]*m')


def ok(stdout: str = "") -> CommandResult:
    return CommandResult(args=[], returncode=0, stdout=stdout)


def fail(stderr: str = "", stdout: str = "", code: int = 1) -> CommandResult:
    return CommandResult(args=[], returncode=code, stdout=stdout, stderr=stderr)


class FakeRunner(CommandRunner):
    """Returns scripted results keyed by the full argv.

    A list value is consumed in order, the last entry repeating. Commands
    with no script succeed with empty output.
    """

    def __init__(self, responses: dict | None = None, programs=('git',)):
        self.responses = dict(responses or {})
        self.programs = set(programs)
        self.calls: list[list[str]] = []

    def run(self, args):
        self.calls.append(list(args))
        scripted = self.responses.get(tuple(args))
        if isinstance(scripted, list):
            scripted = scripted.pop(0) if len(scripted) > 1 else scripted[0]
        if scripted is None:
            scripted = ok()
        return CommandResult(
            args=list(args),
            returncode=scripted.returncode,
            stdout=scripted.stdout,
            stderr=scripted.stderr,
        )

    def which(self, program):
        return program in self.programs

    def called(self, *prefix: str) -> list[list[str]]:
        """Calls whose argv starts with prefix."""
        return [call for call in self.calls if tuple(call[:len(prefix)]) == prefix]


class FakeClient(LLMClient):
    """LLM stand-in returning fixed content or raising a fixed error."""

    def __init__(self, content: str = "", error: Exception | None = None):
        self.content = content
        self.error = error
        self.prompts = []

    @property
    def name(self) -> str:
        return "Fake (test)"

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return LLMResponse(content=self.content, model="fake", tokens_used=42)


@pytest.fixture
def strip_ansi():
    """Return a function that removes ANSI escape codes."""
    def _strip(text: str) -> str:
        return ANSI_RE.sub('', text)
    return _strip


@pytest.fixture
def make_ctx(tmp_path):
    """Return a factory for contexts backed by scripted answers and commands."""
    def _make(answers=(), runner=None, environ=None, config=None, has_editor=False):
        return ExecutionContext(
            config=config or Config(),
            prompter=ScriptedPrompter(list(answers)),
            runner=runner if runner is not None else FakeRunner(),
            cwd=tmp_path,
            desktop=tmp_path / "Desktop",
            environ=environ if environ is not None else {},
            has_editor=has_editor,
        )
    return _make


@pytest.fixture
def spinners(monkeypatch):
    """Record every Spinner the command flows create."""
    created = []

    class RecordingSpinner(Spinner):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            created.append(self)

    monkeypatch.setattr("pfcli.workflow.Spinner", RecordingSpinner)
    monkeypatch.setattr("pfcli.cli.commands.Spinner", RecordingSpinner)
    return created
