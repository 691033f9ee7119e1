"""Interactive question/answer providers.

Both flows ask their questions through a PromptProvider so they can run
against a real terminal or against a scripted list of answers.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from pfcli.errors import PromptAborted
from pfcli.output import bold, dim, error, info, CROSS

# A validator returns an error message, or None when the answer is fine
Validator = Callable[[str], Optional[str]]
Choice = tuple[str, Any]


class PromptProvider(ABC):
    """Asks the operator questions. Raises PromptAborted on Ctrl-C/EOF."""

    @abstractmethod
    def text(self, message: str, default: str | None = None, validate: Validator | None = None) -> str:
        pass

    @abstractmethod
    def confirm(self, message: str, default: bool = False) -> bool:
        pass

    @abstractmethod
    def select(self, message: str, choices: list[Choice]) -> Any:
        pass

    @abstractmethod
    def checkbox(self, message: str, choices: list[Choice], validate: Callable[[list], Optional[str]] | None = None) -> list:
        pass


class TerminalPrompter(PromptProvider):
    """Prompts on stdin/stdout, re-asking until the answer validates."""

    def _ask(self, prompt: str) -> str:
        try:
            return input(prompt)
        except (KeyboardInterrupt, EOFError):
            print()
            raise PromptAborted("Prompt cancelled")

    def _complain(self, message: str) -> None:
        print(f"  {error(CROSS)} {error(message)}")

    def text(self, message: str, default: str | None = None, validate: Validator | None = None) -> str:
        suffix = f" {dim(f'({default})')}" if default else ""
        while True:
            answer = self._ask(f"{bold(message)}{suffix} ").strip()
            if not answer and default is not None:
                answer = default
            problem = validate(answer) if validate else None
            if problem is None:
                return answer
            self._complain(problem)

    def confirm(self, message: str, default: bool = False) -> bool:
        hint = "[Y/n]" if default else "[y/N]"
        while True:
            answer = self._ask(f"{bold(message)} {dim(hint)} ").strip().lower()
            if not answer:
                return default
            if answer in ('y', 'yes'):
                return True
            if answer in ('n', 'no'):
                return False
            self._complain("Answer y or n")

    def _print_choices(self, message: str, choices: list[Choice]) -> None:
        print(bold(message))
        for i, (label, _) in enumerate(choices, 1):
            print(f"  {info(f'[{i}]')} {label}")

    def select(self, message: str, choices: list[Choice]) -> Any:
        self._print_choices(message, choices)
        while True:
            answer = self._ask(f"Select [1-{len(choices)}]: ").strip()
            if answer.isdigit() and 1 <= int(answer) <= len(choices):
                return choices[int(answer) - 1][1]
            self._complain(f"Enter a number from 1 to {len(choices)}")

    def checkbox(self, message: str, choices: list[Choice], validate: Callable[[list], Optional[str]] | None = None) -> list:
        self._print_choices(message, choices)
        while True:
            answer = self._ask(f"Select numbers, e.g. 1 3 4 {dim('(a for all)')}: ").strip().lower()
            if answer == 'a':
                picked = [value for _, value in choices]
            else:
                tokens = answer.replace(',', ' ').split()
                if not all(t.isdigit() and 1 <= int(t) <= len(choices) for t in tokens):
                    self._complain(f"Use numbers from 1 to {len(choices)}")
                    continue
                indexes = sorted({int(t) - 1 for t in tokens})
                picked = [choices[i][1] for i in indexes]
            problem = validate(picked) if validate else None
            if problem is None:
                return picked
            self._complain(problem)


class ScriptedPrompter(PromptProvider):
    """Answers prompts from a pre-seeded list, for tests and automation.

    Each prompt consumes the next answer. None takes the prompt's default,
    and a PromptAborted instance is raised as if the user hit Ctrl-C.
    Answers that fail validation are recorded in `rejected` and the next
    answer is tried, the same way a terminal user would retype.
    """

    def __init__(self, answers: list):
        self.answers = list(answers)
        self.asked: list[str] = []
        self.rejected: list[tuple[str, str]] = []

    def _next(self, message: str) -> Any:
        self.asked.append(message)
        if not self.answers:
            raise LookupError(f"No scripted answer for prompt: {message}")
        answer = self.answers.pop(0)
        if isinstance(answer, PromptAborted):
            raise answer
        return answer

    def text(self, message: str, default: str | None = None, validate: Validator | None = None) -> str:
        while True:
            answer = self._next(message)
            if answer is None:
                answer = default if default is not None else ""
            problem = validate(answer) if validate else None
            if problem is None:
                return answer
            self.rejected.append((answer, problem))

    def confirm(self, message: str, default: bool = False) -> bool:
        answer = self._next(message)
        return default if answer is None else bool(answer)

    def select(self, message: str, choices: list[Choice]) -> Any:
        answer = self._next(message)
        values = [value for _, value in choices]
        if answer not in values:
            raise LookupError(f"Scripted answer {answer!r} is not one of {values!r}")
        return answer

    def checkbox(self, message: str, choices: list[Choice], validate: Callable[[list], Optional[str]] | None = None) -> list:
        while True:
            answer = list(self._next(message))
            problem = validate(answer) if validate else None
            if problem is None:
                return answer
            self.rejected.append((answer, problem))


__all__ = [
    "PromptProvider",
    "TerminalPrompter",
    "ScriptedPrompter",
    "Validator",
    "Choice",
]
