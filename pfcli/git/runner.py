"""Command Runner - Run external programs and capture their output."""

import shutil
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class CommandResult:
    """Exit code plus captured text of one finished command."""
    args: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """stderr and stdout together, for messages that land in either."""
        return "\n".join(part for part in (self.stderr, self.stdout) if part)


class CommandRunner(ABC):
    """Runs commands. Never raises on a non-zero exit."""

    @abstractmethod
    def run(self, args: list[str]) -> CommandResult:
        pass

    @abstractmethod
    def which(self, program: str) -> bool:
        pass


class SubprocessRunner(CommandRunner):
    """Runs commands as real subprocesses in the current directory."""

    def run(self, args: list[str]) -> CommandResult:
        try:
            result = subprocess.run(
                args,
                capture_output=True,
                text=True,
                encoding='utf-8',
                errors='replace'
            )
        except FileNotFoundError:
            return CommandResult(args=list(args), returncode=127, stderr=f"{args[0]}: command not found")
        except OSError as e:
            return CommandResult(args=list(args), returncode=126, stderr=str(e))
        return CommandResult(
            args=list(args),
            returncode=result.returncode,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
        )

    def which(self, program: str) -> bool:
        return shutil.which(program) is not None
