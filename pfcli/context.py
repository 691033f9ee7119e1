"""Execution context threaded through both command flows."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values

from pfcli.cli.prompter import PromptProvider, TerminalPrompter
from pfcli.config import Config, load_config
from pfcli.git.runner import CommandRunner, SubprocessRunner
from pfcli.output import print_debug


@dataclass
class ExecutionContext:
    """Everything a command needs from the outside world."""
    config: Config
    prompter: PromptProvider
    runner: CommandRunner
    cwd: Path
    desktop: Path
    environ: dict = field(default_factory=dict)
    has_editor: bool = False
    verbose: bool = False
    config_path: Optional[Path] = None

    def debug(self, message: str) -> None:
        if self.verbose:
            print_debug(message)

    @classmethod
    def create(cls, verbose: bool = False) -> 'ExecutionContext':
        """Context for a real terminal session."""
        # .env in the working directory fills in, real environment wins
        dotenv = dotenv_values(Path.cwd() / '.env')
        environ = {k: v for k, v in dotenv.items() if v is not None}
        environ.update(os.environ)
        config, config_path = load_config(environ)
        runner = SubprocessRunner()
        return cls(
            config=config,
            prompter=TerminalPrompter(),
            runner=runner,
            cwd=Path.cwd(),
            desktop=Path.home() / 'Desktop',
            environ=environ,
            has_editor=runner.which(config.editor),
            verbose=verbose,
            config_path=config_path,
        )
