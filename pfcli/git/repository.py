"""Git Repository - The git commands used by the commit workflow."""

from dataclasses import dataclass
from typing import Optional

from pfcli.errors import GitError
from pfcli.git.runner import CommandResult, CommandRunner

# Index or worktree codes that carry a second (source) path in -z output
RENAME_CODES = ('R', 'C')


@dataclass
class FileStatus:
    """One entry of 'git status --porcelain -z'."""
    code: str
    path: str
    orig_path: Optional[str] = None

    @property
    def label(self) -> str:
        if self.code == '??':
            return 'Untracked'
        if 'M' in self.code:
            return 'Modified'
        if 'A' in self.code:
            return 'Added'
        if 'D' in self.code:
            return 'Deleted'
        if 'R' in self.code:
            return 'Renamed'
        return 'Changed'

    @property
    def stage_path(self) -> str:
        """Path to hand to 'git add'. For renames this is the new path."""
        return self.path

    @property
    def display_path(self) -> str:
        if self.orig_path:
            return f"{self.orig_path} -> {self.path}"
        return self.path


def parse_porcelain(text: str) -> list[FileStatus]:
    """Parse NUL-separated 'XY path' records from 'git status --porcelain -z'.

    Paths arrive verbatim (no C-quoting). A rename or copy record is
    followed by a second record holding the source path.
    """
    records = text.split('\0')
    files = []
    i = 0
    while i < len(records):
        record = records[i]
        i += 1
        if len(record) < 4:
            continue
        code, path = record[:2], record[3:]
        orig_path = None
        if any(c in RENAME_CODES for c in code) and i < len(records):
            orig_path = records[i] or None
            i += 1
        files.append(FileStatus(code=code, path=path, orig_path=orig_path))
    return files


class GitRepository:
    """Git commands for the current working tree, run through a CommandRunner."""

    def __init__(self, runner: CommandRunner):
        self.runner = runner

    def _git(self, *args: str) -> CommandResult:
        return self.runner.run(['git', *args])

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout, raising GitError on failure."""
        result = self._git(*args)
        if not result.ok:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{result.stderr.strip()}")
        return result.stdout

    def verify(self) -> None:
        """Fail fast if git isn't available or we're not in a work tree."""
        if not self.runner.which('git'):
            raise GitError("Git is not installed or not in PATH")
        result = self._git('rev-parse', '--is-inside-work-tree')
        if not result.ok or result.stdout.strip() != 'true':
            raise GitError("Current directory is not a git repository")

    def status_text(self) -> str:
        return self._run_git('status', '--porcelain')

    def status(self) -> list[FileStatus]:
        return parse_porcelain(self._run_git('status', '--porcelain', '-z'))

    def add_all(self) -> None:
        self._run_git('add', '.')

    def add_tracked(self) -> None:
        self._run_git('add', '-u')

    def add_paths(self, paths: list[str]) -> None:
        if not paths:
            raise GitError("No files selected to stage")
        self._run_git('add', '--', *paths)

    def staged_diff(self) -> str:
        return self._run_git('diff', '--cached')

    def commit(self, message: str) -> None:
        result = self._git('commit', '-m', message)
        if not result.ok:
            raise GitError(f"Git commit failed: {result.output.strip()}")

    def remotes(self) -> list[str]:
        result = self._git('remote')
        if not result.ok:
            return []
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def current_branch(self) -> str:
        """Current branch name, or '' when detached or unknown."""
        result = self._git('branch', '--show-current')
        if not result.ok:
            return ""
        return result.stdout.strip()

    def remote_branch_exists(self, remote: str, branch: str) -> bool:
        result = self._git('ls-remote', '--heads', remote, branch)
        return result.ok and bool(result.stdout.strip())

    def conflicted_files(self) -> list[str]:
        result = self._git('diff', '--name-only', '--diff-filter=U')
        if not result.ok:
            return []
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def pull(self, remote: str, branch: str) -> CommandResult:
        return self._git('pull', remote, branch)

    def push(self, remote: str, branch: str, set_upstream: bool = False) -> CommandResult:
        if set_upstream:
            return self._git('push', '-u', remote, branch)
        return self._git('push', remote, branch)
