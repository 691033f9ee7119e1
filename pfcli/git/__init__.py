"""Git Operations Package"""

from pfcli.git.repository import GitRepository, FileStatus, parse_porcelain
from pfcli.git.runner import CommandRunner, CommandResult, SubprocessRunner

__all__ = [
    "GitRepository",
    "FileStatus",
    "parse_porcelain",
    "CommandRunner",
    "CommandResult",
    "SubprocessRunner",
]
