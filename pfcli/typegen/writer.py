"""Write generated type definitions to disk."""

from pathlib import Path

from pfcli import TYPE_FILE_EXTENSION
from pfcli.errors import EmptyGenerationError


def type_file_path(directory: Path | str, name: str) -> Path:
    return Path(directory).expanduser() / f"{name}{TYPE_FILE_EXTENSION}"


def write_type_file(directory: Path | str, name: str, lines: list[str]) -> Path:
    """Write lines to <directory>/<name>.py, creating directory if needed."""
    if not lines or not any(line.strip() for line in lines):
        raise EmptyGenerationError()
    path = type_file_path(directory, name)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text('\n'.join(lines) + '\n', encoding='utf-8')
    return path
