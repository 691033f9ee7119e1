"""Terminal Output Formatting Package"""

import sys
import os
import threading


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'


def _supports_color() -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(sys.stdout, 'isatty') or not sys.stdout.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-11), 7)
            return True
        except Exception:
            return False
    return True


def _supports_unicode() -> bool:
    if sys.platform == 'win32':
        try:
            '✓'.encode(sys.stdout.encoding or 'utf-8')
            return True
        except (UnicodeEncodeError, LookupError):
            return False
    return True


COLORS_ENABLED = _supports_color()
UNICODE_ENABLED = _supports_unicode()

CHECK = '✓' if UNICODE_ENABLED else '[OK]'
CROSS = '✗' if UNICODE_ENABLED else '[X]'
INFO = 'ℹ' if UNICODE_ENABLED else '[i]'


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def success(text: str) -> str:
    return _colorize(text, Colors.GREEN)


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def warning(text: str) -> str:
    return _colorize(text, Colors.YELLOW)


def info(text: str) -> str:
    return _colorize(text, Colors.CYAN)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def bold(text: str) -> str:
    return _colorize(text, Colors.BOLD)


def print_error(message: str) -> None:
    print(f"{error(CROSS)} {error(message)}", file=sys.stderr)


def print_debug(message: str) -> None:
    """Verbose-only diagnostics. Callers decide whether verbose is on."""
    print(dim(f"[debug] {message}"), file=sys.stderr)


def print_box(text: str) -> None:
    import shutil
    import textwrap

    term_width = shutil.get_terminal_size((80, 24)).columns
    # Box chrome takes 4 chars: "│ " + " │"
    max_width = max(int(term_width * 0.8), 60) - 4

    lines = text.split('\n')
    wrapped_lines = []
    for line in lines:
        if len(line) > max_width:
            indent = '    ' if line.startswith('    ') else ''
            wrapped_lines.extend(textwrap.wrap(line, width=max_width, subsequent_indent=indent))
        else:
            wrapped_lines.append(line)

    content_width = max((len(line) for line in wrapped_lines), default=0)

    if UNICODE_ENABLED:
        top = f'┌─{"─" * content_width}─┐'
        bottom = f'└─{"─" * content_width}─┘'
        side = '│'
    else:
        top = f'+-{"-" * content_width}-+'
        bottom = f'+-{"-" * content_width}-+'
        side = '|'

    print(dim(top))
    for line in wrapped_lines:
        padding = ' ' * (content_width - len(line))
        print(f"{dim(side)} {line}{padding} {dim(side)}")
    print(dim(bottom))


# Porcelain status label -> color, used when listing working tree changes
STATUS_COLORS = {
    'Modified': Colors.YELLOW,
    'Added': Colors.GREEN,
    'Deleted': Colors.RED,
    'Renamed': Colors.MAGENTA,
    'Untracked': Colors.BLUE,
}


def colorize_status(label: str) -> str:
    color = STATUS_COLORS.get(label)
    if not color:
        return label
    return _colorize(label, color)


class Spinner:
    """Animated spinner for long operations.

    Use as a context manager, or call start() and finish with one of
    succeed(), fail() or info(). The text can be updated while spinning.
    """
    FRAMES_UNICODE = ['⠋', '⠙', '⠹', '⠸', '⠼', '⠴', '⠦', '⠧', '⠇', '⠏']
    FRAMES_ASCII = ['-', '\\', '|', '/']

    def __init__(self, text: str = ""):
        self.text = text
        self._thread = None
        self._stop_event = threading.Event()
        self._frames = self.FRAMES_UNICODE if UNICODE_ENABLED else self.FRAMES_ASCII

    def _spin(self):
        idx = 0
        while not self._stop_event.is_set():
            frame = self._frames[idx % len(self._frames)]
            print(f'\r\033[K{frame} {self.text}', end='', flush=True)
            idx += 1
            self._stop_event.wait(0.08)

    def start(self, text: str | None = None) -> 'Spinner':
        if text is not None:
            self.text = text
        if self._thread is None and sys.stdout.isatty():
            self._stop_event.clear()
            self._thread = threading.Thread(target=self._spin, daemon=True)
            self._thread.start()
        return self

    def stop(self) -> None:
        self._stop_event.set()
        if self._thread:
            self._thread.join()
            self._thread = None
            print('\r\033[K', end='', flush=True)

    def _finish(self, symbol: str, text: str | None) -> None:
        self.stop()
        print(f"{symbol} {text if text is not None else self.text}")

    def succeed(self, text: str | None = None) -> None:
        self._finish(success(CHECK), text)

    def fail(self, text: str | None = None) -> None:
        self._finish(error(CROSS), text)

    def info(self, text: str | None = None) -> None:
        self._finish(info(INFO), text)

    def __enter__(self):
        return self.start()

    def __exit__(self, *args):
        self.stop()


__all__ = [
    "Colors", "COLORS_ENABLED", "UNICODE_ENABLED",
    "CHECK", "CROSS", "INFO",
    "success", "error", "warning", "info", "dim", "bold",
    "print_error", "print_debug", "print_box",
    "colorize_status", "Spinner", "STATUS_COLORS",
]
