"""Console status line for long-running searches."""

import sys
from typing import TextIO, Optional

BAR_WIDTH = 40
LINE_WIDTH = 80
SPINNER_CHARS = "|/-\\"


class ProgressDisplay:
    """Carriage-return status line and progress bar.

    All methods are no-ops when the display is disabled.
    """

    def __init__(self, enabled: bool = True, stream: Optional[TextIO] = None):
        self.enabled = enabled
        self.stream = stream or sys.stdout
        self._spinner_index = 0

    def _write(self, text: str) -> None:
        if not self.enabled:
            return
        self.stream.write(text)
        self.stream.flush()

    def status(self, best_score: int, label: str, value: int, spinner: bool = False) -> None:
        """Show ``Current best: <best> | <label>: <value>``."""
        prefix = ""
        if spinner:
            self._spinner_index = (self._spinner_index + 1) % len(SPINNER_CHARS)
            prefix = f"[{SPINNER_CHARS[self._spinner_index]}] "
        self._write(f"\r{prefix}Current best: {best_score} | {label}: {value}" + " " * 10)

    def bar(self, current: int, total: int) -> None:
        if total <= 0:
            return
        progress = current / total
        filled = int(BAR_WIDTH * progress)
        bar = "#" * filled + " " * (BAR_WIDTH - filled)
        self._write(f"\rEvaluating: [{bar}] {progress * 100:.1f}%")

    def clear(self) -> None:
        self._write("\r" + " " * LINE_WIDTH + "\r")
