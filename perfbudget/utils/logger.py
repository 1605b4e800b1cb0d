"""
Structured console logging for budget validation and page
evaluation.

Each line carries a timestamp, a level symbol and the module
context, followed by ``key=value`` pairs.  Lines go to stderr in
colour; a plain copy is kept so the host system can attach the
log of an evaluation to its report.

Timers and the buffer live in a ``contextvars.ContextVar`` so
that concurrent evaluations keep separate log state.
"""

from __future__ import annotations

import contextvars
import dataclasses
import re
import sys
import time
from datetime import UTC, datetime

# ============================================================================
# Per-context state
# ============================================================================


@dataclasses.dataclass
class _LogState:
    lines: list[str] = dataclasses.field(default_factory=list)
    timers: dict[tuple[str, str], tuple[float, str]] = dataclasses.field(default_factory=dict)


_state_var: contextvars.ContextVar[_LogState] = contextvars.ContextVar("_state_var")

_ANSI_RE = re.compile(r"\033\[[0-9;]*m")


def _state() -> _LogState:
    """Return this context's log state, creating it on first use."""
    try:
        return _state_var.get()
    except LookupError:
        state = _LogState()
        _state_var.set(state)
        return state


def get_log_buffer() -> list[str]:
    """Return a copy of the lines logged so far, without ANSI codes."""
    return list(_state().lines)


def clear_log_buffer() -> None:
    """Forget buffered lines and running timers."""
    state = _state()
    state.lines.clear()
    state.timers.clear()


# ============================================================================
# Formatting
# ============================================================================

_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_GRAY = "\033[90m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_CYAN = "\033[36m"
_MAGENTA = "\033[35m"

# level -> (colour, symbol)
_LEVELS = {
    "info": (_CYAN, "ℹ"),
    "warn": (_YELLOW, "⚠"),
    "error": ("\033[31m", "✗"),
    "debug": (_GRAY, "•"),
    "timing": (_MAGENTA, "⏱"),
}

_MAX_STRING = 200


def _timestamp() -> str:
    """Current UTC time as HH:MM:SS.mmm."""
    now = datetime.now(UTC)
    return f"{now:%H:%M:%S}.{now.microsecond // 1000:03d}"


def _duration(ms: float) -> str:
    return f"{ms:.1f}ms" if ms < 1000 else f"{ms / 1000:.2f}s"


def _render(value: object) -> str:
    """Colour a logged value by kind; collections show their size."""
    if isinstance(value, str):
        if len(value) > _MAX_STRING:
            value = value[: _MAX_STRING - 3] + "..."
        return f'{_GREEN}"{value}"{_RESET}'
    if value is None or isinstance(value, bool):
        return f"{_DIM}{value}{_RESET}"
    if isinstance(value, (int, float)):
        return f"{_YELLOW}{value}{_RESET}"
    if isinstance(value, (list, tuple, set, frozenset)):
        return f"{_CYAN}[{len(value)} items]{_RESET}"
    if isinstance(value, dict):
        return f"{_CYAN}{{{len(value)} keys}}{_RESET}"
    return str(value)


# ============================================================================
# Logger
# ============================================================================


class Logger:
    """Logger bound to a module context such as ``"Evaluation"``."""

    def __init__(self, context: str) -> None:
        self._context = context

    def _log(self, level: str, message: str, data: dict[str, object] | None = None) -> None:
        colour, symbol = _LEVELS[level]
        parts = [
            f"{_GRAY}[{_timestamp()}]{_RESET}",
            f"{colour}{symbol}{_RESET}",
            f"{_BOLD}[{self._context}]{_RESET}",
            message,
        ]
        parts.extend(f"{_DIM}{key}={_RESET}{_render(value)}" for key, value in (data or {}).items())
        line = " ".join(parts)
        print(line, file=sys.stderr)
        _state().lines.append(_ANSI_RE.sub("", line))

    def info(self, message: str, data: dict[str, object] | None = None) -> None:
        self._log("info", message, data)

    def warn(self, message: str, data: dict[str, object] | None = None) -> None:
        self._log("warn", message, data)

    def error(self, message: str, data: dict[str, object] | None = None) -> None:
        self._log("error", message, data)

    def debug(self, message: str, data: dict[str, object] | None = None) -> None:
        self._log("debug", message, data)

    def start_timer(self, label: str) -> None:
        """Start timing *label* within this logger's context."""
        _state().timers[(self._context, label)] = (time.monotonic(), _timestamp())

    def end_timer(self, label: str, message: str | None = None) -> float:
        """Stop timing *label* and log the elapsed time.

        Returns:
            Elapsed milliseconds, or ``0.0`` when the timer was
            never started.
        """
        entry = _state().timers.pop((self._context, label), None)
        if entry is None:
            self.warn(f'Timer "{label}" was not started')
            return 0.0

        started, started_at = entry
        elapsed = (time.monotonic() - started) * 1000
        self._log(
            "timing",
            f"{message or f'Completed: {label}'} {_DIM}took{_RESET} "
            f"{_MAGENTA}{_duration(elapsed)}{_RESET} {_DIM}(started {started_at}){_RESET}",
        )
        return elapsed


def create_logger(context: str) -> Logger:
    """Create a logger for a specific module."""
    return Logger(context)
