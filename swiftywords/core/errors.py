"""Error types raised while loading levels."""

from __future__ import annotations

from typing import Optional


class SwiftyWordsError(Exception):
    """Base class for game errors."""


class LevelError(SwiftyWordsError):
    """A level resource could not be turned into a playable level."""

    def __init__(self, level: int, message: str) -> None:
        super().__init__(message)
        self.level = level


class LevelNotFoundError(LevelError, LookupError):
    """No level file exists for the requested level number."""

    def __init__(self, level: int, path: Optional[object] = None) -> None:
        where = f" ({path})" if path is not None else ""
        super().__init__(level, f"Level {level} not found{where}")
        self.path = path


class LevelEmptyError(LevelError, ValueError):
    """The level file exists but is unreadable or holds no puzzles."""


class MalformedLevelEntryError(LevelEmptyError):
    """A line in a level file is not of the form ``frag|ments: clue``."""

    def __init__(self, level: int, source: str, line_number: int, line: str, reason: str) -> None:
        super().__init__(level, f"{source}:{line_number}: {reason}: {line!r}")
        self.source = source
        self.line_number = line_number
        self.line = line
