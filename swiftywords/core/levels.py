from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from swiftywords.core.errors import LevelEmptyError, LevelNotFoundError, MalformedLevelEntryError
from swiftywords.core.shuffle import Shuffler, system_shuffle

logger = logging.getLogger(__name__)

FRAGMENT_SEPARATOR = "|"
CLUE_SEPARATOR = ": "

DEFAULT_LEVELS_DIR = Path(__file__).resolve().parent.parent / "data" / "levels"


@dataclass(frozen=True)
class PuzzleEntry:
    """One clue and the word it points at, kept as the fragments it is built from."""

    clue: str
    answer: str
    fragments: Tuple[str, ...]

    @property
    def letter_count(self) -> int:
        return len(self.answer)

    @property
    def placeholder(self) -> str:
        """Hint shown in the answers panel until the word is solved."""
        return f"{self.letter_count} letters"


@dataclass(frozen=True)
class LevelData:
    number: int
    entries: Tuple[PuzzleEntry, ...]
    fragments: Tuple[str, ...]

    @property
    def solutions(self) -> Tuple[str, ...]:
        return tuple(entry.answer for entry in self.entries)

    @property
    def clue_lines(self) -> List[str]:
        return [f"{index}. {entry.clue}" for index, entry in enumerate(self.entries, start=1)]

    @property
    def placeholder_lines(self) -> List[str]:
        return [entry.placeholder for entry in self.entries]


def parse_entry(line: str, level: int = 0, source: str = "<string>", line_number: int = 0) -> PuzzleEntry:
    """Parse ``HA|UNT|ED: Ghosts in residence`` into a :class:`PuzzleEntry`."""
    answer, sep, clue = line.partition(CLUE_SEPARATOR)
    if not sep:
        raise MalformedLevelEntryError(level, source, line_number, line, f"missing {CLUE_SEPARATOR!r} separator")
    answer = answer.strip()
    clue = clue.strip()
    if not answer:
        raise MalformedLevelEntryError(level, source, line_number, line, "empty answer")
    if not clue:
        raise MalformedLevelEntryError(level, source, line_number, line, "empty clue")
    fragments = tuple(answer.split(FRAGMENT_SEPARATOR))
    if any(not fragment for fragment in fragments):
        raise MalformedLevelEntryError(level, source, line_number, line, "empty fragment")
    return PuzzleEntry(clue=clue, answer="".join(fragments), fragments=fragments)


def parse_level(
    text: str,
    level: int = 0,
    shuffle: Shuffler = system_shuffle,
    source: str = "<string>",
) -> LevelData:
    """Turn the contents of a level file into shuffled :class:`LevelData`.

    Blank lines are ignored. Line order is shuffled before clues are numbered,
    and the fragments of every entry are pooled and shuffled again.
    """
    numbered = [
        (line_number, line)
        for line_number, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    ]
    if not numbered:
        raise LevelEmptyError(level, f"{source}: level {level} has no puzzles")

    entries = [
        parse_entry(line, level=level, source=source, line_number=line_number)
        for line_number, line in shuffle(numbered)
    ]
    pooled = [fragment for entry in entries for fragment in entry.fragments]
    return LevelData(
        number=level,
        entries=tuple(entries),
        fragments=tuple(shuffle(pooled)),
    )


class LevelRepository:
    """Numbered ``level<N>.txt`` files in a directory."""

    def __init__(self, base_dir: Optional[Path] = None) -> None:
        self._base_dir = Path(base_dir) if base_dir is not None else DEFAULT_LEVELS_DIR
        if not self._base_dir.is_dir():
            raise FileNotFoundError(f"Levels directory not found: {self._base_dir}")

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def path_for(self, level: int) -> Path:
        return self._base_dir / f"level{level}.txt"

    def has_level(self, level: int) -> bool:
        return self.path_for(level).is_file()

    def available(self) -> List[int]:
        """Level numbers with a file on disk, in numeric order."""
        numbers = []
        for level_path in self._base_dir.glob("level*.txt"):
            m = re.match(r"^level(\d+)$", level_path.stem)
            if m:
                numbers.append(int(m.group(1)))
        return sorted(numbers)

    def load(self, level: int, shuffle: Shuffler = system_shuffle) -> LevelData:
        level_path = self.path_for(level)
        if not level_path.is_file():
            raise LevelNotFoundError(level, level_path)
        try:
            text = level_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise LevelEmptyError(level, f"{level_path.name}: could not read level {level}: {e}") from e

        data = parse_level(text, level=level, shuffle=shuffle, source=level_path.name)
        logger.info(
            "Loaded level %d from %s: %d puzzles, %d fragments",
            level,
            level_path.name,
            len(data.entries),
            len(data.fragments),
        )
        return data
