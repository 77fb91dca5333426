"""Game state and the display updates produced when it changes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class FragmentButton:
    button_id: int
    label: str = ""
    hidden: bool = False


@dataclass(frozen=True)
class GameState:
    """Everything the game knows at one moment.

    Transitions never mutate a state; they return a new one. ``selected``
    holds button ids in the order they were tapped, and ``current_answer`` is
    always the concatenation of those buttons' labels.
    """

    level: int = 1
    score: int = 0
    clues: Tuple[str, ...] = ()
    solutions: Tuple[str, ...] = ()
    revealed_answers: Tuple[str, ...] = ()
    buttons: Tuple[FragmentButton, ...] = ()
    selected: Tuple[int, ...] = ()
    current_answer: str = ""

    def button(self, button_id: int) -> Optional[FragmentButton]:
        for btn in self.buttons:
            if btn.button_id == button_id:
                return btn
        return None

    @property
    def selected_fragments(self) -> Tuple[FragmentButton, ...]:
        by_id = {btn.button_id: btn for btn in self.buttons}
        return tuple(by_id[button_id] for button_id in self.selected)

    @property
    def clues_text(self) -> str:
        return "\n".join(self.clues)

    @property
    def answers_text(self) -> str:
        return "\n".join(self.revealed_answers)

    @property
    def score_text(self) -> str:
        return score_text(self.score)


def score_text(score: int) -> str:
    return f"Score: {score}"


# ---------------------------------------------------------------------------
# Display updates
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CluesChanged:
    text: str


@dataclass(frozen=True)
class AnswersChanged:
    text: str


@dataclass(frozen=True)
class CurrentAnswerChanged:
    text: str


@dataclass(frozen=True)
class ScoreChanged:
    score: int

    @property
    def text(self) -> str:
        return score_text(self.score)


@dataclass(frozen=True)
class LevelChanged:
    level: int


@dataclass(frozen=True)
class ButtonChanged:
    button_id: int
    label: str
    hidden: bool

    @classmethod
    def of(cls, button: FragmentButton) -> "ButtonChanged":
        return cls(button_id=button.button_id, label=button.label, hidden=button.hidden)


@dataclass(frozen=True)
class LevelCompleteEvent:
    """The player should be asked whether to move on to the next level."""

    level: int
    score: int


Effect = Union[
    CluesChanged,
    AnswersChanged,
    CurrentAnswerChanged,
    ScoreChanged,
    LevelChanged,
    ButtonChanged,
    LevelCompleteEvent,
]


@dataclass(frozen=True)
class Transition:
    state: GameState
    effects: Tuple[Effect, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SubmitResult(Transition):
    """Outcome of submitting the current answer.

    ``position`` is the index of the revealed solution, or None when the
    answer matched nothing and the state was left untouched.
    """

    position: Optional[int] = None

    @property
    def accepted(self) -> bool:
        return self.position is not None

    @property
    def level_complete(self) -> bool:
        return any(isinstance(effect, LevelCompleteEvent) for effect in self.effects)
