"""State transitions for a game session.

Every function takes a :class:`GameState` and returns a :class:`Transition`
holding the new state and the display updates the UI has to render. Nothing
here touches widgets or files.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional

from swiftywords.core.levels import LevelData
from swiftywords.core.shuffle import Shuffler, system_shuffle
from swiftywords.core.state import (
    AnswersChanged,
    ButtonChanged,
    CluesChanged,
    CurrentAnswerChanged,
    Effect,
    FragmentButton,
    GameState,
    LevelChanged,
    LevelCompleteEvent,
    ScoreChanged,
    SubmitResult,
    Transition,
)

logger = logging.getLogger(__name__)

DEFAULT_BUTTON_COUNT = 20
DEFAULT_LEVEL_COMPLETE_EVERY = 7


def new_game(button_count: int = DEFAULT_BUTTON_COUNT, start_level: int = 1) -> GameState:
    if button_count < 1:
        raise ValueError(f"button_count must be positive, got {button_count}")
    buttons = tuple(FragmentButton(button_id=i) for i in range(button_count))
    return GameState(level=start_level, buttons=buttons)


def _button_effects(buttons) -> List[Effect]:
    return [ButtonChanged.of(btn) for btn in buttons]


def assign_fragments(
    buttons: tuple,
    fragments: tuple,
    shuffle: Shuffler = system_shuffle,
) -> tuple:
    """Label shuffled button slots with fragments, all buttons visible.

    When the counts differ no label is changed and the buttons keep whatever
    they showed before.
    """
    slots = shuffle(buttons)
    labels = {btn.button_id: btn.label for btn in buttons}
    if len(fragments) == len(slots):
        for slot, fragment in zip(slots, fragments):
            labels[slot.button_id] = fragment
    else:
        logger.warning(
            "Fragment count %d does not match button count %d; keeping previous labels",
            len(fragments),
            len(slots),
        )
    return tuple(replace(btn, label=labels[btn.button_id], hidden=False) for btn in buttons)


def load_level(state: GameState, data: LevelData, shuffle: Shuffler = system_shuffle) -> Transition:
    """Install a freshly parsed level on the board."""
    buttons = assign_fragments(state.buttons, data.fragments, shuffle)
    new_state = replace(
        state,
        level=data.number,
        clues=tuple(data.clue_lines),
        solutions=data.solutions,
        revealed_answers=tuple(data.placeholder_lines),
        buttons=buttons,
        selected=(),
        current_answer="",
    )
    effects: List[Effect] = [
        LevelChanged(new_state.level),
        CluesChanged(new_state.clues_text),
        AnswersChanged(new_state.answers_text),
        CurrentAnswerChanged(""),
        ScoreChanged(new_state.score),
    ]
    effects.extend(_button_effects(buttons))
    return Transition(new_state, tuple(effects))


def tap_fragment(state: GameState, button_id: int) -> Transition:
    button = state.button(button_id)
    if button is None:
        logger.warning("Ignoring tap on unknown button %d", button_id)
        return Transition(state)
    if button.hidden:
        logger.debug("Ignoring tap on hidden button %d", button_id)
        return Transition(state)

    tapped = replace(button, hidden=True)
    new_state = replace(
        state,
        buttons=tuple(tapped if btn.button_id == button_id else btn for btn in state.buttons),
        selected=state.selected + (button_id,),
        current_answer=state.current_answer + button.label,
    )
    return Transition(
        new_state,
        (CurrentAnswerChanged(new_state.current_answer), ButtonChanged.of(tapped)),
    )


def _solution_position(state: GameState, answer: str) -> Optional[int]:
    matches = [i for i, solution in enumerate(state.solutions) if solution == answer]
    if not matches:
        return None
    for i in matches:
        if state.revealed_answers[i] != answer:
            return i
    return matches[0]


def submit(state: GameState, level_complete_every: int = DEFAULT_LEVEL_COMPLETE_EVERY) -> SubmitResult:
    """Check the current answer against the level's solutions.

    A wrong answer changes nothing. A right one is revealed in place of its
    placeholder, the tapped buttons stay hidden and the score goes up by one.
    """
    position = _solution_position(state, state.current_answer)
    if position is None:
        logger.debug("No solution matches %r", state.current_answer)
        return SubmitResult(state)

    revealed = list(state.revealed_answers)
    revealed[position] = state.current_answer
    new_state = replace(
        state,
        revealed_answers=tuple(revealed),
        selected=(),
        current_answer="",
        score=state.score + 1,
    )
    effects: List[Effect] = [
        AnswersChanged(new_state.answers_text),
        CurrentAnswerChanged(""),
        ScoreChanged(new_state.score),
    ]
    if new_state.score > 0 and new_state.score % level_complete_every == 0:
        logger.info("Level %d complete with score %d", new_state.level, new_state.score)
        effects.append(LevelCompleteEvent(level=new_state.level, score=new_state.score))
    return SubmitResult(new_state, tuple(effects), position=position)


def clear(state: GameState) -> Transition:
    """Put every selected fragment back on the board and empty the answer."""
    selected = set(state.selected)
    buttons = tuple(
        replace(btn, hidden=False) if btn.button_id in selected else btn
        for btn in state.buttons
    )
    new_state = replace(state, buttons=buttons, selected=(), current_answer="")
    effects: List[Effect] = [CurrentAnswerChanged("")]
    effects.extend(_button_effects(btn for btn in buttons if btn.button_id in selected))
    return Transition(new_state, tuple(effects))


def advance_level(state: GameState, data: LevelData, shuffle: Shuffler = system_shuffle) -> Transition:
    """Move on to ``data``, which must be the level after ``state.level``."""
    if data.number != state.level + 1:
        raise ValueError(f"Expected level {state.level + 1}, got level {data.number}")

    cleared = replace(state, level=state.level + 1, solutions=())
    loaded = load_level(cleared, data, shuffle)
    buttons = tuple(replace(btn, hidden=False) for btn in loaded.state.buttons)
    new_state = replace(loaded.state, buttons=buttons)
    return Transition(new_state, loaded.effects + tuple(_button_effects(buttons)))
