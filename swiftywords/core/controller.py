from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from swiftywords.core import game
from swiftywords.core.levels import LevelRepository
from swiftywords.core.settings import GameSettings
from swiftywords.core.shuffle import Shuffler, make_shuffler
from swiftywords.core.state import Effect, GameState, SubmitResult, Transition

logger = logging.getLogger(__name__)

Listener = Callable[[Effect], None]


class GameController:
    """Owns the session state and turns UI events into display updates.

    The UI shell calls the ``*_pressed`` / ``*_tapped`` handlers and renders
    the effects delivered to its listeners. Handlers run to completion one at
    a time; nothing here is thread-safe.
    """

    def __init__(
        self,
        levels: LevelRepository,
        settings: Optional[GameSettings] = None,
        shuffle: Optional[Shuffler] = None,
    ) -> None:
        self._levels = levels
        self._settings = settings or GameSettings()
        self._shuffle = shuffle or make_shuffler(self._settings.seed)
        self._state = game.new_game(self._settings.button_count, self._settings.start_level)
        self._listeners: List[Listener] = []

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def settings(self) -> GameSettings:
        return self._settings

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _apply(self, transition: Transition) -> None:
        self._state = transition.state
        self._emit(transition.effects)

    def _emit(self, effects: Iterable[Effect]) -> None:
        for effect in effects:
            for listener in list(self._listeners):
                listener(effect)

    # ------------------------------------------------------------------
    # Events from the UI shell
    # ------------------------------------------------------------------

    def view_ready(self) -> None:
        """Load the current level; raises LevelError if it cannot be played."""
        self.load_level(self._state.level)

    def load_level(self, level: int) -> None:
        data = self._levels.load(level, self._shuffle)
        self._apply(game.load_level(self._state, data, self._shuffle))

    def fragment_button_tapped(self, button_id: int) -> None:
        self._apply(game.tap_fragment(self._state, button_id))

    def submit_pressed(self) -> SubmitResult:
        result = game.submit(self._state, self._settings.level_complete_every)
        if result.accepted:
            logger.debug("Solved %r at position %d", result.state.solutions[result.position], result.position)
        self._apply(result)
        return result

    def clear_pressed(self) -> None:
        self._apply(game.clear(self._state))

    def level_complete_acknowledged(self) -> None:
        """Advance to the next level.

        Raises LevelNotFoundError when there is no next level; the current
        board is left as it was.
        """
        next_level = self._state.level + 1
        data = self._levels.load(next_level, self._shuffle)
        self._apply(game.advance_level(self._state, data, self._shuffle))
        logger.info("Advanced to level %d (score %d)", self._state.level, self._state.score)

    def has_next_level(self) -> bool:
        return self._levels.has_level(self._state.level + 1)
