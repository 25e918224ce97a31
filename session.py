from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Callable

from action import Action, ActionKind
from metrics import compute_accuracy, compute_wpm
from stats import Statistics


log = logging.getLogger("typing_tutor.session")


class Lifecycle(Enum):
    CONTINUING = "continuing"
    COMPLETED = "completed"
    QUIT = "quit"


class CharState(Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    CURRENT = "current"
    PENDING = "pending"


class Session:
    """Typing progress through a fixed target text.

    State only changes through ``apply``. ``typed_text`` and
    ``cursor_position`` move together; ``total_keystrokes`` and
    ``error_count`` only ever grow, so deleting and retyping still costs
    keystrokes.
    """

    def __init__(self, target_text: str = "", clock: Callable[[], float] = time.perf_counter) -> None:
        self.target_text = target_text
        self.typed_text = ""
        self.cursor_position = 0
        self.total_keystrokes = 0
        self.error_count = 0
        self.clock = clock
        self.start_time = clock()

    def __repr__(self) -> str:
        return (
            f"Session(position={self.cursor_position}/{len(self.target_text)}, "
            f"keystrokes={self.total_keystrokes}, errors={self.error_count})"
        )

    @property
    def is_finished(self) -> bool:
        return bool(self.target_text) and self.cursor_position == len(self.target_text)

    def apply(self, action: Action) -> Lifecycle:
        if action.kind is ActionKind.DELETE:
            if self.typed_text:
                self.typed_text = self.typed_text[:-1]
                self.cursor_position = max(0, self.cursor_position - 1)
            return Lifecycle.CONTINUING

        if action.kind is ActionKind.ESCAPE:
            return Lifecycle.QUIT

        if self.cursor_position >= len(self.target_text):
            log.debug("ignoring %r past the end of the text", action.char)
            return Lifecycle.CONTINUING

        expected = self.target_text[self.cursor_position]
        self.typed_text += action.char
        self.total_keystrokes += 1
        if action.char != expected:
            self.error_count += 1
        self.cursor_position += 1

        if self.cursor_position == len(self.target_text):
            return Lifecycle.COMPLETED
        return Lifecycle.CONTINUING

    def elapsed(self, now: float | None = None) -> float:
        if now is None:
            now = self.clock()
        return now - self.start_time

    def accuracy(self) -> float:
        return compute_accuracy(self.total_keystrokes, self.error_count)

    def wpm(self, now: float | None = None) -> float:
        return compute_wpm(self.cursor_position, self.elapsed(now))

    def statistics(self, now: float | None = None) -> Statistics:
        """Snapshot the current statistics.

        Raises AccuracyError or TimingError when the counters or the clock
        make a figure meaningless.
        """
        if now is None:
            now = self.clock()
        return Statistics(
            accuracy=self.accuracy(),
            elapsed_time=self.elapsed(now),
            errors=self.error_count,
            wpm=self.wpm(now),
        )

    def character_states(self) -> list[tuple[str, CharState]]:
        states = []
        for i, ch in enumerate(self.target_text):
            if i < self.cursor_position:
                if i < len(self.typed_text) and self.typed_text[i] == ch:
                    states.append((ch, CharState.CORRECT))
                else:
                    states.append((ch, CharState.INCORRECT))
            elif i == self.cursor_position:
                states.append((ch, CharState.CURRENT))
            else:
                states.append((ch, CharState.PENDING))
        return states
