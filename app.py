from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from typing import Callable

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.logging import TextualHandler
from textual.message import Message
from textual.timer import Timer
from textual.widgets import Header, Static
from rich.console import Console
from rich.text import Text

from action import Action
from metrics import StatisticsError
from session import CharState, Lifecycle, Session
from stats import Statistics
from words import build_text


DEFAULT_WORD_COUNT = 100
REFRESH_INTERVAL = 0.1
LOG_LEVEL_ENV = "TYPING_TUTOR_LOG_LEVEL"

CHAR_STYLES = {
    CharState.CORRECT: "green",
    CharState.INCORRECT: "red",
    CharState.CURRENT: "black on yellow",
    CharState.PENDING: "",
}

log = logging.getLogger("typing_tutor.app")


def render_lesson(session: Session) -> Text:
    text = Text()
    for ch, state in session.character_states():
        text.append(ch, style=CHAR_STYLES[state])
    return text


class LessonView(Static, can_focus=True):
    """Target text display that turns key presses into session actions."""

    class ActionTaken(Message):
        def __init__(self, action: Action) -> None:
            self.action = action
            super().__init__()

    def on_key(self, event: events.Key) -> None:
        action = Action.from_event(event)
        if action is None:
            return
        event.stop()
        event.prevent_default()
        self.post_message(self.ActionTaken(action))


class TypingTutorApp(App[Statistics]):
    CSS = """
    #session {
        padding: 1 2;
    }

    #lesson-text {
        height: auto;
        border: solid $primary;
        padding: 1;
    }

    #lesson-text:focus {
        border: solid $accent;
    }

    #statistics {
        height: auto;
        margin: 1 0;
    }
    """

    TITLE = "Typing Tutor"

    def __init__(
        self,
        word_count: int = DEFAULT_WORD_COUNT,
        text: str | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        super().__init__()
        target_text = text if text is not None else build_text(word_count)
        self.session = Session(target_text, clock=clock)
        self._refresh_timer: Timer | None = None
        self._finished = False

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="session"):
            yield LessonView("", id="lesson-text")
            yield Static("", id="statistics")

    def on_mount(self) -> None:
        log.info("session started with %d characters", len(self.session.target_text))
        self.query_one(LessonView).focus()
        self.refresh_lesson()
        if not self._finished:
            self._refresh_timer = self.set_interval(REFRESH_INTERVAL, self.refresh_lesson)

    def refresh_lesson(self) -> None:
        if self._finished:
            return
        try:
            statistics = self.session.statistics()
        except StatisticsError as error:
            self._abort(error)
            return
        self.query_one(LessonView).update(render_lesson(self.session))
        self.query_one("#statistics", Static).update(str(statistics))

    def on_lesson_view_action_taken(self, message: LessonView.ActionTaken) -> None:
        if self._finished:
            return
        lifecycle = self.session.apply(message.action)

        if lifecycle is Lifecycle.QUIT:
            log.info("session quit: %r", self.session)
            self._finish()
            self.exit()
        elif lifecycle is Lifecycle.COMPLETED:
            try:
                statistics = self.session.statistics()
            except StatisticsError as error:
                self._abort(error)
                return
            log.info("session completed: %s", statistics)
            self._finish()
            self.exit(statistics)
        else:
            self.refresh_lesson()

    def _finish(self) -> None:
        self._finished = True
        if self._refresh_timer is not None:
            self._refresh_timer.stop()

    def _abort(self, error: StatisticsError) -> None:
        log.error("statistics unavailable, aborting session", exc_info=error)
        self._finish()
        self.exit(return_code=1, message=f"error: {error}")


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid word count: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"word count must be at least 1, got {number}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="typing-tutor", description="Terminal typing speed trainer.")
    parser.add_argument(
        "-w",
        "--word-count",
        type=_positive_int,
        default=DEFAULT_WORD_COUNT,
        help=f"Number of random words to type (default: {DEFAULT_WORD_COUNT})",
    )
    return parser.parse_args(argv)


def setup_logging() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[TextualHandler()],
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging()

    app = TypingTutorApp(word_count=args.word_count)
    statistics = app.run()
    if statistics is not None:
        Console().print(str(statistics), markup=False, highlight=False)
    return app.return_code or 0


if __name__ == "__main__":
    sys.exit(main())
