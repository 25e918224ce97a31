from __future__ import annotations

import math


CHARS_PER_WORD = 5


class StatisticsError(Exception):
    """Raised when session statistics cannot be derived."""


class AccuracyError(StatisticsError, ArithmeticError):
    def __init__(self, message: str, total_keystrokes: int, error_count: int, accuracy: float | None = None) -> None:
        super().__init__(message)
        self.total_keystrokes = total_keystrokes
        self.error_count = error_count
        self.accuracy = accuracy


class TimingError(StatisticsError):
    def __init__(self, message: str, elapsed_seconds: float, wpm: float | None = None) -> None:
        super().__init__(message)
        self.elapsed_seconds = elapsed_seconds
        self.wpm = wpm


def compute_accuracy(total_keystrokes: int, error_count: int) -> float:
    if total_keystrokes == 0:
        return 100.0

    if error_count > total_keystrokes:
        raise AccuracyError(
            f"error count {error_count} exceeds keystroke count {total_keystrokes}",
            total_keystrokes,
            error_count,
        )

    correct_chars = total_keystrokes - error_count
    accuracy = correct_chars / total_keystrokes * 100.0

    if not math.isfinite(accuracy):
        raise AccuracyError(
            "accuracy calculation produced invalid result",
            total_keystrokes,
            error_count,
            accuracy,
        )
    return accuracy


def compute_wpm(cursor_position: int, elapsed_s: float) -> float:
    # Whole words of net progress only.
    if elapsed_s <= 0:
        raise TimingError("no time has elapsed since starting", elapsed_s)

    words = cursor_position // CHARS_PER_WORD
    minutes = elapsed_s / 60.0

    if minutes == 0:
        raise TimingError("insufficient time elapsed to calculate wpm", elapsed_s)

    wpm = words / minutes

    if not math.isfinite(wpm):
        raise TimingError("wpm calculation produced invalid result", elapsed_s, wpm)
    return wpm
