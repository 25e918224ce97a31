from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Statistics:
    accuracy: float
    elapsed_time: float
    errors: int
    wpm: float

    def __str__(self) -> str:
        return (
            f"WPM: {self.wpm:.1f} | Errors: {self.errors} | "
            f"Accuracy: {self.accuracy:.1f}% | Elapsed Time: {self.elapsed_time:.2f}s"
        )
