"""Tests for accuracy and WPM calculations."""

import math

import pytest

from metrics import AccuracyError, StatisticsError, TimingError, compute_accuracy, compute_wpm


class TestComputeAccuracy:
    def test_no_keystrokes_is_perfect(self):
        assert compute_accuracy(0, 0) == 100.0

    def test_all_correct(self):
        assert compute_accuracy(10, 0) == 100.0

    def test_half_wrong(self):
        assert compute_accuracy(2, 1) == 50.0

    def test_partial(self):
        assert compute_accuracy(3, 1) == pytest.approx(66.666, abs=0.01)

    def test_all_wrong(self):
        assert compute_accuracy(4, 4) == 0.0

    def test_more_errors_than_keystrokes(self):
        with pytest.raises(AccuracyError) as excinfo:
            compute_accuracy(2, 3)
        assert excinfo.value.total_keystrokes == 2
        assert excinfo.value.error_count == 3

    def test_accuracy_error_is_arithmetic_error(self):
        with pytest.raises(ArithmeticError):
            compute_accuracy(1, 2)


class TestComputeWPM:
    def test_one_minute(self):
        """10 characters is 2 words; over 60 seconds that is 2 WPM."""
        assert compute_wpm(10, 60.0) == pytest.approx(2.0)

    def test_half_minute(self):
        assert compute_wpm(10, 30.0) == pytest.approx(4.0)

    def test_partial_words_are_dropped(self):
        """14 characters still counts as 2 whole words."""
        assert compute_wpm(14, 60.0) == pytest.approx(2.0)

    def test_no_progress(self):
        assert compute_wpm(0, 12.5) == 0.0

    def test_zero_elapsed(self):
        with pytest.raises(TimingError) as excinfo:
            compute_wpm(10, 0.0)
        assert excinfo.value.elapsed_seconds == 0.0

    def test_negative_elapsed(self):
        with pytest.raises(TimingError):
            compute_wpm(10, -1.0)

    def test_elapsed_too_small_to_measure(self):
        with pytest.raises(TimingError, match="insufficient time"):
            compute_wpm(10, 5e-324)

    def test_non_finite_rate(self):
        with pytest.raises(TimingError, match="invalid result"):
            compute_wpm(10**6, 1e-310)

    def test_nan_elapsed_is_rejected(self):
        with pytest.raises(StatisticsError):
            compute_wpm(10, math.nan)
