"""Tests for set input checks and set numbering."""

import math

import pytest

from app.core.errors import InvalidSetError
from app.liftlog.sets import check_set_values, next_set_number, same_exercise


# ======================================================================
# Input checks
# ======================================================================


class TestCheckSetValues:
    def test_valid(self):
        check_set_values(5, 100.0)
        check_set_values(1, 0.0)

    def test_none_means_unchanged(self):
        check_set_values(None, None)
        check_set_values(reps=8)
        check_set_values(weight=60.0)

    @pytest.mark.parametrize("reps", [0, -3, True, 2.5])
    def test_rejects_bad_reps(self, reps):
        with pytest.raises(InvalidSetError, match="reps"):
            check_set_values(reps, 50.0)

    @pytest.mark.parametrize("weight", [-0.5, math.inf, math.nan])
    def test_rejects_bad_weight(self, weight):
        with pytest.raises(InvalidSetError, match="weight"):
            check_set_values(5, weight)

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            check_set_values(0, 10.0)


# ======================================================================
# Numbering
# ======================================================================


class TestSetNumbering:
    def test_first_set(self):
        assert next_set_number([], exercise_id=7, exercise_name="Squat") == 1

    def test_counts_template_exercise_by_id(self, make_log):
        logs = [
            make_log(exercise_name="Squat", exercise_id=7),
            make_log(exercise_name="Squat", exercise_id=7),
            make_log(exercise_name="Bench Press", exercise_id=8),
        ]
        assert next_set_number(logs, exercise_id=7, exercise_name="Squat") == 3

    def test_renamed_template_still_matches_by_id(self, make_log):
        logs = [make_log(exercise_name="Back Squat", exercise_id=7)]
        assert next_set_number(logs, exercise_id=7, exercise_name="Squat") == 2

    def test_free_form_matches_by_name(self, make_log):
        logs = [
            make_log(exercise_name="Farmer's Carry"),
            make_log(exercise_name="Farmer's Carry", exercise_id=9),
        ]
        assert next_set_number(logs, exercise_id=None, exercise_name="Farmer's Carry") == 2

    def test_same_exercise(self, make_log):
        log = make_log(exercise_name="Dips")
        assert same_exercise(log, None, "Dips")
        assert not same_exercise(log, 3, "Dips")
