"""Tests for evaluating the three typed fields together."""

from math import isnan

import pytest

from onekill.util import PLACEHOLDER, ValidationError, evaluate, field_labels, formula_text


def test_default_deck():
    evaluation = evaluate("80", "7", "5")
    assert evaluation.other_count == 48
    assert evaluation.total == 60
    assert not evaluation.has_errors
    assert evaluation.errors == {}
    assert evaluation.probability == pytest.approx(85_900_584 / 312_577_848)
    assert evaluation.display_probability() == "27.48%"


def test_full_width_input():
    evaluation = evaluate("８０", "７", "５")
    assert (evaluation.hp_threshold, evaluation.low_hp_count, evaluation.high_hp_count) == (
        80,
        7,
        5,
    )
    assert evaluation.display_probability() == "27.48%"


def test_total_exceeds_deck():
    evaluation = evaluate("80", "40", "30")
    assert evaluation.other_count == 0
    assert evaluation.total == 70
    assert evaluation.total_error is ValidationError.TOTAL_EXCEEDS_DECK_SIZE
    assert evaluation.low_hp_error is None
    assert evaluation.high_hp_error is None
    assert evaluation.probability == 0
    assert evaluation.display_probability() == PLACEHOLDER


def test_not_a_number_still_evaluates():
    evaluation = evaluate("80", "abc", "5")
    assert evaluation.low_hp_error is ValidationError.NOT_A_NUMBER
    assert evaluation.other_count is None
    assert evaluation.total is None
    assert evaluation.total_error is None
    assert isnan(evaluation.probability)
    assert evaluation.display_probability() == PLACEHOLDER


def test_errors_are_independent():
    evaluation = evaluate("-1", "61", "-2")
    assert evaluation.total == 60
    assert evaluation.errors == {
        "hp_threshold": ValidationError.NEGATIVE,
        "low_hp": ValidationError.EXCEEDS_DECK_SIZE,
        "high_hp": ValidationError.NEGATIVE,
    }
    # the engine runs anyway, only the display hides it
    assert evaluation.probability == 0
    assert evaluation.display_probability() == PLACEHOLDER


def test_threshold_does_not_change_result():
    shown = evaluate("abc", "7", "5")
    assert shown.hp_threshold_error is ValidationError.NOT_A_NUMBER
    assert shown.probability == evaluate("30", "7", "5").probability
    assert shown.display_probability() == "27.48%"


def test_no_basics():
    evaluation = evaluate("80", "0", "0")
    assert evaluation.other_count == 60
    assert evaluation.display_probability() == "0.00%"


def test_field_labels():
    assert field_labels(80) == (
        "Basic Pokémon with HP 80 or less",
        "Basic Pokémon with more than HP 80",
    )
    assert field_labels(None)[0] == "Basic Pokémon with HP ? or less"


def test_formula_text():
    assert formula_text() == "[C(a,1) × C(c,6)] / [C(60,7) - C(c,7)]"


def test_long_digit_run_in_count():
    evaluation = evaluate("80", "9" * 5000, "5")
    assert evaluation.low_hp_error is ValidationError.EXCEEDS_DECK_SIZE
    assert evaluation.other_count == 0
    assert evaluation.total_error is ValidationError.TOTAL_EXCEEDS_DECK_SIZE
    assert evaluation.display_probability() == PLACEHOLDER
