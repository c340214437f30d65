"""Everything to do with evaluating a deck from the three typed fields."""

from __future__ import annotations

import logging
from math import isnan

from .probability import CONDITION_DRAW_SIZE, DECK_SIZE, DRAW_SIZE, compute_probability
from .validation import (
    ValidationError,
    derive_other_count,
    derive_total,
    normalize,
    parse_integer,
    validate_category_count,
    validate_threshold,
    validate_total,
)

logger = logging.getLogger(__name__)

PLACEHOLDER = "---"


class DeckEvaluation:
    """Everything shown for one set of inputs."""

    def __init__(
        self: DeckEvaluation,
        hp_threshold: int | None,
        low_hp_count: int | None,
        high_hp_count: int | None,
    ) -> None:
        """Derive counts, errors and the probability from parsed inputs.

        Args:
        ----
        hp_threshold (int): The HP threshold, only used for labels
        low_hp_count (int): Basics with HP at or below the threshold
        high_hp_count (int): Basics with HP above the threshold
        """
        self.hp_threshold: int | None = hp_threshold
        self.low_hp_count: int | None = low_hp_count
        self.high_hp_count: int | None = high_hp_count
        self.other_count: int | None = derive_other_count(low_hp_count, high_hp_count)
        self.total: int | None = derive_total(low_hp_count, high_hp_count, self.other_count)

        self.hp_threshold_error: ValidationError | None = validate_threshold(hp_threshold)
        self.low_hp_error: ValidationError | None = validate_category_count(low_hp_count)
        self.high_hp_error: ValidationError | None = validate_category_count(high_hp_count)
        self.total_error: ValidationError | None = validate_total(self.total)

        self.probability: float = compute_probability(low_hp_count, self.other_count)

    @property
    def errors(self: DeckEvaluation) -> dict[str, ValidationError]:
        """Get the fields that have an error."""
        fields = {
            "hp_threshold": self.hp_threshold_error,
            "low_hp": self.low_hp_error,
            "high_hp": self.high_hp_error,
            "total": self.total_error,
        }
        return {name: error for name, error in fields.items() if error}

    @property
    def has_errors(self: DeckEvaluation) -> bool:
        """Check if any field has an error."""
        return bool(self.errors)

    def display_probability(self: DeckEvaluation) -> str:
        """Get the probability as a percentage, or a placeholder if it can't be shown."""
        if isnan(self.probability) or self.low_hp_error or self.high_hp_error or self.total_error:
            return PLACEHOLDER
        return f"{self.probability * 100:.2f}%"


def evaluate(hp_threshold_raw: str, low_hp_raw: str, high_hp_raw: str) -> DeckEvaluation:
    """Evaluate the three fields as typed.

    Args:
    ----
    hp_threshold_raw (str): The HP threshold
    low_hp_raw (str): Basics with HP at or below the threshold
    high_hp_raw (str): Basics with HP above the threshold
    """
    evaluation = DeckEvaluation(
        parse_integer(normalize(hp_threshold_raw)),
        parse_integer(normalize(low_hp_raw)),
        parse_integer(normalize(high_hp_raw)),
    )
    logger.debug(
        "Evaluated %r/%r/%r: %s",
        hp_threshold_raw,
        low_hp_raw,
        high_hp_raw,
        evaluation.probability,
    )
    return evaluation


def field_labels(hp_threshold: int | None) -> tuple[str, str]:
    """Get the labels for the low and high HP fields."""
    shown = "?" if hp_threshold is None else str(hp_threshold)
    return (
        f"Basic Pokémon with HP {shown} or less",
        f"Basic Pokémon with more than HP {shown}",
    )


def formula_text() -> str:
    """Get the formula used for the probability."""
    return (
        f"[C(a,1) × C(c,{CONDITION_DRAW_SIZE})] / "
        f"[C({DECK_SIZE},{DRAW_SIZE}) - C(c,{DRAW_SIZE})]"
    )
