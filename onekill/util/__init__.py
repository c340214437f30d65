"""Deck evaluation utilities."""

from .deck import PLACEHOLDER, DeckEvaluation, evaluate, field_labels, formula_text
from .probability import (
    CONDITION_DRAW_SIZE,
    DECK_SIZE,
    DRAW_SIZE,
    binomial,
    compute_probability,
    is_missing,
    probability_curve,
)
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

__all__ = [
    "CONDITION_DRAW_SIZE",
    "DECK_SIZE",
    "DRAW_SIZE",
    "PLACEHOLDER",
    "DeckEvaluation",
    "ValidationError",
    "binomial",
    "compute_probability",
    "derive_other_count",
    "derive_total",
    "evaluate",
    "field_labels",
    "formula_text",
    "is_missing",
    "normalize",
    "parse_integer",
    "probability_curve",
    "validate_category_count",
    "validate_threshold",
    "validate_total",
]
