"""Poker Hands - five-card showdown evaluation.

Classifies two five-card poker hands and names the winner with the
reason it won.
"""

__version__ = "0.1.0"
__author__ = "Poker Hands Team"

from poker_hands.evaluator import (
    EvaluatorConfig,
    Showdown,
    evaluate,
    evaluate_hands,
    evaluate_lines,
    evaluate_showdowns,
)
from poker_hands.rules import ClassificationError, ParseError

__all__ = [
    "__version__",
    "EvaluatorConfig",
    "Showdown",
    "evaluate",
    "evaluate_hands",
    "evaluate_lines",
    "evaluate_showdowns",
    "ClassificationError",
    "ParseError",
]
