"""pokerrank: rank 5-card poker hands and order them strongest first."""

__version__ = "0.1.0"

from pokerrank.cards import (
    Card,
    card_rank,
    card_ranks,
    find_duplicates,
    parse_card,
    parse_hand,
)
from pokerrank.errors import (
    ConfigError,
    DuplicateCard,
    EmptyHandCollection,
    InvalidCard,
    InvalidHandSize,
    PokerRankError,
)
from pokerrank.evaluator import (
    HandCategory,
    HandRank,
    classify,
    compare_hands,
    hand_rank,
    sort_hands,
    winner,
)

__all__ = [
    "__version__",
    # Cards
    "Card",
    "card_rank",
    "card_ranks",
    "find_duplicates",
    "parse_card",
    "parse_hand",
    # Evaluation
    "HandCategory",
    "HandRank",
    "classify",
    "compare_hands",
    "hand_rank",
    "sort_hands",
    "winner",
    # Errors
    "ConfigError",
    "DuplicateCard",
    "EmptyHandCollection",
    "InvalidCard",
    "InvalidHandSize",
    "PokerRankError",
]
