"""Poker hand evaluator: classify 5-card hands and order them.

A hand is scored by running the detectors from the strongest category
down; the first one that recognizes the hand produces its HandRank, and a
hand nothing recognizes is scored as a high card. The
order of ``_DETECTORS`` matters, because weaker patterns also match some
stronger hands (every full house contains a three of a kind).
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import IntEnum

from pokerrank.cards import Card, card_ranks, parse_hand
from pokerrank.errors import EmptyHandCollection

__all__ = [
    "HandCategory",
    "HandRank",
    "hand_rank",
    "classify",
    "compare_hands",
    "sort_hands",
    "winner",
]

Ranks = tuple[int, ...]


class HandCategory(IntEnum):
    """Hand categories ordered from weakest to strongest."""

    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", " ")


@dataclass(frozen=True, order=True)
class HandRank:
    """Comparison key for a hand; greater is stronger.

    ``tiebreaks`` holds the grouped ranks that decide between hands of the
    same category (quad rank, trip-then-pair, high-then-low pair) and always
    has the same length for a given category. ``kickers`` holds what is
    compared after that.
    """

    category: HandCategory
    tiebreaks: Ranks = ()
    kickers: Ranks = ()

    @property
    def name(self) -> str:
        return self.category.label

    def as_list(self) -> list[int]:
        """Flat form: ``[category, *tiebreaks, *kickers]``."""
        return [int(self.category), *self.tiebreaks, *self.kickers]


# ------------------------------------------------------------------
# Detectors: (ranks, hand) -> HandRank | None
# ------------------------------------------------------------------

def _straight_flush(ranks: Ranks, hand: Sequence[Card]) -> HandRank | None:
    straight = _straight(ranks, hand)
    if straight is not None and _flush(ranks, hand) is not None:
        return HandRank(HandCategory.STRAIGHT_FLUSH, straight.tiebreaks)
    return None


def _four_of_a_kind(ranks: Ranks, hand: Sequence[Card]) -> HandRank | None:
    a, b, c, d, e = ranks
    if b == c == d == e:
        return HandRank(HandCategory.FOUR_OF_A_KIND, (b,), (a,))
    if a == b == c == d:
        return HandRank(HandCategory.FOUR_OF_A_KIND, (a,), (e,))
    return None


def _full_house(ranks: Ranks, hand: Sequence[Card]) -> HandRank | None:
    a, b, c, d, e = ranks
    if a == b == c and d == e:
        return HandRank(HandCategory.FULL_HOUSE, (a, e))
    if a == b and c == d == e:
        return HandRank(HandCategory.FULL_HOUSE, (e, a))
    return None


def _flush(ranks: Ranks, hand: Sequence[Card]) -> HandRank | None:
    if len({card.suit for card in hand}) == 1:
        return HandRank(HandCategory.FLUSH, (), ranks)
    return None


def _straight(ranks: Ranks, hand: Sequence[Card]) -> HandRank | None:
    # card_ranks has already turned A-5-4-3-2 into 5-4-3-2-1
    if all(hi == lo + 1 for hi, lo in zip(ranks, ranks[1:])):
        return HandRank(HandCategory.STRAIGHT, (ranks[0],))
    return None


def _three_of_a_kind(ranks: Ranks, hand: Sequence[Card]) -> HandRank | None:
    for i in range(3):
        if ranks[i] == ranks[i + 1] == ranks[i + 2]:
            return HandRank(HandCategory.THREE_OF_A_KIND, (ranks[i],), ranks)
    return None


def _two_pair(ranks: Ranks, hand: Sequence[Card]) -> HandRank | None:
    a, b, c, d, e = ranks
    if a == b and c == d:
        pair_ranks = (a, c)
    elif a == b and d == e:
        pair_ranks = (a, d)
    elif b == c and d == e:
        pair_ranks = (b, d)
    else:
        return None
    return HandRank(HandCategory.TWO_PAIR, pair_ranks, ranks)


def _pair(ranks: Ranks, hand: Sequence[Card]) -> HandRank | None:
    counts = Counter(ranks)
    if len(counts) != 4:
        return None
    paired, _ = counts.most_common(1)[0]
    return HandRank(HandCategory.PAIR, (paired,), ranks)


def _high_card(ranks: Ranks, hand: Sequence[Card]) -> HandRank:
    return HandRank(HandCategory.HIGH_CARD, (), ranks)


_DETECTORS: tuple[Callable[[Ranks, Sequence[Card]], HandRank | None], ...] = (
    _straight_flush,
    _four_of_a_kind,
    _full_house,
    _flush,
    _straight,
    _three_of_a_kind,
    _two_pair,
    _pair,
)


# ------------------------------------------------------------------
# Public API
# ------------------------------------------------------------------

def hand_rank(hand: Sequence[str | Card]) -> HandRank:
    """Score a 5-card hand.

    Accepts Cards or two-character tokens (``["AS", "KD", ...]``). Raises
    InvalidHandSize for anything but five cards and InvalidCard for
    unrecognized tokens.
    """
    cards = parse_hand(hand)
    ranks = card_ranks(cards)
    for detect in _DETECTORS:
        result = detect(ranks, cards)
        if result is not None:
            return result
    # nothing else matched
    return _high_card(ranks, cards)


def classify(hand: Sequence[str | Card]) -> HandCategory:
    """Return just the category of a hand."""
    return hand_rank(hand).category


def compare_hands(a: Sequence[str | Card], b: Sequence[str | Card]) -> int:
    """Return 1 if ``a`` beats ``b``, -1 if it loses, 0 on a tie."""
    rank_a, rank_b = hand_rank(a), hand_rank(b)
    return (rank_a > rank_b) - (rank_a < rank_b)


def sort_hands(hands, *, key=None):
    """Order hands strongest first.

    The sort is stable: hands that rank equal keep their input order. The
    caller's own objects are returned, not parsed copies. ``key`` picks the
    hand out of each item when sorting e.g. ``(name, hand)`` pairs.
    """
    if key is None:
        return sorted(hands, key=hand_rank, reverse=True)
    return sorted(hands, key=lambda item: hand_rank(key(item)), reverse=True)


def winner(hands, *, key=None):
    """Return the strongest hand; the earliest one on a tie."""
    ordered = sort_hands(hands, key=key)
    if not ordered:
        raise EmptyHandCollection()
    return ordered[0]
