"""Card notation and rank normalization.

Cards are written as two characters, rank then suit: ``"AS"`` is the ace of
spades, ``"TD"`` the ten of diamonds. Ranks map to 2-14 with the ace high;
the one place the ace plays low is the wheel (A-2-3-4-5), which
``card_ranks`` rewrites to 5-4-3-2-1 so straights can be detected uniformly.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from pokerrank.errors import InvalidCard, InvalidHandSize

__all__ = [
    "Card",
    "RANKS",
    "SUITS",
    "HAND_SIZE",
    "card_rank",
    "card_ranks",
    "parse_card",
    "parse_hand",
    "find_duplicates",
]

RANKS = "23456789TJQKA"
SUITS = "CDHS"
RANK_VALUE: dict[str, int] = {r: i for i, r in enumerate(RANKS, start=2)}
HAND_SIZE = 5

_WHEEL = (14, 5, 4, 3, 2)
_WHEEL_LOW = (5, 4, 3, 2, 1)


@dataclass(frozen=True)
class Card:
    """A playing card with rank and suit."""

    rank: str
    suit: str

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"{self.rank}{self.suit}"


def parse_card(token: str | Card) -> Card:
    """Parse a token such as ``"AS"``, ``"td"`` or ``"10H"`` into a Card."""
    if isinstance(token, Card):
        return token
    if not isinstance(token, str):
        raise InvalidCard(token, "card must be a string")

    text = token.strip().upper()
    if len(text) < 2:
        raise InvalidCard(token)

    rank, suit = text[:-1], text[-1]
    if rank == "10":
        rank = "T"
    if rank not in RANK_VALUE:
        raise InvalidCard(token, "unknown rank")
    if suit not in SUITS:
        raise InvalidCard(token, "unknown suit")
    return Card(rank=rank, suit=suit)


def parse_hand(hand: str | Iterable[str | Card]) -> tuple[Card, ...]:
    """Parse ``"2H 3H 4H 5H 6H"`` or a sequence of tokens into Cards.

    The hand size is not checked here; evaluation does that.
    """
    if isinstance(hand, str):
        hand = hand.split()
    return tuple(parse_card(token) for token in hand)


def card_rank(card: str | Card) -> int:
    """Return the numeric rank of a card, 2 through 14 (ace high)."""
    if not isinstance(card, Card):
        card = parse_card(card)
    try:
        return RANK_VALUE[card.rank]
    except KeyError:
        raise InvalidCard(card, "unknown rank") from None


def card_ranks(hand: str | Sequence[str | Card]) -> tuple[int, ...]:
    """Return the hand's ranks sorted high to low.

    Takes the same inputs as ``parse_hand``. An ace-low straight comes back
    as (5, 4, 3, 2, 1).
    """
    cards = parse_hand(hand)
    if len(cards) != HAND_SIZE:
        raise InvalidHandSize(len(cards))

    ranks = tuple(sorted((card_rank(c) for c in cards), reverse=True))
    if ranks == _WHEEL:
        return _WHEEL_LOW
    return ranks


def find_duplicates(hand: Iterable[str | Card]) -> list[Card]:
    """Return each card that appears more than once, in first-seen order."""
    counts = Counter(parse_hand(hand))
    return [card for card, n in counts.items() if n > 1]
