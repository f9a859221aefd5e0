"""Exception taxonomy for hand parsing, evaluation and showdown loading."""


class PokerRankError(ValueError):
    """Base class for every error raised by pokerrank."""


class InvalidCard(PokerRankError):
    """A card's rank or suit symbol is not recognized."""

    def __init__(self, token, reason: str = "unrecognized card") -> None:
        self.token = token
        super().__init__(f"{reason}: {token!r}")


class InvalidHandSize(PokerRankError):
    """A hand does not hold exactly five cards."""

    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(f"Expected 5 cards, got {size}")


class EmptyHandCollection(PokerRankError):
    """winner() was asked to pick from no hands at all."""

    def __init__(self) -> None:
        super().__init__("Cannot pick a winner from an empty collection of hands")


class DuplicateCard(PokerRankError):
    """The same card appears more than once where duplicates are rejected."""

    def __init__(self, cards, hand_name: str | None = None) -> None:
        self.cards = list(cards)
        self.hand_name = hand_name
        listed = " ".join(str(c) for c in self.cards)
        prefix = f"Hand {hand_name!r}: " if hand_name else ""
        super().__init__(f"{prefix}duplicate cards: {listed}")


class ConfigError(PokerRankError):
    """A showdown file is malformed or holds an unparseable hand."""
