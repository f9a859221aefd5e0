"""Showdown file loader.

A showdown file is YAML naming the hands to rank::

    showdown:
      name: friday-night
      reject_duplicates: false
    hands:
      alice: "AS KS QS JS TS"
      bob: ["9H", "9D", "9S", "9C", "2D"]
    output:
      dir: output/showdowns

The file is checked against ``schema.json`` before any card is parsed.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

import jsonschema
import yaml

from pokerrank.cards import HAND_SIZE, Card, find_duplicates, parse_hand
from pokerrank.errors import ConfigError, DuplicateCard, InvalidCard

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).parent / "schema.json"


def load_schema(path: Path = SCHEMA_PATH) -> dict:
    """Load the showdown JSON Schema."""
    with open(path) as f:
        return json.load(f)


@dataclass
class ShowdownConfig:
    name: str
    hands: dict[str, tuple[Card, ...]] = field(default_factory=dict)
    reject_duplicates: bool = False
    output_dir: Path | None = None


def build_hands(
    raw_hands: dict, *, reject_duplicates: bool = False
) -> dict[str, tuple[Card, ...]]:
    """Parse ``{name: cards}`` into Cards, keeping file order."""
    hands = {}
    for name, raw in raw_hands.items():
        name = str(name)
        try:
            cards = parse_hand(raw)
        except InvalidCard as e:
            raise ConfigError(f"Hand {name!r}: {e}") from e
        if len(cards) != HAND_SIZE:
            raise ConfigError(
                f"Hand {name!r}: expected {HAND_SIZE} cards, got {len(cards)}"
            )

        dupes = find_duplicates(cards)
        if dupes:
            if reject_duplicates:
                raise DuplicateCard(dupes, hand_name=name)
            logger.warning(
                "Hand %s repeats %s", name, " ".join(str(c) for c in dupes)
            )
        hands[name] = cards
    return hands


def load_config(path: Path) -> ShowdownConfig:
    """Load and validate a showdown config from a YAML file."""
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: invalid YAML: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: expected a mapping with 'showdown' and 'hands'")

    try:
        jsonschema.validate(raw, load_schema())
    except jsonschema.ValidationError as e:
        raise ConfigError(f"{path}: {e.message}") from e

    s = raw["showdown"]
    reject = s.get("reject_duplicates", False)
    out = raw.get("output", {})

    config = ShowdownConfig(
        name=s["name"],
        hands=build_hands(raw["hands"], reject_duplicates=reject),
        reject_duplicates=reject,
        output_dir=Path(out["dir"]) if "dir" in out else None,
    )
    logger.debug("Loaded showdown %s (%d hands) from %s", config.name, len(config.hands), path)
    return config
